from sqlalchemy import func, select

from db.stock import FloorStock, Product, StockLog


async def table_counts(session_maker) -> dict:
    async with session_maker() as s:
        return {
            "products": (await s.execute(select(func.count(Product.id)))).scalar(),
            "floor_stock": (await s.execute(select(func.count(FloorStock.id)))).scalar(),
            "stock_logs": (await s.execute(select(func.count(StockLog.id)))).scalar(),
        }


async def table_snapshot(session_maker) -> dict:
    async with session_maker() as s:
        products = (await s.execute(select(Product).order_by(Product.id))).scalars().all()
        floors = (await s.execute(select(FloorStock).order_by(FloorStock.id))).scalars().all()
        logs = (await s.execute(select(func.count(StockLog.id)))).scalar()
    return {
        "products": [
            (p.barcode, p.current_stock, p.total_in, p.total_out,
             p.ground_floor_stock, p.second_floor_stock, p.third_floor_stock)
            for p in products
        ],
        "floor_stock": [(f.barcode, f.floor, f.stock) for f in floors],
        "stock_logs": logs,
    }


async def assert_ledger_consistent(session_maker, barcode: str) -> None:
    async with session_maker() as s:
        p = (await s.execute(select(Product).where(Product.barcode == barcode))).scalar_one()
        rows = (await s.execute(select(FloorStock).where(FloorStock.barcode == barcode))).scalars().all()
    by_floor = {r.floor: r.stock for r in rows}
    assert p.current_stock == p.total_in - p.total_out
    assert p.current_stock == sum(by_floor.values())
    assert p.current_stock == p.ground_floor_stock + p.second_floor_stock + p.third_floor_stock
    assert p.ground_floor_stock == by_floor.get("Ground Floor", 0)
    assert p.second_floor_stock == by_floor.get("2nd Floor", 0)
    assert p.third_floor_stock == by_floor.get("3rd Floor", 0)
    assert p.current_stock >= 0
