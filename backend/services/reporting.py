"""Read-only queries over the stock tables."""
import logging
from typing import Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from core.converters import floor_stock_to_dict, product_to_dict, stock_log_to_dict
from db.stock import FloorStock, Product, StockLog

logger = logging.getLogger(__name__)

LOW_STOCK_THRESHOLD = 10


async def list_products(db: AsyncSession) -> List[Dict]:
    res = await db.execute(select(Product).order_by(Product.updated_at.desc(), Product.id.desc()))
    return [product_to_dict(p) for p in res.scalars().all()]


async def get_product(db: AsyncSession, barcode: str) -> Optional[Dict]:
    res = await db.execute(select(Product).where(Product.barcode == barcode))
    product = res.scalar_one_or_none()
    if product is None:
        return None
    fres = await db.execute(
        select(FloorStock).where(FloorStock.barcode == barcode).order_by(FloorStock.floor.asc())
    )
    return {
        "product": product_to_dict(product),
        "floors": [floor_stock_to_dict(r) for r in fres.scalars().all()],
    }


async def _floor_totals(db: AsyncSession) -> List[Dict]:
    res = await db.execute(
        select(FloorStock.floor, func.sum(FloorStock.stock).label("total"))
        .group_by(FloorStock.floor)
        .order_by(FloorStock.floor.asc())
    )
    return [{"floor": floor, "total": int(total or 0)} for floor, total in res.all()]


async def get_stats(db: AsyncSession) -> Dict:
    """
    Dashboard counters.

    todayIn/todayOut are always 0: there is no time-windowed aggregation.
    The per-floor breakdown is optional; if its query fails the stats are
    still returned with an empty floorStats list.
    """
    total_products = (await db.execute(select(func.count(Product.id)))).scalar() or 0
    total_stock = (await db.execute(select(func.sum(Product.current_stock)))).scalar() or 0
    low_stock = (
        await db.execute(
            select(func.count(Product.id)).where(Product.current_stock < LOW_STOCK_THRESHOLD)
        )
    ).scalar() or 0

    try:
        floor_stats = await _floor_totals(db)
    except Exception as e:
        logger.warning("Floor breakdown unavailable, reporting none: %s", e)
        await db.rollback()
        floor_stats = []

    return {
        "totalProducts": int(total_products),
        "totalStock": int(total_stock),
        "lowStock": int(low_stock),
        "todayIn": 0,
        "todayOut": 0,
        "floorStats": floor_stats,
    }


async def list_stock_logs(db: AsyncSession, *, barcode: Optional[str] = None, limit: int = 100) -> List[Dict]:
    stmt = select(StockLog)
    if barcode:
        stmt = stmt.where(StockLog.barcode == barcode)
    res = await db.execute(stmt.order_by(StockLog.id.desc()).limit(limit))
    return [stock_log_to_dict(e) for e in res.scalars().all()]
