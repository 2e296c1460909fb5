"""
Stock ledger: single-unit IN/OUT movements for a barcode on one floor.

Each movement touches three tables (products, floor_stock, stock_logs) and
runs as one transaction on the caller's session. Counters are incremented
server-side (``col = col + 1``) so concurrent movements on the same barcode
serialize through the database rather than through Python state.
"""
import logging
from typing import Callable, Dict, Optional

from sqlalchemy import select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from core.converters import product_to_dict
from db.stock import FLOOR_COUNTERS, FloorStock, Product, StockLog
from services.errors import InsufficientStockError, InvalidFloorError, InvalidMovementError

logger = logging.getLogger(__name__)

DEFAULT_PRODUCT_NAME = "Unknown"

Notifier = Callable[[Dict], None]


def _floor_counter(floor: Optional[str]):
    counter = FLOOR_COUNTERS.get(floor or "")
    if counter is None:
        raise InvalidFloorError(floor)
    return counter


def _require_barcode(barcode: Optional[str]) -> str:
    barcode = (barcode or "").strip()
    if not barcode:
        raise InvalidMovementError("Invalid data")
    return barcode


def _insert_for(db: AsyncSession):
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert
    if dialect == "sqlite":
        return sqlite.insert
    raise RuntimeError(f"Unsupported database dialect for floor stock upsert: {dialect}")


async def _load_product(db: AsyncSession, barcode: str) -> Optional[Product]:
    res = await db.execute(
        select(Product)
        .where(Product.barcode == barcode)
        .execution_options(populate_existing=True)
    )
    return res.scalar_one_or_none()


class StockLedger:
    def __init__(self, notify: Optional[Notifier] = None):
        self.notify = notify

    def _publish(self, snapshot: Dict) -> None:
        if self.notify is None:
            return
        try:
            self.notify(snapshot)
        except Exception:
            # Live updates are best effort; the movement is already committed.
            logger.exception("stock-update notification failed for %s", snapshot.get("barcode"))

    async def apply_stock_in(
        self,
        db: AsyncSession,
        *,
        barcode: Optional[str],
        floor: Optional[str],
        product_name: Optional[str] = None,
    ) -> Dict:
        """
        Record one unit arriving on ``floor``.

        Creates the product on its first IN, upserts the floor row and
        appends an IN log carrying the post-movement ``current_stock``.
        Returns the committed product snapshot.
        """
        barcode = _require_barcode(barcode)
        counter = _floor_counter(floor)
        insert = _insert_for(db)

        try:
            product = await _load_product(db, barcode)
            if product is None:
                product = Product(
                    barcode=barcode,
                    product_name=(product_name or "").strip() or DEFAULT_PRODUCT_NAME,
                    total_in=1,
                    total_out=0,
                    current_stock=1,
                )
                setattr(product, counter.key, 1)
                db.add(product)
                await db.flush()
            else:
                await db.execute(
                    update(Product)
                    .where(Product.barcode == barcode)
                    .values(
                        {
                            Product.total_in: Product.total_in + 1,
                            Product.current_stock: Product.current_stock + 1,
                            counter: counter + 1,
                        }
                    )
                )
            stored_name = product.product_name

            floor_tbl = FloorStock.__table__
            upsert = (
                insert(floor_tbl)
                .values(barcode=barcode, product_name=stored_name, floor=floor, stock=1)
                .on_conflict_do_update(
                    index_elements=[floor_tbl.c.barcode, floor_tbl.c.floor],
                    set_={"stock": floor_tbl.c.stock + 1},
                )
            )
            await db.execute(upsert)

            product = await _load_product(db, barcode)
            db.add(
                StockLog(
                    barcode=barcode,
                    product_name=product.product_name,
                    action="IN",
                    quantity=1,
                    floor=floor,
                    new_stock=product.current_stock,
                )
            )
            await db.flush()
            snapshot = product_to_dict(product)
            await db.commit()
        except Exception:
            await db.rollback()
            logger.exception("stock-in failed for barcode=%s floor=%s", barcode, floor)
            raise

        self._publish(snapshot)
        return snapshot

    async def apply_stock_out(
        self,
        db: AsyncSession,
        *,
        barcode: Optional[str],
        floor: Optional[str],
    ) -> Dict:
        """
        Record one unit leaving ``floor``.

        Raises InsufficientStockError, with nothing written, when the floor
        has no row for the barcode or its stock is already zero. OUT
        movements are not written to stock_logs.
        """
        barcode = _require_barcode(barcode)
        counter = _floor_counter(floor)

        try:
            # Lock products before floor_stock, the same order stock-in writes them.
            await db.execute(
                select(Product.id).where(Product.barcode == barcode).with_for_update()
            )
            res = await db.execute(
                select(FloorStock.stock)
                .where(FloorStock.barcode == barcode, FloorStock.floor == floor)
                .with_for_update()
            )
            current = res.scalar_one_or_none()
            if current is None or current <= 0:
                raise InsufficientStockError(barcode, floor)

            await db.execute(
                update(FloorStock)
                .where(FloorStock.barcode == barcode, FloorStock.floor == floor)
                .values(stock=FloorStock.stock - 1)
            )
            await db.execute(
                update(Product)
                .where(Product.barcode == barcode)
                .values(
                    {
                        Product.total_out: Product.total_out + 1,
                        Product.current_stock: Product.current_stock - 1,
                        counter: counter - 1,
                    }
                )
            )

            product = await _load_product(db, barcode)
            snapshot = product_to_dict(product)
            await db.commit()
        except InsufficientStockError:
            await db.rollback()
            raise
        except Exception:
            await db.rollback()
            logger.exception("stock-out failed for barcode=%s floor=%s", barcode, floor)
            raise

        self._publish(snapshot)
        return snapshot
