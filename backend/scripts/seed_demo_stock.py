"""
Seed a few demo products by playing scan movements through the ledger.

This script can be run from either:
- backend/: `python scripts/seed_demo_stock.py`
- repo root: `python backend/scripts/seed_demo_stock.py`

It uses the same DB_* / DATABASE_URL env vars as the backend (dotenv supported).
"""

from __future__ import annotations

import asyncio
import sys
from dataclasses import dataclass
from pathlib import Path

# Allow running from repo root by ensuring `backend/` is on sys.path
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from db.database import async_session_maker, create_db_and_tables  # noqa: E402
from services.errors import InsufficientStockError  # noqa: E402
from services.ledger import StockLedger  # noqa: E402


@dataclass(frozen=True)
class SeedMovement:
    action: str  # 'IN' | 'OUT'
    barcode: str
    floor: str
    product_name: str | None = None


SEED_MOVEMENTS: list[SeedMovement] = [
    *[SeedMovement("IN", "8901234567890", "Ground Floor", "Blue Mug") for _ in range(12)],
    *[SeedMovement("IN", "8901234567890", "2nd Floor") for _ in range(3)],
    SeedMovement("OUT", "8901234567890", "Ground Floor"),
    *[SeedMovement("IN", "4006381333931", "3rd Floor", "Desk Lamp") for _ in range(4)],
    SeedMovement("IN", "5012345678900", "2nd Floor", "Notebook A5"),
    SeedMovement("OUT", "5012345678900", "2nd Floor"),
]


async def main() -> None:
    await create_db_and_tables()
    ledger = StockLedger()
    applied = 0
    rejected = 0
    async with async_session_maker() as db:
        for m in SEED_MOVEMENTS:
            try:
                if m.action == "IN":
                    await ledger.apply_stock_in(db, barcode=m.barcode, floor=m.floor, product_name=m.product_name)
                else:
                    await ledger.apply_stock_out(db, barcode=m.barcode, floor=m.floor)
                applied += 1
            except InsufficientStockError:
                rejected += 1
    print(f"Applied movements: {applied}, rejected (no stock): {rejected}")


if __name__ == "__main__":
    asyncio.run(main())
