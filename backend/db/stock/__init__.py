"""
Floor-wise stock tables.

Models:
- Product (aggregate totals plus one denormalized counter per floor)
- FloorStock (quantity per barcode per floor)
- StockLog (append-only audit of stock-in movements)
"""

from .product import FLOOR_COUNTERS, FLOORS, Product
from .floor_stock import FloorStock
from .log import StockLog

__all__ = ["FLOOR_COUNTERS", "FLOORS", "Product", "FloorStock", "StockLog"]
