from datetime import datetime
from typing import Dict, Optional

from db.stock import FloorStock, Product, StockLog


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def product_to_dict(product: Product) -> Dict:
    """JSON-ready product snapshot, shared by HTTP responses and live updates."""
    return {
        "id": product.id,
        "barcode": product.barcode,
        "product_name": product.product_name,
        "current_stock": int(product.current_stock or 0),
        "total_in": int(product.total_in or 0),
        "total_out": int(product.total_out or 0),
        "ground_floor_stock": int(product.ground_floor_stock or 0),
        "second_floor_stock": int(product.second_floor_stock or 0),
        "third_floor_stock": int(product.third_floor_stock or 0),
        "created_at": _iso(product.created_at),
        "updated_at": _iso(product.updated_at),
    }


def floor_stock_to_dict(row: FloorStock) -> Dict:
    return {"floor": row.floor, "stock": int(row.stock or 0)}


def stock_log_to_dict(entry: StockLog) -> Dict:
    return {
        "id": entry.id,
        "barcode": entry.barcode,
        "product_name": entry.product_name,
        "action": entry.action,
        "quantity": int(entry.quantity),
        "floor": entry.floor,
        "new_stock": int(entry.new_stock),
        "created_at": _iso(entry.created_at),
    }
