from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String

from ..database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    barcode = Column(String(128), nullable=False, unique=True, index=True)
    product_name = Column(String(255), nullable=False, default="Unknown")

    current_stock = Column(Integer, nullable=False, default=0)
    total_in = Column(Integer, nullable=False, default=0)
    total_out = Column(Integer, nullable=False, default=0)

    # Mirrors of floor_stock.stock, one column per floor
    ground_floor_stock = Column(Integer, nullable=False, default=0)
    second_floor_stock = Column(Integer, nullable=False, default=0)
    third_floor_stock = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow, index=True)


# Closed floor set. Keys are the floor names clients send, values the Product
# counter each one mirrors.
FLOOR_COUNTERS = {
    "Ground Floor": Product.ground_floor_stock,
    "2nd Floor": Product.second_floor_stock,
    "3rd Floor": Product.third_floor_stock,
}

FLOORS = tuple(FLOOR_COUNTERS)
