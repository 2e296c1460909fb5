from sqlalchemy import Column, Integer, String, UniqueConstraint

from ..database import Base


class FloorStock(Base):
    __tablename__ = "floor_stock"
    __table_args__ = (
        UniqueConstraint("barcode", "floor", name="ux_floor_stock_barcode_floor"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    barcode = Column(String(128), nullable=False, index=True)
    product_name = Column(String(255), nullable=False, default="Unknown")
    floor = Column(String(64), nullable=False, index=True)
    stock = Column(Integer, nullable=False, default=0)
