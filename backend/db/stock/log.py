from sqlalchemy import Column, DateTime, Integer, String

from ..database import Base
from .product import utcnow


class StockLog(Base):
    __tablename__ = "stock_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    barcode = Column(String(128), nullable=False, index=True)
    product_name = Column(String(255), nullable=False)
    action = Column(String(8), nullable=False)  # 'IN' | 'OUT'
    quantity = Column(Integer, nullable=False, default=1)
    floor = Column(String(64), nullable=False)
    new_stock = Column(Integer, nullable=False)  # products.current_stock after the movement

    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)
