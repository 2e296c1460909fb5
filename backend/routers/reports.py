from typing import Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from db.database import get_async_session
from services import reporting

router = APIRouter()


@router.get("/products", response_model=Dict)
async def list_products(db: AsyncSession = Depends(get_async_session)):
    products = await reporting.list_products(db)
    return {"success": True, "products": products}


@router.get("/products/{barcode}", response_model=Dict)
async def get_product(barcode: str, db: AsyncSession = Depends(get_async_session)):
    found = await reporting.get_product(db, barcode.strip())
    if found is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return {"success": True, **found}


@router.get("/stats", response_model=Dict)
async def get_stats(db: AsyncSession = Depends(get_async_session)):
    try:
        stats = await reporting.get_stats(db)
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return {"success": True, "stats": stats}


@router.get("/logs", response_model=Dict)
async def list_logs(
    barcode: Optional[str] = None,
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(get_async_session),
):
    """Most recent stock-in audit entries first."""
    logs = await reporting.list_stock_logs(db, barcode=(barcode or "").strip() or None, limit=limit)
    return {"success": True, "logs": logs}
