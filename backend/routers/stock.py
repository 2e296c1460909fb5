from typing import Dict

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from core.broadcast import hub
from db.database import get_async_session
from db.stock import FLOORS
from schemas.stock import ScanInRequest, ScanOutRequest
from services.errors import StockLedgerError
from services.ledger import StockLedger

router = APIRouter()


def get_ledger() -> StockLedger:
    return StockLedger(notify=hub.notify)


def _validate_movement(barcode, floor) -> None:
    # Reject before any storage access.
    if not barcode or not floor:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid data")
    if floor not in FLOORS:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid floor")


@router.post("/scan-in", response_model=Dict)
async def scan_in(
    payload: ScanInRequest,
    db: AsyncSession = Depends(get_async_session),
    ledger: StockLedger = Depends(get_ledger),
):
    _validate_movement(payload.barcode, payload.floor)
    try:
        product = await ledger.apply_stock_in(
            db,
            barcode=payload.barcode,
            floor=payload.floor,
            product_name=payload.product_name,
        )
    except StockLedgerError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return {"success": True, "product": product}


@router.post("/scan-out", response_model=Dict)
async def scan_out(
    payload: ScanOutRequest,
    db: AsyncSession = Depends(get_async_session),
    ledger: StockLedger = Depends(get_ledger),
):
    """
    Take one unit off a floor.

    Every failure here is reported as 400, including storage errors.
    """
    _validate_movement(payload.barcode, payload.floor)
    try:
        product = await ledger.apply_stock_out(db, barcode=payload.barcode, floor=payload.floor)
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"success": True, "product": product}
