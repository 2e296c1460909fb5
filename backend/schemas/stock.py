from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _clean_text(v: Any) -> Optional[str]:
    # Scanners often submit numeric barcodes as JSON integers; floats are rejected.
    if v is None:
        return None
    if isinstance(v, int) and not isinstance(v, bool):
        v = str(v)
    if not isinstance(v, str):
        raise ValueError("must be a string")
    v = v.strip()
    return v or None


class ScanInRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    barcode: Optional[str] = None
    product_name: Optional[str] = Field(default=None, alias="productName")
    floor: Optional[str] = None

    @field_validator("barcode", "product_name", "floor", mode="before")
    @classmethod
    def _strip_nullable(cls, v: Any) -> Optional[str]:
        return _clean_text(v)


class ScanOutRequest(BaseModel):
    barcode: Optional[str] = None
    floor: Optional[str] = None

    @field_validator("barcode", "floor", mode="before")
    @classmethod
    def _strip_nullable(cls, v: Any) -> Optional[str]:
        return _clean_text(v)
