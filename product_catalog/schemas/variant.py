"""
==============================================================================
Variant Schemas Module
==============================================================================

Request and response schemas for product variants.

==============================================================================
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from .common import CamelModel, Price


class VariantCreate(CamelModel):
    """Variant creation request."""
    price: Price
    sku: str = Field(..., min_length=1, max_length=100)
    product_id: str = Field(..., min_length=1)
    size: Optional[str] = Field(default=None, max_length=50)
    color: Optional[str] = Field(default=None, max_length=50)
    stock: int = Field(default=0, ge=0)


class VariantUpdate(CamelModel):
    """
    Partial variant update.

    ``size`` and ``color`` may be cleared with null; price, stock and sku
    may only be replaced.
    """
    size: Optional[str] = Field(default=None, max_length=50)
    color: Optional[str] = Field(default=None, max_length=50)
    price: Optional[Price] = None
    stock: Optional[int] = Field(default=None, ge=0)
    sku: Optional[str] = Field(default=None, min_length=1, max_length=100)

    @field_validator("price", "stock", "sku")
    @classmethod
    def not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class VariantRead(CamelModel):
    """Variant as nested inside a product."""
    id: str
    size: Optional[str] = None
    color: Optional[str] = None
    price: Price
    stock: int
    sku: str
    product_id: str
    created_at: datetime
    updated_at: datetime

    @property
    def in_stock(self) -> bool:
        return self.stock > 0
