"""
==============================================================================
Product Type Schemas Module
==============================================================================

Request and response schemas for product types. The nested detail view
(type with its products) lives in ``schemas.product``.

==============================================================================
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from .common import CamelModel


class ProductTypeCreate(CamelModel):
    """Product type creation request."""
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(default=None)


class ProductTypeUpdate(CamelModel):
    """Partial product type update. Omitted fields are left unchanged."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = Field(default=None)

    @field_validator("name")
    @classmethod
    def name_not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("Name cannot be null")
        return v


class ProductTypeRead(CamelModel):
    """Product type as returned by the API."""
    id: str
    name: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ProductCount(CamelModel):
    """Number of products owned by a type."""
    products: int = Field(ge=0)


class ProductTypeSummary(ProductTypeRead):
    """Listing entry: a product type with its product count under ``_count``."""
    count: ProductCount = Field(alias="_count")
