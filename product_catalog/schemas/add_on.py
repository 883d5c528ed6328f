"""
==============================================================================
Add-on Schemas Module
==============================================================================

Request and response schemas for food add-ons.

==============================================================================
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from .common import CamelModel, Price


class AddOnCreate(CamelModel):
    """Add-on creation request."""
    name: str = Field(..., min_length=1, max_length=255)
    price: Price
    product_id: str = Field(..., min_length=1)
    description: Optional[str] = Field(default=None)


class AddOnUpdate(CamelModel):
    """Partial add-on update."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None)
    price: Optional[Price] = None

    @field_validator("name", "price")
    @classmethod
    def not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class AddOnRead(CamelModel):
    """Add-on as nested inside a product."""
    id: str
    name: str
    description: Optional[str] = None
    price: Price
    product_id: str
    created_at: datetime
    updated_at: datetime
