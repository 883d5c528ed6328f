"""
==============================================================================
Product Schemas Module
==============================================================================

Request and response schemas for products, plus the nested views that
embed a product or a list of products:

    ProductDetail       product + productType + variants + addOns
    ProductTypeDetail   product type + products (each with variants, addOns)
    VariantDetail       variant + owning product (with its type)
    AddOnDetail         add-on + owning product (with its type)

==============================================================================
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from product_catalog.db.models import FOOD_TYPE_NAME

from .add_on import AddOnRead
from .common import CamelModel
from .product_type import ProductTypeRead
from .variant import VariantRead


ImageUrl = str


class ProductCreate(CamelModel):
    """Product creation request."""
    name: str = Field(..., min_length=1, max_length=255)
    product_type_id: str = Field(..., min_length=1)
    description: Optional[str] = Field(default=None)
    images: List[ImageUrl] = Field(default_factory=list)

    @field_validator("images")
    @classmethod
    def drop_blank_images(cls, v: List[str]) -> List[str]:
        return [url.strip() for url in v if url and url.strip()]


class ProductUpdate(CamelModel):
    """
    Partial product update.

    Only fields present in the request body are applied. ``description``
    may be cleared with null.
    """
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None)
    product_type_id: Optional[str] = Field(default=None, min_length=1)
    images: Optional[List[ImageUrl]] = Field(default=None)

    @field_validator("name", "product_type_id", "images")
    @classmethod
    def not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


# =============================================================================
# READ SCHEMAS
# =============================================================================

class ProductBase(CamelModel):
    """Product columns without any relations."""
    id: str
    name: str
    description: Optional[str] = None
    images: List[ImageUrl] = Field(default_factory=list)
    product_type_id: str
    created_at: datetime
    updated_at: datetime


class ProductRead(ProductBase):
    """Product with its variants and add-ons, both cheapest first."""
    variants: List[VariantRead] = Field(default_factory=list)
    add_ons: List[AddOnRead] = Field(default_factory=list)


class ProductDetail(ProductRead):
    """Product with its type, variants and add-ons."""
    product_type: ProductTypeRead

    @property
    def is_food(self) -> bool:
        return self.product_type.name.lower() == FOOD_TYPE_NAME


class ProductSummary(ProductBase):
    """Owning product embedded in a variant or add-on response."""
    product_type: ProductTypeRead


class ProductTypeDetail(ProductTypeRead):
    """Product type with every product it owns."""
    products: List[ProductRead] = Field(default_factory=list)


class VariantDetail(VariantRead):
    """Variant with its owning product."""
    product: ProductSummary


class AddOnDetail(AddOnRead):
    """Add-on with its owning product."""
    product: ProductSummary
