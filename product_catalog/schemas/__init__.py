"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request and response schemas validated at the API boundary and reused by
the catalog client to parse responses.

==============================================================================
"""

from .common import CamelModel, ErrorResponse, HealthResponse, MessageResponse, Price
from .product_type import (
    ProductCount,
    ProductTypeCreate,
    ProductTypeRead,
    ProductTypeSummary,
    ProductTypeUpdate,
)
from .variant import VariantCreate, VariantRead, VariantUpdate
from .add_on import AddOnCreate, AddOnRead, AddOnUpdate
from .product import (
    AddOnDetail,
    ProductBase,
    ProductCreate,
    ProductDetail,
    ProductRead,
    ProductSummary,
    ProductTypeDetail,
    ProductUpdate,
    VariantDetail,
)

__all__ = [
    # Common
    "CamelModel",
    "Price",
    "MessageResponse",
    "ErrorResponse",
    "HealthResponse",
    # Product types
    "ProductTypeCreate",
    "ProductTypeUpdate",
    "ProductTypeRead",
    "ProductTypeSummary",
    "ProductTypeDetail",
    "ProductCount",
    # Products
    "ProductCreate",
    "ProductUpdate",
    "ProductBase",
    "ProductRead",
    "ProductDetail",
    "ProductSummary",
    # Variants
    "VariantCreate",
    "VariantUpdate",
    "VariantRead",
    "VariantDetail",
    # Add-ons
    "AddOnCreate",
    "AddOnUpdate",
    "AddOnRead",
    "AddOnDetail",
]
