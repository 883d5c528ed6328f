"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Service classes implementing validation and query composition over the
catalog store.

Architecture Pattern: Service Layer
----------------------------------

    ┌─────────────────┐
    │   API Router    │  ← request/response schemas
    └────────┬────────┘
             │  Depends(get_*_service)
    ┌────────▼────────┐
    │    Service      │  ← business rules
    └────────┬────────┘
             │  request-scoped Session
    ┌────────▼────────┐
    │   SQLAlchemy    │  ← persistent store
    └─────────────────┘

Each operation runs as one validate-then-mutate sequence on the session it
was given; services never open or close sessions themselves.

==============================================================================
"""

from .product_type_service import ProductTypeService
from .product_service import ProductService
from .variant_service import VariantService
from .add_on_service import AddOnService

__all__ = [
    "ProductTypeService",
    "ProductService",
    "VariantService",
    "AddOnService",
]
