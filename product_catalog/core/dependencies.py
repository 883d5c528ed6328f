"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for the catalog services.

Dependency Hierarchy:
--------------------
                         ┌─────────────────┐
                         │    get_db()     │  one Session per request
                         └────────┬────────┘
                                  │
        ┌─────────────────┬───────┴─────────┬─────────────────┐
        │                 │                 │                 │
┌───────▼───────┐ ┌───────▼───────┐ ┌───────▼───────┐ ┌───────▼───────┐
│ product types │ │   products    │ │   variants    │ │    add-ons    │
└───────────────┘ └───────────────┘ └───────────────┘ └───────────────┘

Tests override ``get_db`` to point every service at an in-memory store.

==============================================================================
"""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from product_catalog.db.database import get_db
from product_catalog.services import (
    AddOnService,
    ProductService,
    ProductTypeService,
    VariantService,
)


def get_product_type_service(db: Session = Depends(get_db)) -> ProductTypeService:
    return ProductTypeService(db)


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)


def get_variant_service(db: Session = Depends(get_db)) -> VariantService:
    return VariantService(db)


def get_add_on_service(db: Session = Depends(get_db)) -> AddOnService:
    return AddOnService(db)


__all__ = [
    "get_db",
    "get_product_type_service",
    "get_product_service",
    "get_variant_service",
    "get_add_on_service",
]
