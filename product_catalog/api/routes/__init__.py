"""
==============================================================================
API Endpoints
==============================================================================

Routers:
--------
- health: Health check endpoints
- product_types: Product type CRUD
- products: Product CRUD and type filter
- variants: Variant CRUD
- add_ons: Add-on CRUD

==============================================================================
"""

from . import health, product_types, products, variants, add_ons

__all__ = ["health", "product_types", "products", "variants", "add_ons"]
