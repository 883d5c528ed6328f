"""
==============================================================================
UI Package - View Models
==============================================================================

Presentation state for the catalog, independent of any rendering layer.

Modules:
--------
- catalog_view: catalog loading, type filter, grouping
- product_detail: product page loading
- selection: variant/add-on selection and price computation
- sequencing: latest-request-wins tokens

==============================================================================
"""

from .sequencing import RequestSequencer
from .selection import PriceBreakdown, PriceLine, ProductSelection, cheapest_variant
from .catalog_view import ALL_TYPES, CatalogView
from .product_detail import ProductDetailView

__all__ = [
    "ALL_TYPES",
    "CatalogView",
    "PriceBreakdown",
    "PriceLine",
    "ProductDetailView",
    "ProductSelection",
    "RequestSequencer",
    "cheapest_variant",
]
