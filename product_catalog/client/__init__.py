"""
==============================================================================
Client Package
==============================================================================

Async HTTP access to the catalog API for scripts and UI view-models.

==============================================================================
"""

from .catalog_client import (
    AddOnsClient,
    CatalogClient,
    ProductsClient,
    ProductTypesClient,
    VariantsClient,
)
from .exceptions import CatalogAPIError

__all__ = [
    "CatalogClient",
    "CatalogAPIError",
    "ProductTypesClient",
    "ProductsClient",
    "VariantsClient",
    "AddOnsClient",
]
