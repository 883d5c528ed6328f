"""
==============================================================================
Main API Router
==============================================================================

Combines all catalog routes under the /api prefix.

==============================================================================
"""

from fastapi import APIRouter

from product_catalog.api.routes import health, product_types, products, variants, add_ons
from product_catalog.schemas import ErrorResponse


API_PREFIX = "/api"

# Documented error bodies shared by every catalog route
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Validation error or conflict"},
    404: {"model": ErrorResponse, "description": "Entity or route not found"},
    500: {"model": ErrorResponse, "description": "Unexpected server failure"},
}


class MainAPIRouter:
    """
    Main API router combining all catalog routes.

    Provides a single entry point for all API endpoints.
    """

    def __init__(self):
        self._router = APIRouter(prefix=API_PREFIX, responses=ERROR_RESPONSES)
        self._include_routers()

    def _include_routers(self) -> None:
        self._router.include_router(health.router)
        self._router.include_router(product_types.router)
        self._router.include_router(products.router)
        self._router.include_router(variants.router)
        self._router.include_router(add_ons.router)

    @property
    def router(self):
        """Get the FastAPI router instance."""
        return self._router


# Create main API router instance
api_router = MainAPIRouter().router
