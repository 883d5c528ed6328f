"""
==============================================================================
Catalog View Module
==============================================================================

View-model for the catalog page: loads products and product types,
filters by type, and groups products for display.

Failures leave a static error message and stop loading; nothing is
retried. Only the latest request's response is applied.

==============================================================================
"""

import asyncio
import logging
from typing import Dict, List, Optional

from product_catalog.client import CatalogAPIError, CatalogClient
from product_catalog.schemas import ProductDetail, ProductTypeSummary
from product_catalog.ui.sequencing import RequestSequencer


logger = logging.getLogger(__name__)

ALL_TYPES = "all"


class CatalogView:
    """
    Catalog page state.

    Attributes:
        products: Products currently shown
        product_types: Types offered in the filter bar
        selected_type: "all" or a product type name
        loading: True while a request is in flight
        error: User-facing error message of the last failed request
    """

    LOAD_ERROR = "Failed to load catalog data. Please try again later."
    FILTER_ERROR = "Failed to filter products. Please try again."

    def __init__(self, client: CatalogClient):
        self._client = client
        self._sequencer = RequestSequencer()

        self.products: List[ProductDetail] = []
        self.product_types: List[ProductTypeSummary] = []
        self.selected_type: str = ALL_TYPES
        self.loading: bool = True
        self.error: Optional[str] = None

    async def load(self) -> None:
        """Fetch products and product types in parallel."""
        token = self._start()
        try:
            products, product_types = self._unpack(await asyncio.gather(
                self._client.products.list(),
                self._client.product_types.list(),
                return_exceptions=True,
            ))
        except CatalogAPIError as e:
            self._fail(token, self.LOAD_ERROR, e)
            return

        if not self._sequencer.is_current(token):
            logger.debug(f"Discarding stale catalog load #{token}")
            return

        self.products = products
        self.product_types = product_types
        self.selected_type = ALL_TYPES
        self.loading = False
        logger.info(f"✅ Catalog loaded: {len(products)} products, {len(product_types)} types")

    async def filter_by_type(self, type_name: str) -> None:
        """Show every product ("all") or only products of one type."""
        self.selected_type = type_name
        token = self._start()
        try:
            if type_name == ALL_TYPES:
                products = await self._client.products.list()
            else:
                products = await self._client.products.list_by_type(type_name)
        except CatalogAPIError as e:
            self._fail(token, self.FILTER_ERROR, e)
            return

        if not self._sequencer.is_current(token):
            logger.debug(f"Discarding stale filter response #{token} for '{type_name}'")
            return

        self.products = products
        self.loading = False

    def grouped(self) -> Dict[str, List[ProductDetail]]:
        """Products grouped by type name, in the order types first appear."""
        groups: Dict[str, List[ProductDetail]] = {}
        for product in self.products:
            groups.setdefault(product.product_type.name, []).append(product)
        return groups

    def type_counts(self) -> Dict[str, int]:
        """Shown-product count for every type in the filter bar."""
        counts = {t.name: 0 for t in self.product_types}
        for product in self.products:
            if product.product_type.name in counts:
                counts[product.product_type.name] += 1
        return counts

    @property
    def total_count(self) -> int:
        return len(self.products)

    def _start(self) -> int:
        self.loading = True
        self.error = None
        return self._sequencer.next()

    def _fail(self, token: int, message: str, exc: CatalogAPIError) -> None:
        if not self._sequencer.is_current(token):
            logger.debug(f"Ignoring failure of stale request #{token}: {exc.message}")
            return
        logger.error(f"Catalog request failed: {exc.message}")
        self.error = message
        self.loading = False

    @staticmethod
    def _unpack(results: list) -> list:
        """Both parallel fetches have settled; raise the first failure, if any."""
        for result in results:
            if isinstance(result, BaseException):
                raise result
        return results
