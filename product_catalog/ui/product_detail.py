"""
View-model for the product detail page: loads one product and wraps it in
a ProductSelection.
"""

import logging
from typing import Optional

from product_catalog.client import CatalogAPIError, CatalogClient
from product_catalog.schemas import ProductDetail
from product_catalog.ui.selection import ProductSelection
from product_catalog.ui.sequencing import RequestSequencer


logger = logging.getLogger(__name__)


class ProductDetailView:
    """Product detail page state."""

    LOAD_ERROR = "Failed to load product details. Please try again later."

    def __init__(self, client: CatalogClient, exchange_rate: Optional[float] = None):
        self._client = client
        self._exchange_rate = exchange_rate
        self._sequencer = RequestSequencer()

        self.product: Optional[ProductDetail] = None
        self.selection: Optional[ProductSelection] = None
        self.loading: bool = True
        self.error: Optional[str] = None

    async def load(self, product_id: str) -> None:
        token = self._sequencer.next()
        self.loading = True
        self.error = None

        try:
            product = await self._client.products.get(product_id)
        except CatalogAPIError as e:
            if self._sequencer.is_current(token):
                logger.error(f"Failed to load product {product_id}: {e.message}")
                self.error = self.LOAD_ERROR
                self.loading = False
            return

        if not self._sequencer.is_current(token):
            return

        self.product = product
        self.selection = ProductSelection(product, exchange_rate=self._exchange_rate)
        self.loading = False
