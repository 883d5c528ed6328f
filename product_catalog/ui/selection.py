"""
==============================================================================
Variant & Add-on Selection Module
==============================================================================

State behind the product detail widget: which variant is selected, which
add-ons are toggled on, and the resulting price.

Rules:
------
- Default selection is the cheapest variant; ties go to the first one
  in iteration order.
- Add-ons start unselected and toggle independently.
- For products with both sizes and colors, picking one attribute re-resolves
  the (size, color) pair. Duplicate pairs resolve to the last-created
  variant; a pair with no variant leaves the selection unchanged.
- Add-ons are only offered for food products.
- Totals stay in USD; INR conversion happens for display only.

==============================================================================
"""

import logging
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel

from product_catalog.config import get_client_settings
from product_catalog.schemas import AddOnRead, ProductDetail, VariantRead
from product_catalog.utils.currency import convert_usd_to_inr, format_inr


logger = logging.getLogger(__name__)

ELECTRONICS_TYPE_NAME = "electronics"


class PriceLine(BaseModel):
    """One row of the price breakdown, already converted for display."""
    label: str
    amount: Decimal
    formatted: str


class PriceBreakdown(BaseModel):
    """Itemized display price for the current selection."""
    lines: List[PriceLine]
    total: Decimal
    formatted_total: str


def cheapest_variant(variants: List[VariantRead]) -> Optional[VariantRead]:
    """Lowest-priced variant; the first one wins ties."""
    best = None
    for variant in variants:
        if best is None or variant.price < best.price:
            best = variant
    return best


def _unique(values) -> List[str]:
    seen = []
    for value in values:
        if value and value not in seen:
            seen.append(value)
    return seen


class ProductSelection:
    """
    Selection and pricing state for one product.

    Args:
        product: Product with its type, variants and add-ons
        exchange_rate: USD to INR display rate (defaults to ClientSettings)
    """

    def __init__(self, product: ProductDetail, exchange_rate: Optional[float] = None):
        self.product = product
        self.exchange_rate = (
            exchange_rate if exchange_rate is not None
            else get_client_settings().usd_to_inr_rate
        )
        self._selected_variant = cheapest_variant(product.variants)
        self._add_on_state: Dict[str, bool] = {add_on.id: False for add_on in product.add_ons}

    # -------------------------------------------------------------------------
    # Variants
    # -------------------------------------------------------------------------

    @property
    def selected_variant(self) -> Optional[VariantRead]:
        return self._selected_variant

    @property
    def sizes(self) -> List[str]:
        return _unique(v.size for v in self.product.variants)

    @property
    def colors(self) -> List[str]:
        return _unique(v.color for v in self.product.variants)

    @property
    def has_size_and_color(self) -> bool:
        return bool(self.sizes) and bool(self.colors)

    @property
    def color_label(self) -> str:
        if self.product.product_type.name.lower() == ELECTRONICS_TYPE_NAME:
            return "Processor"
        return "Color"

    def select_variant(self, variant_id: str) -> bool:
        """
        Select a variant by id.

        Out-of-stock variants cannot be picked; the call is then a no-op.

        Returns:
            True if the selection changed

        Raises:
            KeyError: if the variant does not belong to this product
        """
        variant = next((v for v in self.product.variants if v.id == variant_id), None)
        if variant is None:
            raise KeyError(variant_id)

        if not variant.in_stock:
            logger.debug(f"Variant {variant.sku} is out of stock, selection unchanged")
            return False

        self._selected_variant = variant
        return True

    def find_variant(self, size: Optional[str], color: Optional[str]) -> Optional[VariantRead]:
        """Variant with this exact (size, color) pair; last-created wins."""
        matches = [v for v in self.product.variants if v.size == size and v.color == color]
        if not matches:
            return None
        return max(matches, key=lambda v: v.created_at)

    def select_size(self, size: str) -> bool:
        """Re-resolve the selection with a new size and the current color."""
        color = self._selected_variant.color if self._selected_variant else None
        return self._resolve(size, color)

    def select_color(self, color: str) -> bool:
        """Re-resolve the selection with a new color and the current size."""
        size = self._selected_variant.size if self._selected_variant else None
        return self._resolve(size, color)

    def _resolve(self, size: Optional[str], color: Optional[str]) -> bool:
        variant = self.find_variant(size, color)
        if variant is None:
            logger.debug(f"No variant for size={size} color={color}, selection unchanged")
            return False
        self._selected_variant = variant
        return True

    # -------------------------------------------------------------------------
    # Add-ons
    # -------------------------------------------------------------------------

    @property
    def show_add_ons(self) -> bool:
        return self.product.is_food and len(self.product.add_ons) > 0

    def is_add_on_selected(self, add_on_id: str) -> bool:
        return self._add_on_state[add_on_id]

    def toggle_add_on(self, add_on_id: str) -> bool:
        """
        Flip one add-on.

        Returns:
            The add-on's new state

        Raises:
            KeyError: if the add-on does not belong to this product
        """
        self._add_on_state[add_on_id] = not self._add_on_state[add_on_id]
        return self._add_on_state[add_on_id]

    @property
    def selected_add_ons(self) -> List[AddOnRead]:
        return [a for a in self.product.add_ons if self._add_on_state.get(a.id)]

    # -------------------------------------------------------------------------
    # Pricing
    # -------------------------------------------------------------------------

    @property
    def total_price(self) -> Decimal:
        """Selected variant price plus selected add-on prices, in USD."""
        total = self._selected_variant.price if self._selected_variant else Decimal("0")
        for add_on in self.selected_add_ons:
            total += add_on.price
        return total

    @property
    def display_total(self) -> str:
        return format_inr(convert_usd_to_inr(self.total_price, self.exchange_rate))

    def price_breakdown(self) -> PriceBreakdown:
        lines = []
        if self._selected_variant:
            lines.append(self._line("Base Price", self._selected_variant.price))
        for add_on in self.selected_add_ons:
            lines.append(self._line(add_on.name, add_on.price))

        total = convert_usd_to_inr(self.total_price, self.exchange_rate)
        return PriceBreakdown(lines=lines, total=total, formatted_total=format_inr(total))

    def _line(self, label: str, usd_price: Decimal) -> PriceLine:
        amount = convert_usd_to_inr(usd_price, self.exchange_rate)
        return PriceLine(label=label, amount=amount, formatted=format_inr(amount))

    # -------------------------------------------------------------------------
    # Cart
    # -------------------------------------------------------------------------

    @property
    def can_add_to_cart(self) -> bool:
        return self._selected_variant is not None and self._selected_variant.in_stock

    @property
    def cart_label(self) -> str:
        if self._selected_variant is None:
            return "Select a variant"
        if not self._selected_variant.in_stock:
            return "Out of stock"
        return "Add to Cart"
