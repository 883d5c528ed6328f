"""
==============================================================================
Selection & Pricing Tests
==============================================================================

Tests for variant defaults, attribute lookup, add-on toggling and totals.

==============================================================================
"""

import uuid
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any, Dict, List, Optional

import pytest

from product_catalog.schemas import ProductDetail
from product_catalog.ui import ProductSelection, cheapest_variant


BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def _variant(
    price: str,
    size: Optional[str] = None,
    color: Optional[str] = None,
    stock: int = 5,
    minutes: int = 0,
) -> Dict[str, Any]:
    created = BASE_TIME + timedelta(minutes=minutes)
    return {
        "id": str(uuid.uuid4()),
        "size": size,
        "color": color,
        "price": price,
        "stock": stock,
        "sku": f"SKU-{uuid.uuid4().hex[:6]}",
        "productId": "p-1",
        "createdAt": created,
        "updatedAt": created,
    }


def _add_on(name: str, price: str) -> Dict[str, Any]:
    return {
        "id": str(uuid.uuid4()),
        "name": name,
        "price": price,
        "productId": "p-1",
        "createdAt": BASE_TIME,
        "updatedAt": BASE_TIME,
    }


def _product(
    type_name: str,
    variants: List[Dict[str, Any]],
    add_ons: Optional[List[Dict[str, Any]]] = None,
) -> ProductDetail:
    return ProductDetail.model_validate({
        "id": "p-1",
        "name": "Sample",
        "images": [],
        "productTypeId": "t-1",
        "createdAt": BASE_TIME,
        "updatedAt": BASE_TIME,
        "productType": {
            "id": "t-1",
            "name": type_name,
            "createdAt": BASE_TIME,
            "updatedAt": BASE_TIME,
        },
        "variants": variants,
        "addOns": add_ons or [],
    })


class TestDefaultSelection:

    def test_cheapest_variant_is_selected(self):
        small = _variant("10", size="S")
        medium = _variant("8", size="M")
        selection = ProductSelection(_product("Food", [small, medium]), exchange_rate=83)

        assert selection.selected_variant.id == medium["id"]
        assert selection.total_price == Decimal("8")

    def test_tie_goes_to_first(self):
        first = _variant("5", size="S")
        second = _variant("5", size="M")
        product = _product("Food", [first, second])
        assert cheapest_variant(product.variants).id == first["id"]

    def test_no_variants(self):
        selection = ProductSelection(_product("Food", []), exchange_rate=83)
        assert selection.selected_variant is None
        assert selection.total_price == Decimal("0")
        assert selection.cart_label == "Select a variant"
        assert not selection.can_add_to_cart

    def test_add_ons_start_unselected(self):
        cheese = _add_on("Extra Cheese", "1.50")
        selection = ProductSelection(
            _product("Food", [_variant("8")], [cheese]), exchange_rate=83
        )
        assert selection.selected_add_ons == []
        assert not selection.is_add_on_selected(cheese["id"])


class TestVariantSelection:

    def test_select_variant(self):
        small = _variant("10", size="S")
        medium = _variant("8", size="M")
        selection = ProductSelection(_product("Food", [small, medium]), exchange_rate=83)

        assert selection.select_variant(small["id"]) is True
        assert selection.total_price == Decimal("10")

    def test_out_of_stock_pick_is_ignored(self):
        cheap = _variant("8", size="S")
        empty = _variant("12", size="L", stock=0)
        selection = ProductSelection(_product("Food", [cheap, empty]), exchange_rate=83)

        assert selection.select_variant(empty["id"]) is False
        assert selection.selected_variant.id == cheap["id"]

    def test_unknown_variant(self):
        selection = ProductSelection(_product("Food", [_variant("8")]), exchange_rate=83)
        with pytest.raises(KeyError):
            selection.select_variant("missing")


class TestAttributeLookup:

    def _shirts(self):
        return [
            _variant("20", size="M", color="Red", minutes=0),
            _variant("22", size="L", color="Red", minutes=1),
            _variant("21", size="M", color="Blue", minutes=2),
        ]

    def test_size_change_keeps_color(self):
        variants = self._shirts()
        selection = ProductSelection(_product("Clothing", variants), exchange_rate=83)

        assert selection.select_size("L") is True
        assert selection.selected_variant.id == variants[1]["id"]

    def test_color_change_keeps_size(self):
        variants = self._shirts()
        selection = ProductSelection(_product("Clothing", variants), exchange_rate=83)

        assert selection.select_color("Blue") is True
        assert selection.selected_variant.id == variants[2]["id"]

    def test_missing_pair_leaves_selection(self):
        variants = self._shirts()
        selection = ProductSelection(_product("Clothing", variants), exchange_rate=83)
        selection.select_size("L")

        # No (L, Blue) variant exists
        assert selection.select_color("Blue") is False
        assert selection.selected_variant.id == variants[1]["id"]

    def test_duplicate_pair_resolves_to_last_created(self):
        older = _variant("20", size="M", color="Red", minutes=0)
        newer = _variant("25", size="M", color="Red", minutes=5)
        other = _variant("30", size="L", color="Red", minutes=1)
        selection = ProductSelection(_product("Clothing", [older, newer, other]), exchange_rate=83)

        selection.select_size("L")
        selection.select_size("M")
        assert selection.selected_variant.id == newer["id"]

    def test_option_lists_are_unique(self):
        selection = ProductSelection(_product("Clothing", self._shirts()), exchange_rate=83)
        assert selection.sizes == ["M", "L"]
        assert selection.colors == ["Red", "Blue"]
        assert selection.has_size_and_color

    def test_color_label(self):
        assert ProductSelection(_product("Clothing", []), exchange_rate=83).color_label == "Color"
        assert ProductSelection(_product("Electronics", []), exchange_rate=83).color_label == "Processor"


class TestAddOnsAndTotals:

    def test_toggle_adds_to_total(self):
        cheese = _add_on("Extra Cheese", "1.50")
        olives = _add_on("Olives", "0.75")
        selection = ProductSelection(
            _product("food", [_variant("8")], [cheese, olives]), exchange_rate=83
        )

        assert selection.toggle_add_on(cheese["id"]) is True
        assert selection.total_price == Decimal("9.50")

        selection.toggle_add_on(olives["id"])
        assert selection.total_price == Decimal("10.25")

        assert selection.toggle_add_on(cheese["id"]) is False
        assert selection.total_price == Decimal("8.75")
        assert [a.name for a in selection.selected_add_ons] == ["Olives"]

    def test_unknown_add_on(self):
        selection = ProductSelection(_product("Food", [_variant("8")]), exchange_rate=83)
        with pytest.raises(KeyError):
            selection.toggle_add_on("missing")

    def test_add_ons_shown_only_for_food(self):
        cheese = _add_on("Extra Cheese", "1.50")
        assert ProductSelection(_product("FOOD", [], [cheese]), exchange_rate=83).show_add_ons
        assert not ProductSelection(_product("Food", []), exchange_rate=83).show_add_ons
        assert not ProductSelection(_product("Clothing", [], [cheese]), exchange_rate=83).show_add_ons

    def test_price_breakdown_in_display_currency(self):
        cheese = _add_on("Extra Cheese", "1.50")
        selection = ProductSelection(
            _product("Food", [_variant("8")], [cheese]), exchange_rate=83
        )
        selection.toggle_add_on(cheese["id"])

        breakdown = selection.price_breakdown()
        assert [line.label for line in breakdown.lines] == ["Base Price", "Extra Cheese"]
        assert breakdown.lines[0].formatted == "₹664.00"
        assert breakdown.total == Decimal("788.5")
        assert breakdown.formatted_total == "₹788.50"
        assert selection.display_total == "₹788.50"

    def test_cart_label_for_out_of_stock_selection(self):
        selection = ProductSelection(_product("Food", [_variant("8", stock=0)]), exchange_rate=83)
        assert selection.cart_label == "Out of stock"
        assert not selection.can_add_to_cart

    def test_cart_label_in_stock(self):
        selection = ProductSelection(_product("Food", [_variant("8")]), exchange_rate=83)
        assert selection.cart_label == "Add to Cart"
        assert selection.can_add_to_cart
