"""
==============================================================================
Currency Formatting Tests
==============================================================================
"""

from decimal import Decimal

import pytest

from product_catalog.utils import (
    convert_usd_to_inr,
    format_inr,
    format_inr_with_indian_system,
    format_price_range,
)


class TestFormatINR:

    def test_two_decimals_by_default(self):
        assert format_inr(249) == "₹249.00"
        assert format_inr(Decimal("8.5")) == "₹8.50"

    def test_rounded(self):
        assert format_inr(249.5, show_decimals=False) == "₹250"

    def test_price_range(self):
        assert format_price_range(10, 20) == "₹10.00 - ₹20.00"

    def test_equal_range_collapses(self):
        assert format_price_range(Decimal("10.00"), 10) == "₹10.00"


class TestConversion:

    def test_default_rate(self):
        assert convert_usd_to_inr(Decimal("10")) == Decimal("830")

    def test_custom_rate(self):
        assert convert_usd_to_inr(2, exchange_rate=80) == Decimal("160")


class TestIndianSystem:

    @pytest.mark.parametrize("price, expected", [
        (25_000_000, "₹2.5 Cr"),
        (150_000, "₹1.5 L"),
        (2_500, "₹2.5K"),
        (999, "₹999.00"),
    ])
    def test_suffixes(self, price, expected):
        assert format_inr_with_indian_system(price) == expected
