"""
==============================================================================
Currency Formatting Module
==============================================================================

Display helpers for Indian Rupees. Catalog prices are stored in USD;
conversion happens only at display time with a fixed exchange rate.

==============================================================================
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Union


Number = Union[int, float, Decimal]

RUPEE = "₹"
DEFAULT_USD_TO_INR_RATE = 83

_CRORE = Decimal(10_000_000)
_LAKH = Decimal(100_000)
_THOUSAND = Decimal(1_000)


def _to_decimal(value: Number) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _round(value: Decimal, places: str) -> Decimal:
    return value.quantize(Decimal(places), rounding=ROUND_HALF_UP)


def format_inr(price: Number, show_decimals: bool = True) -> str:
    """
    Format a price in rupees.

    >>> format_inr(249)
    '₹249.00'
    >>> format_inr(249.5, show_decimals=False)
    '₹250'
    """
    value = _to_decimal(price)
    if show_decimals:
        return f"{RUPEE}{_round(value, '0.01')}"
    return f"{RUPEE}{_round(value, '1')}"


def format_price_range(min_price: Number, max_price: Number) -> str:
    """Format a price range, collapsing equal bounds to a single price."""
    if _to_decimal(min_price) == _to_decimal(max_price):
        return format_inr(min_price)
    return f"{format_inr(min_price)} - {format_inr(max_price)}"


def convert_usd_to_inr(usd_price: Number, exchange_rate: Number = DEFAULT_USD_TO_INR_RATE) -> Decimal:
    """Convert a USD price to rupees at a fixed rate."""
    return _to_decimal(usd_price) * _to_decimal(exchange_rate)


def format_inr_with_indian_system(price: Number) -> str:
    """
    Abbreviate large amounts with the Indian numbering system.

    >>> format_inr_with_indian_system(25_000_000)
    '₹2.5 Cr'
    >>> format_inr_with_indian_system(150_000)
    '₹1.5 L'
    >>> format_inr_with_indian_system(2_500)
    '₹2.5K'
    """
    value = _to_decimal(price)
    if value >= _CRORE:
        return f"{RUPEE}{_round(value / _CRORE, '0.1')} Cr"
    if value >= _LAKH:
        return f"{RUPEE}{_round(value / _LAKH, '0.1')} L"
    if value >= _THOUSAND:
        return f"{RUPEE}{_round(value / _THOUSAND, '0.1')}K"
    return format_inr(value)
