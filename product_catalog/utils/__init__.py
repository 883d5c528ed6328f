"""
==============================================================================
Utilities Package
==============================================================================

Modules:
--------
- currency: rupee formatting and display-time USD conversion

==============================================================================
"""

from .currency import (
    convert_usd_to_inr,
    format_inr,
    format_inr_with_indian_system,
    format_price_range,
)

__all__ = [
    "convert_usd_to_inr",
    "format_inr",
    "format_inr_with_indian_system",
    "format_price_range",
]
