"""
==============================================================================
Configuration Package
==============================================================================

Centralized configuration management using Pydantic Settings.

Usage:
------
    from product_catalog.config import get_settings

    settings = get_settings()
    print(settings.database_url)

==============================================================================
"""

from .settings import ClientSettings, Settings, get_client_settings, get_settings

__all__ = [
    "Settings",
    "ClientSettings",
    "get_settings",
    "get_client_settings",
]
