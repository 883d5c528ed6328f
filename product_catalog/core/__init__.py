"""
==============================================================================
Core Package
==============================================================================

Core infrastructure for the application.

Modules:
--------
- exceptions: AppException class, error factory functions, FastAPI handlers
- dependencies: FastAPI dependency injection for services (import it
  directly, it pulls in the service layer)

Usage:
------
    from product_catalog.core import exceptions
    raise exceptions.product_not_found(product_id)

==============================================================================
"""

from .exceptions import AppException, register_exception_handlers

__all__ = [
    "AppException",
    "register_exception_handlers",
]
