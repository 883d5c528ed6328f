"""
Application Exception Handling

Single AppException class for all catalog errors with FastAPI integration.
Every error reaches the client as ``{"error": "<message>", "code": "<CODE>"}``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from product_catalog.db.errors import ConstraintViolation, classify_integrity_error


logger = logging.getLogger(__name__)


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Usage:
        raise AppException("Invalid product type ID", "VALIDATION_ERROR", 400)

    Error Codes:
        - VALIDATION_ERROR (400): missing or invalid field, bad reference
        - CONFLICT (400): duplicate name or SKU, delete blocked by children
        - NOT_FOUND (404): referenced id absent
        - INTERNAL_ERROR (500): unexpected store or server failure
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "NOT_FOUND")
            status_code: HTTP status code (default: 400)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        body: Dict[str, Any] = {"error": self.message, "code": self.code}
        if self.details:
            body["details"] = self.details
        return body


# ============================================
# TAXONOMY
# ============================================

def validation_error(message: str, **details: Any) -> AppException:
    return AppException(message, "VALIDATION_ERROR", 400, details)


def not_found(message: str, **details: Any) -> AppException:
    return AppException(message, "NOT_FOUND", 404, details)


def conflict(message: str, **details: Any) -> AppException:
    return AppException(message, "CONFLICT", 400, details)


def internal_error(message: str = "Something went wrong!") -> AppException:
    return AppException(message, "INTERNAL_ERROR", 500)


# ============================================
# CATALOG ERRORS
# ============================================

def product_type_not_found(product_type_id: Optional[str] = None) -> AppException:
    details = {"id": product_type_id} if product_type_id else {}
    return not_found("Product type not found", **details)


def product_not_found(product_id: Optional[str] = None) -> AppException:
    details = {"id": product_id} if product_id else {}
    return not_found("Product not found", **details)


def variant_not_found(variant_id: Optional[str] = None) -> AppException:
    details = {"id": variant_id} if variant_id else {}
    return not_found("Variant not found", **details)


def add_on_not_found(add_on_id: Optional[str] = None) -> AppException:
    details = {"id": add_on_id} if add_on_id else {}
    return not_found("Add-on not found", **details)


def product_type_name_exists(name: str) -> AppException:
    return conflict("Product type with this name already exists", name=name)


def product_type_in_use(product_count: int) -> AppException:
    return conflict(
        "Cannot delete product type with existing products",
        products=product_count,
    )


def sku_exists(sku: str) -> AppException:
    return conflict("SKU must be unique", sku=sku)


def invalid_product_type_id(product_type_id: str) -> AppException:
    return validation_error("Invalid product type ID", productTypeId=product_type_id)


def invalid_product_id(product_id: str) -> AppException:
    return validation_error("Invalid product ID", productId=product_id)


def add_ons_food_only() -> AppException:
    return validation_error("Add-ons can only be created for food items")


def from_integrity_error(exc: IntegrityError, conflict_message: str) -> AppException:
    """
    Map a store constraint violation onto the error taxonomy.

    Unique and foreign key violations are conflicts; anything else is an
    unexpected failure.
    """
    violation = classify_integrity_error(exc)
    if violation in (ConstraintViolation.UNIQUE, ConstraintViolation.FOREIGN_KEY):
        return conflict(conflict_message, constraint=str(violation))

    logger.error(f"Unclassified integrity error ({violation}): {exc.orig}")
    return internal_error()


# ============================================
# HANDLERS
# ============================================

def _format_validation_errors(exc: RequestValidationError) -> str:
    """Render pydantic errors as 'field: message; ...'."""
    parts = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(location)
        message = error.get("msg", "Invalid value")
        parts.append(f"{field}: {message}" if field else message)
    return "; ".join(parts) or "Invalid request"


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = _format_validation_errors(exc)
    logger.debug(f"Rejected {request.method} {request.url.path}: {message}")
    return JSONResponse(
        status_code=400,
        content={"error": message, "code": "VALIDATION_ERROR"},
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    message = "Route not found" if exc.status_code == 404 else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message, "code": "HTTP_ERROR"},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content=internal_error().to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
