"""
==============================================================================
Error Handling Tests
==============================================================================

Tests for constraint classification and the error taxonomy.

==============================================================================
"""

from types import SimpleNamespace

import pytest
from sqlalchemy.exc import IntegrityError

from product_catalog.core import exceptions
from product_catalog.core.exceptions import AppException
from product_catalog.db.errors import ConstraintViolation, classify_integrity_error


def _integrity_error(orig) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, orig)


class TestClassifyIntegrityError:
    """Tests for mapping driver errors onto constraint kinds."""

    @pytest.mark.parametrize("message, expected", [
        ("UNIQUE constraint failed: variants.sku", ConstraintViolation.UNIQUE),
        ("FOREIGN KEY constraint failed", ConstraintViolation.FOREIGN_KEY),
        ("NOT NULL constraint failed: variants.sku", ConstraintViolation.NOT_NULL),
        ("CHECK constraint failed: ck_variants_price", ConstraintViolation.CHECK),
        ("something else entirely", ConstraintViolation.UNKNOWN),
    ])
    def test_sqlite_messages(self, message: str, expected: ConstraintViolation):
        assert classify_integrity_error(_integrity_error(Exception(message))) == expected

    @pytest.mark.parametrize("sqlstate, expected", [
        ("23505", ConstraintViolation.UNIQUE),
        ("23503", ConstraintViolation.FOREIGN_KEY),
        ("23502", ConstraintViolation.NOT_NULL),
        ("23514", ConstraintViolation.CHECK),
    ])
    def test_postgres_sqlstate(self, sqlstate: str, expected: ConstraintViolation):
        orig = SimpleNamespace(pgcode=sqlstate)
        assert classify_integrity_error(_integrity_error(orig)) == expected


class TestFromIntegrityError:
    """Tests for turning constraint violations into API errors."""

    def test_unique_violation_is_conflict(self):
        exc = _integrity_error(Exception("UNIQUE constraint failed: variants.sku"))
        error = exceptions.from_integrity_error(exc, "SKU must be unique")
        assert error.status_code == 400
        assert error.code == "CONFLICT"
        assert error.message == "SKU must be unique"

    def test_foreign_key_violation_is_conflict(self):
        exc = _integrity_error(Exception("FOREIGN KEY constraint failed"))
        assert exceptions.from_integrity_error(exc, "x").code == "CONFLICT"

    def test_other_violation_is_internal(self):
        exc = _integrity_error(Exception("CHECK constraint failed"))
        error = exceptions.from_integrity_error(exc, "x")
        assert error.status_code == 500
        assert error.message == "Something went wrong!"


class TestAppException:
    """Tests for the error body."""

    def test_to_dict_without_details(self):
        error = exceptions.product_not_found()
        assert error.to_dict() == {"error": "Product not found", "code": "NOT_FOUND"}

    def test_to_dict_with_details(self):
        error = exceptions.sku_exists("X-1")
        assert error.to_dict() == {
            "error": "SKU must be unique",
            "code": "CONFLICT",
            "details": {"sku": "X-1"},
        }

    def test_is_exception(self):
        with pytest.raises(AppException):
            raise exceptions.add_ons_food_only()
