"""
Classification of store constraint violations.

Drivers report constraint failures differently: PostgreSQL drivers expose a
SQLSTATE code, SQLite only a message. Services use ``classify_integrity_error``
to decide between a Conflict and an unexpected failure.
"""

from __future__ import annotations

import enum

from sqlalchemy.exc import IntegrityError


class ConstraintViolation(str, enum.Enum):
    """Kind of constraint an IntegrityError tripped."""

    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"
    NOT_NULL = "not_null"
    CHECK = "check"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


# PostgreSQL SQLSTATE class 23 codes
_SQLSTATE_CODES = {
    "23505": ConstraintViolation.UNIQUE,
    "23503": ConstraintViolation.FOREIGN_KEY,
    "23502": ConstraintViolation.NOT_NULL,
    "23514": ConstraintViolation.CHECK,
}

# SQLite (and MySQL) message fragments, matched case-insensitively
_MESSAGE_MARKERS = (
    ("unique constraint failed", ConstraintViolation.UNIQUE),
    ("duplicate entry", ConstraintViolation.UNIQUE),
    ("foreign key constraint", ConstraintViolation.FOREIGN_KEY),
    ("not null constraint failed", ConstraintViolation.NOT_NULL),
    ("check constraint failed", ConstraintViolation.CHECK),
)


def classify_integrity_error(exc: IntegrityError) -> ConstraintViolation:
    """Inspect the driver error behind ``exc`` and name the violated constraint."""
    orig = getattr(exc, "orig", None)

    # psycopg2 exposes pgcode, psycopg 3 exposes sqlstate
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code in _SQLSTATE_CODES:
        return _SQLSTATE_CODES[code]

    message = str(orig if orig is not None else exc).lower()
    for marker, violation in _MESSAGE_MARKERS:
        if marker in message:
            return violation

    return ConstraintViolation.UNKNOWN
