"""
Shared plumbing for the catalog services.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from product_catalog.core.exceptions import from_integrity_error


logger = logging.getLogger(__name__)


class BaseService:
    """
    Base class holding the request-scoped session.

    Attributes:
        _db: Database session, owned by the caller
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def _commit(self, conflict_message: str) -> None:
        """
        Commit the current unit of work.

        Constraint violations roll back and surface as an AppException
        (Conflict for unique/foreign key violations, Unknown otherwise).
        """
        try:
            self._db.commit()
        except IntegrityError as e:
            self._db.rollback()
            logger.warning(f"Commit rejected by store: {e.orig}")
            raise from_integrity_error(e, conflict_message) from e
