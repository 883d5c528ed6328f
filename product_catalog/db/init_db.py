"""
==============================================================================
Database Initialization Module
==============================================================================

Startup and development utilities for the catalog schema.

Initialization Flow:
-------------------
1. Verify the database is reachable
2. Create all catalog tables from ORM models (idempotent)
3. Log a row count summary

Usage:
------
    from product_catalog.db import init_db

    init_db()

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from product_catalog.config import Settings, get_settings
from product_catalog.db.database import DatabaseManager
from product_catalog.db.models import AddOn, Product, ProductType, Variant


# Module logger
logger = logging.getLogger(__name__)


class DatabaseInitializer:
    """
    Database initialization manager.

    Example:
        >>> initializer = DatabaseInitializer()
        >>> initializer.initialize()
    """

    def __init__(
        self,
        db_manager: Optional[DatabaseManager] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._db_manager = db_manager or DatabaseManager()
        self._settings = settings or get_settings()

    def create_tables(self) -> None:
        logger.info("Creating database tables...")
        self._db_manager.create_tables()
        logger.info("✅ Database tables created successfully")

    def reset(self) -> None:
        """Drop and recreate every catalog table. Deletes all data."""
        if self._settings.is_production:
            logger.error("Cannot reset database in production!")
            raise RuntimeError("Database reset not allowed in production")

        logger.warning("Resetting catalog database...")
        self._db_manager.drop_tables()
        self._db_manager.create_tables()
        logger.warning("Database reset complete")

    def get_stats(self) -> Dict[str, int]:
        """Count rows per catalog table."""
        with self._db_manager.session_scope() as session:
            return {
                "product_types": session.query(ProductType).count(),
                "products": session.query(Product).count(),
                "variants": session.query(Variant).count(),
                "add_ons": session.query(AddOn).count(),
            }

    def initialize(self) -> None:
        """Run the full startup sequence."""
        if not self._db_manager.verify_connection():
            raise RuntimeError("Database is not reachable")

        self.create_tables()

        stats = self.get_stats()
        logger.info(
            "Catalog contains "
            f"{stats['product_types']} product types, "
            f"{stats['products']} products, "
            f"{stats['variants']} variants, "
            f"{stats['add_ons']} add-ons"
        )


def init_db() -> None:
    """Initialize the database with default settings."""
    DatabaseInitializer().initialize()
