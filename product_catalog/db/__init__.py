"""
==============================================================================
Database Package
==============================================================================

SQLAlchemy database infrastructure and ORM models.

Architecture:
------------
├── database.py   - DatabaseManager class, session dependency
├── models.py     - ProductType, Product, Variant, AddOn
├── errors.py     - IntegrityError classification
└── init_db.py    - DatabaseInitializer for setup

==============================================================================
"""

from .database import Base, DatabaseManager, get_database_manager, get_db
from .models import FOOD_TYPE_NAME, AddOn, Product, ProductType, Variant
from .init_db import DatabaseInitializer, init_db

__all__ = [
    # Database management
    "DatabaseManager",
    "Base",
    "get_db",
    "get_database_manager",
    # Models
    "ProductType",
    "Product",
    "Variant",
    "AddOn",
    "FOOD_TYPE_NAME",
    # Initialization
    "DatabaseInitializer",
    "init_db",
]
