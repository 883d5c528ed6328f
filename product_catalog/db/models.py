"""
==============================================================================
SQLAlchemy ORM Models Module
==============================================================================

ORM models for the product catalog.

Database Schema:
---------------

    ┌─────────────────────────────────────────────────────────────────┐
    │                        product_types                             │
    ├─────────────────────────────────────────────────────────────────┤
    │ id (UUID, PK)                                                   │
    │ name (VARCHAR, UNIQUE, NOT NULL)                                │
    │ description (TEXT, NULLABLE)                                    │
    │ created_at / updated_at (DATETIME)                              │
    └─────────────────────────────────────────────────────────────────┘
                                    │
                                    │ 1:N (RESTRICT)
                                    ▼
    ┌─────────────────────────────────────────────────────────────────┐
    │                          products                                │
    ├─────────────────────────────────────────────────────────────────┤
    │ id (UUID, PK)                                                   │
    │ name (VARCHAR, NOT NULL)                                        │
    │ description (TEXT, NULLABLE)                                    │
    │ images (JSON list of URLs)                                      │
    │ product_type_id (UUID, FK → product_types.id)                   │
    │ created_at / updated_at (DATETIME)                              │
    └─────────────────────────────────────────────────────────────────┘
                   │                                   │
                   │ 1:N (CASCADE)                     │ 1:N (CASCADE)
                   ▼                                   ▼
    ┌──────────────────────────────┐   ┌──────────────────────────────┐
    │           variants            │   │            add_ons            │
    ├──────────────────────────────┤   ├──────────────────────────────┤
    │ id (UUID, PK)                │   │ id (UUID, PK)                │
    │ size, color (NULLABLE)       │   │ name (NOT NULL)              │
    │ price (NUMERIC >= 0)         │   │ description (NULLABLE)       │
    │ stock (INTEGER >= 0)         │   │ price (NUMERIC >= 0)         │
    │ sku (UNIQUE, NOT NULL)       │   │ product_id (FK)              │
    │ product_id (FK)              │   │ created_at / updated_at      │
    │ created_at / updated_at      │   └──────────────────────────────┘
    └──────────────────────────────┘

Delete Policy:
-------------
- Deleting a product type that still owns products is rejected (RESTRICT).
- Deleting a product removes its variants and add-ons (CASCADE).

==============================================================================
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import (
    JSON,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, relationship

from product_catalog.db.database import Base


# Add-ons are only offered for products of this type (compared lowercased)
FOOD_TYPE_NAME = "food"


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


# =============================================================================
# PRODUCT TYPE MODEL
# =============================================================================

class ProductType(Base):
    """
    Product type (category) such as Food, Apparel or Electronics.

    Attributes:
        id: Unique identifier (UUID)
        name: Unique display name
        description: Optional free text
        created_at: Creation timestamp
        updated_at: Last modification timestamp

    Relationships:
        products: Products of this type
    """

    __tablename__ = "product_types"

    id: str = Column(
        String(36),
        primary_key=True,
        default=_new_id,
        doc="Unique product type identifier (UUID)"
    )

    name: str = Column(
        String(100),
        unique=True,
        nullable=False,
        index=True,
        doc="Unique type name"
    )

    description: Optional[str] = Column(
        Text,
        nullable=True,
        doc="Optional description"
    )

    created_at: datetime = Column(
        DateTime,
        default=_utcnow,
        nullable=False,
        doc="Creation timestamp"
    )

    updated_at: datetime = Column(
        DateTime,
        default=_utcnow,
        onupdate=_utcnow,
        nullable=False,
        doc="Last modification timestamp"
    )

    # Deletion is guarded by the database (RESTRICT); the ORM must not try
    # to null out product_type_id on the children.
    products: Mapped[List["Product"]] = relationship(
        "Product",
        back_populates="product_type",
        passive_deletes="all",
        order_by="Product.created_at.desc()",
        doc="Products of this type"
    )

    @property
    def is_food(self) -> bool:
        """Check if products of this type may carry add-ons."""
        return self.name.lower() == FOOD_TYPE_NAME

    def __repr__(self) -> str:
        return f"ProductType(id={self.id!r}, name={self.name!r})"


# =============================================================================
# PRODUCT MODEL
# =============================================================================

class Product(Base):
    """
    Catalog product.

    Attributes:
        id: Unique identifier (UUID)
        name: Display name
        description: Optional free text
        images: Ordered list of image URLs
        product_type_id: Owning product type

    Relationships:
        product_type: Owning ProductType
        variants: Purchasable configurations, cheapest first
        add_ons: Optional extras (food only), cheapest first
    """

    __tablename__ = "products"

    id: str = Column(
        String(36),
        primary_key=True,
        default=_new_id,
        doc="Unique product identifier (UUID)"
    )

    name: str = Column(
        String(255),
        nullable=False,
        doc="Product display name"
    )

    description: Optional[str] = Column(
        Text,
        nullable=True,
        doc="Optional description"
    )

    images: list = Column(
        JSON,
        default=list,
        nullable=False,
        doc="Ordered list of image URLs"
    )

    product_type_id: str = Column(
        String(36),
        ForeignKey("product_types.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
        doc="FK to the owning product type"
    )

    created_at: datetime = Column(
        DateTime,
        default=_utcnow,
        nullable=False,
        index=True,
        doc="Creation timestamp"
    )

    updated_at: datetime = Column(
        DateTime,
        default=_utcnow,
        onupdate=_utcnow,
        nullable=False,
        doc="Last modification timestamp"
    )

    product_type: Mapped["ProductType"] = relationship(
        "ProductType",
        back_populates="products",
        doc="Owning product type"
    )

    variants: Mapped[List["Variant"]] = relationship(
        "Variant",
        back_populates="product",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Variant.price",
        doc="Variants ordered by price ascending"
    )

    add_ons: Mapped[List["AddOn"]] = relationship(
        "AddOn",
        back_populates="product",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="AddOn.price",
        doc="Add-ons ordered by price ascending"
    )

    @property
    def is_food(self) -> bool:
        return self.product_type is not None and self.product_type.is_food

    def __repr__(self) -> str:
        return f"Product(id={self.id!r}, name={self.name!r})"


# =============================================================================
# VARIANT MODEL
# =============================================================================

class Variant(Base):
    """
    One purchasable configuration of a product.

    (size, color) pairs are not unique per product; the SKU is unique
    across the whole catalog.
    """

    __tablename__ = "variants"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_variants_price_non_negative"),
        CheckConstraint("stock >= 0", name="ck_variants_stock_non_negative"),
    )

    id: str = Column(String(36), primary_key=True, default=_new_id)

    size: Optional[str] = Column(String(50), nullable=True)

    color: Optional[str] = Column(String(50), nullable=True)

    price: Decimal = Column(Numeric(10, 2), nullable=False)

    stock: int = Column(Integer, default=0, nullable=False)

    sku: str = Column(
        String(100),
        unique=True,
        nullable=False,
        index=True,
        doc="Stock keeping unit, globally unique"
    )

    product_id: str = Column(
        String(36),
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    created_at: datetime = Column(DateTime, default=_utcnow, nullable=False)

    updated_at: datetime = Column(
        DateTime, default=_utcnow, onupdate=_utcnow, nullable=False
    )

    product: Mapped["Product"] = relationship("Product", back_populates="variants")

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    def __repr__(self) -> str:
        return (
            f"Variant(id={self.id!r}, sku={self.sku!r}, "
            f"size={self.size!r}, color={self.color!r}, price={self.price})"
        )


# =============================================================================
# ADD-ON MODEL
# =============================================================================

class AddOn(Base):
    """Optional extra for a food product (e.g. extra cheese)."""

    __tablename__ = "add_ons"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_add_ons_price_non_negative"),
    )

    id: str = Column(String(36), primary_key=True, default=_new_id)

    name: str = Column(String(255), nullable=False)

    description: Optional[str] = Column(Text, nullable=True)

    price: Decimal = Column(Numeric(10, 2), nullable=False)

    product_id: str = Column(
        String(36),
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    created_at: datetime = Column(DateTime, default=_utcnow, nullable=False)

    updated_at: datetime = Column(
        DateTime, default=_utcnow, onupdate=_utcnow, nullable=False
    )

    product: Mapped["Product"] = relationship("Product", back_populates="add_ons")

    def __repr__(self) -> str:
        return f"AddOn(id={self.id!r}, name={self.name!r}, price={self.price})"
