"""
==============================================================================
Product Type Service Module
==============================================================================

CRUD operations for product types.

Rules:
------
- Names are unique (exact match).
- Listing is newest first, each entry annotated with its product count.
- A type that still owns products cannot be deleted.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import selectinload

from product_catalog.core import exceptions
from product_catalog.db.models import Product, ProductType
from product_catalog.schemas.product_type import ProductTypeCreate, ProductTypeUpdate
from product_catalog.services.base import BaseService


# Module logger
logger = logging.getLogger(__name__)

NAME_EXISTS_MESSAGE = "Product type with this name already exists"


class ProductTypeService(BaseService):
    """
    Product type management service.

    Example:
        >>> service = ProductTypeService(db_session)
        >>> food = service.create(ProductTypeCreate(name="Food"))
        >>> [(t.name, n) for t, n in service.list_with_counts()]
        [('Food', 0)]
    """

    # =========================================================================
    # CREATE OPERATIONS
    # =========================================================================

    def create(self, data: ProductTypeCreate) -> ProductType:
        """
        Create a new product type.

        Raises:
            AppException: CONFLICT if the name is already taken
        """
        if self._find_by_name(data.name):
            logger.warning(f"Product type creation failed: name exists - {data.name}")
            raise exceptions.product_type_name_exists(data.name)

        product_type = ProductType(name=data.name, description=data.description)
        self._db.add(product_type)
        self._commit(NAME_EXISTS_MESSAGE)
        self._db.refresh(product_type)

        logger.info(f"✅ Product type created: {product_type.name}")
        return product_type

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def list_with_counts(self) -> List[Tuple[ProductType, int]]:
        """
        List every product type, newest first, with its product count.

        Returns:
            List of (ProductType, product_count) tuples
        """
        return (
            self._db.query(ProductType, func.count(Product.id))
            .outerjoin(Product, Product.product_type_id == ProductType.id)
            .group_by(ProductType.id)
            .order_by(ProductType.created_at.desc())
            .all()
        )

    def get_by_id(self, product_type_id: str) -> ProductType:
        """
        Get a product type with its products, variants and add-ons loaded.

        Raises:
            AppException: NOT_FOUND if the type doesn't exist
        """
        product_type = (
            self._db.query(ProductType)
            .options(
                selectinload(ProductType.products).selectinload(Product.variants),
                selectinload(ProductType.products).selectinload(Product.add_ons),
            )
            .filter(ProductType.id == product_type_id)
            .first()
        )

        if not product_type:
            logger.warning(f"Product type not found: {product_type_id}")
            raise exceptions.product_type_not_found(product_type_id)

        return product_type

    def _find_by_name(self, name: str) -> Optional[ProductType]:
        return self._db.query(ProductType).filter(ProductType.name == name).first()

    # =========================================================================
    # UPDATE OPERATIONS
    # =========================================================================

    def update(self, product_type_id: str, data: ProductTypeUpdate) -> ProductType:
        """
        Update the supplied fields of a product type.

        Raises:
            AppException: NOT_FOUND if the type doesn't exist,
                CONFLICT if the new name belongs to another type
        """
        product_type = self.get_by_id(product_type_id)
        changes = data.model_dump(exclude_unset=True)

        new_name = changes.get("name")
        if new_name is not None and new_name != product_type.name:
            existing = self._find_by_name(new_name)
            if existing and existing.id != product_type.id:
                raise exceptions.product_type_name_exists(new_name)

        for field, value in changes.items():
            setattr(product_type, field, value)

        self._commit(NAME_EXISTS_MESSAGE)
        self._db.refresh(product_type)

        logger.info(f"Product type updated: {product_type.name} ({', '.join(changes) or 'no changes'})")
        return product_type

    # =========================================================================
    # DELETE OPERATIONS
    # =========================================================================

    def delete(self, product_type_id: str) -> None:
        """
        Permanently delete a product type.

        Raises:
            AppException: NOT_FOUND if the type doesn't exist,
                CONFLICT if products still reference it
        """
        product_type = self.get_by_id(product_type_id)

        product_count = (
            self._db.query(func.count(Product.id))
            .filter(Product.product_type_id == product_type.id)
            .scalar()
        )
        if product_count:
            logger.warning(
                f"Refusing to delete product type {product_type.name}: "
                f"{product_count} products reference it"
            )
            raise exceptions.product_type_in_use(product_count)

        name = product_type.name
        self._db.delete(product_type)
        self._commit("Cannot delete product type with existing products")

        logger.warning(f"⚠️ Product type permanently deleted: {name}")
