"""
==============================================================================
Product Service Module
==============================================================================

CRUD operations and type filtering for products.

Every product read loads the owning type plus variants and add-ons, the
latter two ordered by price ascending. Product lists are newest first.

Deleting a product removes its variants and add-ons with it.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Query, contains_eager, selectinload

from product_catalog.core import exceptions
from product_catalog.db.models import Product, ProductType
from product_catalog.schemas.product import ProductCreate, ProductUpdate
from product_catalog.services.base import BaseService


# Module logger
logger = logging.getLogger(__name__)


class ProductService(BaseService):
    """
    Product management service.

    Example:
        >>> service = ProductService(db_session)
        >>> pizza = service.create(ProductCreate(name="Pizza", product_type_id=food.id))
        >>> service.list(type_name="FOOD")
        [Product(id='...', name='Pizza')]
    """

    # =========================================================================
    # CREATE OPERATIONS
    # =========================================================================

    def create(self, data: ProductCreate) -> Product:
        """
        Create a product under an existing product type.

        Raises:
            AppException: VALIDATION_ERROR "Invalid product type ID" if the
                type doesn't exist
        """
        self._ensure_product_type(data.product_type_id)

        product = Product(
            name=data.name,
            description=data.description,
            product_type_id=data.product_type_id,
            images=list(data.images),
        )
        self._db.add(product)
        self._commit("Product could not be created")

        logger.info(f"✅ Product created: {product.name} ({product.id})")
        return self.get_by_id(product.id)

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def _base_query(self) -> Query:
        return (
            self._db.query(Product)
            .join(Product.product_type)
            .options(
                contains_eager(Product.product_type),
                selectinload(Product.variants),
                selectinload(Product.add_ons),
            )
        )

    def list(self, type_name: Optional[str] = None) -> List[Product]:
        """
        List products, newest first.

        Args:
            type_name: Optional product type name, matched case-insensitively

        Returns:
            List of Product models (possibly empty)
        """
        query = self._base_query()

        if type_name:
            query = query.filter(func.lower(ProductType.name) == type_name.lower())

        return query.order_by(Product.created_at.desc()).all()

    def list_by_type_name(self, type_name: str) -> List[Product]:
        """List products whose type name matches; empty when nothing matches."""
        return self.list(type_name=type_name)

    def get_by_id(self, product_id: str) -> Product:
        """
        Get a product with its type, variants and add-ons.

        Raises:
            AppException: NOT_FOUND if the product doesn't exist
        """
        product = self._base_query().filter(Product.id == product_id).first()

        if not product:
            logger.warning(f"Product not found: {product_id}")
            raise exceptions.product_not_found(product_id)

        return product

    # =========================================================================
    # UPDATE OPERATIONS
    # =========================================================================

    def update(self, product_id: str, data: ProductUpdate) -> Product:
        """
        Update the supplied fields of a product.

        A new product_type_id is checked for existence before anything
        is written.

        Raises:
            AppException: NOT_FOUND if the product doesn't exist,
                VALIDATION_ERROR if the new product type doesn't exist
        """
        product = self.get_by_id(product_id)
        changes = data.model_dump(exclude_unset=True)

        if "product_type_id" in changes:
            self._ensure_product_type(changes["product_type_id"])

        for field, value in changes.items():
            setattr(product, field, value)

        self._commit("Product could not be updated")

        logger.info(f"Product updated: {product.name} ({', '.join(changes) or 'no changes'})")
        self._db.expire(product)
        return self.get_by_id(product_id)

    # =========================================================================
    # DELETE OPERATIONS
    # =========================================================================

    def delete(self, product_id: str) -> None:
        """
        Permanently delete a product together with its variants and add-ons.

        Raises:
            AppException: NOT_FOUND if the product doesn't exist
        """
        product = self.get_by_id(product_id)
        name = product.name
        child_count = len(product.variants) + len(product.add_ons)

        self._db.delete(product)
        self._commit("Product could not be deleted")

        logger.warning(
            f"⚠️ Product permanently deleted: {name} "
            f"(with {child_count} variants/add-ons)"
        )

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _ensure_product_type(self, product_type_id: str) -> ProductType:
        product_type = self._db.get(ProductType, product_type_id)
        if not product_type:
            logger.warning(f"Invalid product type ID: {product_type_id}")
            raise exceptions.invalid_product_type_id(product_type_id)
        return product_type
