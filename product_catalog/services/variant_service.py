"""
==============================================================================
Variant Service Module
==============================================================================

CRUD operations for product variants.

Rules:
------
- The owning product must exist at creation time.
- SKUs are unique across the whole catalog, not per product.
- Listing by product needs no existing product: unknown ids give [].

==============================================================================
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.orm import joinedload

from product_catalog.core import exceptions
from product_catalog.db.models import Product, Variant
from product_catalog.schemas.variant import VariantCreate, VariantUpdate
from product_catalog.services.base import BaseService


# Module logger
logger = logging.getLogger(__name__)

SKU_EXISTS_MESSAGE = "SKU must be unique"


class VariantService(BaseService):
    """
    Variant management service.

    Example:
        >>> service = VariantService(db_session)
        >>> service.create(VariantCreate(price=3.99, sku="X-1", product_id=pizza.id))
        >>> [v.sku for v in service.list_by_product(pizza.id)]
        ['X-1']
    """

    def create(self, data: VariantCreate) -> Variant:
        """
        Create a variant for an existing product.

        Raises:
            AppException: VALIDATION_ERROR "Invalid product ID" if the product
                doesn't exist, CONFLICT if the SKU is taken
        """
        if not self._db.get(Product, data.product_id):
            logger.warning(f"Variant creation failed: invalid product - {data.product_id}")
            raise exceptions.invalid_product_id(data.product_id)

        if self._find_by_sku(data.sku):
            logger.warning(f"Variant creation failed: SKU exists - {data.sku}")
            raise exceptions.sku_exists(data.sku)

        variant = Variant(
            size=data.size,
            color=data.color,
            price=data.price,
            stock=data.stock,
            sku=data.sku,
            product_id=data.product_id,
        )
        self._db.add(variant)
        self._commit(SKU_EXISTS_MESSAGE)

        logger.info(f"✅ Variant created: {variant.sku} (product {variant.product_id})")
        return self.get_by_id(variant.id)

    def list_by_product(self, product_id: str) -> List[Variant]:
        """List a product's variants, cheapest first."""
        return (
            self._with_product()
            .filter(Variant.product_id == product_id)
            .order_by(Variant.price.asc(), Variant.created_at.asc())
            .all()
        )

    def get_by_id(self, variant_id: str) -> Variant:
        """
        Raises:
            AppException: NOT_FOUND if the variant doesn't exist
        """
        variant = self._with_product().filter(Variant.id == variant_id).first()

        if not variant:
            logger.warning(f"Variant not found: {variant_id}")
            raise exceptions.variant_not_found(variant_id)

        return variant

    def update(self, variant_id: str, data: VariantUpdate) -> Variant:
        """
        Update the supplied fields of a variant.

        Raises:
            AppException: NOT_FOUND if the variant doesn't exist,
                CONFLICT if the new SKU belongs to another variant
        """
        variant = self.get_by_id(variant_id)
        changes = data.model_dump(exclude_unset=True)

        new_sku = changes.get("sku")
        if new_sku is not None and new_sku != variant.sku:
            existing = self._find_by_sku(new_sku)
            if existing and existing.id != variant.id:
                raise exceptions.sku_exists(new_sku)

        for field, value in changes.items():
            setattr(variant, field, value)

        self._commit(SKU_EXISTS_MESSAGE)
        self._db.refresh(variant)

        logger.info(f"Variant updated: {variant.sku} ({', '.join(changes) or 'no changes'})")
        return variant

    def delete(self, variant_id: str) -> None:
        """
        Raises:
            AppException: NOT_FOUND if the variant doesn't exist
        """
        variant = self.get_by_id(variant_id)
        sku = variant.sku

        self._db.delete(variant)
        self._commit("Variant could not be deleted")

        logger.info(f"Variant deleted: {sku}")

    def _with_product(self):
        return self._db.query(Variant).options(
            joinedload(Variant.product).joinedload(Product.product_type)
        )

    def _find_by_sku(self, sku: str) -> Optional[Variant]:
        return self._db.query(Variant).filter(Variant.sku == sku).first()
