"""
==============================================================================
Add-on Service Module
==============================================================================

CRUD operations for add-ons.

Add-ons only make sense for food. The rule is checked when an add-on is
created and when a product's add-ons are listed; it is not enforced by the
database, so add-ons of a product that was later re-typed stay stored but
are no longer listed.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import List

from sqlalchemy.orm import joinedload

from product_catalog.core import exceptions
from product_catalog.db.models import AddOn, Product
from product_catalog.schemas.add_on import AddOnCreate, AddOnUpdate
from product_catalog.services.base import BaseService


# Module logger
logger = logging.getLogger(__name__)


class AddOnService(BaseService):
    """Add-on management service."""

    def create(self, data: AddOnCreate) -> AddOn:
        """
        Create an add-on for an existing food product.

        Raises:
            AppException: VALIDATION_ERROR if the product doesn't exist or
                its type is not food
        """
        product = self._get_product(data.product_id)
        if not product:
            logger.warning(f"Add-on creation failed: invalid product - {data.product_id}")
            raise exceptions.invalid_product_id(data.product_id)

        if not product.is_food:
            logger.warning(
                f"Add-on creation rejected for non-food product {product.name} "
                f"({product.product_type.name})"
            )
            raise exceptions.add_ons_food_only()

        add_on = AddOn(
            name=data.name,
            description=data.description,
            price=data.price,
            product_id=product.id,
        )
        self._db.add(add_on)
        self._commit("Add-on could not be created")

        logger.info(f"✅ Add-on created: {add_on.name} for {product.name}")
        return self.get_by_id(add_on.id)

    def list_by_product(self, product_id: str) -> List[AddOn]:
        """
        List a product's add-ons, cheapest first.

        Returns [] for non-food products, even if add-ons are stored.

        Raises:
            AppException: NOT_FOUND if the product doesn't exist
        """
        product = self._get_product(product_id)
        if not product:
            logger.warning(f"Product not found: {product_id}")
            raise exceptions.product_not_found(product_id)

        if not product.is_food:
            return []

        return (
            self._with_product()
            .filter(AddOn.product_id == product_id)
            .order_by(AddOn.price.asc(), AddOn.created_at.asc())
            .all()
        )

    def get_by_id(self, add_on_id: str) -> AddOn:
        add_on = self._with_product().filter(AddOn.id == add_on_id).first()

        if not add_on:
            logger.warning(f"Add-on not found: {add_on_id}")
            raise exceptions.add_on_not_found(add_on_id)

        return add_on

    def update(self, add_on_id: str, data: AddOnUpdate) -> AddOn:
        add_on = self.get_by_id(add_on_id)
        changes = data.model_dump(exclude_unset=True)

        for field, value in changes.items():
            setattr(add_on, field, value)

        self._commit("Add-on could not be updated")
        self._db.refresh(add_on)

        logger.info(f"Add-on updated: {add_on.name} ({', '.join(changes) or 'no changes'})")
        return add_on

    def delete(self, add_on_id: str) -> None:
        add_on = self.get_by_id(add_on_id)
        name = add_on.name

        self._db.delete(add_on)
        self._commit("Add-on could not be deleted")

        logger.info(f"Add-on deleted: {name}")

    def _get_product(self, product_id: str):
        return (
            self._db.query(Product)
            .options(joinedload(Product.product_type))
            .filter(Product.id == product_id)
            .first()
        )

    def _with_product(self):
        return self._db.query(AddOn).options(
            joinedload(AddOn.product).joinedload(Product.product_type)
        )
