"""
==============================================================================
Product Type Endpoints
==============================================================================

CRUD endpoints for product types.

==============================================================================
"""

from typing import List

from fastapi import APIRouter, Depends, status

from product_catalog.core.dependencies import get_product_type_service
from product_catalog.db.models import ProductType
from product_catalog.schemas import (
    MessageResponse,
    ProductTypeCreate,
    ProductTypeDetail,
    ProductTypeRead,
    ProductTypeSummary,
    ProductTypeUpdate,
)
from product_catalog.services import ProductTypeService


router = APIRouter(prefix="/product-types", tags=["Product Types"])


class ProductTypeController:
    """Controller for product type operations."""

    def __init__(self, service: ProductTypeService):
        self._service = service

    def create(self, data: ProductTypeCreate) -> ProductTypeRead:
        return ProductTypeRead.model_validate(self._service.create(data))

    def list_all(self) -> List[ProductTypeSummary]:
        """List types with their product counts."""
        return [
            self._summary(product_type, product_count)
            for product_type, product_count in self._service.list_with_counts()
        ]

    def get(self, product_type_id: str) -> ProductTypeDetail:
        return ProductTypeDetail.model_validate(self._service.get_by_id(product_type_id))

    def update(self, product_type_id: str, data: ProductTypeUpdate) -> ProductTypeRead:
        return ProductTypeRead.model_validate(self._service.update(product_type_id, data))

    def delete(self, product_type_id: str) -> MessageResponse:
        self._service.delete(product_type_id)
        return MessageResponse(message="Product type deleted successfully")

    @staticmethod
    def _summary(product_type: ProductType, product_count: int) -> ProductTypeSummary:
        fields = ProductTypeRead.model_validate(product_type).model_dump()
        return ProductTypeSummary.model_validate(
            {**fields, "count": {"products": product_count}}
        )


@router.post("", response_model=ProductTypeRead, status_code=status.HTTP_201_CREATED)
async def create_product_type(
    request: ProductTypeCreate,
    service: ProductTypeService = Depends(get_product_type_service)
):
    """Create a new product type."""
    return ProductTypeController(service).create(request)


@router.get("", response_model=List[ProductTypeSummary])
async def list_product_types(service: ProductTypeService = Depends(get_product_type_service)):
    """List all product types, newest first, with product counts."""
    return ProductTypeController(service).list_all()


@router.get("/{product_type_id}", response_model=ProductTypeDetail)
async def get_product_type(
    product_type_id: str,
    service: ProductTypeService = Depends(get_product_type_service)
):
    """Get a product type with its products, variants and add-ons."""
    return ProductTypeController(service).get(product_type_id)


@router.put("/{product_type_id}", response_model=ProductTypeRead)
async def update_product_type(
    product_type_id: str,
    request: ProductTypeUpdate,
    service: ProductTypeService = Depends(get_product_type_service)
):
    """Update a product type's name and/or description."""
    return ProductTypeController(service).update(product_type_id, request)


@router.delete("/{product_type_id}", response_model=MessageResponse)
async def delete_product_type(
    product_type_id: str,
    service: ProductTypeService = Depends(get_product_type_service)
):
    """Delete a product type that owns no products."""
    return ProductTypeController(service).delete(product_type_id)
