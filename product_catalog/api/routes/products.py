"""
==============================================================================
Product Endpoints
==============================================================================

CRUD endpoints for products plus filtering by product type name.

==============================================================================
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from product_catalog.core.dependencies import get_product_service
from product_catalog.schemas import (
    MessageResponse,
    ProductCreate,
    ProductDetail,
    ProductUpdate,
)
from product_catalog.services import ProductService


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product operations."""

    def __init__(self, service: ProductService):
        self._service = service

    def create(self, data: ProductCreate) -> ProductDetail:
        return ProductDetail.model_validate(self._service.create(data))

    def list_all(self, type_name: Optional[str]) -> List[ProductDetail]:
        products = self._service.list(type_name=type_name)
        return [ProductDetail.model_validate(p) for p in products]

    def list_by_type(self, type_name: str) -> List[ProductDetail]:
        products = self._service.list_by_type_name(type_name)
        return [ProductDetail.model_validate(p) for p in products]

    def get(self, product_id: str) -> ProductDetail:
        return ProductDetail.model_validate(self._service.get_by_id(product_id))

    def update(self, product_id: str, data: ProductUpdate) -> ProductDetail:
        return ProductDetail.model_validate(self._service.update(product_id, data))

    def delete(self, product_id: str) -> MessageResponse:
        self._service.delete(product_id)
        return MessageResponse(message="Product deleted successfully")


@router.post("", response_model=ProductDetail, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    """Create a product under an existing product type."""
    return ProductController(service).create(request)


@router.get("", response_model=List[ProductDetail])
async def list_products(
    type: Optional[str] = Query(None, description="Product type name, case-insensitive"),
    service: ProductService = Depends(get_product_service)
):
    """List products, newest first, optionally filtered by type name."""
    return ProductController(service).list_all(type)


@router.get("/by-type/{type_name}", response_model=List[ProductDetail])
async def list_products_by_type(
    type_name: str,
    service: ProductService = Depends(get_product_service)
):
    """List products of one type; an unknown type gives an empty list."""
    return ProductController(service).list_by_type(type_name)


@router.get("/{product_id}", response_model=ProductDetail)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service)
):
    """Get a product with its type, variants and add-ons."""
    return ProductController(service).get(product_id)


@router.put("/{product_id}", response_model=ProductDetail)
async def update_product(
    product_id: str,
    request: ProductUpdate,
    service: ProductService = Depends(get_product_service)
):
    """Update the supplied product fields."""
    return ProductController(service).update(product_id, request)


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service)
):
    """Delete a product along with its variants and add-ons."""
    return ProductController(service).delete(product_id)
