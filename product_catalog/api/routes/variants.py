"""
==============================================================================
Variant Endpoints
==============================================================================

CRUD endpoints for product variants.

==============================================================================
"""

from typing import List

from fastapi import APIRouter, Depends, status

from product_catalog.core.dependencies import get_variant_service
from product_catalog.schemas import (
    MessageResponse,
    VariantCreate,
    VariantDetail,
    VariantUpdate,
)
from product_catalog.services import VariantService


router = APIRouter(prefix="/variants", tags=["Variants"])


class VariantController:
    """Controller for variant operations."""

    def __init__(self, service: VariantService):
        self._service = service

    def create(self, data: VariantCreate) -> VariantDetail:
        return VariantDetail.model_validate(self._service.create(data))

    def list_by_product(self, product_id: str) -> List[VariantDetail]:
        return [
            VariantDetail.model_validate(v)
            for v in self._service.list_by_product(product_id)
        ]

    def get(self, variant_id: str) -> VariantDetail:
        return VariantDetail.model_validate(self._service.get_by_id(variant_id))

    def update(self, variant_id: str, data: VariantUpdate) -> VariantDetail:
        return VariantDetail.model_validate(self._service.update(variant_id, data))

    def delete(self, variant_id: str) -> MessageResponse:
        self._service.delete(variant_id)
        return MessageResponse(message="Variant deleted successfully")


@router.post("", response_model=VariantDetail, status_code=status.HTTP_201_CREATED)
async def create_variant(
    request: VariantCreate,
    service: VariantService = Depends(get_variant_service)
):
    """Create a variant; the SKU must be unique across the catalog."""
    return VariantController(service).create(request)


@router.get("/product/{product_id}", response_model=List[VariantDetail])
async def list_variants_for_product(
    product_id: str,
    service: VariantService = Depends(get_variant_service)
):
    """List a product's variants, cheapest first."""
    return VariantController(service).list_by_product(product_id)


@router.get("/{variant_id}", response_model=VariantDetail)
async def get_variant(
    variant_id: str,
    service: VariantService = Depends(get_variant_service)
):
    return VariantController(service).get(variant_id)


@router.put("/{variant_id}", response_model=VariantDetail)
async def update_variant(
    variant_id: str,
    request: VariantUpdate,
    service: VariantService = Depends(get_variant_service)
):
    return VariantController(service).update(variant_id, request)


@router.delete("/{variant_id}", response_model=MessageResponse)
async def delete_variant(
    variant_id: str,
    service: VariantService = Depends(get_variant_service)
):
    return VariantController(service).delete(variant_id)
