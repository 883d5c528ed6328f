"""
==============================================================================
Add-on Endpoints
==============================================================================

CRUD endpoints for food add-ons.

==============================================================================
"""

from typing import List

from fastapi import APIRouter, Depends, status

from product_catalog.core.dependencies import get_add_on_service
from product_catalog.schemas import (
    AddOnCreate,
    AddOnDetail,
    AddOnUpdate,
    MessageResponse,
)
from product_catalog.services import AddOnService


router = APIRouter(prefix="/add-ons", tags=["Add-ons"])


class AddOnController:
    """Controller for add-on operations."""

    def __init__(self, service: AddOnService):
        self._service = service

    def create(self, data: AddOnCreate) -> AddOnDetail:
        return AddOnDetail.model_validate(self._service.create(data))

    def list_by_product(self, product_id: str) -> List[AddOnDetail]:
        return [
            AddOnDetail.model_validate(a)
            for a in self._service.list_by_product(product_id)
        ]

    def get(self, add_on_id: str) -> AddOnDetail:
        return AddOnDetail.model_validate(self._service.get_by_id(add_on_id))

    def update(self, add_on_id: str, data: AddOnUpdate) -> AddOnDetail:
        return AddOnDetail.model_validate(self._service.update(add_on_id, data))

    def delete(self, add_on_id: str) -> MessageResponse:
        self._service.delete(add_on_id)
        return MessageResponse(message="Add-on deleted successfully")


@router.post("", response_model=AddOnDetail, status_code=status.HTTP_201_CREATED)
async def create_add_on(
    request: AddOnCreate,
    service: AddOnService = Depends(get_add_on_service)
):
    """Create an add-on; only food products accept add-ons."""
    return AddOnController(service).create(request)


@router.get("/product/{product_id}", response_model=List[AddOnDetail])
async def list_add_ons_for_product(
    product_id: str,
    service: AddOnService = Depends(get_add_on_service)
):
    """List a food product's add-ons, cheapest first ([] for other types)."""
    return AddOnController(service).list_by_product(product_id)


@router.get("/{add_on_id}", response_model=AddOnDetail)
async def get_add_on(
    add_on_id: str,
    service: AddOnService = Depends(get_add_on_service)
):
    return AddOnController(service).get(add_on_id)


@router.put("/{add_on_id}", response_model=AddOnDetail)
async def update_add_on(
    add_on_id: str,
    request: AddOnUpdate,
    service: AddOnService = Depends(get_add_on_service)
):
    return AddOnController(service).update(add_on_id, request)


@router.delete("/{add_on_id}", response_model=MessageResponse)
async def delete_add_on(
    add_on_id: str,
    service: AddOnService = Depends(get_add_on_service)
):
    return AddOnController(service).delete(add_on_id)
