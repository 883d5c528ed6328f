"""
==============================================================================
Catalog API Client
==============================================================================

Async HTTP client for the catalog API built on httpx.

Responses are parsed into the same Pydantic schemas the server emits, so
callers work with typed objects (Decimal prices, datetime timestamps)
instead of raw JSON.

Behavior:
---------
- Base URL from ClientSettings (default ``/api`` on http://localhost:3001)
- Fixed request timeout (10 s by default), no retries
- Every failure raises CatalogAPIError after logging "API Error":
  transport errors, non-2xx statuses, bodies that are not JSON and
  bodies that do not match the expected schema

Usage:
------
    async with CatalogClient() as client:
        products = await client.products.list(type_name="food")
        variant = await client.variants.get(variant_id)

==============================================================================
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, List, Optional, Type, Union

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from product_catalog.client.exceptions import CatalogAPIError
from product_catalog.config import get_client_settings
from product_catalog.schemas import (
    AddOnCreate,
    AddOnDetail,
    AddOnUpdate,
    ErrorResponse,
    HealthResponse,
    MessageResponse,
    ProductCreate,
    ProductDetail,
    ProductTypeCreate,
    ProductTypeDetail,
    ProductTypeRead,
    ProductTypeSummary,
    ProductTypeUpdate,
    ProductUpdate,
    VariantCreate,
    VariantDetail,
    VariantUpdate,
)


logger = logging.getLogger(__name__)

Payload = Union[BaseModel, Dict[str, Any]]


def _to_json(payload: Payload, schema: Type[BaseModel]) -> Dict[str, Any]:
    """Validate a payload against its request schema and dump it camelCased."""
    if not isinstance(payload, schema):
        payload = schema.model_validate(payload)
    return payload.model_dump(mode="json", by_alias=True, exclude_unset=True)


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


# =============================================================================
# RESOURCE CLIENTS
# =============================================================================

class _Resource:
    """Shared plumbing for one API resource."""

    path: str = ""

    def __init__(self, api: "CatalogClient"):
        self._api = api

    async def delete(self, item_id: str) -> MessageResponse:
        return await self._api.request("DELETE", f"{self.path}/{item_id}", into=MessageResponse)


class ProductTypesClient(_Resource):
    path = "/product-types"

    async def list(self) -> List[ProductTypeSummary]:
        return await self._api.request("GET", self.path, into=List[ProductTypeSummary])

    async def get(self, product_type_id: str) -> ProductTypeDetail:
        return await self._api.request(
            "GET", f"{self.path}/{product_type_id}", into=ProductTypeDetail
        )

    async def create(self, payload: Payload) -> ProductTypeRead:
        return await self._api.request(
            "POST", self.path, into=ProductTypeRead, json=_to_json(payload, ProductTypeCreate)
        )

    async def update(self, product_type_id: str, payload: Payload) -> ProductTypeRead:
        return await self._api.request(
            "PUT", f"{self.path}/{product_type_id}",
            into=ProductTypeRead, json=_to_json(payload, ProductTypeUpdate)
        )


class ProductsClient(_Resource):
    path = "/products"

    async def list(self, type_name: Optional[str] = None) -> List[ProductDetail]:
        params = {"type": type_name} if type_name else None
        return await self._api.request("GET", self.path, into=List[ProductDetail], params=params)

    async def list_by_type(self, type_name: str) -> List[ProductDetail]:
        return await self._api.request(
            "GET", f"{self.path}/by-type/{type_name}", into=List[ProductDetail]
        )

    async def get(self, product_id: str) -> ProductDetail:
        return await self._api.request("GET", f"{self.path}/{product_id}", into=ProductDetail)

    async def create(self, payload: Payload) -> ProductDetail:
        return await self._api.request(
            "POST", self.path, into=ProductDetail, json=_to_json(payload, ProductCreate)
        )

    async def update(self, product_id: str, payload: Payload) -> ProductDetail:
        return await self._api.request(
            "PUT", f"{self.path}/{product_id}",
            into=ProductDetail, json=_to_json(payload, ProductUpdate)
        )


class VariantsClient(_Resource):
    path = "/variants"

    async def list_by_product(self, product_id: str) -> List[VariantDetail]:
        return await self._api.request(
            "GET", f"{self.path}/product/{product_id}", into=List[VariantDetail]
        )

    async def get(self, variant_id: str) -> VariantDetail:
        return await self._api.request("GET", f"{self.path}/{variant_id}", into=VariantDetail)

    async def create(self, payload: Payload) -> VariantDetail:
        return await self._api.request(
            "POST", self.path, into=VariantDetail, json=_to_json(payload, VariantCreate)
        )

    async def update(self, variant_id: str, payload: Payload) -> VariantDetail:
        return await self._api.request(
            "PUT", f"{self.path}/{variant_id}",
            into=VariantDetail, json=_to_json(payload, VariantUpdate)
        )


class AddOnsClient(_Resource):
    path = "/add-ons"

    async def list_by_product(self, product_id: str) -> List[AddOnDetail]:
        return await self._api.request(
            "GET", f"{self.path}/product/{product_id}", into=List[AddOnDetail]
        )

    async def get(self, add_on_id: str) -> AddOnDetail:
        return await self._api.request("GET", f"{self.path}/{add_on_id}", into=AddOnDetail)

    async def create(self, payload: Payload) -> AddOnDetail:
        return await self._api.request(
            "POST", self.path, into=AddOnDetail, json=_to_json(payload, AddOnCreate)
        )

    async def update(self, add_on_id: str, payload: Payload) -> AddOnDetail:
        return await self._api.request(
            "PUT", f"{self.path}/{add_on_id}",
            into=AddOnDetail, json=_to_json(payload, AddOnUpdate)
        )


# =============================================================================
# CATALOG CLIENT
# =============================================================================

class CatalogClient:
    """
    Entry point for talking to the catalog API.

    Args:
        base_url: Absolute API base URL (defaults to ClientSettings.base_url)
        timeout: Request timeout in seconds (defaults to ClientSettings)
        transport: Optional httpx transport, e.g. httpx.ASGITransport(app)
        client: Pre-built httpx.AsyncClient; takes precedence over the above
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        settings = get_client_settings()
        self._client = client or httpx.AsyncClient(
            base_url=base_url or settings.base_url,
            timeout=timeout if timeout is not None else settings.request_timeout,
            transport=transport,
        )

        self.product_types = ProductTypesClient(self)
        self.products = ProductsClient(self)
        self.variants = VariantsClient(self)
        self.add_ons = AddOnsClient(self)

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    async def health(self) -> HealthResponse:
        return await self.request("GET", "/health", into=HealthResponse)

    async def request(self, method: str, path: str, into: Any = None, **kwargs) -> Any:
        """
        Send one request and return the decoded body.

        Args:
            into: Schema (or typing construct such as ``List[Schema]``) to
                parse the body into; the raw JSON is returned when omitted

        Raises:
            CatalogAPIError: on transport failure, non-2xx status, a body
                that is not JSON or a body that does not match ``into``
        """
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"API Error: {method} {path} failed: {e}")
            raise CatalogAPIError(None, str(e) or e.__class__.__name__) from e

        if not response.is_success:
            message, code = self._error_from(response)
            logger.error(f"API Error: {method} {path} -> {response.status_code} {message}")
            raise CatalogAPIError(response.status_code, message, code)

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"API Error: {method} {path} returned a non-JSON body")
            raise CatalogAPIError(response.status_code, "Invalid JSON in response") from e

        if into is None:
            return data

        try:
            return _adapter(into).validate_python(data)
        except ValidationError as e:
            logger.error(
                f"API Error: {method} {path} returned an unexpected body "
                f"({e.error_count()} validation errors)"
            )
            raise CatalogAPIError(response.status_code, "Unexpected response format") from e

    @staticmethod
    def _error_from(response: httpx.Response) -> tuple:
        try:
            body = ErrorResponse.model_validate(response.json())
        except (ValueError, ValidationError):
            return response.text or response.reason_phrase, None
        return body.error, body.code
