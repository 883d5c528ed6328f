"""
==============================================================================
Common Schemas Module
==============================================================================

Shared base model, field types and response schemas.

JSON keys are camelCase on the wire (``productTypeId``, ``createdAt``);
Python code uses the snake_case field names. Prices are ``Decimal`` in
Python and plain JSON numbers on the wire.

==============================================================================
"""

from decimal import Decimal
from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel


Price = Annotated[
    Decimal,
    Field(ge=0, max_digits=10, decimal_places=2),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class CamelModel(BaseModel):
    """Base for every catalog schema."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


class MessageResponse(BaseModel):
    """Simple message response."""
    message: str


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""
    error: str
    code: Optional[str] = None
    details: Optional[Dict[str, Any]] = None


class HealthResponse(BaseModel):
    """Liveness check response."""
    status: str = Field(default="OK")
    message: str
    database: str
