"""Property listing schemas.

Create and update schemas name exactly the fields a caller may set. Owner,
coordinates, ``available`` and ``posted_on`` are never accepted from a request.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from realty.schemas.base import CamelModel

REQUIRED_ON_UPDATE = ("title", "address", "price", "beds", "baths", "sqft")


class PropertyCreate(CamelModel):
    """Create a new listing."""

    title: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=500)
    price: float = Field(..., ge=0)
    beds: float = Field(..., ge=0)
    baths: float = Field(..., ge=0)
    sqft: float = Field(..., ge=0)
    built: float | None = Field(None, ge=0)
    lot: float | None = Field(None, ge=0)
    description: str | None = Field(None, max_length=5000)
    for_rent: bool = False
    for_sale: bool = False


class PropertyUpdate(CamelModel):
    """Update a listing. Only fields present in the request are applied."""

    title: str | None = Field(None, min_length=1, max_length=255)
    address: str | None = Field(None, min_length=1, max_length=500)
    price: float | None = Field(None, ge=0)
    beds: float | None = Field(None, ge=0)
    baths: float | None = Field(None, ge=0)
    sqft: float | None = Field(None, ge=0)
    built: float | None = Field(None, ge=0)
    lot: float | None = Field(None, ge=0)
    description: str | None = Field(None, max_length=5000)
    for_rent: bool | None = None
    for_sale: bool | None = None

    @field_validator(*REQUIRED_ON_UPDATE, "for_rent", "for_sale")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("field cannot be null")
        return value


class PropertyResponse(CamelModel):
    """Property listing response."""

    id: UUID
    title: str
    address: str
    lat: float
    long: float
    price: float
    beds: float
    baths: float
    sqft: float
    built: float | None
    lot: float | None
    description: str | None
    available: bool
    for_rent: bool
    for_sale: bool
    posted_on: datetime
    owner_id: UUID


class PropertyEnvelope(CamelModel):
    """A single listing wrapped in ``{"property": ...}``."""

    property: PropertyResponse


class PropertyListResponse(CamelModel):
    """Listings wrapped in ``{"properties": [...]}``."""

    properties: list[PropertyResponse]
