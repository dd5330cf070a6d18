"""Property listing endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends

from realty.api.dependencies import get_current_user, get_property_service, valid_property_id
from realty.models.user import User
from realty.schemas.property import (
    PropertyCreate,
    PropertyEnvelope,
    PropertyListResponse,
    PropertyResponse,
    PropertyUpdate,
)
from realty.services.property_service import PropertyService

router = APIRouter(tags=["properties"])


@router.post("/properties", response_model=PropertyResponse)
async def create_property(
    property_data: PropertyCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[PropertyService, Depends(get_property_service)],
):
    """Create a listing owned by the current user."""
    return await service.create(current_user, property_data)


@router.get("/properties", response_model=PropertyListResponse)
def get_properties(
    service: Annotated[PropertyService, Depends(get_property_service)],
):
    """Get all listings."""
    return {"properties": service.list_all()}


@router.get("/myproperties", response_model=PropertyListResponse)
def get_my_properties(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[PropertyService, Depends(get_property_service)],
):
    """Get the current user's listings."""
    return {"properties": service.list_mine(current_user)}


@router.get("/properties/{property_id}", response_model=PropertyEnvelope)
def get_property(
    property_id: Annotated[UUID, Depends(valid_property_id)],
    service: Annotated[PropertyService, Depends(get_property_service)],
):
    """Get a listing by id."""
    return {"property": service.get_by_id(property_id)}


@router.patch("/properties/{property_id}", response_model=PropertyEnvelope)
async def update_property(
    current_user: Annotated[User, Depends(get_current_user)],
    property_id: Annotated[UUID, Depends(valid_property_id)],
    property_data: PropertyUpdate,
    service: Annotated[PropertyService, Depends(get_property_service)],
):
    """Update one of the current user's listings."""
    return {"property": await service.update(current_user, property_id, property_data)}


@router.delete("/properties/{property_id}", response_model=PropertyEnvelope)
def delete_property(
    current_user: Annotated[User, Depends(get_current_user)],
    property_id: Annotated[UUID, Depends(valid_property_id)],
    service: Annotated[PropertyService, Depends(get_property_service)],
):
    """Delete one of the current user's listings."""
    return {"property": service.remove(current_user, property_id)}
