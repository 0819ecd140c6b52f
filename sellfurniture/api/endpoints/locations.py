"""
Location endpoints - public list, gated create.
"""

from fastapi import APIRouter, status

from sellfurniture.core.dependencies import LocationAuthor
from sellfurniture.db.repositories.location_repository import LocationRepository
from sellfurniture.db.session import DbSession
from sellfurniture.schemas.location import LocationCreate, LocationResponse
from sellfurniture.services.location_service import LocationService

router = APIRouter()


def _get_location_service(session: DbSession) -> LocationService:
    return LocationService(LocationRepository(session))


@router.get("", response_model=list[LocationResponse])
async def list_locations(session: DbSession):
    return await _get_location_service(session).list_locations()


@router.post("", response_model=LocationResponse, status_code=status.HTTP_201_CREATED)
async def create_location(session: DbSession, data: LocationCreate, identity: LocationAuthor):
    """Add a location; the caller is recorded as its creator."""
    svc = _get_location_service(session)
    return await svc.create(data.name, identity)
