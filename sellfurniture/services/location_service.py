"""
Location service - create and list pickup/drop-off sites.
"""

from sellfurniture.core.exceptions import ValidationError, store_errors
from sellfurniture.db.base import utcnow
from sellfurniture.db.models.location import Location
from sellfurniture.db.repositories.location_repository import LocationRepository
from sellfurniture.schemas.location import LocationResponse
from sellfurniture.schemas.user import Identity


class LocationService:
    def __init__(self, location_repo: LocationRepository):
        self.location_repo = location_repo

    async def create(self, name: str | None, identity: Identity | None) -> LocationResponse:
        """Persist a location. identity is None only when anonymous creation is enabled."""
        if not name or not name.strip():
            raise ValidationError("Location name is required")
        location = Location(
            name=name,
            created_by=identity.email if identity else None,
            created_at=utcnow(),
        )
        with store_errors("Failed to add location"):
            location = await self.location_repo.add(location)
        return LocationResponse.model_validate(location)

    async def list_locations(self) -> list[LocationResponse]:
        with store_errors("Failed to fetch locations"):
            locations = await self.location_repo.get_all()
        return [LocationResponse.model_validate(loc) for loc in locations]
