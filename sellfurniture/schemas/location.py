"""Location request/response schemas."""

from datetime import datetime

from pydantic import BaseModel

from sellfurniture.schemas.base import CamelModel


class LocationCreate(BaseModel):
    name: str | None = None


class LocationResponse(CamelModel):
    id: str
    name: str
    created_by: str | None = None
    created_at: datetime | None = None
