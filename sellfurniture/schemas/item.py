"""Item request/response schemas - REST API contract."""

from datetime import datetime

from pydantic import Field

from sellfurniture.schemas.base import CamelModel


class ItemCreate(CamelModel):
    # title/price stay optional here; ItemService reports them missing with a 400
    title: str | None = None
    # Finite only: NaN and inf would be stored but serialise back as null
    price: float | None = Field(default=None, allow_inf_nan=False)
    description: str | None = None
    retail_price: float | None = Field(default=None, alias="retail", allow_inf_nan=False)
    location_id: str | None = None
    available: bool | None = None
    url: str | None = None
    instructions: str | None = None


class ItemResponse(CamelModel):
    id: str
    title: str
    description: str
    price: float
    retail_price: float | None = Field(default=None, alias="retail")
    location_id: str | None = None
    created_by: str
    created_at: datetime
    available: bool
    url: str
    instructions: str


class ItemCount(CamelModel):
    total_number: int
