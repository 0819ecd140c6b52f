"""Visit response schema."""

from datetime import datetime

from sellfurniture.schemas.base import CamelModel


class VisitResponse(CamelModel):
    id: str
    timestamp: datetime
    ip: str | None = None
    user_agent: str | None = None
