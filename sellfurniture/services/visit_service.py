"""
Visit service - page-view logging.
Failures are logged and reported as StoreError; they never propagate past the request.
"""

import asyncio
import logging

from sellfurniture.core.exceptions import StoreError, store_errors
from sellfurniture.db.base import utcnow
from sellfurniture.db.models.visit import Visit
from sellfurniture.db.repositories.visit_repository import VisitRepository
from sellfurniture.schemas.visit import VisitResponse

logger = logging.getLogger(__name__)


def client_address(forwarded_for: str | None, peer_host: str | None) -> str | None:
    """First hop of X-Forwarded-For if present, else the socket peer address."""
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first
    return peer_host


class VisitService:
    def __init__(self, visit_repo: VisitRepository, timeout_seconds: float):
        self.visit_repo = visit_repo
        self.timeout_seconds = timeout_seconds

    async def record(self, ip: str | None, user_agent: str | None) -> VisitResponse:
        visit = Visit(timestamp=utcnow(), ip=ip, user_agent=user_agent)
        with store_errors("Failed to record visit"):
            try:
                visit = await asyncio.wait_for(self.visit_repo.add(visit), self.timeout_seconds)
            except asyncio.TimeoutError as exc:
                logger.error("Recording visit timed out after %.1fs", self.timeout_seconds)
                raise StoreError("Failed to record visit") from exc
        return VisitResponse.model_validate(visit)
