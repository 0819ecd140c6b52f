"""
Visit endpoint - called by the frontend on every page view; never needs a token.
"""

from fastapi import APIRouter, Request, status

from sellfurniture.config import get_settings
from sellfurniture.db.repositories.visit_repository import VisitRepository
from sellfurniture.db.session import DbSession
from sellfurniture.schemas.visit import VisitResponse
from sellfurniture.services.visit_service import VisitService, client_address

router = APIRouter()


@router.post("", response_model=VisitResponse, status_code=status.HTTP_201_CREATED)
async def record_visit(session: DbSession, request: Request):
    svc = VisitService(VisitRepository(session), get_settings().visit_write_timeout_seconds)
    ip = client_address(
        request.headers.get("x-forwarded-for"),
        request.client.host if request.client else None,
    )
    return await svc.record(ip, request.headers.get("user-agent"))
