"""
Health checks - for load balancers and monitoring.
Liveness is process-only; readiness round-trips to the database.
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from sellfurniture.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter()
settings = get_settings()


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready(request: Request):
    """Readiness: can the store answer a trivial query?"""
    try:
        await request.app.state.database.ping()
    except Exception as exc:
        logger.warning("Readiness check failed: %s", exc)
        return JSONResponse(status_code=503, content={"error": "Database unavailable"})
    return {"status": "ready"}
