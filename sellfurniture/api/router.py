"""
API routers - /auth for credentials, /api for resources.
"""

from fastapi import APIRouter

from sellfurniture.api.endpoints import auth, health, items, locations, search, visits

auth_router = APIRouter(prefix="/auth", tags=["auth"])
auth_router.include_router(auth.router)

api_router = APIRouter(prefix="/api")
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(locations.router, prefix="/locations", tags=["locations"])
api_router.include_router(items.router, tags=["items"])
api_router.include_router(search.router, prefix="/search", tags=["search"])
api_router.include_router(visits.router, prefix="/visit", tags=["visits"])
