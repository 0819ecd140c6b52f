"""
FastAPI dependencies - bearer-token authorization gate.
Resolves the caller's identity from the token alone; no storage access.
"""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from sellfurniture.config import get_settings
from sellfurniture.core.exceptions import AuthenticationRequiredError, ForbiddenError
from sellfurniture.core.security import decode_access_token
from sellfurniture.schemas.user import Identity

# auto_error=False: a missing or non-Bearer header yields None and we answer 401 ourselves
security = HTTPBearer(auto_error=False)


def _identity_from_token(token: str) -> Identity | None:
    payload = decode_access_token(token)
    if not payload or "sub" not in payload:
        return None
    return Identity(email=payload["sub"], role=payload.get("role", "user"))


async def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> Identity:
    """Resolve JWT to the caller. 401 if no token, 403 if it fails verification."""
    if not credentials:
        raise AuthenticationRequiredError()
    identity = _identity_from_token(credentials.credentials)
    if identity is None:
        raise ForbiddenError()
    return identity


async def get_optional_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> Identity | None:
    """Return the caller if a valid token is present, else None."""
    if not credentials:
        return None
    return _identity_from_token(credentials.credentials)


async def get_location_author(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> Identity | None:
    """Location creation is gated unless LOCATIONS_REQUIRE_AUTH is turned off."""
    if get_settings().locations_require_auth:
        return await get_current_identity(credentials)
    return await get_optional_identity(credentials)


CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]
LocationAuthor = Annotated[Identity | None, Depends(get_location_author)]
