"""
Auth endpoints - register, login, logout, me.
"""

from fastapi import APIRouter, status

from sellfurniture.core.dependencies import CurrentIdentity
from sellfurniture.db.repositories.user_repository import UserRepository
from sellfurniture.db.session import DbSession
from sellfurniture.schemas.user import (
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    TokenResponse,
    UserSummary,
)
from sellfurniture.services.auth_service import AuthService

router = APIRouter()


def _get_auth_service(session: DbSession) -> AuthService:
    return AuthService(UserRepository(session))


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register(session: DbSession, data: RegisterRequest):
    """Create new user. Log in separately to get a token."""
    svc = _get_auth_service(session)
    await svc.register(data.email, data.password, data.name)
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=TokenResponse)
async def login(session: DbSession, data: LoginRequest):
    """Authenticate and return JWT (valid for one hour)."""
    svc = _get_auth_service(session)
    token = await svc.login(data.email, data.password)
    return TokenResponse(token=token)


@router.post("/logout", response_model=MessageResponse)
async def logout():
    """Stateless: the client discards its token."""
    return AuthService.logout()


@router.get("/me", response_model=UserSummary)
async def me(session: DbSession, identity: CurrentIdentity):
    """Current user from the bearer token. 404 if the account is gone."""
    svc = _get_auth_service(session)
    return await svc.current_user(identity)
