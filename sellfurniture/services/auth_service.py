"""
Authentication service - registration, login, logout and identity lookup.
Endpoints stay thin; credential rules live here.
"""

import logging

from sqlalchemy.exc import IntegrityError
from starlette.concurrency import run_in_threadpool

from sellfurniture.core.exceptions import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    StoreError,
    ValidationError,
    store_errors,
)
from sellfurniture.core.security import (
    MAX_PASSWORD_BYTES,
    create_access_token,
    dummy_password_hash,
    hash_password,
    verify_password,
)
from sellfurniture.db.models.user import User, UserRole
from sellfurniture.db.repositories.user_repository import UserRepository
from sellfurniture.schemas.user import Identity, UserSummary

logger = logging.getLogger(__name__)


class AuthService:
    """Orchestrates the credential store, password hasher and token issuer."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def register(self, email: str | None, password: str | None, name: str | None = None) -> UserSummary:
        """Create a user with role "user". No token is issued."""
        if not email or not password:
            raise ValidationError("Email and password are required")
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")

        with store_errors("Failed to register user"):
            existing = await self.user_repo.get_by_email(email)
        # Check-then-insert is not atomic; the unique index catches the race below
        if existing:
            raise ConflictError("User already exists")

        try:
            hashed = await run_in_threadpool(hash_password, password)
        except ValueError as exc:
            logger.exception("Password hashing failed")
            raise StoreError("Failed to register user") from exc

        user = User(email=email, hashed_password=hashed, name=name, role=UserRole.USER.value)
        with store_errors("Failed to register user"):
            try:
                user = await self.user_repo.add(user)
            except IntegrityError:
                logger.warning("Concurrent registration for %s hit the unique index", email)
                raise ConflictError("User already exists") from None
        logger.info("Registered user %s", email)
        return UserSummary.model_validate(user)

    async def login(self, email: str | None, password: str | None) -> str:
        """Verify credentials and return a signed token. One error for every failure."""
        if not email or not password:
            raise InvalidCredentialsError()
        with store_errors("Failed to log in"):
            user = await self.user_repo.get_by_email(email)
        digest = user.hashed_password if user else dummy_password_hash()
        matches = await run_in_threadpool(verify_password, password, digest)
        if not user or not matches:
            logger.info("Failed login for %s", email)
            raise InvalidCredentialsError()
        return create_access_token(user.email, user.role)

    @staticmethod
    def logout() -> dict:
        """Tokens are not tracked server-side; the client just drops its copy."""
        return {"message": "Logged out successfully"}

    async def current_user(self, identity: Identity) -> UserSummary:
        with store_errors("Failed to fetch user"):
            user = await self.user_repo.get_by_email(identity.email)
        if not user:
            raise NotFoundError("User not found")
        return UserSummary.model_validate(user)
