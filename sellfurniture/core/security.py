"""
Security: password hashing and JWT.
No plain-text passwords, stateless token validation (no revocation list).
"""

from datetime import datetime, timezone, timedelta
from functools import lru_cache
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from sellfurniture.config import get_settings

settings = get_settings()
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    """One-way salted hash for storage. Never store plain passwords."""
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    """Constant-time comparison for login. Unparseable digests count as a mismatch."""
    try:
        return pwd_context.verify(plain, hashed)
    except (ValueError, TypeError):
        return False


@lru_cache
def dummy_password_hash() -> str:
    """Digest checked when no user matches, so unknown emails cost one bcrypt round too."""
    return pwd_context.hash("no-such-user")


def create_access_token(
    email: str,
    role: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Create JWT carrying the caller's email and role."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_expire_minutes)
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode = {"sub": email, "email": email, "role": role, "exp": expire}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any] | None:
    """Decode and validate JWT. Returns payload or None if tampered, malformed or expired."""
    try:
        return jwt.decode(
            token, settings.secret_key, algorithms=[settings.jwt_algorithm]
        )
    except JWTError:
        return None
