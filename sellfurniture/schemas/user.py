"""User and auth request/response schemas - API contract."""

from pydantic import BaseModel

from sellfurniture.schemas.base import CamelModel


# Fields are optional so missing values reach the service and get the documented 400
class RegisterRequest(BaseModel):
    email: str | None = None
    password: str | None = None
    name: str | None = None


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class UserSummary(CamelModel):
    """User as returned to clients. No password hash."""

    id: str
    email: str
    name: str | None = None
    role: str


class Identity(BaseModel):
    """Caller resolved from a verified bearer token."""

    email: str
    role: str = "user"


class TokenResponse(BaseModel):
    token: str


class MessageResponse(BaseModel):
    message: str
