"""
SQLAlchemy declarative base and shared column helpers.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models. Tables are created at startup from its metadata."""

    pass


def new_id() -> str:
    """Opaque storage-assigned identifier returned to clients."""
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
