"""
Service-layer tests - store failures become StoreError, validation runs before storage.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import IntegrityError, OperationalError

from sellfurniture.core.exceptions import (
    ConflictError,
    InvalidCredentialsError,
    StoreError,
    ValidationError,
)
from sellfurniture.core.security import dummy_password_hash
from sellfurniture.schemas.item import ItemCreate
from sellfurniture.schemas.user import Identity
from sellfurniture.services.auth_service import AuthService
from sellfurniture.services.item_service import ItemService
from sellfurniture.services.location_service import LocationService
from sellfurniture.services.visit_service import VisitService


def _broken_repo() -> MagicMock:
    repo = MagicMock()
    error = OperationalError("SELECT 1", {}, Exception("connection refused"))
    for name in ("get_all", "count", "add", "search", "get_by_email"):
        setattr(repo, name, AsyncMock(side_effect=error))
    return repo


@pytest.mark.asyncio
async def test_item_store_failures_become_store_error():
    svc = ItemService(_broken_repo())
    with pytest.raises(StoreError, match="Failed to fetch items"):
        await svc.list_items()
    with pytest.raises(StoreError, match="Failed to count items"):
        await svc.count()
    with pytest.raises(StoreError, match="Failed to search items"):
        await svc.search("chair")
    with pytest.raises(StoreError, match="Failed to add item"):
        await svc.create(ItemCreate(title="Chair", price=1), Identity(email="a@x.com"))


@pytest.mark.asyncio
async def test_validation_happens_before_storage():
    repo = _broken_repo()
    with pytest.raises(ValidationError):
        await ItemService(repo).search("")
    with pytest.raises(ValidationError):
        await ItemService(repo).create(ItemCreate(title="Chair"), Identity(email="a@x.com"))
    with pytest.raises(ValidationError):
        await LocationService(repo).create("  ", Identity(email="a@x.com"))
    with pytest.raises(ValidationError):
        await AuthService(repo).register("a@x.com", None)
    repo.search.assert_not_called()
    repo.add.assert_not_called()
    repo.get_by_email.assert_not_called()


@pytest.mark.asyncio
async def test_login_store_failure_is_not_reported_as_bad_credentials():
    with pytest.raises(StoreError):
        await AuthService(_broken_repo()).login("a@x.com", "pw123")


@pytest.mark.asyncio
async def test_visit_store_failure_is_store_error():
    svc = VisitService(_broken_repo(), timeout_seconds=1)
    with pytest.raises(StoreError, match="Failed to record visit"):
        await svc.record("127.0.0.1", "agent")


@pytest.mark.asyncio
async def test_visit_write_is_bounded_by_timeout():
    async def hang(entity):
        await asyncio.sleep(10)

    repo = MagicMock()
    repo.add = AsyncMock(side_effect=hang)
    svc = VisitService(repo, timeout_seconds=0.01)
    with pytest.raises(StoreError, match="Failed to record visit"):
        await svc.record("127.0.0.1", "agent")


@pytest.mark.asyncio
async def test_store_error_response_hides_driver_detail(client: AsyncClient, monkeypatch):
    from sellfurniture.db.repositories.item_repository import ItemRepository

    error = OperationalError("SELECT * FROM items", {}, Exception("secret driver detail"))
    monkeypatch.setattr(ItemRepository, "get_all", AsyncMock(side_effect=error))
    response = await client.get("/api/items")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch items"}


@pytest.mark.asyncio
async def test_register_race_on_unique_index_is_conflict():
    repo = MagicMock()
    repo.get_by_email = AsyncMock(return_value=None)
    repo.add = AsyncMock(side_effect=IntegrityError("INSERT INTO users", {}, Exception("UNIQUE constraint failed")))
    with pytest.raises(ConflictError, match="User already exists"):
        await AuthService(repo).register("a@x.com", "pw123")


@pytest.mark.asyncio
async def test_unknown_email_still_checks_a_password_hash(monkeypatch):
    from sellfurniture.services import auth_service

    checked = []

    def recording_verify(plain, digest):
        checked.append(digest)
        return False

    monkeypatch.setattr(auth_service, "verify_password", recording_verify)
    repo = MagicMock()
    repo.get_by_email = AsyncMock(return_value=None)
    with pytest.raises(InvalidCredentialsError):
        await AuthService(repo).login("ghost@x.com", "pw123")
    assert checked == [dummy_password_hash()]
