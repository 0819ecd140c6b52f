"""
Item endpoints - public list and count, authenticated create.
Design: Thin controller; service layer holds business logic.
"""

from fastapi import APIRouter, status

from sellfurniture.core.dependencies import CurrentIdentity
from sellfurniture.db.repositories.item_repository import ItemRepository
from sellfurniture.db.session import DbSession
from sellfurniture.schemas.item import ItemCount, ItemCreate, ItemResponse
from sellfurniture.services.item_service import ItemService

router = APIRouter()


def _get_item_service(session: DbSession) -> ItemService:
    """Factory for service with repository injection."""
    return ItemService(ItemRepository(session))


@router.get("/items", response_model=list[ItemResponse])
async def list_items(session: DbSession):
    """List every item. No pagination."""
    return await _get_item_service(session).list_items()


@router.post("/items", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
async def create_item(session: DbSession, data: ItemCreate, identity: CurrentIdentity):
    """Create item (authenticated). Creator is taken from the token, never the body."""
    svc = _get_item_service(session)
    return await svc.create(data, identity)


@router.get("/totalNumber", response_model=ItemCount)
async def total_number(session: DbSession):
    total = await _get_item_service(session).count()
    return ItemCount(total_number=total)
