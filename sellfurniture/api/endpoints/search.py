"""
Search endpoint - case-insensitive substring match over item name, title and description.
"""

from fastapi import APIRouter, Query

from sellfurniture.db.repositories.item_repository import ItemRepository
from sellfurniture.db.session import DbSession
from sellfurniture.schemas.item import ItemResponse
from sellfurniture.services.item_service import ItemService

router = APIRouter()


@router.get("", response_model=list[ItemResponse])
async def search_items_endpoint(session: DbSession, q: str | None = Query(None)):
    """Missing or empty q is a 400 from the service, not a 422."""
    svc = ItemService(ItemRepository(session))
    return await svc.search(q)
