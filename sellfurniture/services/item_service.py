"""
Item service - business logic for listings.
Validates and fills defaults before any storage access; converts store failures to StoreError.
"""

from sellfurniture.core.exceptions import ValidationError, store_errors
from sellfurniture.db.base import utcnow
from sellfurniture.db.models.item import Item
from sellfurniture.db.repositories.item_repository import ItemRepository
from sellfurniture.schemas.item import ItemCreate, ItemResponse
from sellfurniture.schemas.user import Identity


def _item_to_response(item: Item) -> ItemResponse:
    return ItemResponse.model_validate(item)


class ItemService:
    """Handles item use cases: create, list, count, search."""

    def __init__(self, item_repo: ItemRepository):
        self.item_repo = item_repo

    async def create(self, data: ItemCreate, identity: Identity) -> ItemResponse:
        """Create item owned by the authenticated caller."""
        if not data.title or data.price is None:
            raise ValidationError("Title and price are required")
        item = Item(
            title=data.title,
            description=data.description or "",
            price=float(data.price),
            retail_price=float(data.retail_price) if data.retail_price is not None else None,
            location_id=data.location_id or None,
            available=True if data.available is None else data.available,
            url=data.url or "",
            instructions=data.instructions or "",
            created_by=identity.email,
            created_at=utcnow(),
        )
        with store_errors("Failed to add item"):
            item = await self.item_repo.add(item)
        return _item_to_response(item)

    async def list_items(self) -> list[ItemResponse]:
        with store_errors("Failed to fetch items"):
            items = await self.item_repo.get_all()
        return [_item_to_response(i) for i in items]

    async def count(self) -> int:
        """Total number of listings (aggregate query, rows not loaded)."""
        with store_errors("Failed to count items"):
            return await self.item_repo.count()

    async def search(self, query: str | None) -> list[ItemResponse]:
        """Case-insensitive substring search across name, title and description."""
        if not query:
            raise ValidationError("Search query is required")
        with store_errors("Failed to search items"):
            items = await self.item_repo.search(query)
        return [_item_to_response(i) for i in items]
