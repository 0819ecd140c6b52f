"""
Item repository - listing queries, including the multi-field text search.
"""

from sqlalchemy import or_, select

from sellfurniture.db.models.item import Item
from sellfurniture.db.repositories.base_repository import BaseRepository


class ItemRepository(BaseRepository[Item]):
    def __init__(self, session):
        super().__init__(session, Item)

    async def search(self, term: str) -> list[Item]:
        """Case-insensitive substring match on name OR title OR description.

        autoescape makes % and _ in the term match literally.
        """
        result = await self.session.execute(
            select(Item).where(
                or_(
                    Item.name.icontains(term, autoescape=True),
                    Item.title.icontains(term, autoescape=True),
                    Item.description.icontains(term, autoescape=True),
                )
            )
        )
        return list(result.scalars().all())
