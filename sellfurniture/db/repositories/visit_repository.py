from sellfurniture.db.models.visit import Visit
from sellfurniture.db.repositories.base_repository import BaseRepository


class VisitRepository(BaseRepository[Visit]):
    """Write-only access log."""

    def __init__(self, session):
        super().__init__(session, Visit)
