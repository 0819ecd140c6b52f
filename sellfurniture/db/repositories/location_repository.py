from sellfurniture.db.models.location import Location
from sellfurniture.db.repositories.base_repository import BaseRepository


class LocationRepository(BaseRepository[Location]):
    def __init__(self, session):
        super().__init__(session, Location)
