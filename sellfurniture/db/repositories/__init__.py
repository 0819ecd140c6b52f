# Repository pattern: data access kept out of services and endpoints

from sellfurniture.db.repositories.item_repository import ItemRepository
from sellfurniture.db.repositories.location_repository import LocationRepository
from sellfurniture.db.repositories.user_repository import UserRepository
from sellfurniture.db.repositories.visit_repository import VisitRepository

__all__ = ["UserRepository", "ItemRepository", "LocationRepository", "VisitRepository"]
