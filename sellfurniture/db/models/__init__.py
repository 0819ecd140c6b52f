# Import every model so Base.metadata knows all tables before create_all

from sellfurniture.db.models.item import Item
from sellfurniture.db.models.location import Location
from sellfurniture.db.models.user import User, UserRole
from sellfurniture.db.models.visit import Visit

__all__ = ["Item", "Location", "User", "UserRole", "Visit"]
