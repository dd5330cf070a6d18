"""SQLAlchemy models."""

from realty.models.property import Property
from realty.models.todo import Todo
from realty.models.user import User, UserToken

__all__ = [
    "User",
    "UserToken",
    "Property",
    "Todo",
]
