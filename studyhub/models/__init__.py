"""SQLAlchemy models."""

from studyhub.models.subscription import Subscription
from studyhub.models.user import User

__all__ = [
    "User",
    "Subscription",
]
