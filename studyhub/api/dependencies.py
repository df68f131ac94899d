"""FastAPI dependencies for services and static assets."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from studyhub.config import get_settings
from studyhub.database import get_db
from studyhub.services.static_site import StaticSite
from studyhub.services.subscriptions import SubscriptionService


def get_subscription_service(
    db: Annotated[Session, Depends(get_db)],
) -> SubscriptionService:
    """Get subscription service with dependencies."""
    return SubscriptionService(db)


@lru_cache
def get_static_site() -> StaticSite:
    """Get the static site resolver for the configured directories."""
    return StaticSite.from_settings(get_settings())
