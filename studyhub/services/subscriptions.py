"""Newsletter subscription store."""

import logging

from sqlalchemy import func
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from studyhub.models.subscription import Subscription
from studyhub.services.errors import InfrastructureError, ValidationError

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    """Trim and lower-case an email address."""
    return email.strip().lower()


class SubscriptionService:
    """Upserts newsletter preferences keyed on normalized email."""

    def __init__(self, db: Session):
        self.db = db

    def _insert(self):
        dialect = self.db.get_bind().dialect.name
        if dialect == "postgresql":
            return postgresql.insert(Subscription)
        if dialect == "sqlite":
            return sqlite.insert(Subscription)
        raise InfrastructureError(f"Subscription upsert not supported on {dialect}")

    def upsert(self, email: str | None, subscribed: bool = True) -> Subscription:
        """Create or update the subscription row for ``email``.

        A new row gets created_at = updated_at = now(); an existing row keeps
        created_at and has subscribers and updated_at overwritten.
        """
        if not email or not email.strip():
            raise ValidationError("EmailID is required")

        normalized = normalize_email(email)
        stmt = self._insert().values(
            email=normalized,
            subscribed=subscribed,
            created_at=func.now(),
            updated_at=func.now(),
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[Subscription.email],
            set_={
                Subscription.subscribed: stmt.excluded.subscribers,
                Subscription.updated_at: func.now(),
            },
        )
        self.db.execute(stmt)
        self.db.commit()

        subscription = self.db.query(Subscription).filter(Subscription.email == normalized).one()
        logger.info(f"Subscription saved: '{normalized}' subscribed={subscription.subscribed}")
        return subscription

    def get(self, email: str) -> Subscription | None:
        """Get the subscription for an email, normalizing it first."""
        return (
            self.db.query(Subscription)
            .filter(Subscription.email == normalize_email(email))
            .first()
        )
