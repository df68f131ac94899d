"""Newsletter subscription model."""

from sqlalchemy import Boolean, Column, Integer, String, true

from studyhub.database import Base
from studyhub.models.mixins import TimestampMixin


class Subscription(Base, TimestampMixin):
    """One row per normalized email address."""

    __tablename__ = "subscribe_table"

    subscribe_id = Column(Integer, primary_key=True, index=True)
    email = Column("emailid", String(255), unique=True, nullable=False, index=True)
    subscribed = Column("subscribers", Boolean, nullable=False, default=True, server_default=true())
