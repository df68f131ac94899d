"""Subscription schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from studyhub.models.subscription import Subscription


class SubscribeRequest(BaseModel):
    """Subscribe request.

    ``subscribers`` defaults to subscribed; only an explicit ``false`` unsubscribes.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: str | None = Field(None, alias="emailid", max_length=255)
    subscribed: StrictBool | None = Field(None, alias="subscribers")


class SubscriptionResponse(BaseModel):
    """Stored subscription row."""

    subscribe_id: int
    emailid: str
    subscribers: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, subscription: Subscription) -> "SubscriptionResponse":
        return cls(
            subscribe_id=subscription.subscribe_id,
            emailid=subscription.email,
            subscribers=subscription.subscribed,
            created_at=subscription.created_at,
            updated_at=subscription.updated_at,
        )


class SubscribeResponse(BaseModel):
    message: str = "Subscription saved successfully"
    data: SubscriptionResponse
