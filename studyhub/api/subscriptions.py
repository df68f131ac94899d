"""Newsletter subscription API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from studyhub.api.dependencies import get_subscription_service
from studyhub.schemas.error import error_responses
from studyhub.schemas.subscription import (
    SubscribeRequest,
    SubscribeResponse,
    SubscriptionResponse,
)
from studyhub.services.subscriptions import SubscriptionService

router = APIRouter(prefix="/api", tags=["subscriptions"])


@router.post(
    "/subscribe", response_model=SubscribeResponse, responses=error_responses(400, 500)
)
def subscribe(
    request: SubscribeRequest,
    service: Annotated[SubscriptionService, Depends(get_subscription_service)],
):
    """Insert or update the subscription for an email."""
    subscription = service.upsert(request.email, subscribed=request.subscribed is not False)
    return SubscribeResponse(data=SubscriptionResponse.from_model(subscription))
