"""Pydantic schemas for API requests and responses."""

from studyhub.schemas.auth import (
    LoginResponse,
    LoginUser,
    SignupResponse,
    SignupUser,
    UserLogin,
    UserSignup,
)
from studyhub.schemas.error import ErrorResponse
from studyhub.schemas.subscription import (
    SubscribeRequest,
    SubscribeResponse,
    SubscriptionResponse,
)

__all__ = [
    "UserSignup",
    "UserLogin",
    "SignupUser",
    "SignupResponse",
    "LoginUser",
    "LoginResponse",
    "SubscribeRequest",
    "SubscribeResponse",
    "SubscriptionResponse",
    "ErrorResponse",
]
