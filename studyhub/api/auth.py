"""Signup and login API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from studyhub.database import get_db
from studyhub.schemas.auth import (
    LoginResponse,
    LoginUser,
    SignupResponse,
    SignupUser,
    UserLogin,
    UserSignup,
)
from studyhub.schemas.error import error_responses
from studyhub.services.users import authenticate_user, create_user

router = APIRouter(prefix="/api", tags=["auth"])


@router.post(
    "/signup", response_model=SignupResponse, responses=error_responses(400, 409, 500)
)
async def signup(
    user_data: UserSignup,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    user = await create_user(
        db, user_data.name, user_data.mobile, user_data.email, user_data.password
    )
    return SignupResponse(user=SignupUser(user_id=user.user_id))


@router.post(
    "/login", response_model=LoginResponse, responses=error_responses(400, 401, 404, 500)
)
async def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Check email and password.

    Stateless: nothing is issued to the client beyond the user fields.
    """
    user = await authenticate_user(db, credentials.email, credentials.password)
    return LoginResponse(
        user=LoginUser(user_id=user.user_id, name=user.name, emailid=user.email),
    )
