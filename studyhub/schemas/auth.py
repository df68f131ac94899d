"""Authentication schemas."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

# Blank after trimming counts as missing; passwords are kept verbatim
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class UserSignup(BaseModel):
    """Signup request."""

    model_config = ConfigDict(populate_by_name=True)

    name: RequiredText = Field(..., max_length=255)
    mobile: RequiredText = Field(..., alias="mobileNo", max_length=32)
    email: RequiredText = Field(..., alias="emailID", max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class UserLogin(BaseModel):
    """Login request."""

    model_config = ConfigDict(populate_by_name=True)

    email: RequiredText = Field(..., alias="emailid", max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class SignupUser(BaseModel):
    user_id: int


class SignupResponse(BaseModel):
    """Signup response."""

    message: str = "Registered"
    user: SignupUser


class LoginUser(BaseModel):
    user_id: int
    name: str
    emailid: str


class LoginResponse(BaseModel):
    """Login response with the public user fields."""

    message: str = "Login success"
    user: LoginUser
