"""
Pydantic models for site accounts.

``User`` is the stored record and includes the password hash; it is
never returned by the API.  Responses use ``UserRead`` instead.
"""

from pydantic import BaseModel, ConfigDict, Field

from .common import Record


class UserCredentials(BaseModel):
    """Username and password as sent to the login endpoint."""

    username: str = Field(..., min_length=1, max_length=64, examples=["admin"])
    password: str = Field(..., min_length=1, examples=["admin123"])


class UserCreate(UserCredentials):
    """Schema for self-registration.  New accounts are never admins."""

    password: str = Field(..., min_length=6)


class User(Record):
    username: str
    password_hash: str
    is_admin: bool = False


class UserRead(BaseModel):
    """Public view of an account."""

    id: int
    username: str
    is_admin: bool = False

    model_config = ConfigDict(from_attributes=True)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserRead
