"""User schema definitions.

This module defines the stored user record and the request/response bodies
of the login, register and profile endpoints. Request and response bodies
use camelCase keys on the wire (``firstName``); snake_case is accepted on
input as well.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserRecord(BaseModel):
    """A persisted user account, as handed out by the directory."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Identifier assigned by the store at registration.")
    username: str = Field(description="Unique login name.")
    password: str = Field(description="Credential string, compared verbatim at login.")
    email: Optional[str] = Field(default=None)
    first_name: Optional[str] = Field(default=None)
    last_name: Optional[str] = Field(default=None)
    created_at: str = Field(description="The time when the user registered (ISO 8601, UTC).")


class LoginRequest(BaseModel):
    """Request body for POST /login."""

    username: str
    password: str


class RegisterRequest(BaseModel):
    """Request body for POST /register.

    Unknown keys, including any ``id`` sent by the client, are ignored.
    """

    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(description="Login name; must not be taken yet.")
    password: str = Field(description="Credential string.")
    email: Optional[str] = Field(default=None)
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")


class UpdateProfileRequest(BaseModel):
    """Request body for PUT /profile/{id}.

    All three fields are written as given; an omitted field clears the
    stored value.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = Field(default=None)
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")


class UserResponse(BaseModel):
    """User information returned by the API (never includes the password)."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    username: str
    email: Optional[str] = None
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    created_at: Optional[str] = Field(default=None, alias="createdAt")
