"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class UserRecord(BaseModel):
    """
    A user row as stored in the database.

    Holds the password hash, so it never leaves the auth module.
    """

    id: str
    email: str
    password_hash: str
    created_at: datetime


class PublicUser(BaseModel):
    """The user view returned by register and login."""

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="Normalized email address")


class UserProfile(BaseModel):
    """The user view returned by the profile endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="Normalized email address")
    created_at: datetime = Field(..., alias="createdAt", description="Account creation time")


class TokenPayload(BaseModel):
    """Decoded session token claims."""

    sub: str = Field(..., description="Subject (user ID)")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")


# -----------------------------------------------------------------------------
# Request / response bodies
# -----------------------------------------------------------------------------

class CredentialsRequest(BaseModel):
    """
    Body of register and login.

    Fields default to empty strings so a missing field is reported by the
    field rules together with every other problem.
    """

    email: str = ""
    password: str = ""


class AuthResponse(BaseModel):
    """Token plus public user view."""

    message: str
    token: str
    user: PublicUser


class ProfileResponse(BaseModel):
    user: UserProfile
