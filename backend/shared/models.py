"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    The identity resolved by the auth gate.

    Produced once per request from a verified token plus a user lookup, then
    passed explicitly into every protected operation. Book ownership is always
    taken from this value, never from request input.
    """

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="User's normalized email address")

    model_config = {
        "frozen": True,  # Make immutable for safety
    }
