"""
Authentication module.

Handles registration, login, session tokens and user profiles.

Public API:
- IAuthService: Interface for auth operations
- TokenService: Issues and verifies session tokens
- PublicUser / UserProfile: User views returned to clients
- Auth exceptions: InvalidCredentialsError, InvalidTokenError, etc.
"""

from .interfaces import IAuthService
from .models import (
    AuthResponse,
    CredentialsRequest,
    ProfileResponse,
    PublicUser,
    TokenPayload,
    UserProfile,
    UserRecord,
)
from .tokens import TokenService
from .exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    UserNotFoundError,
    ProfileNotFoundError,
)

__all__ = [
    # Interface
    "IAuthService",
    "TokenService",
    # Models
    "AuthResponse",
    "CredentialsRequest",
    "ProfileResponse",
    "PublicUser",
    "TokenPayload",
    "UserProfile",
    "UserRecord",
    # Exceptions
    "DuplicateEmailError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "UserNotFoundError",
    "ProfileNotFoundError",
]
