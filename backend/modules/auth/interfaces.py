"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import AuthResponse, UserProfile


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def register(self, email: str, password: str) -> AuthResponse:
        """
        Create an account and sign it in.

        Args:
            email: Email address, normalized before any check
            password: Plaintext password (at least 6 characters)

        Returns:
            AuthResponse with a fresh token and the public user view

        Raises:
            ValidationError: Listing every violated field rule
            DuplicateEmailError: If the normalized email is already registered
        """
        ...

    async def login(self, email: str, password: str) -> AuthResponse:
        """
        Exchange credentials for a fresh token.

        Raises:
            ValidationError: If the email is malformed or the password empty
            InvalidCredentialsError: Unknown email or wrong password
        """
        ...

    async def authenticate(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Resolve a bearer token to the user it was issued for.

        Raises:
            AuthenticationError: Missing, invalid or expired token, or the
                user no longer exists
        """
        ...

    async def get_profile(self, user: AuthenticatedUser) -> UserProfile:
        """
        Get the profile of an already authenticated user.

        Raises:
            ProfileNotFoundError: If the user record vanished
        """
        ...
