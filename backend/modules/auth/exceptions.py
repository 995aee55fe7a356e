"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, ConflictError, NotFoundError


class DuplicateEmailError(ConflictError):
    """Raised when registering an email that already belongs to a user."""

    def __init__(self, message: str = "User already exists with this email"):
        super().__init__(message, code="DUPLICATE_EMAIL")


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when login fails.

    Unknown email and wrong password both raise this, with the same message,
    so callers cannot tell which emails are registered.
    """

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class UserNotFoundError(AuthenticationError):
    """Raised when a valid token references a user that no longer exists."""

    def __init__(self, user_id: str):
        super().__init__(
            "User for this token no longer exists",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class ProfileNotFoundError(NotFoundError):
    """Raised when the resolved user's record vanished before the profile lookup."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="PROFILE_NOT_FOUND",
            details={"user_id": user_id},
        )
