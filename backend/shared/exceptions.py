"""
Base exception classes for the Bookshelf backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base class to one HTTP status, so a module exception
only has to pick the right parent.
"""

from typing import Optional, Any

from pydantic import BaseModel


class FieldError(BaseModel):
    """A single violated field rule, as reported to the client."""

    msg: str
    param: str


class BookshelfError(Exception):
    """
    Base exception for all Bookshelf errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(BookshelfError):
    """
    Input validation failed.

    Carries every violated rule, not just the first one.
    """

    def __init__(
        self,
        errors: list[FieldError],
        message: str = "Validation failed",
        code: str = "VALIDATION_ERROR",
    ):
        super().__init__(
            message,
            code=code,
            details={"fields": sorted({e.param for e in errors})},
        )
        self.errors = list(errors)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["errors"] = [e.model_dump() for e in self.errors]
        return result


class ConflictError(BookshelfError):
    """The request conflicts with existing data."""

    pass


class AuthenticationError(BookshelfError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class NotFoundError(BookshelfError):
    """Resource not found."""

    pass


class InternalError(BookshelfError):
    """Store unavailable or an unexpected failure."""

    def __init__(
        self,
        message: str = "Internal server error",
        code: str = "INTERNAL_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
