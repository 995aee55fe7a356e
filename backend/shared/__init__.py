"""
Shared infrastructure for the Bookshelf backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- validation: Field rule evaluation

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    BookshelfError,
    FieldError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    NotFoundError,
    InternalError,
)
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "BookshelfError",
    "FieldError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "NotFoundError",
    "InternalError",
    "AuthenticatedUser",
]
