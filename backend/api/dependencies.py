"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Settings are read once and handed to the pieces that need
them; each module exposes its service through an interface, and this file
creates the concrete implementations.
"""

from datetime import timedelta
from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import IAuthService
    from modules.auth.repository import UserRepository
    from modules.auth.tokens import TokenService
    from modules.books.interfaces import IBookService
    from modules.books.repository import BookRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        db: "Client | None" = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._db: "Client | None" = db
        self._tokens: "TokenService | None" = None
        self._user_repository: "UserRepository | None" = None
        self._book_repository: "BookRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._book_service: "IBookService | None" = None

    @property
    def db(self) -> "Client":
        """Get the Supabase client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client(self.settings)
        return self._db

    @property
    def tokens(self) -> "TokenService":
        """Get the token service instance."""
        if self._tokens is None:
            from modules.auth.tokens import TokenService
            self._tokens = TokenService(
                self.settings.jwt_secret,
                algorithm=self.settings.jwt_algorithm,
                lifetime=timedelta(days=self.settings.token_expire_days),
            )
        return self._tokens

    @property
    def user_repository(self) -> "UserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            self._user_repository = UserRepository(self.db)
        return self._user_repository

    @property
    def book_repository(self) -> "BookRepository":
        """Get the book repository instance."""
        if self._book_repository is None:
            from modules.books.repository import BookRepository
            self._book_repository = BookRepository(self.db)
        return self._book_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.user_repository,
                tokens=self.tokens,
            )
        return self._auth_service

    @property
    def books(self) -> "IBookService":
        """Get the book service instance."""
        if self._book_service is None:
            from modules.books.service import BookService
            self._book_service = BookService(repository=self.book_repository)
        return self._book_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._db = None
        self._tokens = None
        self._user_repository = None
        self._book_repository = None
        self._auth_service = None
        self._book_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def set_container(container: ServiceContainer) -> None:
    """Install a pre-built container (used by tests to inject a fake store)."""
    global _container
    _container = container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_book_service() -> "IBookService":
    """FastAPI dependency for book service."""
    return get_container().books
