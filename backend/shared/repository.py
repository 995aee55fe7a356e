"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

from typing import TypeVar, Generic
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class BookRepository(BaseRepository[Book]):
            def list_for_user(self, user_id: str) -> list[Book]:
                result = self._db.table("books").select("*").eq("user_id", user_id).execute()
                return [self._map_to_book(row) for row in result.data]
    """

    #: Table this repository reads and writes.
    table_name: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _table(self):
        return self._db.table(self.table_name)

    def ping(self) -> bool:
        """Return True if the table can be queried."""
        self._table().select("id").limit(1).execute()
        return True
