"""
Book repository for database access.

Encapsulates all Supabase queries and data mapping for the ``books`` table.
Every query is scoped to a single owner.
"""

from typing import Any

from supabase import Client

from shared.repository import BaseRepository
from .models import Book


class BookRepository(BaseRepository[Book]):
    """
    Repository for book data access.

    Note: This repository does NOT resolve identities. The caller passes the
    owner id taken from the authenticated user.
    """

    table_name = "books"

    def __init__(self, db: Client) -> None:
        super().__init__(db)

    def create(self, user_id: str, title: str, author: str) -> Book:
        """
        Insert a book owned by ``user_id``.

        Returns:
            Created Book with generated ID and creation time.
        """
        data = {"user_id": user_id, "title": title, "author": author}
        result = self._table().insert(data).execute()
        return self._map_to_book(result.data[0])

    def list_for_user(self, user_id: str) -> list[Book]:
        """Every book owned by ``user_id``, most recently added first."""
        result = (
            self._table()
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_book(row) for row in result.data]

    def _map_to_book(self, data: dict[str, Any]) -> Book:
        return Book(
            id=str(data["id"]),
            title=data["title"],
            author=data["author"],
            user=str(data["user_id"]),
            created_at=data["created_at"],
        )
