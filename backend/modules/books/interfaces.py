"""
Books module interface.

The API layer depends on IBookService for all book operations.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import Book


@runtime_checkable
class IBookService(Protocol):
    """
    Interface for book operations.

    Both operations take the identity resolved by the auth gate; ownership
    always comes from it.
    """

    async def list_books(self, user: AuthenticatedUser) -> list[Book]:
        """
        List the user's books, most recently added first.

        Returns an empty list when the user has none.
        """
        ...

    async def create_book(
        self,
        user: AuthenticatedUser,
        title: str,
        author: str,
    ) -> Book:
        """
        Add a book to the user's list.

        Args:
            user: The authenticated owner
            title: Book title, 1-200 characters after trimming
            author: Book author, 1-100 characters after trimming

        Returns:
            The stored book with its generated ID and creation time

        Raises:
            ValidationError: Listing every violated field rule
        """
        ...
