"""
Books service implementation.
"""

import logging

from shared.models import AuthenticatedUser
from shared.validation import FieldRule, max_length, not_empty, trim, validate_fields

from .interfaces import IBookService
from .models import AUTHOR_MAX_LENGTH, TITLE_MAX_LENGTH, Book
from .repository import BookRepository

logger = logging.getLogger(__name__)

BOOK_RULES = [
    FieldRule("title", not_empty, "Title is required"),
    FieldRule(
        "title",
        max_length(TITLE_MAX_LENGTH),
        f"Title cannot exceed {TITLE_MAX_LENGTH} characters",
    ),
    FieldRule("author", not_empty, "Author is required"),
    FieldRule(
        "author",
        max_length(AUTHOR_MAX_LENGTH),
        f"Author name cannot exceed {AUTHOR_MAX_LENGTH} characters",
    ),
]


class BookService(IBookService):
    """
    Book service with Supabase backend.

    Validation runs before anything is written, and each operation is a single
    store call, so a failed create leaves nothing behind.
    """

    def __init__(self, repository: BookRepository):
        self._books = repository

    async def list_books(self, user: AuthenticatedUser) -> list[Book]:
        return self._books.list_for_user(user.id)

    async def create_book(
        self,
        user: AuthenticatedUser,
        title: str,
        author: str,
    ) -> Book:
        data = {"title": trim(title), "author": trim(author)}
        validate_fields(data, BOOK_RULES)

        book = self._books.create(user.id, data["title"], data["author"])
        logger.info("User %s added book %s", user.id, book.id)
        return book
