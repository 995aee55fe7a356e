"""
Books module.

Handles the per-user book list.

Public API:
- IBookService: Interface for book operations
- Book: A stored book
- CreateBookRequest: Request to add a book
"""

from .interfaces import IBookService
from .models import Book, CreateBookRequest, TITLE_MAX_LENGTH, AUTHOR_MAX_LENGTH

__all__ = [
    # Interface
    "IBookService",
    # Models
    "Book",
    "CreateBookRequest",
    "TITLE_MAX_LENGTH",
    "AUTHOR_MAX_LENGTH",
]
