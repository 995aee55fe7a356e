"""
Book API endpoints.

Both endpoints require authentication and only ever touch the caller's books.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_book_service
from shared.models import AuthenticatedUser

from .interfaces import IBookService
from .models import Book, CreateBookRequest

router = APIRouter()


@router.get("", response_model=list[Book])
async def list_books(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IBookService = Depends(get_book_service),
) -> list[Book]:
    """
    List the current user's books, most recent first.
    """
    return await service.list_books(user)


@router.post("", response_model=Book, status_code=201)
async def create_book(
    request: CreateBookRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IBookService = Depends(get_book_service),
) -> Book:
    """
    Add a book to the current user's list.
    """
    return await service.create_book(user, request.title, request.author)
