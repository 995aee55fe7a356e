"""
Books module data models.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


TITLE_MAX_LENGTH = 200
AUTHOR_MAX_LENGTH = 100


class Book(BaseModel):
    """
    A book on a user's list.

    ``user`` is the owner's id. It is set from the authenticated identity when
    the book is created and never changes.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Book ID (UUID)")
    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Book author")
    user: str = Field(..., description="Owning user ID")
    created_at: datetime = Field(..., alias="createdAt", description="When the book was added")


class CreateBookRequest(BaseModel):
    """
    Request to add a book.

    Only title and author are read from the body; any owner field sent by the
    client is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    title: str = ""
    author: str = ""
