"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the ``users`` table.
"""

from typing import Optional, Any

from postgrest.exceptions import APIError
from supabase import Client

from shared.repository import BaseRepository

from .exceptions import DuplicateEmailError
from .models import UserRecord


# Postgres error codes
UNIQUE_VIOLATION = "23505"
INVALID_TEXT_REPRESENTATION = "22P02"


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user credential records.

    Emails are expected to be normalized by the caller; the table carries a
    unique constraint on ``email`` as the last line against duplicates.
    """

    table_name = "users"

    def __init__(self, db: Client) -> None:
        super().__init__(db)

    def create(self, email: str, password_hash: str) -> UserRecord:
        """
        Insert a new user.

        Returns:
            Created UserRecord with generated ID and creation time.

        Raises:
            DuplicateEmailError: If the email is already taken.
        """
        data = {"email": email, "password_hash": password_hash}
        try:
            result = self._table().insert(data).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise DuplicateEmailError()
            raise
        return self._map_to_user(result.data[0])

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        try:
            result = self._table().select("*").eq("id", user_id).execute()
        except APIError as e:
            # An id that is not a UUID cannot match any row
            if e.code == INVALID_TEXT_REPRESENTATION:
                return None
            raise
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        result = self._table().select("*").eq("email", email).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def _map_to_user(self, data: dict[str, Any]) -> UserRecord:
        return UserRecord(
            id=str(data["id"]),
            email=data["email"],
            password_hash=data["password_hash"],
            created_at=data["created_at"],
        )
