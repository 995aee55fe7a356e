"""
Authentication service implementation.

Registers users, checks credentials, issues session tokens and resolves
bearer tokens back to users.
"""

import asyncio
import logging
from typing import Optional

from shared.models import AuthenticatedUser
from shared.validation import (
    FieldRule,
    is_email,
    min_length,
    normalize_email,
    not_empty,
    validate_fields,
)

from .interfaces import IAuthService
from .models import AuthResponse, PublicUser, UserProfile, UserRecord
from .exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    ProfileNotFoundError,
    UserNotFoundError,
)
from .passwords import DUMMY_HASH, hash_password, verify_password
from .repository import UserRepository
from .tokens import TokenService

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

REGISTER_RULES = [
    FieldRule("email", is_email, "Please provide a valid email"),
    FieldRule(
        "password",
        min_length(MIN_PASSWORD_LENGTH),
        f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
    ),
]

LOGIN_RULES = [
    FieldRule("email", is_email, "Please provide a valid email"),
    FieldRule("password", not_empty, "Password is required"),
]


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Composes the user repository with the token service. Holds no
    per-request state.
    """

    def __init__(self, users: UserRepository, tokens: TokenService):
        self._users = users
        self._tokens = tokens

    async def register(self, email: str, password: str) -> AuthResponse:
        email = normalize_email(email)
        validate_fields({"email": email, "password": password}, REGISTER_RULES)

        if self._users.get_by_email(email) is not None:
            raise DuplicateEmailError()

        password_hash = await asyncio.to_thread(hash_password, password)
        user = self._users.create(email, password_hash)
        logger.info("Registered user %s", user.id)

        return AuthResponse(
            message="User registered successfully",
            token=self._tokens.issue(user.id),
            user=_public_view(user),
        )

    async def login(self, email: str, password: str) -> AuthResponse:
        email = normalize_email(email)
        validate_fields({"email": email, "password": password}, LOGIN_RULES)

        user = self._users.get_by_email(email)
        if user is None:
            await asyncio.to_thread(verify_password, password, DUMMY_HASH)
            logger.info("Failed login attempt")
            raise InvalidCredentialsError()

        if not await asyncio.to_thread(verify_password, password, user.password_hash):
            logger.info("Failed login attempt")
            raise InvalidCredentialsError()

        return AuthResponse(
            message="Login successful",
            token=self._tokens.issue(user.id),
            user=_public_view(user),
        )

    async def authenticate(self, token: Optional[str]) -> AuthenticatedUser:
        user_id = self._tokens.verify(token)

        user = self._users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        return AuthenticatedUser(id=user.id, email=user.email)

    async def get_profile(self, user: AuthenticatedUser) -> UserProfile:
        record = self._users.get_by_id(user.id)
        if record is None:
            raise ProfileNotFoundError(user.id)

        return UserProfile(id=record.id, email=record.email, created_at=record.created_at)


def _public_view(user: UserRecord) -> PublicUser:
    return PublicUser(id=user.id, email=user.email)
