"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules,
including an in-memory stand-in for the Supabase table query chain so the
API can be exercised end to end without a database.
"""

import itertools
import uuid
from datetime import datetime, timezone, timedelta
from types import SimpleNamespace
from typing import Any, Optional

import jwt  # PyJWT
import pytest
from fastapi.testclient import TestClient
from postgrest.exceptions import APIError

from api.app import create_app
from api.dependencies import ServiceContainer, set_container, reset_container
from modules.auth.tokens import TokenService
from shared.config import Settings
from shared.database import reset_client_cache


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


# -----------------------------------------------------------------------------
# In-memory Supabase stand-in
# -----------------------------------------------------------------------------

_UNIQUE_COLUMNS = {"users": ("email",)}


class FakeQuery:
    """Supports the subset of the PostgREST builder the repositories use."""

    def __init__(self, db: "FakeSupabase", table: str):
        self._db = db
        self._table = table
        self._filters: list[tuple[str, Any]] = []
        self._order: Optional[tuple[str, bool]] = None
        self._limit: Optional[int] = None
        self._insert: Optional[dict[str, Any]] = None

    def select(self, *columns, **kwargs) -> "FakeQuery":
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self._filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self._order = (column, desc)
        return self

    def limit(self, n: int) -> "FakeQuery":
        self._limit = n
        return self

    def insert(self, data: dict[str, Any]) -> "FakeQuery":
        self._insert = dict(data)
        return self

    def execute(self) -> SimpleNamespace:
        if self._db.fail_with is not None:
            raise self._db.fail_with

        rows = self._db.tables.setdefault(self._table, [])

        if self._insert is not None:
            for column in _UNIQUE_COLUMNS.get(self._table, ()):
                if any(r[column] == self._insert[column] for r in rows):
                    raise APIError({
                        "code": "23505",
                        "message": f'duplicate key value violates unique constraint "{self._table}_{column}_key"',
                        "details": None,
                        "hint": None,
                    })
            row = {
                "id": str(uuid.uuid4()),
                "created_at": self._db.next_timestamp().isoformat(),
                **self._insert,
            }
            rows.append(row)
            return SimpleNamespace(data=[dict(row)], count=None)

        result = [r for r in rows if all(str(r.get(c)) == str(v) for c, v in self._filters)]
        if self._order is not None:
            column, desc = self._order
            result.sort(key=lambda r: r[column], reverse=desc)
        if self._limit is not None:
            result = result[: self._limit]
        return SimpleNamespace(data=[dict(r) for r in result], count=len(result))


class FakeSupabase:
    """Minimal in-memory replacement for ``supabase.Client``."""

    def __init__(self):
        self.tables: dict[str, list[dict[str, Any]]] = {"users": [], "books": []}
        self.fail_with: Optional[Exception] = None
        self._clock = itertools.count()
        self._epoch = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def next_timestamp(self) -> datetime:
        # Strictly increasing so ordering by created_at is deterministic
        return self._epoch + timedelta(seconds=next(self._clock))


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def create_test_token(
    user_id: str = "test-user-123",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a session token the way TokenService does, optionally expired.

    Args:
        user_id: User ID to include in the token
        expired: If True, creates a token whose expiry has passed
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    if expired:
        now = now - timedelta(days=8)
    payload = {
        "sub": user_id,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(days=7)).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the container and client cache before and after each test."""
    reset_container()
    reset_client_cache()
    yield
    reset_container()
    reset_client_cache()


@pytest.fixture
def settings() -> Settings:
    """Settings with a known secret and no store configured."""
    return Settings(
        jwt_secret=TEST_JWT_SECRET,
        environment="development",
        supabase_url="",
        supabase_service_role_key="",
    )


@pytest.fixture
def fake_db() -> FakeSupabase:
    return FakeSupabase()


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(TEST_JWT_SECRET)


@pytest.fixture
def container(settings: Settings, fake_db: FakeSupabase) -> ServiceContainer:
    """Service container wired to the in-memory store."""
    container = ServiceContainer(settings=settings, db=fake_db)
    set_container(container)
    return container


@pytest.fixture
def client(settings: Settings, container: ServiceContainer) -> TestClient:
    """Test client for an app backed by the in-memory store."""
    return TestClient(create_app(settings))


@pytest.fixture
def make_token():
    """Factory for hand-built tokens (see create_test_token)."""
    return create_test_token


@pytest.fixture
def register(client: TestClient):
    """Register a user through the API and return the response body."""

    def _register(email: str = "alice@example.com", password: str = "secret1") -> dict:
        response = client.post("/auth/register", json={"email": email, "password": password})
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
def auth_headers(register) -> dict[str, str]:
    """Authorization headers for a freshly registered user."""
    token = register()["token"]
    return {"Authorization": f"Bearer {token}"}
