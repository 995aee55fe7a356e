"""Tests for the bearer token auth gate."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from fastapi.security import HTTPAuthorizationCredentials

import api.middleware.auth as auth_middleware
from api.middleware.auth import get_current_user
from modules.auth.exceptions import MissingTokenError
from shared.models import AuthenticatedUser


class TestGetCurrentUser:
    @pytest.mark.asyncio
    async def test_missing_credentials(self):
        auth = MagicMock()
        auth.authenticate = AsyncMock()

        with pytest.raises(MissingTokenError) as exc_info:
            await get_current_user(credentials=None, auth=auth)

        assert exc_info.value.message == "No token, authorization denied"
        auth.authenticate.assert_not_called()

    @pytest.mark.asyncio
    async def test_resolves_identity_through_auth_service(self):
        user = AuthenticatedUser(id="user-123", email="alice@example.com")
        auth = MagicMock()
        auth.authenticate = AsyncMock(return_value=user)
        credentials = HTTPAuthorizationCredentials(scheme="Bearer", credentials="token-value")

        assert await get_current_user(credentials=credentials, auth=auth) == user
        auth.authenticate.assert_awaited_once_with("token-value")

    def test_routes_depend_on_the_gate_function(self):
        """The gate is exposed as a dependency function only."""
        public = {name for name in vars(auth_middleware) if not name.startswith("_")}
        assert "get_current_user" in public
        assert "bearer_scheme" in public
        assert not any(type(getattr(auth_middleware, name)).__name__ == "Depends" for name in public)
