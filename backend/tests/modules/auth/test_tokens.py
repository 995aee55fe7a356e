import pytest
import jwt
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from modules.auth.tokens import TokenService
from modules.auth.exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
)
from shared.config import DEV_JWT_SECRET
from shared.exceptions import AuthenticationError


SECRET = "test-secret"


class TestTokenService:
    @pytest.fixture
    def service(self):
        return TokenService(SECRET)

    def test_issue_then_verify(self, service):
        """A freshly issued token verifies to the same user id."""
        token = service.issue("user-123")
        assert service.verify(token) == "user-123"

    def test_expiry_is_seven_days_after_issue(self, service):
        issued_at = datetime(2030, 1, 1, tzinfo=timezone.utc)
        token = service.issue("user-123", now=issued_at)

        claims = jwt.decode(token, SECRET, algorithms=["HS256"], options={"verify_signature": False})
        assert claims["exp"] - claims["iat"] == int(timedelta(days=7).total_seconds())
        assert claims["sub"] == "user-123"

    def test_expired_token(self, service):
        """A token past its expiry is rejected even though the signature is valid."""
        token = service.issue("user-123", now=datetime.now(timezone.utc) - timedelta(days=8))
        with pytest.raises(ExpiredTokenError):
            service.verify(token)

    def test_no_leeway(self):
        """Expiry is strict: one second past exp is already expired."""
        service = TokenService(SECRET, lifetime=timedelta(seconds=1))
        token = service.issue("user-123", now=datetime.now(timezone.utc) - timedelta(seconds=2))
        with pytest.raises(ExpiredTokenError):
            service.verify(token)

    @pytest.mark.parametrize("seconds_before_exp,valid", [(1, True), (0, False)])
    def test_valid_only_strictly_before_expiry(self, service, seconds_before_exp, valid):
        """A token is valid iff the current time is before exp."""
        issued_at = datetime(2030, 1, 1, tzinfo=timezone.utc)
        token = service.issue("user-123", now=issued_at)
        frozen = issued_at + timedelta(days=7) - timedelta(seconds=seconds_before_exp)

        class FrozenDatetime(datetime):
            @classmethod
            def now(cls, tz=None):
                return frozen

        with patch("jwt.api_jwt.datetime", FrozenDatetime):
            if valid:
                assert service.verify(token) == "user-123"
            else:
                with pytest.raises(ExpiredTokenError):
                    service.verify(token)

    def test_wrong_signature(self, service):
        token = TokenService("other-secret").issue("user-123")
        with pytest.raises(InvalidTokenError):
            service.verify(token)

    def test_malformed_token(self, service):
        with pytest.raises(InvalidTokenError):
            service.verify("not-a-valid-token")

    def test_missing_subject(self, service):
        now = datetime.now(timezone.utc)
        token = jwt.encode({"iat": now, "exp": now + timedelta(hours=1)}, SECRET, algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            service.verify(token)

    def test_other_algorithm_rejected(self, service):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"sub": "user-123", "iat": now, "exp": now + timedelta(hours=1)},
            SECRET,
            algorithm="HS512",
        )
        with pytest.raises(InvalidTokenError):
            service.verify(token)

    @pytest.mark.parametrize("token", ["", None])
    def test_missing_token(self, service, token):
        with pytest.raises(MissingTokenError):
            service.verify(token)

    def test_all_failures_are_authentication_errors(self):
        for cls in (ExpiredTokenError, InvalidTokenError, MissingTokenError):
            assert issubclass(cls, AuthenticationError)


class TestInsecureFallback:
    def test_falls_back_to_dev_secret(self, caplog):
        """Without a secret the service still works but logs a warning."""
        with caplog.at_level("WARNING", logger="modules.auth.tokens"):
            service = TokenService("")

        assert service.insecure is True
        assert "JWT_SECRET is not set" in caplog.text

        token = service.issue("user-123")
        assert jwt.decode(token, DEV_JWT_SECRET, algorithms=["HS256"])["sub"] == "user-123"

    def test_configured_secret_is_not_insecure(self):
        assert TokenService(SECRET).insecure is False
