"""
Session token issuance and verification.

Tokens are HS256 JWTs carrying the user id (``sub``), issue time and an
expiry a fixed offset after issue. They are not stored anywhere; a token is
valid iff its signature verifies and the current time is before ``exp``.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from shared.config import DEV_JWT_SECRET

from .exceptions import ExpiredTokenError, InvalidTokenError, MissingTokenError
from .models import TokenPayload

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_LIFETIME = timedelta(days=7)


class TokenService:
    """
    Issues and verifies signed, time-limited session tokens.

    Args:
        secret: Signing secret. When empty the built-in development secret
            is used and a warning is logged; such tokens are forgeable.
        algorithm: JWT signing algorithm.
        lifetime: Offset between issue time and expiry.
    """

    def __init__(
        self,
        secret: Optional[str],
        algorithm: str = "HS256",
        lifetime: timedelta = DEFAULT_TOKEN_LIFETIME,
    ) -> None:
        if not secret:
            logger.warning(
                "JWT_SECRET is not set; signing tokens with the insecure "
                "development secret. Set JWT_SECRET for production use."
            )
            secret = DEV_JWT_SECRET
        self._secret = secret
        self._algorithm = algorithm
        self._lifetime = lifetime

    @property
    def insecure(self) -> bool:
        return self._secret == DEV_JWT_SECRET

    def issue(self, user_id: str, now: Optional[datetime] = None) -> str:
        """Create a token for ``user_id``."""
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "iat": issued_at,
            "exp": issued_at + self._lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: Optional[str]) -> TokenPayload:
        """
        Verify ``token`` and return its claims.

        Raises:
            MissingTokenError: If the token is empty.
            ExpiredTokenError: If the expiry has passed. No leeway is applied.
            InvalidTokenError: If the token is malformed, the signature does
                not match, or a required claim is missing.
        """
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "iat", "exp"]},
                leeway=0,
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")

        return TokenPayload(**payload)

    def verify(self, token: Optional[str]) -> str:
        """Verify ``token`` and return the embedded user id."""
        return self.decode(token).sub
