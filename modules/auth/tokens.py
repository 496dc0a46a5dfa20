"""
Bearer token issuance and validation.

Tokens are HS256 JWTs signed with one process-wide secret, which is handed
to the service explicitly. Nothing about issued tokens is stored.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt

from .exceptions import ExpiredTokenError, InvalidTokenError, MissingTokenError
from .models import TokenClaims

ALGORITHM = "HS256"
DEFAULT_LIFETIME = timedelta(hours=24)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """
    Issues and validates signed, time-limited bearer tokens.

    Expiry is checked against the injected ``clock`` rather than PyJWT's own
    wall-clock check, so tests can move time deterministically.
    """

    def __init__(
        self,
        secret: str,
        lifetime: timedelta = DEFAULT_LIFETIME,
        clock: Optional[Clock] = None,
    ):
        self._secret = secret
        self._lifetime = lifetime
        self._clock = clock or utc_now

    def issue(self, subject_id: str, email: str) -> str:
        """
        Issue a token for a user.

        Args:
            subject_id: User ID placed in the ``sub`` claim
            email: Email copied into the token

        Returns:
            Encoded JWT string
        """
        now = self._clock()
        payload = {
            "sub": subject_id,
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int((now + self._lifetime).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def validate(self, token: Optional[str]) -> TokenClaims:
        """
        Verify the signature, then the expiry, and return the claims.

        Raises:
            MissingTokenError: If token is empty
            InvalidTokenError: If token is malformed or signed with another secret
            ExpiredTokenError: If ``exp`` is not after the current time
        """
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": ["sub", "exp", "iat"],
                },
            )
            claims = TokenClaims(**payload)
        except (jwt.InvalidTokenError, ValueError, TypeError):
            raise InvalidTokenError()

        if claims.exp <= self._clock().timestamp():
            raise ExpiredTokenError()

        return claims
