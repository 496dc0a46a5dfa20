"""
Bearer token authorization gate.

Turns the ``Authorization`` header into an AuthenticatedUser or rejects the
request. Decisions depend only on the token's signature and expiry; the
user table is never consulted.
"""

import logging
from typing import Optional

from fastapi import Depends, Header, Request

from modules.auth.exceptions import MalformedAuthHeaderError, MissingTokenError
from modules.auth.tokens import TokenService
from shared.models import AuthenticatedUser

from ..dependencies import get_token_service

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def parse_authorization_header(header: Optional[str]) -> str:
    """
    Extract the token from ``Bearer <token>``.

    The scheme is case-sensitive and must be followed by exactly one space
    and a single non-empty token.

    Raises:
        MissingTokenError: If the header is absent or empty
        MalformedAuthHeaderError: For any other shape
    """
    if not header:
        raise MissingTokenError()

    if not header.startswith(BEARER_PREFIX):
        raise MalformedAuthHeaderError()

    token = header[len(BEARER_PREFIX):]
    if not token or " " in token:
        raise MalformedAuthHeaderError()

    return token


async def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(default=None),
    tokens: TokenService = Depends(get_token_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    The resolved user is also placed on ``request.state.user`` for the rest
    of the request.

    Usage:
        @router.post("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    token = parse_authorization_header(authorization)
    claims = tokens.validate(token)

    user = AuthenticatedUser(id=claims.sub, email=claims.email)
    request.state.user = user
    return user

