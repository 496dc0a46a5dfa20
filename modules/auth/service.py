"""
Authentication service implementation.

Signup and login on top of the Identity Store, bcrypt and the TokenService.
"""

import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from .interfaces import IAuthService, IIdentityStore
from .models import AuthResponse, LoginRequest, SignupRequest, UserRecord
from .passwords import DEFAULT_ROUNDS, hash_password, verify_password
from .tokens import TokenService
from .exceptions import InvalidCredentialsError

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    bcrypt runs in the threadpool so a slow hash never stalls other
    requests on the event loop.
    """

    def __init__(
        self,
        users: IIdentityStore,
        tokens: TokenService,
        bcrypt_rounds: int = DEFAULT_ROUNDS,
    ):
        self._users = users
        self._tokens = tokens
        self._bcrypt_rounds = bcrypt_rounds
        self._missing_user_hash: Optional[str] = None

    async def signup(self, request: SignupRequest) -> AuthResponse:
        """Hash the password, insert the user and issue a token."""
        password_hash = await run_in_threadpool(
            hash_password, request.password, self._bcrypt_rounds
        )

        # EmailAlreadyExistsError propagates from the store untouched
        user = self._users.insert_user(str(request.email), password_hash)

        logger.info(f"User created: {user.id}")
        return self._respond(user)

    async def login(self, request: LoginRequest) -> AuthResponse:
        """Check credentials; unknown email and wrong password fail the same way."""
        user: Optional[UserRecord] = self._users.get_user_by_email(str(request.email))

        if user is None:
            # One bcrypt check at the configured cost whether or not the user exists
            await run_in_threadpool(
                verify_password, request.password, await self._get_missing_user_hash()
            )
            logger.warning("Failed login attempt for unknown email")
            raise InvalidCredentialsError()

        matches = await run_in_threadpool(
            verify_password, request.password, user.password_hash
        )
        if not matches:
            logger.warning(f"Failed login attempt for user {user.id}")
            raise InvalidCredentialsError()

        logger.info(f"User logged in: {user.id}")
        return self._respond(user)

    async def _get_missing_user_hash(self) -> str:
        if self._missing_user_hash is None:
            self._missing_user_hash = await run_in_threadpool(
                hash_password, "", self._bcrypt_rounds
            )
        return self._missing_user_hash

    def _respond(self, user: UserRecord) -> AuthResponse:
        token = self._tokens.issue(user.id, user.email)
        return AuthResponse(token=token, user=user.to_public())

