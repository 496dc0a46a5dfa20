"""
Authentication module interfaces.

Other modules should depend on these protocols, not the concrete
implementations. This enables testing with in-memory fakes.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import AuthResponse, LoginRequest, SignupRequest, UserRecord


@runtime_checkable
class IIdentityStore(Protocol):
    """Persistence boundary for user records."""

    def insert_user(self, email: str, password_hash: str) -> UserRecord:
        """
        Insert a new user.

        Raises:
            EmailAlreadyExistsError: If the email is already taken. The
                store's unique constraint is the only guard, so of two
                concurrent inserts with one email exactly one succeeds.
        """
        ...

    def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        """Return the user with this exact email, or None."""
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for signup and login.

    Token validation is not part of this interface; the authorization gate
    talks to the TokenService directly and never touches the store.
    """

    async def signup(self, request: SignupRequest) -> AuthResponse:
        """
        Create an account and issue its first token.

        Raises:
            EmailAlreadyExistsError: If the email is already registered
        """
        ...

    async def login(self, request: LoginRequest) -> AuthResponse:
        """
        Verify credentials and issue a fresh token.

        Raises:
            InvalidCredentialsError: For an unknown email or wrong password
        """
        ...
