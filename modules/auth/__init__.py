"""
Authentication module.

Handles password hashing, token issuance/validation, signup and login.

Public API:
- IAuthService / IIdentityStore: Interfaces for auth operations and storage
- TokenService: Issues and validates bearer tokens
- hash_password / verify_password: bcrypt helpers
- Auth exceptions: MissingTokenError, InvalidTokenError, etc.
"""

from .interfaces import IAuthService, IIdentityStore
from .models import (
    AuthResponse,
    LoginRequest,
    PublicUser,
    SignupRequest,
    TokenClaims,
    UserRecord,
)
from .passwords import hash_password, verify_password
from .tokens import TokenService
from .exceptions import (
    AuthNotConfiguredError,
    EmailAlreadyExistsError,
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidTokenError,
    MalformedAuthHeaderError,
    MissingTokenError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "IIdentityStore",
    # Models
    "AuthResponse",
    "LoginRequest",
    "PublicUser",
    "SignupRequest",
    "TokenClaims",
    "UserRecord",
    # Helpers
    "hash_password",
    "verify_password",
    "TokenService",
    # Exceptions
    "AuthNotConfiguredError",
    "EmailAlreadyExistsError",
    "ExpiredTokenError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MalformedAuthHeaderError",
    "MissingTokenError",
]
