"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API error
handlers. Every 401 cause keeps its own type for tests, but the messages
deliberately do not say which check failed.
"""

from shared.exceptions import AuthenticationError, ConflictError, InternalError


class MissingTokenError(AuthenticationError):
    """Raised when no Authorization header (or token) is provided."""

    def __init__(self, message: str = "authorization required"):
        super().__init__(message, code="MISSING_TOKEN")


class MalformedAuthHeaderError(AuthenticationError):
    """Raised when the Authorization header is not 'Bearer <token>'."""

    def __init__(self, message: str = "invalid authorization header format"):
        super().__init__(message, code="INVALID_AUTH_HEADER")


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is malformed or its signature does not verify."""

    def __init__(self, message: str = "invalid or expired token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token is past its expiry."""

    def __init__(self, message: str = "invalid or expired token"):
        super().__init__(message, code="INVALID_TOKEN")


class InvalidCredentialsError(AuthenticationError):
    """Raised on login for an unknown email or a wrong password alike."""

    def __init__(self):
        super().__init__("invalid email or password", code="INVALID_CREDENTIALS")


class EmailAlreadyExistsError(ConflictError):
    """Raised when signup hits the unique email constraint."""

    def __init__(self):
        super().__init__("email already exists", code="EMAIL_EXISTS")


class AuthNotConfiguredError(InternalError):
    """Raised when no signing secret is configured."""

    def __init__(self):
        super().__init__(
            "Server authentication not configured",
            code="AUTH_NOT_CONFIGURED",
        )
