"""
Base exception classes for the Threadline backend.

Each module should define its own exceptions that inherit from these bases.
Every base carries a fixed ErrorKind; only the API layer turns a kind into
an HTTP status and a JSON body.
"""

from enum import Enum
from typing import Optional, Any


class ErrorKind(str, Enum):
    """Closed set of failure kinds a core operation can produce."""

    VALIDATION = "validation"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


class ThreadlineError(Exception):
    """
    Base exception for all Threadline errors.

    All custom exceptions should inherit from one of the kind-specific
    subclasses below rather than from this class directly.
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to the public error body (no details)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(ThreadlineError):
    """Input validation failed."""

    kind = ErrorKind.VALIDATION


class ConflictError(ThreadlineError):
    """A uniqueness constraint was violated."""

    kind = ErrorKind.CONFLICT


class AuthenticationError(ThreadlineError):
    """Authentication failed (missing, invalid or expired credentials)."""

    kind = ErrorKind.UNAUTHORIZED


class NotFoundError(ThreadlineError):
    """Resource not found."""

    kind = ErrorKind.NOT_FOUND


class InternalError(ThreadlineError):
    """Store, signing or configuration failure."""

    kind = ErrorKind.INTERNAL
