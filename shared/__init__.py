"""
Shared infrastructure for Threadline backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes and the closed ErrorKind set
- logging_config: Root logger setup

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    ErrorKind,
    ThreadlineError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    NotFoundError,
    InternalError,
)
from .logging_config import configure_logging
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "ErrorKind",
    "ThreadlineError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "NotFoundError",
    "InternalError",
    "configure_logging",
    "AuthenticatedUser",
]
