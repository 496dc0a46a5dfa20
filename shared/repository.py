"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and translation of PostgREST errors.
"""

from typing import TypeVar, Generic, Optional
from postgrest.exceptions import APIError
from supabase import Client


T = TypeVar("T")

# PostgreSQL SQLSTATE codes surfaced through PostgREST
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
INVALID_TEXT_REPRESENTATION = "22P02"


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses implement domain-specific data access methods and handle
    dict-to-Pydantic model mapping internally. They never retry: a store
    failure propagates on the first attempt.
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    @staticmethod
    def _error_code(error: APIError) -> Optional[str]:
        """Return the SQLSTATE code carried by a PostgREST error, if any."""
        return getattr(error, "code", None)
