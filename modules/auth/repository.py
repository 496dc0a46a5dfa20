"""
User repository for database access.

Encapsulates all Supabase queries against the ``users`` table.
"""

from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.repository import BaseRepository, UNIQUE_VIOLATION
from .exceptions import EmailAlreadyExistsError
from .models import UserRecord

USER_COLUMNS = "id, email, password_hash, created_at, updated_at"


class UserRepository(BaseRepository[UserRecord]):
    """
    Identity Store backed by Supabase.

    Email uniqueness is enforced by the table's UNIQUE constraint; this
    class only translates the violation.
    """

    def insert_user(self, email: str, password_hash: str) -> UserRecord:
        """Insert a user and return the stored row."""
        data = {"email": email, "password_hash": password_hash}
        try:
            result = self._db.table("users").insert(data).execute()
        except APIError as e:
            if self._error_code(e) == UNIQUE_VIOLATION:
                raise EmailAlreadyExistsError() from e
            raise
        return self._map_to_user(result.data[0])

    def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        """Look up a user by exact email."""
        result = (
            self._db.table("users")
            .select(USER_COLUMNS)
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def _map_to_user(self, data: dict[str, Any]) -> UserRecord:
        """Map database row to UserRecord model."""
        return UserRecord(
            id=str(data["id"]),
            email=data["email"],
            password_hash=data["password_hash"],
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
