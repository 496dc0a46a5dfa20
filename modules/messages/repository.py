"""
Message repository for database access.

Encapsulates all Supabase queries and data mapping for:
- messages
- replies

Database columns are ``user_id`` and ``message_id``; the models call them
``owner_id`` and ``parent_message_id``.
"""

from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.repository import (
    BaseRepository,
    FOREIGN_KEY_VIOLATION,
    INVALID_TEXT_REPRESENTATION,
)
from .exceptions import MessageNotFoundError
from .models import Message, Reply

MESSAGE_COLUMNS = "id, user_id, content, media_urls, created_at, updated_at"
REPLY_COLUMNS = "id, message_id, user_id, content, media_urls, created_at, updated_at"
PARENT_FOREIGN_KEY = "replies_message_id_fkey"


def _violates_parent_key(error: APIError) -> bool:
    """True when a foreign key error is about ``replies.message_id``."""
    text = f"{error.message or ''} {error.details or ''}"
    return PARENT_FOREIGN_KEY in text or "Key (message_id)" in text


class MessageRepository(BaseRepository[Message]):
    """
    Content Store backed by Supabase.

    Note: This repository does NOT perform authorization checks or content
    validation. The service layer owns both.
    """

    # -------------------------------------------------------------------------
    # Message operations
    # -------------------------------------------------------------------------

    def insert_message(
        self, owner_id: str, content: str, media_urls: list[str]
    ) -> Message:
        """Insert a message and return the stored row."""
        data = {
            "user_id": owner_id,
            "content": content,
            "media_urls": media_urls,
        }
        result = self._db.table("messages").insert(data).execute()
        return self._map_to_message(result.data[0])

    def get_message(self, message_id: str) -> Optional[Message]:
        """
        Get a message by ID.

        A malformed ID cannot match any row, so it reads as not found.
        """
        try:
            result = (
                self._db.table("messages")
                .select(MESSAGE_COLUMNS)
                .eq("id", message_id)
                .execute()
            )
        except APIError as e:
            if self._error_code(e) == INVALID_TEXT_REPRESENTATION:
                return None
            raise

        if not result.data:
            return None
        return self._map_to_message(result.data[0])

    def list_messages(self, limit: int) -> list[Message]:
        """List the most recent messages, newest first."""
        result = (
            self._db.table("messages")
            .select(MESSAGE_COLUMNS)
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [self._map_to_message(row) for row in result.data]

    # -------------------------------------------------------------------------
    # Reply operations
    # -------------------------------------------------------------------------

    def insert_reply(
        self,
        parent_message_id: str,
        owner_id: str,
        content: str,
        media_urls: list[str],
    ) -> Reply:
        """
        Insert a reply.

        The parent is not looked up first; the foreign key on
        ``replies.message_id`` rejects unknown parents.
        """
        data = {
            "message_id": parent_message_id,
            "user_id": owner_id,
            "content": content,
            "media_urls": media_urls,
        }
        try:
            result = self._db.table("replies").insert(data).execute()
        except APIError as e:
            code = self._error_code(e)
            if code == INVALID_TEXT_REPRESENTATION or (
                code == FOREIGN_KEY_VIOLATION and _violates_parent_key(e)
            ):
                raise MessageNotFoundError(parent_message_id) from e
            raise
        return self._map_to_reply(result.data[0])

    def list_replies(self, parent_message_id: str) -> list[Reply]:
        """List replies of a message in thread order (oldest first)."""
        try:
            result = (
                self._db.table("replies")
                .select(REPLY_COLUMNS)
                .eq("message_id", parent_message_id)
                .order("created_at")
                .execute()
            )
        except APIError as e:
            if self._error_code(e) == INVALID_TEXT_REPRESENTATION:
                return []
            raise
        return [self._map_to_reply(row) for row in result.data]

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_message(self, data: dict[str, Any]) -> Message:
        """Map database row to Message model."""
        return Message(
            id=str(data["id"]),
            owner_id=str(data["user_id"]),
            content=data["content"],
            media_urls=data.get("media_urls") or [],
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )

    def _map_to_reply(self, data: dict[str, Any]) -> Reply:
        """Map database row to Reply model."""
        return Reply(
            id=str(data["id"]),
            parent_message_id=str(data["message_id"]),
            owner_id=str(data["user_id"]),
            content=data["content"],
            media_urls=data.get("media_urls") or [],
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
