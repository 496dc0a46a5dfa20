"""
Messages module interfaces.

The API layer depends on IMessageService; the service depends on
IContentStore, which is satisfied by MessageRepository in production and by
in-memory fakes in tests.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import CreateMessageRequest, CreateReplyRequest, Message, Reply


@runtime_checkable
class IContentStore(Protocol):
    """Persistence boundary for messages and replies."""

    def insert_message(
        self, owner_id: str, content: str, media_urls: list[str]
    ) -> Message:
        ...

    def get_message(self, message_id: str) -> Optional[Message]:
        """Return the message, or None if absent or the id is malformed."""
        ...

    def list_messages(self, limit: int) -> list[Message]:
        """Return up to ``limit`` messages, newest first."""
        ...

    def insert_reply(
        self,
        parent_message_id: str,
        owner_id: str,
        content: str,
        media_urls: list[str],
    ) -> Reply:
        """
        Insert a reply.

        Raises:
            MessageNotFoundError: If the store rejects the parent reference
        """
        ...

    def list_replies(self, parent_message_id: str) -> list[Reply]:
        """Return all replies of a message, oldest first."""
        ...


@runtime_checkable
class IMessageService(Protocol):
    """
    Interface for message and reply operations.

    Reads are public. Writes take the owner ID resolved by the
    authorization gate and never read one from the request body.
    """

    async def create_message(
        self, owner_id: str, request: CreateMessageRequest
    ) -> Message:
        """
        Raises:
            EmptyContentError: If content is blank
        """
        ...

    async def get_message(self, message_id: str) -> Message:
        """
        Raises:
            MessageNotFoundError: If no such message exists
        """
        ...

    async def list_messages(self) -> list[Message]:
        """Newest first."""
        ...

    async def create_reply(
        self, owner_id: str, message_id: str, request: CreateReplyRequest
    ) -> Reply:
        """
        Raises:
            EmptyContentError: If content is blank
            MessageNotFoundError: If the store rejects the parent reference
        """
        ...

    async def list_replies(self, message_id: str) -> list[Reply]:
        """Thread order (oldest first)."""
        ...
