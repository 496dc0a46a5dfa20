"""
Messages service implementation.

Validates content, stamps ownership and delegates persistence to the
Content Store.
"""

import logging

from .interfaces import IContentStore, IMessageService
from .models import CreateMessageRequest, CreateReplyRequest, Message, Reply
from .exceptions import EmptyContentError, MessageNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 50


def _require_content(content: str) -> None:
    if not content.strip():
        raise EmptyContentError()


class MessageService(IMessageService):
    """
    Message and reply operations.

    Content is stored as submitted; it is only trimmed for the emptiness
    check.
    """

    def __init__(self, store: IContentStore, page_size: int = DEFAULT_PAGE_SIZE):
        self._store = store
        self._page_size = page_size

    async def create_message(
        self, owner_id: str, request: CreateMessageRequest
    ) -> Message:
        _require_content(request.content)

        message = self._store.insert_message(
            owner_id, request.content, list(request.media_urls)
        )
        logger.info(
            f"Message created: {message.id} by {owner_id} "
            f"({len(message.media_urls)} media)"
        )
        return message

    async def get_message(self, message_id: str) -> Message:
        message = self._store.get_message(message_id)
        if message is None:
            raise MessageNotFoundError(message_id)
        return message

    async def list_messages(self) -> list[Message]:
        return self._store.list_messages(self._page_size)

    async def create_reply(
        self, owner_id: str, message_id: str, request: CreateReplyRequest
    ) -> Reply:
        """
        Create a reply under ``message_id``.

        Media URLs are trusted as already uploaded and are not resolved.
        """
        _require_content(request.content)

        reply = self._store.insert_reply(
            message_id, owner_id, request.content, list(request.media_urls)
        )
        logger.info(f"Reply created: {reply.id} on {message_id} by {owner_id}")
        return reply

    async def list_replies(self, message_id: str) -> list[Reply]:
        return self._store.list_replies(message_id)
