"""
Messages module.

Handles messages, their replies and the ownership rules around them.

Public API:
- IMessageService: Interface for message operations
- IContentStore: Interface for message persistence
- Message / Reply: Stored records
- CreateMessageRequest / CreateReplyRequest: Write payloads
"""

from .interfaces import IContentStore, IMessageService
from .models import CreateMessageRequest, CreateReplyRequest, Message, Reply
from .exceptions import EmptyContentError, MessageNotFoundError

__all__ = [
    # Interfaces
    "IContentStore",
    "IMessageService",
    # Models
    "CreateMessageRequest",
    "CreateReplyRequest",
    "Message",
    "Reply",
    # Exceptions
    "EmptyContentError",
    "MessageNotFoundError",
]
