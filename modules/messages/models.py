"""
Messages module data models.

A Message is a top-level post; a Reply hangs off exactly one Message.
Replies cannot be replied to.
"""

from datetime import datetime
from pydantic import BaseModel, Field


class CreateMessageRequest(BaseModel):
    """
    Request to post a message.

    Unknown fields (an ``owner_id`` sent by the client, say) are ignored;
    the owner always comes from the token.
    """

    content: str = Field(..., description="Message text")
    media_urls: list[str] = Field(
        default_factory=list,
        description="URLs returned by the media upload endpoint",
    )


class CreateReplyRequest(CreateMessageRequest):
    """Request to reply to a message. The parent comes from the URL path."""


class Message(BaseModel):
    """A stored message."""

    id: str = Field(..., description="Message ID (UUID)")
    owner_id: str = Field(..., description="ID of the user who posted it")
    content: str
    media_urls: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class Reply(Message):
    """A stored reply."""

    parent_message_id: str = Field(..., description="ID of the message replied to")
