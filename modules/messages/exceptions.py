"""
Messages module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class MessageNotFoundError(NotFoundError):
    """Raised when a message is not found."""

    def __init__(self, message_id: str):
        super().__init__(
            "message not found",
            code="MESSAGE_NOT_FOUND",
            details={"message_id": message_id},
        )


class EmptyContentError(ValidationError):
    """Raised when message or reply content is blank after trimming."""

    def __init__(self):
        super().__init__("content must not be empty", code="EMPTY_CONTENT")
