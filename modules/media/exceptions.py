"""
Media module exceptions.
"""

from shared.exceptions import InternalError, ValidationError


class MissingFileError(ValidationError):
    """Raised when an upload request carries no file."""

    def __init__(self):
        super().__init__("file is required", code="MISSING_FILE")


class MediaUploadError(InternalError):
    """Raised when the blob store rejects an upload."""

    def __init__(self, object_name: str):
        super().__init__(
            "failed to upload file",
            code="UPLOAD_FAILED",
            details={"object_name": object_name},
        )
