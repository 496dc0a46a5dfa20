"""
Media upload service.
"""

import logging
import os
import uuid

from .exceptions import MediaUploadError
from .interfaces import IBlobStore
from .storage import content_type_for

logger = logging.getLogger(__name__)


def object_name_for(filename: str) -> str:
    """Random object name that keeps the original extension."""
    _, ext = os.path.splitext(filename)
    return f"{uuid.uuid4()}{ext}"


class MediaService:
    """Stores uploaded files and hands back their URLs."""

    def __init__(self, store: IBlobStore):
        self._store = store

    def upload(self, filename: str, data: bytes) -> str:
        """
        Upload a file under a fresh name.

        Raises:
            MediaUploadError: If the blob store fails
        """
        object_name = object_name_for(filename)
        content_type = content_type_for(filename)

        try:
            url = self._store.put_object(object_name, data, content_type)
        except Exception as e:
            logger.error(f"Failed to upload {object_name}: {e}")
            raise MediaUploadError(object_name) from e

        logger.info(f"File uploaded: {object_name} ({len(data)} bytes)")
        return url
