"""
Media module.

Handles file uploads to object storage.

Public API:
- IBlobStore: Interface for object storage
- MediaService: Upload orchestration
- content_type_for: Extension to MIME type mapping
"""

from .interfaces import IBlobStore
from .service import MediaService
from .storage import SupabaseBlobStore, content_type_for
from .exceptions import MissingFileError, MediaUploadError

__all__ = [
    "IBlobStore",
    "MediaService",
    "SupabaseBlobStore",
    "content_type_for",
    "MissingFileError",
    "MediaUploadError",
]
