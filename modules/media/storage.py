"""
Supabase Storage blob store.

Objects land in a single public bucket; the returned URL is the bucket's
public URL for the object.
"""

import os

from supabase import Client

CONTENT_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".mp4": "video/mp4",
    ".webm": "video/webm",
}
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def content_type_for(filename: str) -> str:
    """
    MIME type from the file extension.

    Matching is case-sensitive: "photo.JPG" is application/octet-stream.
    """
    _, ext = os.path.splitext(filename)
    return CONTENT_TYPES.get(ext, DEFAULT_CONTENT_TYPE)


class SupabaseBlobStore:
    """IBlobStore over a Supabase Storage bucket."""

    def __init__(self, db: Client, bucket: str):
        self._db = db
        self._bucket = bucket

    def put_object(self, name: str, data: bytes, content_type: str) -> str:
        bucket = self._db.storage.from_(self._bucket)
        bucket.upload(
            path=name,
            file=data,
            file_options={"content-type": content_type},
        )
        return bucket.get_public_url(name)
