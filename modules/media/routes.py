"""
Media upload endpoint.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from api.dependencies import get_media_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .exceptions import MissingFileError
from .service import MediaService

router = APIRouter()


class MediaUploadResponse(BaseModel):
    """Where the uploaded file can be fetched from."""

    url: str


@router.post("/media", response_model=MediaUploadResponse)
async def upload_media(
    file: Optional[UploadFile] = File(default=None),
    user: AuthenticatedUser = Depends(get_current_user),
    service: MediaService = Depends(get_media_service),
) -> MediaUploadResponse:
    """
    Upload a file (multipart field ``file``).

    The returned URL can be passed in ``media_urls`` when posting.
    """
    if file is None:
        raise MissingFileError()

    data = await file.read()
    url = await run_in_threadpool(service.upload, file.filename or "", data)
    return MediaUploadResponse(url=url)
