"""
Message API endpoints.

Reads are public; posting a message or a reply requires a bearer token.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_message_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .interfaces import IMessageService
from .models import CreateMessageRequest, CreateReplyRequest, Message, Reply

router = APIRouter()


@router.get("", response_model=list[Message])
async def list_messages(
    service: IMessageService = Depends(get_message_service),
) -> list[Message]:
    """
    List recent messages, newest first.
    """
    return await service.list_messages()


@router.post("", response_model=Message, status_code=201)
async def create_message(
    request: CreateMessageRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessageService = Depends(get_message_service),
) -> Message:
    """
    Post a message owned by the authenticated user.
    """
    return await service.create_message(user.id, request)


@router.get("/{message_id}", response_model=Message)
async def get_message(
    message_id: str,
    service: IMessageService = Depends(get_message_service),
) -> Message:
    """
    Get a single message.
    """
    return await service.get_message(message_id)


@router.get("/{message_id}/replies", response_model=list[Reply])
async def list_replies(
    message_id: str,
    service: IMessageService = Depends(get_message_service),
) -> list[Reply]:
    """
    List replies to a message in thread order (oldest first).
    """
    return await service.list_replies(message_id)


@router.post("/{message_id}/replies", response_model=Reply, status_code=201)
async def create_reply(
    message_id: str,
    request: CreateReplyRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessageService = Depends(get_message_service),
) -> Reply:
    """
    Reply to a message. The parent is taken from the path, never the body.
    """
    return await service.create_reply(user.id, message_id, request)
