"""In-app messages for the current user."""

from uuid import UUID

from fastapi import APIRouter

from src.api.core.dependencies import CurrentUserAuthDep, MessageServiceDep
from src.api.core.messages import APIResponse, MessageCode
from src.api.messages.schemas import (
    MessageListResponse,
    MessageModel,
    MessageResponse,
)

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get("", response_model=MessageListResponse)
async def list_messages(
    current_user: CurrentUserAuthDep,
    message_service: MessageServiceDep,
) -> MessageListResponse:
    messages = await message_service.list_for_user(current_user.user_id)
    return APIResponse.success(
        data=[MessageModel.model_validate(m) for m in messages],
    )


@router.put("/{message_id}/read", response_model=MessageResponse)
async def mark_message_read(
    message_id: UUID,
    current_user: CurrentUserAuthDep,
    message_service: MessageServiceDep,
) -> MessageResponse:
    message = await message_service.mark_read(message_id, current_user.user_id)
    return APIResponse.success(
        message_code=MessageCode.MESSAGE_READ,
        data=MessageModel.model_validate(message),
    )
