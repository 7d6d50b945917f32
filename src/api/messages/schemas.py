from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from src.api.core.messages import APIResponse


class MessageModel(BaseModel):
    id: UUID
    sender_id: UUID | None = None
    recipient_id: UUID
    title: str
    content: str
    is_read: bool
    created_at: datetime

    class Config:
        from_attributes = True


MessageResponse = APIResponse[MessageModel]
MessageListResponse = APIResponse[list[MessageModel]]
