from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.api.core.messages import APIResponse
from src.database.models.welfare import WelfareStatus


class WelfareModel(BaseModel):
    id: UUID
    user_id: UUID
    name: str
    description: str | None = None
    website: str | None = None
    wallet_address: str | None = None
    status: WelfareStatus
    created_at: datetime

    class Config:
        from_attributes = True


class WelfareUpdateRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, max_length=5000)
    website: str | None = Field(None, max_length=255)
    wallet_address: str | None = Field(None, max_length=42)


class WelfareStatusUpdateRequest(BaseModel):
    status: WelfareStatus


WelfareResponse = APIResponse[WelfareModel]
WelfareListResponse = APIResponse[list[WelfareModel]]
