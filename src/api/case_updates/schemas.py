from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.api.core.messages import APIResponse


class CaseUpdateModel(BaseModel):
    id: UUID
    case_id: UUID
    welfare_id: UUID
    title: str
    content: str
    is_success_story: bool
    is_published: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class CaseUpdateCreateRequest(BaseModel):
    case_id: UUID = Field(..., alias="caseId")
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1, max_length=10000)
    is_success_story: bool = Field(False, alias="isSuccessStory")

    class Config:
        populate_by_name = True


class CaseUpdateEditRequest(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=200)
    content: str | None = Field(None, min_length=1, max_length=10000)
    is_success_story: bool | None = Field(None, alias="isSuccessStory")
    is_published: bool | None = Field(None, alias="isPublished")

    class Config:
        populate_by_name = True


CaseUpdateResponse = APIResponse[CaseUpdateModel]
CaseUpdateListResponse = APIResponse[list[CaseUpdateModel]]
