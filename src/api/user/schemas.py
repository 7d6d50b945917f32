from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.api.core.messages import APIResponse
from src.database.models.users import UserRole


class UserModel(BaseModel):
    id: UUID
    name: str
    email: str
    role: UserRole
    phone: str | None = None
    address: str | None = None
    bio: str | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class UserProfileUpdateRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    phone: str | None = Field(None, max_length=32)
    address: str | None = Field(None, max_length=255)
    bio: str | None = Field(None, max_length=2000)


UserProfileResponse = APIResponse[UserModel]
