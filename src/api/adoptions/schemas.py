from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.api.core.messages import APIResponse
from src.database.models.adoptions import AdoptionStatus, PetType


class AdoptionModel(BaseModel):
    id: UUID
    name: str
    type: PetType
    breed: str | None = None
    age: str | None = None
    gender: str | None = None
    size: str | None = None
    description: str
    location: str | None = None
    health: str | None = None
    behavior: str | None = None
    status: AdoptionStatus
    posted_by: UUID
    adopted_by: UUID | None = None
    created_at: datetime

    class Config:
        from_attributes = True


class AdoptionCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    type: PetType
    breed: str | None = Field(None, max_length=100)
    age: str | None = Field(None, max_length=50)
    gender: str | None = Field(None, max_length=20)
    size: str | None = Field(None, max_length=20)
    description: str = Field(..., min_length=1)
    location: str | None = Field(None, max_length=255)
    health: str | None = None
    behavior: str | None = None


AdoptionResponse = APIResponse[AdoptionModel]
AdoptionListResponse = APIResponse[list[AdoptionModel]]
