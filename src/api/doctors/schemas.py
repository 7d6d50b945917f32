from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from src.api.core.messages import APIResponse


class DoctorModel(BaseModel):
    id: UUID
    user_id: UUID
    welfare_id: UUID
    name: str
    email: str
    specialization: str
    is_active: bool
    created_at: datetime

    @classmethod
    def from_profile(cls, profile) -> "DoctorModel":
        return cls(
            id=profile.id,
            user_id=profile.user_id,
            welfare_id=profile.welfare_id,
            name=profile.user.name,
            email=profile.user.email,
            specialization=profile.specialization,
            is_active=profile.is_active,
            created_at=profile.created_at,
        )


class DoctorRegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=256)
    specialization: str = Field(..., min_length=1, max_length=200)


class DoctorUpdateRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    email: EmailStr | None = None
    specialization: str | None = Field(None, min_length=1, max_length=200)
    is_active: bool | None = Field(None, alias="isActive")

    class Config:
        populate_by_name = True


class DoctorCaseRequest(BaseModel):
    case_id: UUID = Field(..., alias="caseId")

    class Config:
        populate_by_name = True


DoctorResponse = APIResponse[DoctorModel]
DoctorListResponse = APIResponse[list[DoctorModel]]
