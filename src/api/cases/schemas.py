from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from src.api.core.messages import APIResponse
from src.database.models.cases import CaseStatus


class CaseModel(BaseModel):
    id: UUID
    welfare_id: UUID
    title: str
    description: str
    target_amount: float
    amount_raised: float
    medical_issue: str | None = None
    doctor_id: UUID | None = None
    status: CaseStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class CaseCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    target_amount: Decimal = Field(..., gt=0, max_digits=18, decimal_places=2)
    medical_issue: str | None = Field(None, max_length=500)


class AssignDoctorRequest(BaseModel):
    doctor_id: UUID


CaseResponse = APIResponse[CaseModel]
CaseListResponse = APIResponse[list[CaseModel]]
