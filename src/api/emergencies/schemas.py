from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from src.api.cases.schemas import CaseModel
from src.api.core.messages import APIResponse
from src.database.models.emergencies import EmergencyStatus


class PublicEmergencyModel(BaseModel):
    """Emergency without the reporter's contact details."""

    id: UUID
    reporter_name: str
    animal_type: str
    condition: str
    location: str
    description: str
    status: EmergencyStatus
    assigned_welfare_id: UUID | None = None
    converted_to_case: bool
    case_id: UUID | None = None
    created_at: datetime

    class Config:
        from_attributes = True


class EmergencyModel(PublicEmergencyModel):
    phone: str
    email: str | None = None
    medical_issue: str | None = None
    estimated_cost: float | None = None
    treatment_plan: str | None = None
    updated_at: datetime


class EmergencyReportRequest(BaseModel):
    reporter_name: str = Field(..., alias="name", min_length=1, max_length=200)
    phone: str = Field(..., min_length=3, max_length=32)
    email: EmailStr | None = None
    animal_type: str = Field(..., alias="animalType", min_length=1, max_length=100)
    condition: str = Field(..., min_length=1, max_length=200)
    location: str = Field(..., min_length=1, max_length=500)
    description: str = Field(..., min_length=1, max_length=5000)

    class Config:
        populate_by_name = True


class EmergencyUpdateRequest(BaseModel):
    status: EmergencyStatus | None = None
    medical_issue: str | None = Field(None, alias="medicalIssue", max_length=500)
    estimated_cost: Decimal | None = Field(
        None, alias="estimatedCost", ge=0, max_digits=18, decimal_places=2
    )
    treatment_plan: str | None = Field(None, alias="treatmentPlan", max_length=5000)

    class Config:
        populate_by_name = True


class EmergencyConversionRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    target_amount: Decimal = Field(
        ..., alias="targetAmount", gt=0, max_digits=18, decimal_places=2
    )

    class Config:
        populate_by_name = True


class EmergencyConversionModel(BaseModel):
    emergency: EmergencyModel
    case: CaseModel


EmergencyResponse = APIResponse[EmergencyModel]
EmergencyListResponse = APIResponse[list[EmergencyModel]]
PublicEmergencyListResponse = APIResponse[list[PublicEmergencyModel]]
EmergencyConversionResponse = APIResponse[EmergencyConversionModel]
