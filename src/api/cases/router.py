"""Donation cases posted by welfare organizations."""

from uuid import UUID

from fastapi import APIRouter, status

from src.api.cases.schemas import (
    AssignDoctorRequest,
    CaseCreateRequest,
    CaseListResponse,
    CaseModel,
    CaseResponse,
)
from src.api.core.decorators.auth import require_role
from src.api.core.dependencies import (
    CaseServiceDep,
    CurrentUserAuthDep,
    WelfareServiceDep,
)
from src.api.core.messages import APIResponse, MessageCode
from src.database.models.users import UserRole

router = APIRouter(prefix="/cases", tags=["cases"])


@router.get("", response_model=CaseListResponse)
async def list_cases(case_service: CaseServiceDep) -> CaseListResponse:
    """List active cases."""
    cases = await case_service.list_active()
    return APIResponse.success(data=[CaseModel.model_validate(c) for c in cases])


@router.get("/{case_id}", response_model=CaseResponse)
async def get_case(case_id: UUID, case_service: CaseServiceDep) -> CaseResponse:
    case = await case_service.get_case(case_id)
    return APIResponse.success(data=CaseModel.model_validate(case))


@router.post("", response_model=CaseResponse, status_code=status.HTTP_201_CREATED)
@require_role(UserRole.WELFARE)
async def create_case(
    payload: CaseCreateRequest,
    current_user: CurrentUserAuthDep,
    case_service: CaseServiceDep,
    welfare_service: WelfareServiceDep,
) -> CaseResponse:
    """Create a case (approved welfare organizations only)."""
    welfare = await welfare_service.get_approved_by_user(current_user.user_id)
    case = await case_service.create_case(
        welfare,
        title=payload.title,
        description=payload.description,
        target_amount=payload.target_amount,
        medical_issue=payload.medical_issue,
    )
    return APIResponse.success(
        message_code=MessageCode.CASE_CREATED,
        data=CaseModel.model_validate(case),
    )


@router.patch("/{case_id}/doctor", response_model=CaseResponse)
@require_role(UserRole.WELFARE)
async def assign_doctor(
    case_id: UUID,
    payload: AssignDoctorRequest,
    current_user: CurrentUserAuthDep,
    case_service: CaseServiceDep,
    welfare_service: WelfareServiceDep,
) -> CaseResponse:
    welfare = await welfare_service.get_by_user(current_user.user_id)
    case = await case_service.assign_doctor(case_id, welfare, payload.doctor_id)
    return APIResponse.success(
        message_code=MessageCode.CASE_UPDATED,
        data=CaseModel.model_validate(case),
    )
