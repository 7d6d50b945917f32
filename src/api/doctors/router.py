"""Doctor accounts and case assignment, managed by welfare organizations."""

from uuid import UUID

from fastapi import APIRouter, status

from src.api.cases.schemas import CaseListResponse, CaseModel, CaseResponse
from src.api.core.decorators.auth import require_role
from src.api.core.dependencies import (
    CurrentUserAuthDep,
    DoctorServiceDep,
    WelfareServiceDep,
)
from src.api.core.messages import APIResponse, MessageCode
from src.api.doctors.schemas import (
    DoctorCaseRequest,
    DoctorListResponse,
    DoctorModel,
    DoctorRegisterRequest,
    DoctorResponse,
    DoctorUpdateRequest,
)
from src.database.models.users import UserRole

router = APIRouter(prefix="/doctors", tags=["doctors"])


@router.post("", response_model=DoctorResponse, status_code=status.HTTP_201_CREATED)
@require_role(UserRole.WELFARE)
async def register_doctor(
    payload: DoctorRegisterRequest,
    current_user: CurrentUserAuthDep,
    doctor_service: DoctorServiceDep,
    welfare_service: WelfareServiceDep,
) -> DoctorResponse:
    """Create a doctor login for the caller's organization."""
    welfare = await welfare_service.get_approved_by_user(current_user.user_id)
    profile = await doctor_service.register(
        welfare,
        name=payload.name,
        email=payload.email,
        password=payload.password,
        specialization=payload.specialization,
    )
    return APIResponse.success(
        message_code=MessageCode.DOCTOR_REGISTERED,
        data=DoctorModel.from_profile(profile),
    )


@router.get("/me/cases", response_model=CaseListResponse)
@require_role(UserRole.DOCTOR)
async def my_assigned_cases(
    current_user: CurrentUserAuthDep,
    doctor_service: DoctorServiceDep,
) -> CaseListResponse:
    cases = await doctor_service.assigned_cases(current_user.user_id)
    return APIResponse.success(data=[CaseModel.model_validate(c) for c in cases])


@router.get("/welfare/{welfare_id}", response_model=DoctorListResponse)
async def list_welfare_doctors(
    welfare_id: UUID,
    current_user: CurrentUserAuthDep,
    doctor_service: DoctorServiceDep,
) -> DoctorListResponse:
    profiles = await doctor_service.list_for_welfare(welfare_id)
    return APIResponse.success(data=[DoctorModel.from_profile(p) for p in profiles])


@router.get("/{doctor_id}", response_model=DoctorResponse)
async def get_doctor(
    doctor_id: UUID,
    current_user: CurrentUserAuthDep,
    doctor_service: DoctorServiceDep,
) -> DoctorResponse:
    profile = await doctor_service.get_doctor(doctor_id)
    return APIResponse.success(data=DoctorModel.from_profile(profile))


@router.patch("/{doctor_id}", response_model=DoctorResponse)
@require_role(UserRole.WELFARE)
async def update_doctor(
    doctor_id: UUID,
    payload: DoctorUpdateRequest,
    current_user: CurrentUserAuthDep,
    doctor_service: DoctorServiceDep,
    welfare_service: WelfareServiceDep,
) -> DoctorResponse:
    welfare = await welfare_service.get_by_user(current_user.user_id)
    profile = await doctor_service.update_doctor(
        doctor_id, welfare, **payload.model_dump(exclude_unset=True)
    )
    return APIResponse.success(
        message_code=MessageCode.DOCTOR_UPDATED,
        data=DoctorModel.from_profile(profile),
    )


@router.delete("/{doctor_id}", response_model=APIResponse[None])
@require_role(UserRole.WELFARE)
async def remove_doctor(
    doctor_id: UUID,
    current_user: CurrentUserAuthDep,
    doctor_service: DoctorServiceDep,
    welfare_service: WelfareServiceDep,
) -> APIResponse[None]:
    welfare = await welfare_service.get_by_user(current_user.user_id)
    await doctor_service.remove_doctor(doctor_id, welfare)
    return APIResponse.success(message_code=MessageCode.DOCTOR_REMOVED)


@router.post("/{doctor_id}/assign-case", response_model=CaseResponse)
@require_role(UserRole.WELFARE)
async def assign_case_to_doctor(
    doctor_id: UUID,
    payload: DoctorCaseRequest,
    current_user: CurrentUserAuthDep,
    doctor_service: DoctorServiceDep,
    welfare_service: WelfareServiceDep,
) -> CaseResponse:
    welfare = await welfare_service.get_by_user(current_user.user_id)
    case = await doctor_service.assign_case(doctor_id, welfare, payload.case_id)
    return APIResponse.success(
        message_code=MessageCode.CASE_UPDATED,
        data=CaseModel.model_validate(case),
    )


@router.post("/{doctor_id}/remove-case", response_model=CaseResponse)
@require_role(UserRole.WELFARE)
async def remove_case_from_doctor(
    doctor_id: UUID,
    payload: DoctorCaseRequest,
    current_user: CurrentUserAuthDep,
    doctor_service: DoctorServiceDep,
    welfare_service: WelfareServiceDep,
) -> CaseResponse:
    welfare = await welfare_service.get_by_user(current_user.user_id)
    case = await doctor_service.remove_case(doctor_id, welfare, payload.case_id)
    return APIResponse.success(
        message_code=MessageCode.CASE_UPDATED,
        data=CaseModel.model_validate(case),
    )
