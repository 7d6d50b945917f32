"""Emergency reports: public intake and welfare response."""

from uuid import UUID

from fastapi import APIRouter, Query, status

from src.api.cases.schemas import CaseModel
from src.api.core.decorators.auth import require_role
from src.api.core.dependencies import (
    CurrentUserAuthDep,
    EmergencyServiceDep,
    WelfareServiceDep,
)
from src.api.core.messages import APIResponse, MessageCode
from src.api.emergencies.schemas import (
    EmergencyConversionModel,
    EmergencyConversionRequest,
    EmergencyConversionResponse,
    EmergencyListResponse,
    EmergencyModel,
    EmergencyReportRequest,
    EmergencyResponse,
    EmergencyUpdateRequest,
    PublicEmergencyListResponse,
    PublicEmergencyModel,
)
from src.database.models.emergencies import EmergencyStatus
from src.database.models.users import UserRole

router = APIRouter(prefix="/emergencies", tags=["emergencies"])


@router.post("", response_model=EmergencyResponse, status_code=status.HTTP_201_CREATED)
async def report_emergency(
    payload: EmergencyReportRequest,
    emergency_service: EmergencyServiceDep,
) -> EmergencyResponse:
    """Report an animal emergency; no account needed."""
    emergency = await emergency_service.report(**payload.model_dump())
    return APIResponse.success(
        message_code=MessageCode.EMERGENCY_REPORTED,
        data=EmergencyModel.model_validate(emergency),
    )


@router.get("/public", response_model=PublicEmergencyListResponse)
async def list_public_emergencies(
    emergency_service: EmergencyServiceDep,
) -> PublicEmergencyListResponse:
    emergencies = await emergency_service.list_public()
    return APIResponse.success(
        data=[PublicEmergencyModel.model_validate(e) for e in emergencies]
    )


@router.get("", response_model=EmergencyListResponse)
async def list_emergencies(
    current_user: CurrentUserAuthDep,
    emergency_service: EmergencyServiceDep,
    status_filter: EmergencyStatus | None = Query(None, alias="status"),
) -> EmergencyListResponse:
    emergencies = await emergency_service.list_for(current_user, status_filter)
    return APIResponse.success(
        data=[EmergencyModel.model_validate(e) for e in emergencies]
    )


@router.get("/{emergency_id}", response_model=EmergencyResponse)
async def get_emergency(
    emergency_id: UUID,
    current_user: CurrentUserAuthDep,
    emergency_service: EmergencyServiceDep,
) -> EmergencyResponse:
    emergency = await emergency_service.get_emergency(emergency_id)
    return APIResponse.success(data=EmergencyModel.model_validate(emergency))


@router.patch("/{emergency_id}", response_model=EmergencyResponse)
@require_role(UserRole.WELFARE)
async def update_emergency(
    emergency_id: UUID,
    payload: EmergencyUpdateRequest,
    current_user: CurrentUserAuthDep,
    emergency_service: EmergencyServiceDep,
    welfare_service: WelfareServiceDep,
) -> EmergencyResponse:
    welfare = await welfare_service.get_by_user(current_user.user_id)
    emergency = await emergency_service.update(
        emergency_id,
        welfare,
        new_status=payload.status,
        medical_issue=payload.medical_issue,
        estimated_cost=payload.estimated_cost,
        treatment_plan=payload.treatment_plan,
    )
    return APIResponse.success(
        message_code=MessageCode.EMERGENCY_UPDATED,
        data=EmergencyModel.model_validate(emergency),
    )


@router.post(
    "/{emergency_id}/convert-to-case",
    response_model=EmergencyConversionResponse,
    status_code=status.HTTP_201_CREATED,
)
@require_role(UserRole.WELFARE)
async def convert_emergency_to_case(
    emergency_id: UUID,
    payload: EmergencyConversionRequest,
    current_user: CurrentUserAuthDep,
    emergency_service: EmergencyServiceDep,
    welfare_service: WelfareServiceDep,
) -> EmergencyConversionResponse:
    """Open a fundraising case from an emergency (approved welfare only)."""
    welfare = await welfare_service.get_approved_by_user(current_user.user_id)
    emergency, case = await emergency_service.convert_to_case(
        emergency_id,
        welfare,
        title=payload.title,
        description=payload.description,
        target_amount=payload.target_amount,
    )
    return APIResponse.success(
        message_code=MessageCode.EMERGENCY_CONVERTED,
        data=EmergencyConversionModel(
            emergency=EmergencyModel.model_validate(emergency),
            case=CaseModel.model_validate(case),
        ),
    )
