"""Welfare organization profiles and admin approval."""

from uuid import UUID

from fastapi import APIRouter

from src.api.core.decorators.auth import require_role
from src.api.core.dependencies import CurrentUserAuthDep, WelfareServiceDep
from src.api.core.messages import APIResponse, MessageCode
from src.api.welfare.schemas import (
    WelfareListResponse,
    WelfareModel,
    WelfareResponse,
    WelfareStatusUpdateRequest,
    WelfareUpdateRequest,
)
from src.database.models.users import UserRole

router = APIRouter(prefix="/welfare", tags=["welfare"])
admin_router = APIRouter(prefix="/admin/welfare", tags=["admin"])


@router.get("", response_model=WelfareListResponse)
async def list_welfare_organizations(
    welfare_service: WelfareServiceDep,
) -> WelfareListResponse:
    """List approved welfare organizations."""
    organizations = await welfare_service.list_approved()
    return APIResponse.success(
        data=[WelfareModel.model_validate(org) for org in organizations],
    )


@router.get("/me", response_model=WelfareResponse)
@require_role(UserRole.WELFARE)
async def get_my_welfare(
    current_user: CurrentUserAuthDep,
    welfare_service: WelfareServiceDep,
) -> WelfareResponse:
    welfare = await welfare_service.get_by_user(current_user.user_id)
    return APIResponse.success(data=WelfareModel.model_validate(welfare))


@router.patch("/me", response_model=WelfareResponse)
@require_role(UserRole.WELFARE)
async def update_my_welfare(
    payload: WelfareUpdateRequest,
    current_user: CurrentUserAuthDep,
    welfare_service: WelfareServiceDep,
) -> WelfareResponse:
    """Update organization details, including the receiving wallet."""
    welfare = await welfare_service.update_profile(
        current_user.user_id, **payload.model_dump(exclude_unset=True)
    )
    return APIResponse.success(
        message_code=MessageCode.WELFARE_UPDATED,
        data=WelfareModel.model_validate(welfare),
    )


@admin_router.patch("/{welfare_id}/status", response_model=WelfareResponse)
@require_role(UserRole.ADMIN)
async def set_welfare_status(
    welfare_id: UUID,
    payload: WelfareStatusUpdateRequest,
    current_user: CurrentUserAuthDep,
    welfare_service: WelfareServiceDep,
) -> WelfareResponse:
    welfare = await welfare_service.set_status(welfare_id, payload.status)
    return APIResponse.success(
        message_code=MessageCode.WELFARE_UPDATED,
        data=WelfareModel.model_validate(welfare),
    )
