"""Donor bookmarks on welfare organizations."""

from uuid import UUID

from fastapi import APIRouter, status

from src.api.core.decorators.auth import require_role
from src.api.core.dependencies import CurrentUserAuthDep, SavedWelfareServiceDep
from src.api.core.messages import APIResponse, MessageCode
from src.api.saved_welfares.schemas import SaveWelfareRequest
from src.api.welfare.schemas import (
    WelfareListResponse,
    WelfareModel,
    WelfareResponse,
)
from src.database.models.users import UserRole

router = APIRouter(prefix="/saved-welfares", tags=["saved-welfares"])


@router.get("", response_model=WelfareListResponse)
@require_role(UserRole.DONOR)
async def list_saved_welfares(
    current_user: CurrentUserAuthDep,
    saved_welfare_service: SavedWelfareServiceDep,
) -> WelfareListResponse:
    organizations = await saved_welfare_service.list_saved(current_user.user_id)
    return APIResponse.success(
        data=[WelfareModel.model_validate(org) for org in organizations]
    )


@router.post("", response_model=WelfareResponse, status_code=status.HTTP_201_CREATED)
@require_role(UserRole.DONOR)
async def save_welfare(
    payload: SaveWelfareRequest,
    current_user: CurrentUserAuthDep,
    saved_welfare_service: SavedWelfareServiceDep,
) -> WelfareResponse:
    welfare = await saved_welfare_service.save(current_user.user_id, payload.welfare_id)
    return APIResponse.success(
        message_code=MessageCode.WELFARE_SAVED,
        data=WelfareModel.model_validate(welfare),
    )


@router.delete("/{welfare_id}", response_model=APIResponse[None])
@require_role(UserRole.DONOR)
async def unsave_welfare(
    welfare_id: UUID,
    current_user: CurrentUserAuthDep,
    saved_welfare_service: SavedWelfareServiceDep,
) -> APIResponse[None]:
    await saved_welfare_service.unsave(current_user.user_id, welfare_id)
    return APIResponse.success(message_code=MessageCode.WELFARE_UNSAVED)
