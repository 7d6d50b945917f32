"""Progress updates posted on cases."""

from uuid import UUID

from fastapi import APIRouter, status

from src.api.case_updates.schemas import (
    CaseUpdateCreateRequest,
    CaseUpdateEditRequest,
    CaseUpdateListResponse,
    CaseUpdateModel,
    CaseUpdateResponse,
)
from src.api.core.decorators.auth import require_role
from src.api.core.dependencies import (
    CaseUpdateServiceDep,
    CurrentUserAuthDep,
    WelfareServiceDep,
)
from src.api.core.messages import APIResponse, MessageCode
from src.database.models.users import UserRole

router = APIRouter(prefix="/case-updates", tags=["case-updates"])


@router.get("/case/{case_id}", response_model=CaseUpdateListResponse)
async def list_case_updates(
    case_id: UUID, case_update_service: CaseUpdateServiceDep
) -> CaseUpdateListResponse:
    """Published updates for a case, newest first."""
    updates = await case_update_service.list_published(case_id)
    return APIResponse.success(
        data=[CaseUpdateModel.model_validate(u) for u in updates]
    )


@router.post(
    "", response_model=CaseUpdateResponse, status_code=status.HTTP_201_CREATED
)
@require_role(UserRole.WELFARE)
async def post_case_update(
    payload: CaseUpdateCreateRequest,
    current_user: CurrentUserAuthDep,
    case_update_service: CaseUpdateServiceDep,
    welfare_service: WelfareServiceDep,
) -> CaseUpdateResponse:
    welfare = await welfare_service.get_by_user(current_user.user_id)
    update = await case_update_service.post_update(
        welfare,
        payload.case_id,
        title=payload.title,
        content=payload.content,
        is_success_story=payload.is_success_story,
    )
    return APIResponse.success(
        message_code=MessageCode.CASE_UPDATE_POSTED,
        data=CaseUpdateModel.model_validate(update),
    )


@router.patch("/{update_id}", response_model=CaseUpdateResponse)
@require_role(UserRole.WELFARE)
async def edit_case_update(
    update_id: UUID,
    payload: CaseUpdateEditRequest,
    current_user: CurrentUserAuthDep,
    case_update_service: CaseUpdateServiceDep,
    welfare_service: WelfareServiceDep,
) -> CaseUpdateResponse:
    welfare = await welfare_service.get_by_user(current_user.user_id)
    fields = payload.model_dump(exclude_unset=True, exclude_none=True)
    update = await case_update_service.edit_update(update_id, welfare, **fields)
    return APIResponse.success(
        message_code=MessageCode.CASE_UPDATE_EDITED,
        data=CaseUpdateModel.model_validate(update),
    )


@router.delete("/{update_id}", response_model=APIResponse[None])
@require_role(UserRole.WELFARE)
async def delete_case_update(
    update_id: UUID,
    current_user: CurrentUserAuthDep,
    case_update_service: CaseUpdateServiceDep,
    welfare_service: WelfareServiceDep,
) -> APIResponse[None]:
    welfare = await welfare_service.get_by_user(current_user.user_id)
    await case_update_service.delete_update(update_id, welfare)
    return APIResponse.success(message_code=MessageCode.CASE_UPDATE_DELETED)
