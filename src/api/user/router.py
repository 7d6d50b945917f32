"""User domain router for user-specific endpoints."""

from fastapi import APIRouter

from src.api.core.dependencies import CurrentUserAuthDep, UserManagementServiceDep
from src.api.core.messages import APIResponse, MessageCode
from src.api.user.schemas import (
    UserModel,
    UserProfileResponse,
    UserProfileUpdateRequest,
)

router = APIRouter(prefix="/user", tags=["user"])


@router.get("/profile", response_model=UserProfileResponse)
async def get_current_user(current_user: CurrentUserAuthDep) -> UserProfileResponse:
    """Get current user's profile information."""
    return APIResponse.success(
        message_code=MessageCode.SUCCESS,
        data=UserModel.model_validate(current_user.user),
    )


@router.patch("/profile", response_model=UserProfileResponse)
async def update_user_profile(
    profile_data: UserProfileUpdateRequest,
    current_user: CurrentUserAuthDep,
    user_service: UserManagementServiceDep,
) -> UserProfileResponse:
    """Update user profile information."""
    user = await user_service.update_profile(
        current_user.user_id, **profile_data.model_dump(exclude_unset=True)
    )
    return APIResponse.success(
        message_code=MessageCode.USER_UPDATED,
        data=UserModel.model_validate(user),
    )
