"""Registration and login endpoints."""

from fastapi import APIRouter, status

from src.api.auth.schemas import (
    AuthTokenModel,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from src.api.core.dependencies import UserManagementServiceDep
from src.api.core.messages import APIResponse, MessageCode
from src.api.user.schemas import UserModel

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    payload: RegisterRequest,
    user_service: UserManagementServiceDep,
) -> RegisterResponse:
    user = await user_service.register_user(
        name=payload.name,
        email=payload.email,
        password=payload.password,
        role=payload.role,
        phone=payload.phone,
        address=payload.address,
        organization_name=payload.organization_name,
    )
    return APIResponse.success(
        message_code=MessageCode.USER_REGISTERED,
        data=UserModel.model_validate(user),
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    payload: LoginRequest,
    user_service: UserManagementServiceDep,
) -> LoginResponse:
    """Exchange email and password for a bearer token."""
    user, token = await user_service.authenticate(payload.email, payload.password)
    return APIResponse.success(
        message_code=MessageCode.SUCCESS,
        data=AuthTokenModel(access_token=token, user=UserModel.model_validate(user)),
    )
