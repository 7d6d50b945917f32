"""Adoption listings."""

from uuid import UUID

from fastapi import APIRouter, status

from src.api.adoptions.schemas import (
    AdoptionCreateRequest,
    AdoptionListResponse,
    AdoptionModel,
    AdoptionResponse,
)
from src.api.core.decorators.auth import require_role
from src.api.core.dependencies import AdoptionServiceDep, CurrentUserAuthDep
from src.api.core.messages import APIResponse, MessageCode
from src.database.models.adoptions import AdoptionStatus, PetType
from src.database.models.users import UserRole

router = APIRouter(prefix="/adoptions", tags=["adoptions"])


@router.get("", response_model=AdoptionListResponse)
async def list_adoptions(
    adoption_service: AdoptionServiceDep,
    type: PetType | None = None,
    status: AdoptionStatus | None = AdoptionStatus.AVAILABLE,
) -> AdoptionListResponse:
    """List adoption listings, available ones by default."""
    adoptions = await adoption_service.list_adoptions(
        pet_type=type, adoption_status=status
    )
    return APIResponse.success(
        data=[AdoptionModel.model_validate(a) for a in adoptions],
    )


@router.get("/posted/{user_id}", response_model=AdoptionListResponse)
async def list_posted_adoptions(
    user_id: UUID,
    adoption_service: AdoptionServiceDep,
) -> AdoptionListResponse:
    adoptions = await adoption_service.list_posted_by(user_id)
    return APIResponse.success(
        data=[AdoptionModel.model_validate(a) for a in adoptions],
    )


@router.get("/{adoption_id}", response_model=AdoptionResponse)
async def get_adoption(
    adoption_id: UUID,
    adoption_service: AdoptionServiceDep,
) -> AdoptionResponse:
    adoption = await adoption_service.get_adoption(adoption_id)
    return APIResponse.success(data=AdoptionModel.model_validate(adoption))


@router.post(
    "", response_model=AdoptionResponse, status_code=status.HTTP_201_CREATED
)
@require_role(UserRole.DONOR, UserRole.WELFARE)
async def create_adoption(
    payload: AdoptionCreateRequest,
    current_user: CurrentUserAuthDep,
    adoption_service: AdoptionServiceDep,
) -> AdoptionResponse:
    adoption = await adoption_service.create_adoption(
        current_user.user_id, **payload.model_dump()
    )
    return APIResponse.success(
        message_code=MessageCode.ADOPTION_CREATED,
        data=AdoptionModel.model_validate(adoption),
    )
