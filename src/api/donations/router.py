"""Case donations recorded from on-chain transfers."""

from uuid import UUID

from fastapi import APIRouter, status

from src.api.core.decorators.auth import require_role
from src.api.core.dependencies import CurrentUserAuthDep, DonationServiceDep
from src.api.core.messages import APIResponse, MessageCode
from src.api.donations.schemas import (
    DonationCreateRequest,
    DonationListResponse,
    DonationModel,
    DonationResponse,
    DonorStatsModel,
    DonorStatsResponse,
)
from src.database.models.users import UserRole

router = APIRouter(prefix="/donations", tags=["donations"])


@router.post("", response_model=DonationResponse, status_code=status.HTTP_201_CREATED)
@require_role(UserRole.DONOR)
async def create_donation(
    payload: DonationCreateRequest,
    current_user: CurrentUserAuthDep,
    donation_service: DonationServiceDep,
) -> DonationResponse:
    """Record a donation after verifying its transfer on chain."""
    donation = await donation_service.record_donation(
        donor_id=current_user.user_id,
        case_id=payload.case_id,
        tx_hash=payload.tx_hash,
        amount=payload.amount,
        amount_usd=payload.amount_usd,
        message=payload.message,
    )
    return APIResponse.success(
        message_code=MessageCode.DONATION_RECORDED,
        data=DonationModel.model_validate(donation),
    )


@router.get("/history", response_model=DonationListResponse)
@require_role(UserRole.DONOR)
async def donation_history(
    current_user: CurrentUserAuthDep,
    donation_service: DonationServiceDep,
) -> DonationListResponse:
    donations = await donation_service.donor_history(current_user.user_id)
    return APIResponse.success(
        data=[DonationModel.model_validate(d) for d in donations],
    )


@router.get("/stats", response_model=DonorStatsResponse)
@require_role(UserRole.DONOR)
async def donation_stats(
    current_user: CurrentUserAuthDep,
    donation_service: DonationServiceDep,
) -> DonorStatsResponse:
    stats = await donation_service.donor_stats(current_user.user_id)
    return APIResponse.success(data=DonorStatsModel.model_validate(stats))


@router.get("/case/{case_id}", response_model=DonationListResponse)
async def case_donations(
    case_id: UUID,
    current_user: CurrentUserAuthDep,
    donation_service: DonationServiceDep,
) -> DonationListResponse:
    """Confirmed donations for a case (assigned doctor or owning welfare)."""
    donations = await donation_service.case_donations(case_id, current_user)
    return APIResponse.success(
        data=[DonationModel.model_validate(d) for d in donations],
    )
