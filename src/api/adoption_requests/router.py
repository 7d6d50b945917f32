"""Adoption requests, review and payment reconciliation."""

from uuid import UUID

from fastapi import APIRouter, status

from src.api.adoption_requests.schemas import (
    AdoptionRequestCreateRequest,
    AdoptionRequestListResponse,
    AdoptionRequestModel,
    AdoptionRequestResponse,
    AdoptionRequestReviewRequest,
    PaymentRequest,
)
from src.api.core.decorators.auth import require_role
from src.api.core.dependencies import AdoptionRequestServiceDep, CurrentUserAuthDep
from src.api.core.messages import APIResponse, MessageCode
from src.database.models.users import UserRole

router = APIRouter(prefix="/adoption-requests", tags=["adoption-requests"])


@router.post(
    "",
    response_model=AdoptionRequestResponse,
    status_code=status.HTTP_201_CREATED,
)
@require_role(UserRole.DONOR)
async def create_adoption_request(
    payload: AdoptionRequestCreateRequest,
    current_user: CurrentUserAuthDep,
    request_service: AdoptionRequestServiceDep,
) -> AdoptionRequestResponse:
    request = await request_service.create_request(
        current_user,
        adoption_id=payload.adoption_id,
        donor_name=payload.donor_name,
        contact_number=payload.contact_number,
        email=payload.email,
        reason=payload.reason,
        preferred_contact=payload.preferred_contact,
    )
    return APIResponse.success(
        message_code=MessageCode.ADOPTION_REQUEST_CREATED,
        data=AdoptionRequestModel.model_validate(request),
    )


@router.get("/my", response_model=AdoptionRequestListResponse)
async def list_my_requests(
    current_user: CurrentUserAuthDep,
    request_service: AdoptionRequestServiceDep,
) -> AdoptionRequestListResponse:
    requests = await request_service.list_for_donor(current_user.user_id)
    return APIResponse.success(
        data=[AdoptionRequestModel.model_validate(r) for r in requests],
    )


@router.get("/welfare", response_model=AdoptionRequestListResponse)
async def list_received_requests(
    current_user: CurrentUserAuthDep,
    request_service: AdoptionRequestServiceDep,
) -> AdoptionRequestListResponse:
    """Requests received on listings the caller posted."""
    requests = await request_service.list_for_poster(current_user.user_id)
    return APIResponse.success(
        data=[AdoptionRequestModel.model_validate(r) for r in requests],
    )


@router.get("/adoption/{adoption_id}", response_model=AdoptionRequestListResponse)
async def list_requests_for_adoption(
    adoption_id: UUID,
    current_user: CurrentUserAuthDep,
    request_service: AdoptionRequestServiceDep,
) -> AdoptionRequestListResponse:
    requests = await request_service.list_for_adoption(adoption_id, current_user)
    return APIResponse.success(
        data=[AdoptionRequestModel.model_validate(r) for r in requests],
    )


@router.patch("/{request_id}", response_model=AdoptionRequestResponse)
async def review_adoption_request(
    request_id: UUID,
    payload: AdoptionRequestReviewRequest,
    current_user: CurrentUserAuthDep,
    request_service: AdoptionRequestServiceDep,
) -> AdoptionRequestResponse:
    """Approve or reject a pending request (listing poster only)."""
    request = await request_service.review_request(
        request_id, current_user, payload.status
    )
    return APIResponse.success(
        message_code=MessageCode.ADOPTION_REQUEST_UPDATED,
        data=AdoptionRequestModel.model_validate(request),
    )


@router.post("/{request_id}/payment", response_model=AdoptionRequestResponse)
async def record_adoption_payment(
    request_id: UUID,
    payload: PaymentRequest,
    current_user: CurrentUserAuthDep,
    request_service: AdoptionRequestServiceDep,
) -> AdoptionRequestResponse:
    """Record a verified adoption fee payment against a request.

    Reporting the same transaction hash again for an already paid request
    returns the stored record unchanged.
    """
    request = await request_service.record_payment(
        request_id,
        current_user,
        tx_hash=payload.tx_hash,
        amount=payload.amount,
    )
    return APIResponse.success(
        message_code=MessageCode.PAYMENT_RECORDED,
        data=AdoptionRequestModel.model_validate(request),
    )


@router.post("/{request_id}/complete", response_model=AdoptionRequestResponse)
async def complete_adoption_request(
    request_id: UUID,
    current_user: CurrentUserAuthDep,
    request_service: AdoptionRequestServiceDep,
) -> AdoptionRequestResponse:
    request = await request_service.complete_request(request_id, current_user)
    return APIResponse.success(
        message_code=MessageCode.ADOPTION_COMPLETED,
        data=AdoptionRequestModel.model_validate(request),
    )
