from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from src.api.core.messages import APIResponse
from src.database.models.adoptions import AdoptionRequestStatus, ContactMethod

TX_HASH_PATTERN = r"^0x[0-9a-fA-F]{64}$"


class AdoptionRequestModel(BaseModel):
    id: UUID
    adoption_id: UUID
    donor_id: UUID
    donor_name: str
    contact_number: str
    email: str
    reason: str
    preferred_contact: ContactMethod
    status: AdoptionRequestStatus
    payment_tx_hash: str | None = None
    payment_amount: float | None = None
    payer_address: str | None = None
    paid_at: datetime | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class AdoptionRequestCreateRequest(BaseModel):
    adoption_id: UUID = Field(..., alias="adoptionId")
    donor_name: str = Field(..., alias="donorName", min_length=1, max_length=100)
    contact_number: str = Field(
        ..., alias="contactNumber", min_length=3, max_length=32
    )
    email: EmailStr
    reason: str = Field(..., min_length=1, max_length=2000)
    preferred_contact: ContactMethod = Field(
        ContactMethod.EMAIL, alias="preferredContact"
    )

    class Config:
        populate_by_name = True


class AdoptionRequestReviewRequest(BaseModel):
    status: AdoptionRequestStatus


class PaymentRequest(BaseModel):
    """Client report of a finalized adoption fee transfer."""

    tx_hash: str = Field(..., alias="txHash", pattern=TX_HASH_PATTERN)
    amount: Decimal = Field(..., ge=0)

    class Config:
        populate_by_name = True


AdoptionRequestResponse = APIResponse[AdoptionRequestModel]
AdoptionRequestListResponse = APIResponse[list[AdoptionRequestModel]]
