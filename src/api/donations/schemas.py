from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from src.api.core.messages import APIResponse
from src.database.models.donations import DonationStatus

TX_HASH_PATTERN = r"^0x[0-9a-fA-F]{64}$"


class DonationModel(BaseModel):
    id: UUID
    donor_id: UUID
    case_id: UUID
    welfare_id: UUID
    amount: str
    amount_usd: float
    tx_hash: str
    status: DonationStatus
    block_number: int | None = None
    donor_address: str | None = None
    recipient_address: str | None = None
    message: str | None = None
    created_at: datetime

    class Config:
        from_attributes = True


class DonationCreateRequest(BaseModel):
    case_id: UUID = Field(..., alias="caseId")
    tx_hash: str = Field(..., alias="txHash", pattern=TX_HASH_PATTERN)
    amount: str = Field(..., pattern=r"^[1-9][0-9]*$", description="Amount in wei")
    amount_usd: Decimal = Field(..., alias="amountUsd", gt=0, decimal_places=2)
    message: str | None = Field(None, max_length=500)

    class Config:
        populate_by_name = True


class DonorStatsModel(BaseModel):
    total_donations: int
    total_amount_usd: float
    cases_supported: int

    class Config:
        from_attributes = True


DonationResponse = APIResponse[DonationModel]
DonationListResponse = APIResponse[list[DonationModel]]
DonorStatsResponse = APIResponse[DonorStatsModel]
