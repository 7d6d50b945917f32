from datetime import datetime

from pydantic import BaseModel

from src.api.core.messages import APIResponse


class OrganizationInfoModel(BaseModel):
    address: str
    name: str
    description: str
    wallet_address: str
    is_active: bool
    # Wei amounts are strings; they overflow JSON number precision
    total_donations: str
    unique_donors: int


class PlatformStatsModel(BaseModel):
    total_donations: str
    total_donors: int
    min_donation_amount: str


class DonorHistoryEntryModel(BaseModel):
    donor: str
    organization: str
    amount: str
    timestamp: datetime
    message: str


OrganizationInfoResponse = APIResponse[OrganizationInfoModel]
PlatformStatsResponse = APIResponse[PlatformStatsModel]
DonorHistoryResponse = APIResponse[list[DonorHistoryEntryModel]]
