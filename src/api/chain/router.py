"""Read-only views of the donation contract."""

from fastapi import APIRouter

from src.api.chain.handler import (
    donor_history_handler,
    organization_info_handler,
    platform_stats_handler,
)
from src.api.chain.schemas import (
    DonorHistoryResponse,
    OrganizationInfoResponse,
    PlatformStatsResponse,
)
from src.api.core.dependencies import ChainReadClientDep
from src.api.core.messages import APIResponse

router = APIRouter(prefix="/chain", tags=["chain"])


@router.get("/organizations/{address}", response_model=OrganizationInfoResponse)
async def get_organization_info(
    address: str, reader: ChainReadClientDep
) -> OrganizationInfoResponse:
    """On-chain metadata and donation totals for an organization wallet."""
    return APIResponse.success(data=await organization_info_handler(reader, address))


@router.get("/stats", response_model=PlatformStatsResponse)
async def get_platform_stats(reader: ChainReadClientDep) -> PlatformStatsResponse:
    return APIResponse.success(data=await platform_stats_handler(reader))


@router.get("/donors/{address}/history", response_model=DonorHistoryResponse)
async def get_donor_history(
    address: str, reader: ChainReadClientDep
) -> DonorHistoryResponse:
    return APIResponse.success(data=await donor_history_handler(reader, address))
