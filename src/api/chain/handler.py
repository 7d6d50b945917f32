from typing import Awaitable, TypeVar

from fastapi import status

from src.api.chain.schemas import (
    DonorHistoryEntryModel,
    OrganizationInfoModel,
    PlatformStatsModel,
)
from src.api.core.exceptions.base import WelfareChainException
from src.api.core.messages import MessageCode
from src.modules.chain.contract import ChainReadClient
from src.modules.chain.exceptions import ChainUnavailable, InvalidAddress

T = TypeVar("T")


async def _read(call: Awaitable[T]) -> T:
    try:
        return await call
    except InvalidAddress as e:
        raise WelfareChainException(
            MessageCode.INVALID_ADDRESS,
            status.HTTP_400_BAD_REQUEST,
            {"address": e.address},
        )
    except ChainUnavailable as e:
        raise WelfareChainException(
            MessageCode.EXTERNAL_SERVICE_ERROR,
            status.HTTP_502_BAD_GATEWAY,
            {"service": "chain_rpc", "description": str(e)},
        )


async def organization_info_handler(
    reader: ChainReadClient, address: str
) -> OrganizationInfoModel:
    info = await _read(reader.get_organization_info(address))
    return OrganizationInfoModel(
        address=info.address,
        name=info.name,
        description=info.description,
        wallet_address=info.wallet_address,
        is_active=info.is_active,
        total_donations=str(info.total_donations),
        unique_donors=info.unique_donors,
    )


async def platform_stats_handler(reader: ChainReadClient) -> PlatformStatsModel:
    stats = await _read(reader.get_platform_stats())
    return PlatformStatsModel(
        total_donations=str(stats.total_donations),
        total_donors=stats.total_donors,
        min_donation_amount=str(stats.min_donation_amount),
    )


async def donor_history_handler(
    reader: ChainReadClient, address: str
) -> list[DonorHistoryEntryModel]:
    entries = await _read(reader.get_donor_history(address))
    return [
        DonorHistoryEntryModel(
            donor=entry.donor,
            organization=entry.organization,
            amount=str(entry.amount),
            timestamp=entry.timestamp,
            message=entry.message,
        )
        for entry in entries
    ]
