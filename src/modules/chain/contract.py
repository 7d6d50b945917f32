"""Read client and calldata codec for the donation contract."""

from dataclasses import dataclass
from datetime import datetime, timezone

import aiohttp
from eth_abi.exceptions import DecodingError
from web3 import AsyncWeb3, Web3
from web3.exceptions import Web3Exception

from src.modules.chain.exceptions import ChainUnavailable
from src.modules.chain.provider import to_checksum
from src.utils.logger import get_logger

logger = get_logger(__name__)

DONATION_CONTRACT_ABI = [
    {
        "inputs": [{"internalType": "address", "name": "orgAddress", "type": "address"}],
        "name": "getOrganizationInfo",
        "outputs": [
            {"internalType": "string", "name": "name", "type": "string"},
            {"internalType": "string", "name": "description", "type": "string"},
            {"internalType": "address", "name": "walletAddress", "type": "address"},
            {"internalType": "bool", "name": "isActive", "type": "bool"},
            {"internalType": "uint256", "name": "orgTotalDonations", "type": "uint256"},
            {"internalType": "uint256", "name": "uniqueDonors", "type": "uint256"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "getTotalDonations",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "getTotalDonors",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "minDonationAmount",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "address", "name": "donor", "type": "address"}],
        "name": "getDonorHistory",
        "outputs": [
            {
                "components": [
                    {"internalType": "address", "name": "donor", "type": "address"},
                    {"internalType": "address", "name": "organization", "type": "address"},
                    {"internalType": "uint256", "name": "amount", "type": "uint256"},
                    {"internalType": "uint256", "name": "timestamp", "type": "uint256"},
                    {"internalType": "string", "name": "message", "type": "string"},
                ],
                "internalType": "struct DonationContract.Donation[]",
                "name": "",
                "type": "tuple[]",
            }
        ],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "address", "name": "organization", "type": "address"},
            {"internalType": "string", "name": "message", "type": "string"},
        ],
        "name": "donate",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function",
    },
]

# Offline codec; encoding and decoding calldata needs no provider
_codec = Web3().eth.contract(abi=DONATION_CONTRACT_ABI)


def encode_donation_call(organization: str, message: str = "") -> str:
    return _codec.encode_abi("donate", args=[to_checksum(organization), message])


def decode_donation_call(data: bytes | str) -> tuple[str, str]:
    """Return the organization and message carried by ``donate`` calldata.

    Raises:
        ValueError: The data is not a call to ``donate``.
    """
    try:
        function, params = _codec.decode_function_input(data)
    except (Web3Exception, DecodingError, ValueError) as e:
        raise ValueError(f"not a donate call: {e}") from e
    if function.fn_name != "donate":
        raise ValueError(f"not a donate call: {function.fn_name}")
    return Web3.to_checksum_address(params["organization"]), params["message"]


@dataclass
class OrganizationInfo:
    address: str
    name: str
    description: str
    wallet_address: str
    is_active: bool
    total_donations: int
    unique_donors: int


@dataclass
class PlatformStats:
    total_donations: int
    total_donors: int
    min_donation_amount: int


@dataclass
class DonorHistoryEntry:
    donor: str
    organization: str
    amount: int
    timestamp: datetime
    message: str


class ChainReadClient:
    """Typed views over the donation contract's read functions.

    Every read goes through ``_call`` so RPC failures surface as
    ``ChainUnavailable`` regardless of which transport error occurred.
    """

    def __init__(self, w3: AsyncWeb3, contract_address: str):
        self.w3 = w3
        self.contract_address = to_checksum(contract_address)
        self.contract = w3.eth.contract(
            address=self.contract_address, abi=DONATION_CONTRACT_ABI
        )

    async def _call(self, function_name: str, *args):
        try:
            return await getattr(self.contract.functions, function_name)(*args).call()
        except (Web3Exception, aiohttp.ClientError, TimeoutError, OSError) as e:
            logger.error(
                "Contract read failed",
                function=function_name,
                error=str(e),
            )
            raise ChainUnavailable(f"{function_name} call failed: {e}") from e

    async def get_organization_info(self, address: str) -> OrganizationInfo:
        checksum = to_checksum(address)
        name, description, wallet, is_active, total, unique_donors = await self._call(
            "getOrganizationInfo", checksum
        )
        return OrganizationInfo(
            address=checksum,
            name=name,
            description=description,
            wallet_address=wallet,
            is_active=is_active,
            total_donations=total,
            unique_donors=unique_donors,
        )

    async def get_platform_stats(self) -> PlatformStats:
        total_donations = await self._call("getTotalDonations")
        total_donors = await self._call("getTotalDonors")
        min_donation_amount = await self._call("minDonationAmount")
        return PlatformStats(
            total_donations=total_donations,
            total_donors=total_donors,
            min_donation_amount=min_donation_amount,
        )

    async def get_donor_history(self, address: str) -> list[DonorHistoryEntry]:
        rows = await self._call("getDonorHistory", to_checksum(address))
        return [
            DonorHistoryEntry(
                donor=donor,
                organization=organization,
                amount=amount,
                timestamp=datetime.fromtimestamp(timestamp, tz=timezone.utc),
                message=message,
            )
            for donor, organization, amount, timestamp, message in rows
        ]
