"""Construction of the shared async web3 handle."""

import aiohttp
from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import AsyncHTTPProvider, AsyncWeb3, Web3

from src.modules.chain.exceptions import InvalidAddress
from src.utils.settings.chain import ChainSettings


def build_web3(settings: ChainSettings) -> AsyncWeb3:
    provider = AsyncHTTPProvider(
        settings.CHAIN_RPC_URL,
        request_kwargs={
            "timeout": aiohttp.ClientTimeout(
                total=settings.CHAIN_REQUEST_TIMEOUT_SECONDS
            )
        },
    )
    return AsyncWeb3(provider)


def load_signer(settings: ChainSettings) -> LocalAccount | None:
    if settings.WALLET_PRIVATE_KEY is None:
        return None
    return Account.from_key(settings.WALLET_PRIVATE_KEY.get_secret_value())


def to_checksum(address: str) -> str:
    """Normalize an address to its checksummed form or raise InvalidAddress."""
    if not isinstance(address, str) or not Web3.is_address(address):
        raise InvalidAddress(str(address))
    return Web3.to_checksum_address(address)


def same_address(left: str | None, right: str | None) -> bool:
    if not left or not right:
        return False
    return left.lower() == right.lower()
