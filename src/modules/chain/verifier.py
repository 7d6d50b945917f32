"""Server-side verification of client-reported transfers."""

import re
from dataclasses import dataclass
from typing import Iterable

import aiohttp
from web3 import AsyncWeb3, Web3
from web3.exceptions import TransactionNotFound, Web3Exception

from src.modules.chain.exceptions import (
    ChainUnavailable,
    TransferVerificationError,
)
from src.modules.chain.provider import same_address
from src.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class VerifiedTransfer:
    tx_hash: str
    sender: str
    recipient: str
    value: int
    block_number: int
    confirmations: int
    data: bytes | str = b""


TX_HASH_PATTERN = re.compile(r"0x[0-9a-fA-F]{64}")


def is_transaction_hash(value: str) -> bool:
    return isinstance(value, str) and TX_HASH_PATTERN.fullmatch(value) is not None


class TransactionVerifier:
    """Checks that a transaction hash is a finalized transfer to a known recipient."""

    def __init__(self, w3: AsyncWeb3, min_confirmations: int = 1):
        self.w3 = w3
        self.min_confirmations = min_confirmations

    async def verify_transfer(
        self,
        tx_hash: str,
        recipients: Iterable[str],
        min_value: int,
    ) -> VerifiedTransfer:
        """Verify a native value transfer.

        Raises:
            TransferVerificationError: The transaction exists but does not match
                (wrong recipient, too little value, reverted, not yet confirmed)
                or does not exist at all.
            ChainUnavailable: The RPC endpoint failed.
        """
        if not is_transaction_hash(tx_hash):
            raise TransferVerificationError(str(tx_hash), "malformed transaction hash")

        try:
            tx = await self.w3.eth.get_transaction(tx_hash)
            receipt = await self.w3.eth.get_transaction_receipt(tx_hash)
            current_block = await self.w3.eth.get_block_number()
        except TransactionNotFound as e:
            raise TransferVerificationError(tx_hash, "transaction not found") from e
        except (Web3Exception, aiohttp.ClientError, TimeoutError, OSError) as e:
            logger.error("Transaction lookup failed", tx_hash=tx_hash, error=str(e))
            raise ChainUnavailable(f"Transaction lookup failed: {e}") from e

        if receipt.get("status") != 1:
            raise TransferVerificationError(tx_hash, "transaction reverted")

        recipient = tx.get("to")
        if not any(same_address(recipient, expected) for expected in recipients):
            raise TransferVerificationError(
                tx_hash, f"unexpected recipient {recipient}"
            )

        value = int(tx.get("value", 0))
        if value < min_value:
            raise TransferVerificationError(
                tx_hash, f"value {value} below required {min_value}"
            )

        block_number = receipt.get("blockNumber")
        if block_number is None:
            raise TransferVerificationError(tx_hash, "transaction not mined")
        confirmations = current_block - block_number + 1
        if confirmations < self.min_confirmations:
            raise TransferVerificationError(
                tx_hash,
                f"{confirmations} confirmations, {self.min_confirmations} required",
            )

        logger.info(
            "Transfer verified",
            tx_hash=tx_hash,
            value=value,
            block_number=block_number,
            confirmations=confirmations,
        )
        return VerifiedTransfer(
            tx_hash=tx_hash,
            sender=Web3.to_checksum_address(tx["from"]),
            recipient=Web3.to_checksum_address(recipient),
            value=value,
            block_number=block_number,
            confirmations=confirmations,
            data=tx.get("input") or b"",
        )
