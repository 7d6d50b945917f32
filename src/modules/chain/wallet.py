"""Wallet side of the payment flow: account access, balance check, transfer."""

from eth_account.signers.local import LocalAccount
from web3 import AsyncWeb3, Web3
from web3.exceptions import TimeExhausted, Web3Exception

from src.modules.chain.exceptions import (
    InsufficientBalance,
    TransactionFailed,
    WalletUnavailable,
)
from src.modules.chain.provider import load_signer, to_checksum
from src.utils.logger import get_logger
from src.utils.settings.chain import ChainSettings

logger = get_logger(__name__)


class WalletClient:
    """Adapter over a wallet provider.

    With a local ``account`` transactions are signed here and submitted raw;
    otherwise the provider is asked for account access and signs them itself.
    """

    def __init__(
        self,
        w3: AsyncWeb3 | None,
        account: LocalAccount | None = None,
        receipt_timeout: float = 120,
    ):
        self.w3 = w3
        self.account = account
        self.receipt_timeout = receipt_timeout

    @classmethod
    def from_settings(
        cls, w3: AsyncWeb3 | None, settings: ChainSettings
    ) -> "WalletClient":
        return cls(
            w3,
            account=load_signer(settings),
            receipt_timeout=settings.CHAIN_RECEIPT_TIMEOUT_SECONDS,
        )

    def _require_provider(self) -> AsyncWeb3:
        if self.w3 is None:
            raise WalletUnavailable("No wallet provider configured")
        return self.w3

    async def request_accounts(self) -> list[str]:
        w3 = self._require_provider()
        if self.account is not None:
            return [self.account.address]

        try:
            response = await w3.provider.make_request("eth_requestAccounts", [])
        except Web3Exception as e:
            raise WalletUnavailable(f"Wallet refused account access: {e}") from e

        if response.get("error"):
            raise WalletUnavailable(
                f"Wallet refused account access: {response['error']}"
            )
        accounts = response.get("result") or []
        if not accounts:
            raise WalletUnavailable("Wallet exposes no account")
        return [Web3.to_checksum_address(account) for account in accounts]

    async def get_balance(self, address: str) -> int:
        w3 = self._require_provider()
        return await w3.eth.get_balance(to_checksum(address))

    async def pay(self, recipient: str, amount_base_units: int) -> str:
        """Send ``amount_base_units`` to ``recipient`` and wait for the receipt.

        Returns the 0x-prefixed transaction hash. Nothing is retried.
        """
        w3 = self._require_provider()
        sender = (await self.request_accounts())[0]

        balance = await self.get_balance(sender)
        if balance < amount_base_units:
            logger.warning(
                "Insufficient balance for payment",
                sender=sender,
                balance=balance,
                required=amount_base_units,
            )
            raise InsufficientBalance(sender, balance, amount_base_units)

        tx = {
            "from": sender,
            "to": to_checksum(recipient),
            "value": amount_base_units,
        }
        try:
            if self.account is not None:
                tx["nonce"] = await w3.eth.get_transaction_count(sender)
                tx["gas"] = await w3.eth.estimate_gas(tx)
                tx["gasPrice"] = await w3.eth.gas_price
                tx["chainId"] = await w3.eth.chain_id
                signed = self.account.sign_transaction(tx)
                tx_hash = await w3.eth.send_raw_transaction(signed.raw_transaction)
            else:
                tx_hash = await w3.eth.send_transaction(tx)
        except Web3Exception as e:
            raise TransactionFailed(f"Transaction submission failed: {e}") from e

        tx_hash_hex = Web3.to_hex(tx_hash)
        logger.info("Payment submitted", tx_hash=tx_hash_hex, sender=sender)

        try:
            receipt = await w3.eth.wait_for_transaction_receipt(
                tx_hash, timeout=self.receipt_timeout
            )
        except TimeExhausted as e:
            raise TransactionFailed(
                "Failed to get transaction receipt", tx_hash=tx_hash_hex
            ) from e

        if not receipt or receipt.get("status") != 1:
            raise TransactionFailed("Transaction reverted", tx_hash=tx_hash_hex)

        return tx_hash_hex
