"""Blockchain settings configuration."""

from decimal import ROUND_DOWN, Decimal

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChainSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    CHAIN_RPC_URL: str = "https://sepolia.era.zksync.dev"
    DONATION_CONTRACT_ADDRESS: str = "0x199c27B10a195ee79e02d50846e59A4aFB82CAD1"

    # Adoption fee: 30 USDT worth, sent as a native transfer in base units
    ADOPTION_PAYMENT_RECIPIENT: str = "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC"
    ADOPTION_FEE_USDT: int = 30
    USDT_DECIMALS: int = 6

    # Donations: USD credit is capped at this price per whole native token
    NATIVE_TOKEN_DECIMALS: int = 18
    DONATION_MAX_USD_PER_TOKEN: Decimal = Decimal("10000")

    CHAIN_VERIFY_PAYMENTS: bool = True
    CHAIN_MIN_CONFIRMATIONS: int = 1
    CHAIN_RECEIPT_TIMEOUT_SECONDS: int = 120
    CHAIN_REQUEST_TIMEOUT_SECONDS: int = 30

    # Local signer for the wallet client; unset means the provider signs
    WALLET_PRIVATE_KEY: SecretStr | None = None
    PAYMENT_API_BASE_URL: str = "http://localhost:8010"

    # Same hash replayed on a paid request returns the record unchanged
    PAYMENT_REPLAY_GUARD: bool = True

    @property
    def adoption_fee_base_units(self) -> int:
        return self.ADOPTION_FEE_USDT * 10**self.USDT_DECIMALS

    def donation_usd_ceiling(self, amount_base_units: int) -> Decimal:
        """Largest USD credit a donation of ``amount_base_units`` can claim."""
        tokens = Decimal(amount_base_units).scaleb(-self.NATIVE_TOKEN_DECIMALS)
        return (tokens * self.DONATION_MAX_USD_PER_TOKEN).quantize(
            Decimal("0.01"), rounding=ROUND_DOWN
        )
