"""Client half of the adoption payment: pay on chain, then report the hash."""

import argparse
import asyncio
import os
from typing import Any
from uuid import UUID

import aiohttp

from src.modules.chain.exceptions import PaymentError, ServerVerificationFailed
from src.modules.chain.provider import build_web3
from src.modules.chain.wallet import WalletClient
from src.utils.logger import get_logger, setup_logging
from src.utils.settings.chain import ChainSettings

logger = get_logger(__name__)


class PaymentClient:
    """Runs the wallet transfer and reports it to the reconciliation endpoint."""

    def __init__(
        self,
        wallet: WalletClient,
        token: str,
        settings: ChainSettings | None = None,
        base_url: str | None = None,
    ):
        self.wallet = wallet
        self.token = token
        self.settings = settings or ChainSettings()
        self.base_url = (base_url or self.settings.PAYMENT_API_BASE_URL).rstrip("/")
        self.timeout = self.settings.CHAIN_REQUEST_TIMEOUT_SECONDS

    async def pay_adoption_fee(self, request_id: UUID | str) -> dict[str, Any]:
        tx_hash = await self.wallet.pay(
            self.settings.ADOPTION_PAYMENT_RECIPIENT,
            self.settings.adoption_fee_base_units,
        )
        return await self.report_payment(
            request_id, tx_hash, self.settings.ADOPTION_FEE_USDT
        )

    async def report_payment(
        self, request_id: UUID | str, tx_hash: str, amount: float
    ) -> dict[str, Any]:
        url = f"{self.base_url}/api/adoption-requests/{request_id}/payment"
        async with aiohttp.ClientSession() as session:
            try:
                async with session.post(
                    url,
                    json={"txHash": tx_hash, "amount": amount},
                    headers={"Authorization": f"Bearer {self.token}"},
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    try:
                        body = await response.json(content_type=None)
                    except ValueError:
                        body = None
                    if response.status != 200:
                        logger.error(
                            "Payment verification rejected by server",
                            tx_hash=tx_hash,
                            status_code=response.status,
                            body=body,
                        )
                        raise ServerVerificationFailed(tx_hash, response.status, body)
                    return (body or {}).get("data")
            except aiohttp.ClientError as e:
                logger.error(f"Payment report request failed: {e}")
                raise ServerVerificationFailed(tx_hash, 0) from e


async def _pay_with_configured_wallet(request_id: str, token: str) -> dict[str, Any]:
    settings = ChainSettings()
    w3 = build_web3(settings)
    try:
        wallet = WalletClient.from_settings(w3, settings)
        return await PaymentClient(wallet, token, settings).pay_adoption_fee(
            request_id
        )
    finally:
        await w3.provider.disconnect()


def main(argv: list[str] | None = None) -> int:
    """Pay the adoption fee for an approved request from the configured wallet."""
    parser = argparse.ArgumentParser(
        prog="welfarechain-pay",
        description="Send the adoption fee on chain and report it to the API.",
    )
    parser.add_argument("request_id", type=UUID)
    parser.add_argument(
        "--token",
        default=os.environ.get("WELFARECHAIN_TOKEN"),
        help="Bearer token of the requesting donor (default: $WELFARECHAIN_TOKEN)",
    )
    args = parser.parse_args(argv)
    if not args.token:
        parser.error("a bearer token is required (--token or WELFARECHAIN_TOKEN)")

    setup_logging()
    try:
        result = asyncio.run(
            _pay_with_configured_wallet(str(args.request_id), args.token)
        )
    except PaymentError as e:
        logger.error("Adoption fee payment failed", error=str(e))
        return 1

    logger.info(
        "Adoption fee paid",
        request_id=str(args.request_id),
        status=(result or {}).get("status"),
    )
    return 0
