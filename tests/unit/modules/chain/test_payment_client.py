"""Tests for the client half of the adoption payment flow."""

from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest

from src.modules.chain.exceptions import (
    InsufficientBalance,
    ServerVerificationFailed,
)
from src.modules.chain.payment_client import PaymentClient, main
from src.modules.chain.wallet import WalletClient
from src.utils.settings.chain import ChainSettings

REQUEST_ID = "6f1c2f0e-1c1a-4a57-9a53-1f8f0f3c2b11"
TX_HASH = "0x" + "ab" * 32


@pytest.fixture
def settings() -> ChainSettings:
    return ChainSettings(PAYMENT_API_BASE_URL="http://api.test/")


@pytest.fixture
def wallet() -> MagicMock:
    wallet = MagicMock(spec=WalletClient)
    wallet.pay = AsyncMock(return_value=TX_HASH)
    return wallet


@pytest.fixture
def http_session():
    """Patch aiohttp.ClientSession and expose the session and response doubles."""
    response = MagicMock()
    response.status = 200
    response.json = AsyncMock(return_value={"data": {"status": "paid"}})

    session = MagicMock()
    session.post.return_value.__aenter__.return_value = response

    with patch("src.modules.chain.payment_client.aiohttp.ClientSession") as factory:
        factory.return_value.__aenter__.return_value = session
        yield session, response


@pytest.mark.asyncio
async def test_pay_adoption_fee_reports_hash(wallet, settings, http_session):
    session, _ = http_session
    client = PaymentClient(wallet, token="jwt-token", settings=settings)

    result = await client.pay_adoption_fee(REQUEST_ID)

    assert result == {"status": "paid"}
    wallet.pay.assert_awaited_once_with(
        settings.ADOPTION_PAYMENT_RECIPIENT, settings.adoption_fee_base_units
    )
    args, kwargs = session.post.call_args
    assert args[0] == f"http://api.test/api/adoption-requests/{REQUEST_ID}/payment"
    assert kwargs["json"] == {"txHash": TX_HASH, "amount": 30}
    assert kwargs["headers"] == {"Authorization": "Bearer jwt-token"}


@pytest.mark.asyncio
async def test_wallet_failure_skips_report(wallet, settings, http_session):
    session, _ = http_session
    wallet.pay.side_effect = InsufficientBalance("0xabc", 1, 2)
    client = PaymentClient(wallet, token="jwt-token", settings=settings)

    with pytest.raises(InsufficientBalance):
        await client.pay_adoption_fee(REQUEST_ID)

    session.post.assert_not_called()


@pytest.mark.asyncio
async def test_server_rejection(wallet, settings, http_session):
    _, response = http_session
    response.status = 422
    response.json.return_value = {
        "message_code": "PAYMENT_VERIFICATION_FAILED",
        "details": {"reason": "transaction reverted"},
    }
    client = PaymentClient(wallet, token="jwt-token", settings=settings)

    with pytest.raises(ServerVerificationFailed) as exc_info:
        await client.report_payment(REQUEST_ID, TX_HASH, 30)

    assert exc_info.value.status_code == 422
    assert exc_info.value.tx_hash == TX_HASH
    assert exc_info.value.body["details"]["reason"] == "transaction reverted"


@pytest.mark.asyncio
async def test_non_json_error_body(wallet, settings, http_session):
    _, response = http_session
    response.status = 502
    response.json.side_effect = ValueError("not json")
    client = PaymentClient(wallet, token="jwt-token", settings=settings)

    with pytest.raises(ServerVerificationFailed) as exc_info:
        await client.report_payment(REQUEST_ID, TX_HASH, 30)

    assert exc_info.value.status_code == 502
    assert exc_info.value.body == {}


@pytest.mark.asyncio
async def test_connection_error(wallet, settings, http_session):
    session, _ = http_session
    session.post.side_effect = aiohttp.ClientConnectionError("refused")
    client = PaymentClient(wallet, token="jwt-token", settings=settings)

    with pytest.raises(ServerVerificationFailed) as exc_info:
        await client.report_payment(REQUEST_ID, TX_HASH, 30)

    assert exc_info.value.status_code == 0


@pytest.fixture
def cli_web3():
    """Patch the web3 factory and logging setup used by the console script."""
    w3 = MagicMock()
    w3.provider.disconnect = AsyncMock()
    with patch(
        "src.modules.chain.payment_client.build_web3", return_value=w3
    ), patch("src.modules.chain.payment_client.setup_logging"):
        yield w3


def test_cli_pays_with_configured_wallet(cli_web3):
    with patch.object(
        PaymentClient, "pay_adoption_fee", AsyncMock(return_value={"status": "paid"})
    ) as pay:
        exit_code = main([REQUEST_ID, "--token", "jwt-token"])

    assert exit_code == 0
    pay.assert_awaited_once_with(REQUEST_ID)
    cli_web3.provider.disconnect.assert_awaited_once()


def test_cli_reports_payment_failure(cli_web3):
    failure = ServerVerificationFailed(TX_HASH, 422)
    with patch.object(
        PaymentClient, "pay_adoption_fee", AsyncMock(side_effect=failure)
    ):
        exit_code = main([REQUEST_ID, "--token", "jwt-token"])

    assert exit_code == 1
    cli_web3.provider.disconnect.assert_awaited_once()


def test_cli_token_from_environment(cli_web3, monkeypatch):
    monkeypatch.setenv("WELFARECHAIN_TOKEN", "env-token")
    with patch.object(
        PaymentClient, "pay_adoption_fee", AsyncMock(return_value={})
    ), patch(
        "src.modules.chain.payment_client.PaymentClient.__init__", return_value=None
    ) as init:
        assert main([REQUEST_ID]) == 0

    assert init.call_args.args[1] == "env-token"


def test_cli_requires_token(cli_web3, monkeypatch):
    monkeypatch.delenv("WELFARECHAIN_TOKEN", raising=False)

    with pytest.raises(SystemExit) as exc_info:
        main([REQUEST_ID])

    assert exc_info.value.code == 2
