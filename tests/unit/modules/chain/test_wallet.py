"""Tests for the wallet client adapter."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from eth_account import Account
from web3.exceptions import TimeExhausted, Web3Exception

from src.modules.chain.exceptions import (
    InsufficientBalance,
    TransactionFailed,
    WalletUnavailable,
)
from src.modules.chain.wallet import WalletClient
from src.utils.settings.chain import ChainSettings

SENDER = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
RECIPIENT = "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC"
FEE = 30 * 10**6
TX_HASH_BYTES = bytes.fromhex("ab" * 32)


async def _value(value):
    return value


@pytest.fixture
def w3() -> MagicMock:
    """Web3 double backed by an injected wallet exposing one account."""
    w3 = MagicMock()
    w3.provider.make_request = AsyncMock(return_value={"result": [SENDER.lower()]})
    w3.eth.get_balance = AsyncMock(return_value=10**18)
    w3.eth.send_transaction = AsyncMock(return_value=TX_HASH_BYTES)
    w3.eth.send_raw_transaction = AsyncMock(return_value=TX_HASH_BYTES)
    w3.eth.wait_for_transaction_receipt = AsyncMock(
        return_value={"status": 1, "blockNumber": 7}
    )
    return w3


class TestRequestAccounts:
    @pytest.mark.asyncio
    async def test_returns_checksummed_accounts(self, w3):
        accounts = await WalletClient(w3).request_accounts()

        assert accounts == [SENDER]
        w3.provider.make_request.assert_awaited_once_with("eth_requestAccounts", [])

    @pytest.mark.asyncio
    async def test_no_provider(self):
        with pytest.raises(WalletUnavailable):
            await WalletClient(None).request_accounts()

    @pytest.mark.asyncio
    async def test_no_accounts_exposed(self, w3):
        w3.provider.make_request.return_value = {"result": []}

        with pytest.raises(WalletUnavailable):
            await WalletClient(w3).request_accounts()

    @pytest.mark.asyncio
    async def test_access_refused(self, w3):
        w3.provider.make_request.return_value = {
            "error": {"code": 4001, "message": "User rejected the request."}
        }

        with pytest.raises(WalletUnavailable, match="refused"):
            await WalletClient(w3).request_accounts()

    @pytest.mark.asyncio
    async def test_local_account_skips_provider(self, w3):
        account = Account.create()

        accounts = await WalletClient(w3, account=account).request_accounts()

        assert accounts == [account.address]
        w3.provider.make_request.assert_not_awaited()


class TestPay:
    @pytest.mark.asyncio
    async def test_successful_payment_returns_hash(self, w3):
        tx_hash = await WalletClient(w3).pay(RECIPIENT, FEE)

        assert tx_hash == "0x" + "ab" * 32
        w3.eth.send_transaction.assert_awaited_once_with(
            {"from": SENDER, "to": RECIPIENT, "value": FEE}
        )
        w3.eth.wait_for_transaction_receipt.assert_awaited_once_with(
            TX_HASH_BYTES, timeout=120
        )

    @pytest.mark.asyncio
    async def test_insufficient_balance_never_sends(self, w3):
        w3.eth.get_balance.return_value = FEE - 1

        with pytest.raises(InsufficientBalance) as exc_info:
            await WalletClient(w3).pay(RECIPIENT, FEE)

        assert exc_info.value.balance == FEE - 1
        assert exc_info.value.required == FEE
        w3.eth.send_transaction.assert_not_awaited()
        w3.eth.send_raw_transaction.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_exact_balance_is_enough(self, w3):
        w3.eth.get_balance.return_value = FEE

        await WalletClient(w3).pay(RECIPIENT, FEE)

        w3.eth.send_transaction.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_receipt_timeout(self, w3):
        w3.eth.wait_for_transaction_receipt.side_effect = TimeExhausted("timed out")

        with pytest.raises(TransactionFailed, match="receipt") as exc_info:
            await WalletClient(w3, receipt_timeout=5).pay(RECIPIENT, FEE)

        assert exc_info.value.tx_hash == "0x" + "ab" * 32

    @pytest.mark.asyncio
    async def test_reverted_receipt(self, w3):
        w3.eth.wait_for_transaction_receipt.return_value = {"status": 0}

        with pytest.raises(TransactionFailed, match="reverted"):
            await WalletClient(w3).pay(RECIPIENT, FEE)

    @pytest.mark.asyncio
    async def test_submission_error_not_retried(self, w3):
        w3.eth.send_transaction.side_effect = Web3Exception("nonce too low")

        with pytest.raises(TransactionFailed):
            await WalletClient(w3).pay(RECIPIENT, FEE)

        assert w3.eth.send_transaction.await_count == 1
        w3.eth.wait_for_transaction_receipt.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_local_account_signs_raw_transaction(self, w3):
        account = Account.create()
        w3.eth.get_transaction_count = AsyncMock(return_value=3)
        w3.eth.estimate_gas = AsyncMock(return_value=21000)
        w3.eth.gas_price = _value(10**9)
        w3.eth.chain_id = _value(300)

        tx_hash = await WalletClient(w3, account=account).pay(RECIPIENT, FEE)

        assert tx_hash == "0x" + "ab" * 32
        w3.eth.send_transaction.assert_not_awaited()
        raw = w3.eth.send_raw_transaction.await_args.args[0]
        assert isinstance(raw, (bytes, bytearray))
        w3.eth.get_balance.assert_awaited_once_with(account.address)


def test_from_settings_loads_signer(w3):
    account = Account.create()
    settings = ChainSettings(
        WALLET_PRIVATE_KEY="0x" + bytes(account.key).hex(),
        CHAIN_RECEIPT_TIMEOUT_SECONDS=45,
    )

    wallet = WalletClient.from_settings(w3, settings)

    assert wallet.account.address == account.address
    assert wallet.receipt_timeout == 45


def test_from_settings_without_key(w3):
    wallet = WalletClient.from_settings(w3, ChainSettings(WALLET_PRIVATE_KEY=None))

    assert wallet.account is None
