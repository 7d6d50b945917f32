"""Shared checks for client-reported transactions."""

from typing import Iterable

from fastapi import status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.exceptions.base import WelfareChainException
from src.api.core.messages import MessageCode
from src.database.models import AdoptionRequest, Donation
from src.modules.chain.contract import decode_donation_call
from src.modules.chain.exceptions import ChainUnavailable, TransferVerificationError
from src.modules.chain.provider import same_address
from src.modules.chain.verifier import TransactionVerifier, VerifiedTransfer


def _verification_failed(tx_hash: str, reason: str) -> WelfareChainException:
    return WelfareChainException(
        MessageCode.PAYMENT_VERIFICATION_FAILED,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        {"tx_hash": tx_hash, "reason": reason},
    )


async def verify_reported_transfer(
    verifier: TransactionVerifier,
    tx_hash: str,
    recipients: Iterable[str],
    min_value: int,
) -> VerifiedTransfer:
    try:
        return await verifier.verify_transfer(tx_hash, recipients, min_value)
    except TransferVerificationError as e:
        raise _verification_failed(tx_hash, e.reason)
    except ChainUnavailable as e:
        raise WelfareChainException(
            MessageCode.EXTERNAL_SERVICE_ERROR,
            status.HTTP_502_BAD_GATEWAY,
            {"service": "chain_rpc", "description": str(e)},
        )


async def verify_donation_transfer(
    verifier: TransactionVerifier,
    tx_hash: str,
    wallet_address: str,
    contract_address: str,
    value: int,
) -> VerifiedTransfer:
    """Verify a donation of exactly ``value`` to one organization.

    The transfer either goes straight to ``wallet_address`` or calls the
    donation contract's ``donate`` naming that same wallet.
    """
    transfer = await verify_reported_transfer(
        verifier, tx_hash, [wallet_address, contract_address], value
    )
    if transfer.value != value:
        raise _verification_failed(
            tx_hash, f"value {transfer.value} does not match declared {value}"
        )

    if same_address(transfer.recipient, contract_address):
        try:
            organization, _ = decode_donation_call(transfer.data)
        except ValueError as e:
            raise _verification_failed(tx_hash, str(e))
        if not same_address(organization, wallet_address):
            raise _verification_failed(
                tx_hash, f"donation routed to organization {organization}"
            )
    return transfer


async def ensure_transaction_unused(db: AsyncSession, tx_hash: str) -> None:
    """Reject a hash already recorded against any donation or adoption request."""
    normalized = tx_hash.lower()
    donation_hit = await db.scalar(
        select(Donation.id).where(func.lower(Donation.tx_hash) == normalized)
    )
    request_hit = await db.scalar(
        select(AdoptionRequest.id).where(
            func.lower(AdoptionRequest.payment_tx_hash) == normalized
        )
    )
    if donation_hit or request_hit:
        raise WelfareChainException(
            MessageCode.TRANSACTION_ALREADY_USED,
            status.HTTP_409_CONFLICT,
            {"tx_hash": tx_hash},
        )
