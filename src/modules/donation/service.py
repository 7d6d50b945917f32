from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from fastapi import status
from sqlalchemy import func, select

from src.api.core.exceptions.base import WelfareChainException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.core.context import AuthenticatedUserContext
from src.core.verification import (
    ensure_transaction_unused,
    verify_donation_transfer,
)
from src.database.models import (
    Case,
    CaseStatus,
    Donation,
    DonationStatus,
    UserRole,
    WelfareOrganization,
)
from src.modules.chain.verifier import TransactionVerifier
from src.modules.message.service import MessageService
from src.utils.settings.chain import ChainSettings


@dataclass
class DonorStats:
    total_donations: int
    total_amount_usd: Decimal
    cases_supported: int


class DonationService(BaseService):
    """Case donations backed by verified on-chain transfers."""

    def __init__(self, db, verifier: TransactionVerifier, settings: ChainSettings):
        super().__init__(db)
        self.verifier = verifier
        self.settings = settings
        self.messages = MessageService(db)

    async def record_donation(
        self,
        donor_id: UUID,
        case_id: UUID,
        tx_hash: str,
        amount: str,
        amount_usd: Decimal,
        message: str | None = None,
    ) -> Donation:
        case = await self.get_or_404(Case, case_id, MessageCode.CASE_NOT_FOUND)
        if case.status != CaseStatus.ACTIVE:
            raise WelfareChainException(
                MessageCode.CASE_NOT_ACTIVE,
                status.HTTP_409_CONFLICT,
                {"status": case.status},
            )

        welfare = await self.get_or_404(
            WelfareOrganization, case.welfare_id, MessageCode.WELFARE_NOT_FOUND
        )
        if not welfare.wallet_address:
            raise WelfareChainException(
                MessageCode.WELFARE_WALLET_MISSING,
                status.HTTP_409_CONFLICT,
                {"welfare_id": str(welfare.id)},
            )

        await ensure_transaction_unused(self.db, tx_hash)

        declared_value = int(amount)
        credited_usd = min(
            amount_usd, self.settings.donation_usd_ceiling(declared_value)
        )
        if credited_usd <= 0:
            raise WelfareChainException(
                MessageCode.DONATION_VALUE_TOO_LOW,
                status.HTTP_422_UNPROCESSABLE_ENTITY,
                {"amount": amount, "amount_usd": str(amount_usd)},
            )
        if credited_usd < amount_usd:
            self.logger.warning(
                f"Capped donation credit for {tx_hash} from {amount_usd} "
                f"to {credited_usd} USD"
            )

        donation = Donation(
            donor_id=donor_id,
            case_id=case.id,
            welfare_id=welfare.id,
            amount=amount,
            amount_usd=credited_usd,
            tx_hash=tx_hash,
            status=DonationStatus.CONFIRMED,
            recipient_address=welfare.wallet_address,
            message=message,
        )

        if self.settings.CHAIN_VERIFY_PAYMENTS:
            transfer = await verify_donation_transfer(
                self.verifier,
                tx_hash,
                welfare.wallet_address,
                self.settings.DONATION_CONTRACT_ADDRESS,
                declared_value,
            )
            donation.block_number = transfer.block_number
            donation.donor_address = transfer.sender

        self.db.add(donation)
        case.amount_raised = (case.amount_raised or Decimal("0")) + credited_usd

        self.messages.notify(
            recipient_id=welfare.user_id,
            sender_id=donor_id,
            title="New donation received",
            content=(
                f"A donation of ${credited_usd} was received for case "
                f'"{case.title}" (transaction {tx_hash}).'
            ),
        )

        await self.db.commit()
        await self.db.refresh(donation)

        self.logger.info(
            f"Recorded donation {donation.id} of {credited_usd} USD to case {case.id}"
        )
        return donation

    async def donor_history(self, donor_id: UUID) -> list[Donation]:
        stmt = (
            select(Donation)
            .where(Donation.donor_id == donor_id)
            .order_by(Donation.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def donor_stats(self, donor_id: UUID) -> DonorStats:
        stmt = select(
            func.count(Donation.id),
            func.coalesce(func.sum(Donation.amount_usd), 0),
            func.count(func.distinct(Donation.case_id)),
        ).where(
            Donation.donor_id == donor_id,
            Donation.status == DonationStatus.CONFIRMED,
        )
        count, total, cases = (await self.db.execute(stmt)).one()
        return DonorStats(
            total_donations=count,
            total_amount_usd=Decimal(str(total)),
            cases_supported=cases,
        )

    async def case_donations(
        self, case_id: UUID, current_user: AuthenticatedUserContext
    ) -> list[Donation]:
        """Confirmed donations for a case, visible to its doctor and owning welfare."""
        case = await self.get_or_404(Case, case_id, MessageCode.CASE_NOT_FOUND)
        welfare = await self.db.get(WelfareOrganization, case.welfare_id)

        is_doctor = case.doctor_id == current_user.user_id
        is_owner = welfare is not None and welfare.user_id == current_user.user_id
        if not (is_doctor or is_owner or current_user.has_role(UserRole.ADMIN)):
            raise WelfareChainException(
                MessageCode.FORBIDDEN,
                status.HTTP_403_FORBIDDEN,
                {"description": "Not assigned to this case"},
            )

        stmt = (
            select(Donation)
            .where(
                Donation.case_id == case_id,
                Donation.status == DonationStatus.CONFIRMED,
            )
            .order_by(Donation.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
