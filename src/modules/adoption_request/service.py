"""Adoption requests: lifecycle, notifications and payment reconciliation."""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID

from fastapi import status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from src.api.core.constants import (
    ADOPTION_APPROVED_MESSAGE,
    ADOPTION_COMPLETED_MESSAGE,
    ADOPTION_REJECTED_MESSAGE,
    PAYMENT_RECEIVED_MESSAGE,
)
from src.api.core.exceptions.base import WelfareChainException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.core.context import AuthenticatedUserContext
from src.core.verification import (
    ensure_transaction_unused,
    verify_reported_transfer,
)
from src.database.models import (
    Adoption,
    AdoptionRequest,
    AdoptionRequestStatus,
    AdoptionStatus,
    ContactMethod,
)
from src.modules.chain.verifier import TransactionVerifier
from src.modules.message.service import MessageService
from src.utils.settings.chain import ChainSettings

# Statuses the poster may set through a review
REVIEW_STATUSES = (AdoptionRequestStatus.APPROVED, AdoptionRequestStatus.REJECTED)
SETTLED_STATUSES = (AdoptionRequestStatus.PAID, AdoptionRequestStatus.COMPLETED)
# A listing holds at most one request in any of these
RESERVING_STATUSES = (AdoptionRequestStatus.APPROVED,) + SETTLED_STATUSES
OPEN_STATUSES = (AdoptionRequestStatus.PENDING, AdoptionRequestStatus.APPROVED)


class AdoptionRequestService(BaseService):
    def __init__(self, db, verifier: TransactionVerifier, settings: ChainSettings):
        super().__init__(db)
        self.verifier = verifier
        self.settings = settings
        self.messages = MessageService(db)

    async def _get_request(self, request_id: UUID) -> AdoptionRequest:
        return await self.get_or_404(
            AdoptionRequest, request_id, MessageCode.ADOPTION_REQUEST_NOT_FOUND
        )

    async def _get_poster_adoption(
        self, adoption_id: UUID, current_user: AuthenticatedUserContext
    ) -> Adoption:
        adoption = await self.get_or_404(
            Adoption, adoption_id, MessageCode.ADOPTION_NOT_FOUND
        )
        if adoption.posted_by != current_user.user_id:
            raise WelfareChainException(
                MessageCode.FORBIDDEN,
                status.HTTP_403_FORBIDDEN,
                {"description": "Only the poster can manage requests for this listing"},
            )
        return adoption

    async def create_request(
        self,
        current_user: AuthenticatedUserContext,
        adoption_id: UUID,
        donor_name: str,
        contact_number: str,
        email: str,
        reason: str,
        preferred_contact: ContactMethod = ContactMethod.EMAIL,
    ) -> AdoptionRequest:
        adoption = await self.get_or_404(
            Adoption, adoption_id, MessageCode.ADOPTION_NOT_FOUND
        )
        if adoption.status == AdoptionStatus.ADOPTED:
            raise WelfareChainException(
                MessageCode.ADOPTION_NOT_AVAILABLE,
                status.HTTP_409_CONFLICT,
                {"status": adoption.status},
            )
        if adoption.posted_by == current_user.user_id:
            raise WelfareChainException(
                MessageCode.FORBIDDEN,
                status.HTTP_403_FORBIDDEN,
                {"description": "Cannot request your own listing"},
            )

        request = AdoptionRequest(
            adoption_id=adoption.id,
            donor_id=current_user.user_id,
            donor_name=donor_name,
            contact_number=contact_number,
            email=email,
            reason=reason,
            preferred_contact=preferred_contact,
        )
        self.db.add(request)
        self.messages.notify(
            recipient_id=adoption.posted_by,
            sender_id=current_user.user_id,
            title="New adoption request",
            content=f"{donor_name} has requested to adopt {adoption.name}.",
        )
        await self.db.commit()
        await self.db.refresh(request)

        self.logger.info(
            f"Adoption request {request.id} created for adoption {adoption.id}"
        )
        return request

    async def _siblings(
        self, request: AdoptionRequest, statuses: tuple
    ) -> list[AdoptionRequest]:
        """Other requests on the same listing currently in one of ``statuses``."""
        stmt = select(AdoptionRequest).where(
            AdoptionRequest.adoption_id == request.adoption_id,
            AdoptionRequest.id != request.id,
            AdoptionRequest.status.in_([s.value for s in statuses]),
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def list_for_donor(self, donor_id: UUID) -> list[AdoptionRequest]:
        stmt = (
            select(AdoptionRequest)
            .where(AdoptionRequest.donor_id == donor_id)
            .order_by(AdoptionRequest.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def list_for_poster(self, user_id: UUID) -> list[AdoptionRequest]:
        """Requests made on any listing the user posted."""
        stmt = (
            select(AdoptionRequest)
            .join(Adoption, AdoptionRequest.adoption_id == Adoption.id)
            .where(Adoption.posted_by == user_id)
            .order_by(AdoptionRequest.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def list_for_adoption(
        self, adoption_id: UUID, current_user: AuthenticatedUserContext
    ) -> list[AdoptionRequest]:
        await self._get_poster_adoption(adoption_id, current_user)
        stmt = (
            select(AdoptionRequest)
            .where(AdoptionRequest.adoption_id == adoption_id)
            .order_by(AdoptionRequest.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def review_request(
        self,
        request_id: UUID,
        current_user: AuthenticatedUserContext,
        new_status: AdoptionRequestStatus,
    ) -> AdoptionRequest:
        """Approve or reject a pending request and tell the donor."""
        request = await self._get_request(request_id)
        adoption = await self._get_poster_adoption(request.adoption_id, current_user)

        if (
            new_status not in REVIEW_STATUSES
            or request.status != AdoptionRequestStatus.PENDING
        ):
            raise WelfareChainException(
                MessageCode.INVALID_STATUS_TRANSITION,
                status.HTTP_409_CONFLICT,
                {"from": request.status, "to": new_status},
            )

        if new_status == AdoptionRequestStatus.APPROVED:
            reserved = await self._siblings(request, RESERVING_STATUSES)
            if reserved:
                raise WelfareChainException(
                    MessageCode.ADOPTION_NOT_AVAILABLE,
                    status.HTTP_409_CONFLICT,
                    {
                        "adoption_id": str(adoption.id),
                        "reserved_by": str(reserved[0].id),
                    },
                )

        request.status = new_status
        if new_status == AdoptionRequestStatus.APPROVED:
            adoption.status = AdoptionStatus.PENDING
            self.messages.notify(
                recipient_id=request.donor_id,
                sender_id=current_user.user_id,
                title="Adoption Request Approved - Payment Required",
                content=ADOPTION_APPROVED_MESSAGE.format(
                    name=adoption.name,
                    fee=self.settings.ADOPTION_FEE_USDT,
                    recipient=self.settings.ADOPTION_PAYMENT_RECIPIENT,
                ),
            )
        else:
            self.messages.notify(
                recipient_id=request.donor_id,
                sender_id=current_user.user_id,
                title="Adoption Request Rejected",
                content=ADOPTION_REJECTED_MESSAGE.format(name=adoption.name),
            )

        await self.db.commit()
        await self.db.refresh(request)

        self.logger.info(f"Adoption request {request_id} {new_status.value}")
        return request

    async def record_payment(
        self,
        request_id: UUID,
        current_user: AuthenticatedUserContext,
        tx_hash: str,
        amount: Decimal,
    ) -> AdoptionRequest:
        """Reconcile a client-reported payment transaction with a request.

        Nothing is written unless every check passes, including the on-chain
        verification of the transfer.
        """
        request = await self._get_request(request_id)

        if request.donor_id != current_user.user_id:
            raise WelfareChainException(
                MessageCode.FORBIDDEN,
                status.HTTP_403_FORBIDDEN,
                {"description": "Not authorized to pay for this request"},
            )

        if request.status in SETTLED_STATUSES:
            if (
                self.settings.PAYMENT_REPLAY_GUARD
                and request.payment_tx_hash
                and request.payment_tx_hash.lower() == tx_hash.lower()
            ):
                self.logger.info(
                    f"Payment replay for request {request_id} ignored",
                    tx_hash=tx_hash,
                )
                return request
            raise WelfareChainException(
                MessageCode.ADOPTION_REQUEST_ALREADY_PAID,
                status.HTTP_409_CONFLICT,
                {"tx_hash": request.payment_tx_hash},
            )

        if amount < self.settings.ADOPTION_FEE_USDT:
            raise WelfareChainException(
                MessageCode.PAYMENT_AMOUNT_TOO_LOW,
                status.HTTP_400_BAD_REQUEST,
                {
                    "amount": str(amount),
                    "required": self.settings.ADOPTION_FEE_USDT,
                },
            )

        if request.status != AdoptionRequestStatus.APPROVED:
            raise WelfareChainException(
                MessageCode.INVALID_STATUS_TRANSITION,
                status.HTTP_409_CONFLICT,
                {"from": request.status, "to": AdoptionRequestStatus.PAID},
            )

        await ensure_transaction_unused(self.db, tx_hash)

        payer_address = None
        if self.settings.CHAIN_VERIFY_PAYMENTS:
            transfer = await verify_reported_transfer(
                self.verifier,
                tx_hash,
                [self.settings.ADOPTION_PAYMENT_RECIPIENT],
                self.settings.adoption_fee_base_units,
            )
            payer_address = transfer.sender

        adoption = await self.db.get(Adoption, request.adoption_id)

        request.payment_tx_hash = tx_hash
        request.payment_amount = amount
        request.payer_address = payer_address
        request.paid_at = datetime.now(timezone.utc)
        request.status = AdoptionRequestStatus.PAID
        self.messages.notify(
            recipient_id=request.donor_id,
            title="Adoption Payment Received",
            content=PAYMENT_RECEIVED_MESSAGE.format(
                amount=amount,
                tx_hash=tx_hash,
                name=adoption.name if adoption else "your pet",
            ),
        )

        try:
            await self.db.commit()
        except IntegrityError:
            # A concurrent request recorded the same hash first
            await self.db.rollback()
            raise WelfareChainException(
                MessageCode.TRANSACTION_ALREADY_USED,
                status.HTTP_409_CONFLICT,
                {"tx_hash": tx_hash},
            )
        await self.db.refresh(request)

        self.logger.info(
            f"Payment recorded for adoption request {request_id}",
            tx_hash=tx_hash,
            amount=str(amount),
        )
        return request

    async def complete_request(
        self, request_id: UUID, current_user: AuthenticatedUserContext
    ) -> AdoptionRequest:
        """Poster finalizes a paid request; the listing becomes adopted."""
        request = await self._get_request(request_id)
        adoption = await self._get_poster_adoption(request.adoption_id, current_user)

        if request.status != AdoptionRequestStatus.PAID:
            raise WelfareChainException(
                MessageCode.INVALID_STATUS_TRANSITION,
                status.HTTP_409_CONFLICT,
                {"from": request.status, "to": AdoptionRequestStatus.COMPLETED},
            )

        request.status = AdoptionRequestStatus.COMPLETED
        adoption.status = AdoptionStatus.ADOPTED
        adoption.adopted_by = request.donor_id
        self.messages.notify(
            recipient_id=request.donor_id,
            sender_id=current_user.user_id,
            title="Adoption Completed",
            content=ADOPTION_COMPLETED_MESSAGE.format(name=adoption.name),
        )
        for sibling in await self._siblings(request, OPEN_STATUSES):
            sibling.status = AdoptionRequestStatus.REJECTED
            self.messages.notify(
                recipient_id=sibling.donor_id,
                sender_id=current_user.user_id,
                title="Adoption Request Rejected",
                content=ADOPTION_REJECTED_MESSAGE.format(name=adoption.name),
            )

        await self.db.commit()
        await self.db.refresh(request)

        self.logger.info(f"Adoption request {request_id} completed")
        return request
