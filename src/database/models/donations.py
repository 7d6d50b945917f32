"""Case donation model."""

import uuid
from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID

from sqlalchemy import BigInteger, DateTime, ForeignKey, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, utcnow


class DonationStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    FAILED = "failed"


class Donation(Base):
    __tablename__ = "donations"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    donor_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    case_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("cases.id", ondelete="CASCADE"), nullable=False, index=True
    )
    welfare_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("welfare_organizations.id", ondelete="CASCADE"),
        nullable=False,
    )
    # Wei, kept as a string since it can exceed 64 bits
    amount: Mapped[str] = mapped_column(String, nullable=False)
    amount_usd: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    tx_hash: Mapped[str] = mapped_column(String(66), unique=True, nullable=False)
    status: Mapped[DonationStatus] = mapped_column(
        String, default=DonationStatus.PENDING, nullable=False
    )
    block_number: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    donor_address: Mapped[str | None] = mapped_column(String(42), nullable=True)
    recipient_address: Mapped[str | None] = mapped_column(String(42), nullable=True)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )

    case = relationship("Case", back_populates="donations")
