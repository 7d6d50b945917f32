"""Adoption listing and adoption request models."""

import uuid
from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, utcnow


class PetType(str, Enum):
    DOG = "dog"
    CAT = "cat"
    OTHER = "other"


class AdoptionStatus(str, Enum):
    AVAILABLE = "available"
    PENDING = "pending"
    ADOPTED = "adopted"


class AdoptionRequestStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    PAID = "paid"
    COMPLETED = "completed"


class ContactMethod(str, Enum):
    EMAIL = "email"
    PHONE = "phone"


class Adoption(Base):
    __tablename__ = "adoptions"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String, nullable=False)
    type: Mapped[PetType] = mapped_column(String, nullable=False)
    breed: Mapped[str | None] = mapped_column(String, nullable=True)
    age: Mapped[str | None] = mapped_column(String, nullable=True)
    gender: Mapped[str | None] = mapped_column(String, nullable=True)
    size: Mapped[str | None] = mapped_column(String, nullable=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    location: Mapped[str | None] = mapped_column(String, nullable=True)
    health: Mapped[str | None] = mapped_column(Text, nullable=True)
    behavior: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[AdoptionStatus] = mapped_column(
        String, default=AdoptionStatus.AVAILABLE, nullable=False
    )
    posted_by: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    adopted_by: Mapped[UUID | None] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )

    requests = relationship(
        "AdoptionRequest", back_populates="adoption", cascade="all, delete-orphan"
    )


class AdoptionRequest(Base):
    __tablename__ = "adoption_requests"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    adoption_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("adoptions.id", ondelete="CASCADE"), nullable=False, index=True
    )
    donor_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    donor_name: Mapped[str] = mapped_column(String, nullable=False)
    contact_number: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String, nullable=False)
    reason: Mapped[str] = mapped_column(Text, nullable=False)
    preferred_contact: Mapped[ContactMethod] = mapped_column(
        String, default=ContactMethod.EMAIL, nullable=False
    )
    status: Mapped[AdoptionRequestStatus] = mapped_column(
        String, default=AdoptionRequestStatus.PENDING, nullable=False
    )
    payment_tx_hash: Mapped[str | None] = mapped_column(
        String(66), unique=True, nullable=True
    )
    payment_amount: Mapped[Decimal | None] = mapped_column(
        Numeric(18, 6), nullable=True
    )
    payer_address: Mapped[str | None] = mapped_column(String(42), nullable=True)
    paid_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    adoption = relationship("Adoption", back_populates="requests")
