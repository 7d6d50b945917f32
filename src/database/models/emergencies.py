"""Emergency reports submitted by the public."""

import uuid
from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, utcnow


class EmergencyStatus(str, Enum):
    NEW = "new"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


class Emergency(Base):
    __tablename__ = "emergencies"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    reporter_name: Mapped[str] = mapped_column(String, nullable=False)
    phone: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str | None] = mapped_column(String, nullable=True)
    animal_type: Mapped[str] = mapped_column(String, nullable=False)
    condition: Mapped[str] = mapped_column(String, nullable=False)
    location: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[EmergencyStatus] = mapped_column(
        String, default=EmergencyStatus.NEW, nullable=False, index=True
    )
    assigned_welfare_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("welfare_organizations.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    # Filled in by the responding organization
    medical_issue: Mapped[str | None] = mapped_column(String, nullable=True)
    estimated_cost: Mapped[Decimal | None] = mapped_column(
        Numeric(18, 2), nullable=True
    )
    treatment_plan: Mapped[str | None] = mapped_column(Text, nullable=True)

    case_id: Mapped[UUID | None] = mapped_column(
        Uuid, ForeignKey("cases.id", ondelete="SET NULL"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    @property
    def converted_to_case(self) -> bool:
        return self.case_id is not None
