import uuid
from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, utcnow


class SavedWelfare(Base):
    """A donor's bookmark on a welfare organization."""

    __tablename__ = "saved_welfares"
    __table_args__ = (
        UniqueConstraint("donor_id", "welfare_id", name="uq_saved_welfares_pair"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    donor_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    welfare_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("welfare_organizations.id", ondelete="CASCADE"),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )
