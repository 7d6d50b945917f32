from uuid import UUID

from fastapi import status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from src.api.core.exceptions.base import WelfareChainException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.database.models import SavedWelfare, WelfareOrganization


class SavedWelfareService(BaseService):
    """A donor's list of bookmarked welfare organizations."""

    async def _find(self, donor_id: UUID, welfare_id: UUID) -> SavedWelfare | None:
        stmt = select(SavedWelfare).where(
            SavedWelfare.donor_id == donor_id, SavedWelfare.welfare_id == welfare_id
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def list_saved(self, donor_id: UUID) -> list[WelfareOrganization]:
        stmt = (
            select(WelfareOrganization)
            .join(SavedWelfare, SavedWelfare.welfare_id == WelfareOrganization.id)
            .where(SavedWelfare.donor_id == donor_id)
            .order_by(SavedWelfare.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def save(self, donor_id: UUID, welfare_id: UUID) -> WelfareOrganization:
        welfare = await self.get_or_404(
            WelfareOrganization, welfare_id, MessageCode.WELFARE_NOT_FOUND
        )
        if await self._find(donor_id, welfare_id):
            raise WelfareChainException(
                MessageCode.WELFARE_ALREADY_SAVED,
                status.HTTP_409_CONFLICT,
                {"welfare_id": str(welfare_id)},
            )

        self.db.add(SavedWelfare(donor_id=donor_id, welfare_id=welfare.id))
        try:
            await self.db.commit()
        except IntegrityError:
            # Same pair saved concurrently
            await self.db.rollback()
            raise WelfareChainException(
                MessageCode.WELFARE_ALREADY_SAVED,
                status.HTTP_409_CONFLICT,
                {"welfare_id": str(welfare_id)},
            )
        await self.db.refresh(welfare)
        return welfare

    async def unsave(self, donor_id: UUID, welfare_id: UUID) -> None:
        saved = await self._find(donor_id, welfare_id)
        if saved is None:
            raise WelfareChainException(
                MessageCode.SAVED_WELFARE_NOT_FOUND,
                status.HTTP_404_NOT_FOUND,
                {"welfare_id": str(welfare_id)},
            )
        await self.db.delete(saved)
        await self.db.commit()
