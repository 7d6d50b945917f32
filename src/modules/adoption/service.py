from uuid import UUID

from sqlalchemy import select

from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.database.models import Adoption, AdoptionStatus, PetType


class AdoptionService(BaseService):
    async def list_adoptions(
        self,
        pet_type: PetType | None = None,
        adoption_status: AdoptionStatus | None = AdoptionStatus.AVAILABLE,
    ) -> list[Adoption]:
        stmt = select(Adoption).order_by(Adoption.created_at.desc())
        if pet_type is not None:
            stmt = stmt.where(Adoption.type == pet_type)
        if adoption_status is not None:
            stmt = stmt.where(Adoption.status == adoption_status)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_adoption(self, adoption_id: UUID) -> Adoption:
        return await self.get_or_404(
            Adoption, adoption_id, MessageCode.ADOPTION_NOT_FOUND
        )

    async def create_adoption(self, posted_by: UUID, **fields) -> Adoption:
        adoption = Adoption(posted_by=posted_by, **fields)
        self.db.add(adoption)
        await self.db.commit()
        await self.db.refresh(adoption)

        self.logger.info(f"User {posted_by} posted adoption listing {adoption.id}")
        return adoption

    async def list_posted_by(self, user_id: UUID) -> list[Adoption]:
        stmt = (
            select(Adoption)
            .where(Adoption.posted_by == user_id)
            .order_by(Adoption.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
