"""Progress updates on cases and the success stories drawn from them."""

from uuid import UUID

from fastapi import status
from sqlalchemy import select

from src.api.core.constants import FEATURED_SUCCESS_STORIES
from src.api.core.exceptions.base import WelfareChainException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.database.models import Case, CaseUpdate, WelfareOrganization


class CaseUpdateService(BaseService):
    async def list_published(self, case_id: UUID) -> list[CaseUpdate]:
        await self.get_or_404(Case, case_id, MessageCode.CASE_NOT_FOUND)
        stmt = (
            select(CaseUpdate)
            .where(CaseUpdate.case_id == case_id, CaseUpdate.is_published.is_(True))
            .order_by(CaseUpdate.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def post_update(
        self,
        welfare: WelfareOrganization,
        case_id: UUID,
        title: str,
        content: str,
        is_success_story: bool = False,
    ) -> CaseUpdate:
        case = await self.get_or_404(Case, case_id, MessageCode.CASE_NOT_FOUND)
        if case.welfare_id != welfare.id:
            raise WelfareChainException(
                MessageCode.FORBIDDEN,
                status.HTTP_403_FORBIDDEN,
                {"description": "Case belongs to another organization"},
            )

        update = CaseUpdate(
            case_id=case.id,
            welfare_id=welfare.id,
            title=title,
            content=content,
            is_success_story=is_success_story,
        )
        self.db.add(update)
        await self.db.commit()
        await self.db.refresh(update)

        self.logger.info(f"Posted update {update.id} on case {case.id}")
        return update

    async def _get_owned(
        self, update_id: UUID, welfare: WelfareOrganization
    ) -> CaseUpdate:
        update = await self.get_or_404(
            CaseUpdate, update_id, MessageCode.CASE_UPDATE_NOT_FOUND
        )
        if update.welfare_id != welfare.id:
            raise WelfareChainException(
                MessageCode.FORBIDDEN,
                status.HTTP_403_FORBIDDEN,
                {"description": "Update was posted by another organization"},
            )
        return update

    async def edit_update(
        self, update_id: UUID, welfare: WelfareOrganization, **fields
    ) -> CaseUpdate:
        update = await self._get_owned(update_id, welfare)
        for field, value in fields.items():
            setattr(update, field, value)

        await self.db.commit()
        await self.db.refresh(update)
        return update

    async def delete_update(self, update_id: UUID, welfare: WelfareOrganization):
        update = await self._get_owned(update_id, welfare)
        await self.db.delete(update)
        await self.db.commit()
        self.logger.info(f"Deleted case update {update_id}")

    async def success_stories(
        self,
        case_id: UUID | None = None,
        welfare_id: UUID | None = None,
        limit: int | None = None,
    ) -> list[CaseUpdate]:
        """Published updates flagged as success stories, newest first."""
        stmt = (
            select(CaseUpdate)
            .where(
                CaseUpdate.is_success_story.is_(True),
                CaseUpdate.is_published.is_(True),
            )
            .order_by(CaseUpdate.created_at.desc())
        )
        if case_id is not None:
            stmt = stmt.where(CaseUpdate.case_id == case_id)
        if welfare_id is not None:
            stmt = stmt.where(CaseUpdate.welfare_id == welfare_id)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def featured_success_stories(self) -> list[CaseUpdate]:
        return await self.success_stories(limit=FEATURED_SUCCESS_STORIES)
