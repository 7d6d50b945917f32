from uuid import UUID

from fastapi import status
from sqlalchemy import select

from src.api.core.exceptions.base import WelfareChainException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.database.models import WelfareOrganization, WelfareStatus
from src.modules.chain.exceptions import InvalidAddress
from src.modules.chain.provider import to_checksum


class WelfareService(BaseService):
    async def list_approved(self) -> list[WelfareOrganization]:
        stmt = (
            select(WelfareOrganization)
            .where(WelfareOrganization.status == WelfareStatus.APPROVED)
            .order_by(WelfareOrganization.name)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_by_user(self, user_id: UUID) -> WelfareOrganization:
        """Get the organization owned by a welfare user."""
        stmt = select(WelfareOrganization).where(
            WelfareOrganization.user_id == user_id
        )
        result = await self.db.execute(stmt)
        welfare = result.scalar_one_or_none()
        if not welfare:
            raise WelfareChainException(
                MessageCode.WELFARE_NOT_FOUND,
                status.HTTP_404_NOT_FOUND,
                {"user_id": str(user_id)},
            )
        return welfare

    async def get_approved_by_user(self, user_id: UUID) -> WelfareOrganization:
        welfare = await self.get_by_user(user_id)
        if welfare.status != WelfareStatus.APPROVED:
            raise WelfareChainException(
                MessageCode.WELFARE_NOT_APPROVED,
                status.HTTP_403_FORBIDDEN,
                {"status": welfare.status},
            )
        return welfare

    async def update_profile(self, user_id: UUID, **fields) -> WelfareOrganization:
        welfare = await self.get_by_user(user_id)

        if fields.get("wallet_address"):
            try:
                fields["wallet_address"] = to_checksum(fields["wallet_address"])
            except InvalidAddress:
                raise WelfareChainException(
                    MessageCode.INVALID_ADDRESS,
                    status.HTTP_400_BAD_REQUEST,
                    {"address": fields["wallet_address"]},
                )

        for field, value in fields.items():
            setattr(welfare, field, value)

        await self.db.commit()
        await self.db.refresh(welfare)
        self.logger.info(f"Updated welfare organization {welfare.id}")
        return welfare

    async def set_status(
        self, welfare_id: UUID, new_status: WelfareStatus
    ) -> WelfareOrganization:
        welfare = await self.get_or_404(
            WelfareOrganization, welfare_id, MessageCode.WELFARE_NOT_FOUND
        )
        welfare.status = new_status
        await self.db.commit()
        await self.db.refresh(welfare)

        self.logger.info(
            f"Welfare organization {welfare_id} status set to {new_status.value}"
        )
        return welfare
