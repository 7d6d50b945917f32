"""Public emergency reports and their hand-off to welfare organizations."""

from decimal import Decimal
from uuid import UUID

from fastapi import status
from sqlalchemy import select

from src.api.core.exceptions.base import WelfareChainException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.core.context import AuthenticatedUserContext
from src.database.models import (
    Case,
    Emergency,
    EmergencyStatus,
    UserRole,
    WelfareOrganization,
)


class EmergencyService(BaseService):
    async def report(
        self,
        reporter_name: str,
        phone: str,
        animal_type: str,
        condition: str,
        location: str,
        description: str,
        email: str | None = None,
    ) -> Emergency:
        emergency = Emergency(
            reporter_name=reporter_name,
            phone=phone,
            email=email,
            animal_type=animal_type,
            condition=condition,
            location=location,
            description=description,
        )
        self.db.add(emergency)
        await self.db.commit()
        await self.db.refresh(emergency)

        self.logger.info(f"Emergency {emergency.id} reported at {location}")
        return emergency

    async def list_public(self) -> list[Emergency]:
        stmt = select(Emergency).order_by(Emergency.created_at.desc())
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def list_for(
        self,
        current_user: AuthenticatedUserContext,
        status_filter: EmergencyStatus | None = None,
    ) -> list[Emergency]:
        """Full reports; welfare users only see ones still waiting for help."""
        stmt = select(Emergency).order_by(Emergency.created_at.desc())
        if status_filter is not None:
            stmt = stmt.where(Emergency.status == status_filter.value)
        if current_user.role == UserRole.WELFARE:
            stmt = stmt.where(
                Emergency.case_id.is_(None),
                Emergency.status != EmergencyStatus.RESOLVED.value,
            )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_emergency(self, emergency_id: UUID) -> Emergency:
        return await self.get_or_404(
            Emergency, emergency_id, MessageCode.EMERGENCY_NOT_FOUND
        )

    def _require_assignee(
        self, emergency: Emergency, welfare: WelfareOrganization
    ) -> None:
        assignee = emergency.assigned_welfare_id
        if assignee is not None and assignee != welfare.id:
            raise WelfareChainException(
                MessageCode.FORBIDDEN,
                status.HTTP_403_FORBIDDEN,
                {"description": "Emergency is handled by another organization"},
            )

    async def update(
        self,
        emergency_id: UUID,
        welfare: WelfareOrganization,
        new_status: EmergencyStatus | None = None,
        medical_issue: str | None = None,
        estimated_cost: Decimal | None = None,
        treatment_plan: str | None = None,
    ) -> Emergency:
        """Record a welfare's response; the first responder becomes the assignee."""
        emergency = await self.get_emergency(emergency_id)
        self._require_assignee(emergency, welfare)

        if emergency.assigned_welfare_id is None:
            emergency.assigned_welfare_id = welfare.id
            if new_status is None and emergency.status == EmergencyStatus.NEW:
                new_status = EmergencyStatus.ASSIGNED

        if new_status is not None:
            emergency.status = new_status
        if medical_issue is not None:
            emergency.medical_issue = medical_issue
        if estimated_cost is not None:
            emergency.estimated_cost = estimated_cost
        if treatment_plan is not None:
            emergency.treatment_plan = treatment_plan

        await self.db.commit()
        await self.db.refresh(emergency)
        self.logger.info(
            f"Emergency {emergency.id} updated by welfare {welfare.id}",
            status=emergency.status,
        )
        return emergency

    async def convert_to_case(
        self,
        emergency_id: UUID,
        welfare: WelfareOrganization,
        title: str,
        description: str,
        target_amount: Decimal,
    ) -> tuple[Emergency, Case]:
        """Open a fundraising case for an emergency and mark it resolved."""
        emergency = await self.get_emergency(emergency_id)
        if (
            emergency.converted_to_case
            or emergency.status == EmergencyStatus.RESOLVED
        ):
            raise WelfareChainException(
                MessageCode.EMERGENCY_ALREADY_CONVERTED,
                status.HTTP_409_CONFLICT,
                {
                    "status": emergency.status,
                    "case_id": str(emergency.case_id) if emergency.case_id else None,
                },
            )
        self._require_assignee(emergency, welfare)
        if not welfare.wallet_address:
            raise WelfareChainException(
                MessageCode.WELFARE_WALLET_MISSING,
                status.HTTP_409_CONFLICT,
                {"welfare_id": str(welfare.id)},
            )

        case = Case(
            welfare_id=welfare.id,
            title=title,
            description=description,
            target_amount=target_amount,
            medical_issue=emergency.medical_issue or emergency.condition,
        )
        self.db.add(case)
        await self.db.flush()

        emergency.case_id = case.id
        emergency.assigned_welfare_id = welfare.id
        emergency.status = EmergencyStatus.RESOLVED
        emergency.treatment_plan = f"Converted to case: {case.id}"

        await self.db.commit()
        await self.db.refresh(emergency)
        await self.db.refresh(case)

        self.logger.info(f"Emergency {emergency.id} converted to case {case.id}")
        return emergency, case
