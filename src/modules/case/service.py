from decimal import Decimal
from uuid import UUID

from fastapi import status
from sqlalchemy import select

from src.api.core.constants import MAX_PUBLIC_CASES
from src.api.core.exceptions.base import WelfareChainException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.database.models import Case, CaseStatus, User, UserRole, WelfareOrganization


class CaseService(BaseService):
    async def list_active(self, limit: int = MAX_PUBLIC_CASES) -> list[Case]:
        stmt = (
            select(Case)
            .where(Case.status == CaseStatus.ACTIVE)
            .order_by(Case.created_at.desc())
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_case(self, case_id: UUID) -> Case:
        return await self.get_or_404(Case, case_id, MessageCode.CASE_NOT_FOUND)

    async def create_case(
        self,
        welfare: WelfareOrganization,
        title: str,
        description: str,
        target_amount: Decimal,
        medical_issue: str | None = None,
    ) -> Case:
        case = Case(
            welfare_id=welfare.id,
            title=title,
            description=description,
            target_amount=target_amount,
            medical_issue=medical_issue,
        )
        self.db.add(case)
        await self.db.commit()
        await self.db.refresh(case)

        self.logger.info(f"Created case {case.id} for welfare {welfare.id}")
        return case

    async def assign_doctor(
        self, case_id: UUID, welfare: WelfareOrganization, doctor_id: UUID
    ) -> Case:
        case = await self.get_case(case_id)
        if case.welfare_id != welfare.id:
            raise WelfareChainException(
                MessageCode.FORBIDDEN,
                status.HTTP_403_FORBIDDEN,
                {"description": "Case belongs to another organization"},
            )

        doctor = await self.db.get(User, doctor_id)
        if not doctor or doctor.role != UserRole.DOCTOR:
            raise WelfareChainException(
                MessageCode.USER_NOT_FOUND,
                status.HTTP_404_NOT_FOUND,
                {"description": "Doctor not found", "doctor_id": str(doctor_id)},
            )

        case.doctor_id = doctor.id
        await self.db.commit()
        await self.db.refresh(case)
        return case
