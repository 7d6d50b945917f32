"""Doctor accounts managed by the welfare organization that registered them."""

from uuid import UUID

from fastapi import status
from sqlalchemy import select, update

from src.api.core.exceptions.base import WelfareChainException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.database.models import Case, DoctorProfile, User, UserRole, WelfareOrganization
from src.modules.case.service import CaseService
from src.utils.hashing import HashingService


class DoctorService(BaseService):
    async def _ensure_email_free(self, email: str) -> None:
        taken = await self.db.scalar(select(User.id).where(User.email == email))
        if taken:
            raise WelfareChainException(
                MessageCode.EMAIL_ALREADY_REGISTERED,
                status.HTTP_409_CONFLICT,
                {"email": email},
            )

    async def register(
        self,
        welfare: WelfareOrganization,
        name: str,
        email: str,
        password: str,
        specialization: str,
    ) -> DoctorProfile:
        """Create a doctor login and attach it to ``welfare``."""
        email = email.lower()
        await self._ensure_email_free(email)

        user = User(
            name=name,
            email=email,
            password_hash=HashingService.hash_password(password),
            role=UserRole.DOCTOR,
        )
        self.db.add(user)
        await self.db.flush()

        profile = DoctorProfile(
            user_id=user.id, welfare_id=welfare.id, specialization=specialization
        )
        profile.user = user
        self.db.add(profile)
        await self.db.commit()
        await self.db.refresh(profile)

        self.logger.info(f"Registered doctor {user.id} for welfare {welfare.id}")
        return profile

    async def list_for_welfare(self, welfare_id: UUID) -> list[DoctorProfile]:
        await self.get_or_404(
            WelfareOrganization, welfare_id, MessageCode.WELFARE_NOT_FOUND
        )
        stmt = (
            select(DoctorProfile)
            .where(DoctorProfile.welfare_id == welfare_id)
            .order_by(DoctorProfile.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_doctor(self, doctor_id: UUID) -> DoctorProfile:
        return await self.get_or_404(
            DoctorProfile, doctor_id, MessageCode.DOCTOR_NOT_FOUND
        )

    async def _get_owned(
        self, doctor_id: UUID, welfare: WelfareOrganization
    ) -> DoctorProfile:
        profile = await self.get_doctor(doctor_id)
        if profile.welfare_id != welfare.id:
            raise WelfareChainException(
                MessageCode.FORBIDDEN,
                status.HTTP_403_FORBIDDEN,
                {"description": "Doctor belongs to another organization"},
            )
        return profile

    async def update_doctor(
        self,
        doctor_id: UUID,
        welfare: WelfareOrganization,
        name: str | None = None,
        email: str | None = None,
        specialization: str | None = None,
        is_active: bool | None = None,
    ) -> DoctorProfile:
        profile = await self._get_owned(doctor_id, welfare)
        user = profile.user

        if email is not None and email.lower() != user.email:
            await self._ensure_email_free(email.lower())
            user.email = email.lower()
        if name is not None:
            user.name = name
        if specialization is not None:
            profile.specialization = specialization
        if is_active is not None:
            profile.is_active = is_active

        await self.db.commit()
        await self.db.refresh(profile)
        return profile

    async def remove_doctor(self, doctor_id: UUID, welfare: WelfareOrganization):
        """Delete the doctor's account and unassign it from every case."""
        profile = await self._get_owned(doctor_id, welfare)
        user_id = profile.user_id

        await self.db.execute(
            update(Case).where(Case.doctor_id == user_id).values(doctor_id=None)
        )
        user = profile.user
        await self.db.delete(profile)
        await self.db.delete(user)
        await self.db.commit()

        self.logger.info(f"Removed doctor {user_id} from welfare {welfare.id}")

    async def assign_case(
        self, doctor_id: UUID, welfare: WelfareOrganization, case_id: UUID
    ) -> Case:
        profile = await self._get_owned(doctor_id, welfare)
        if not profile.is_active:
            raise WelfareChainException(
                MessageCode.CONFLICT,
                status.HTTP_409_CONFLICT,
                {"description": "Doctor is inactive", "doctor_id": str(doctor_id)},
            )
        return await CaseService(self.db).assign_doctor(
            case_id, welfare, profile.user_id
        )

    async def remove_case(
        self, doctor_id: UUID, welfare: WelfareOrganization, case_id: UUID
    ) -> Case:
        profile = await self._get_owned(doctor_id, welfare)
        case = await self.get_or_404(Case, case_id, MessageCode.CASE_NOT_FOUND)
        if case.welfare_id != welfare.id:
            raise WelfareChainException(
                MessageCode.FORBIDDEN,
                status.HTTP_403_FORBIDDEN,
                {"description": "Case belongs to another organization"},
            )
        if case.doctor_id != profile.user_id:
            raise WelfareChainException(
                MessageCode.CONFLICT,
                status.HTTP_409_CONFLICT,
                {"description": "Case is not assigned to this doctor"},
            )

        case.doctor_id = None
        await self.db.commit()
        await self.db.refresh(case)
        return case

    async def assigned_cases(self, user_id: UUID) -> list[Case]:
        stmt = (
            select(Case)
            .where(Case.doctor_id == user_id)
            .order_by(Case.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
