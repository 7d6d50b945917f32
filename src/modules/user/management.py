"""User registration, login and profile operations."""

from uuid import UUID

from fastapi import status
from sqlalchemy import select

from src.api.core.exceptions.base import WelfareChainException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.database.models import User, UserRole, WelfareOrganization
from src.modules.user.tokens import create_access_token
from src.utils.hashing import HashingService


class UserManagementService(BaseService):
    async def get_user_by_id(self, user_id: UUID) -> User | None:
        """Get user by ID."""
        return await self.db.get(User, user_id)

    async def get_user_by_email(self, email: str) -> User | None:
        """Get user by email."""
        stmt = select(User).where(User.email == email.lower())
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def register_user(
        self,
        name: str,
        email: str,
        password: str,
        role: UserRole = UserRole.DONOR,
        phone: str | None = None,
        address: str | None = None,
        organization_name: str | None = None,
    ) -> User:
        """Create a user; welfare accounts also get a pending organization."""
        if role == UserRole.ADMIN:
            raise WelfareChainException(
                MessageCode.FORBIDDEN,
                status.HTTP_403_FORBIDDEN,
                {"description": "Admin accounts cannot be self-registered"},
            )

        if await self.get_user_by_email(email):
            raise WelfareChainException(
                MessageCode.EMAIL_ALREADY_REGISTERED,
                status.HTTP_409_CONFLICT,
                {"email": email},
            )

        user = User(
            name=name,
            email=email.lower(),
            password_hash=HashingService.hash_password(password),
            role=role,
            phone=phone,
            address=address,
        )
        self.db.add(user)
        await self.db.flush()

        if role == UserRole.WELFARE:
            self.db.add(
                WelfareOrganization(user_id=user.id, name=organization_name or name)
            )

        await self.db.commit()
        await self.db.refresh(user)

        self.logger.info(f"Registered {role.value} user {user.id}")
        return user

    async def authenticate(self, email: str, password: str) -> tuple[User, str]:
        """Check credentials and issue an access token."""
        user = await self.get_user_by_email(email)
        if not user or not HashingService.verify_password(
            password, user.password_hash
        ):
            raise WelfareChainException(
                MessageCode.INVALID_CREDENTIALS,
                status.HTTP_401_UNAUTHORIZED,
            )

        if HashingService.needs_rehash(user.password_hash):
            user.password_hash = HashingService.hash_password(password)
            await self.db.commit()
            self.logger.info(f"Upgraded password hash for user {user.id}")

        token = create_access_token(user.id, UserRole(user.role))
        self.logger.info(f"User {user.id} logged in")
        return user, token

    async def update_profile(self, user_id: UUID, **fields) -> User:
        user = await self.get_or_404(User, user_id, MessageCode.USER_NOT_FOUND)
        for field, value in fields.items():
            setattr(user, field, value)

        await self.db.commit()
        await self.db.refresh(user)
        return user
