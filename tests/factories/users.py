"""Factory for User models."""

import factory

from src.database.models import User, UserRole
from src.utils.hashing import HashingService
from .base import AsyncSQLAlchemyModelFactory, UUIDFactory

DEFAULT_PASSWORD = "correct-horse-battery"
DEFAULT_PASSWORD_HASH = HashingService.hash_password(DEFAULT_PASSWORD)


class UserFactory(AsyncSQLAlchemyModelFactory[User]):
    """Factory for creating User instances."""

    class Meta:
        model = User

    id = UUIDFactory()
    name = factory.Faker("name")
    email = factory.Sequence(lambda n: f"user{n}@example.com")
    password_hash = DEFAULT_PASSWORD_HASH
    role = UserRole.DONOR
    phone = factory.Faker("numerify", text="+1555#######")
