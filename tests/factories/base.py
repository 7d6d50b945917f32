"""Base factory for async SQLAlchemy models."""

from typing import Any, Generic, TypeVar
from uuid import uuid4

import factory
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


class AsyncSQLAlchemyModelFactory(factory.Factory, Generic[T]):
    """Base factory for async SQLAlchemy models.

    Rows are committed by default so the application, which opens its own
    sessions, can see them.
    """

    class Meta:
        abstract = True

    @classmethod
    async def create_async(
        cls, session: AsyncSession, commit: bool = True, **kwargs: Any
    ) -> T:
        """Build, add and persist a model instance."""
        instance = cls.build(**kwargs)
        session.add(instance)
        if commit:
            await session.commit()
        else:
            await session.flush()
        return instance


class UUIDFactory(factory.LazyFunction):
    """Factory for generating UUIDs."""

    def __init__(self) -> None:
        super().__init__(uuid4)
