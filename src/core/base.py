from uuid import UUID

from fastapi import status
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.exceptions.base import WelfareChainException
from src.api.core.messages import MessageCode
from src.utils.logger import get_logger


class BaseService:
    """Base service class with database dependency injection."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.logger = get_logger(self.__class__.__name__)

    async def get_or_404(self, model, entity_id: UUID, message_code: MessageCode):
        """Load a row by primary key or raise a 404 with the given code."""
        entity = await self.db.get(model, entity_id)
        if entity is None:
            raise WelfareChainException(
                message_code,
                status.HTTP_404_NOT_FOUND,
                {"id": str(entity_id)},
            )
        return entity
