from uuid import UUID

from fastapi import status
from sqlalchemy import select

from src.api.core.exceptions.base import WelfareChainException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.database.models import Message


class MessageService(BaseService):
    def notify(
        self,
        recipient_id: UUID,
        title: str,
        content: str,
        sender_id: UUID | None = None,
    ) -> Message:
        """Stage a message in the current transaction; the caller commits."""
        message = Message(
            recipient_id=recipient_id,
            sender_id=sender_id,
            title=title,
            content=content,
        )
        self.db.add(message)
        return message

    async def list_for_user(self, user_id: UUID) -> list[Message]:
        stmt = (
            select(Message)
            .where(Message.recipient_id == user_id)
            .order_by(Message.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def mark_read(self, message_id: UUID, user_id: UUID) -> Message:
        message = await self.get_or_404(
            Message, message_id, MessageCode.MESSAGE_NOT_FOUND
        )
        # Other users' messages are reported as missing
        if message.recipient_id != user_id:
            raise WelfareChainException(
                MessageCode.MESSAGE_NOT_FOUND,
                status.HTTP_404_NOT_FOUND,
                {"id": str(message_id)},
            )

        message.is_read = True
        await self.db.commit()
        await self.db.refresh(message)
        return message
