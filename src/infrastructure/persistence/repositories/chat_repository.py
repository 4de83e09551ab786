"""ChatRepository - SQLAlchemy implementation of ChatRepository protocol.

Reads direct chats and their participants.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import ChatParticipation
from src.infrastructure.persistence.models.direct_chat import (
    DirectChat,
    DirectChatParticipant,
)


class ChatRepository:
    """SQLAlchemy implementation of ChatRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def exists(self, chat_id: int) -> bool:
        """Check whether a direct chat exists."""
        stmt = select(DirectChat.id).where(DirectChat.id == chat_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def find_participation(
        self, chat_id: int, user_id: int
    ) -> ChatParticipation | None:
        """Find a user's participation in a direct chat.

        Args:
            chat_id: Chat identifier.
            user_id: User identifier.

        Returns:
            ChatParticipation if the user takes part, None otherwise.
        """
        stmt = select(
            DirectChatParticipant.chat_id, DirectChatParticipant.user_id
        ).where(
            DirectChatParticipant.chat_id == chat_id,
            DirectChatParticipant.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        row = result.one_or_none()

        if row is None:
            return None

        return ChatParticipation(chat_id=row.chat_id, user_id=row.user_id)
