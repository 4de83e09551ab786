"""ChatRepository protocol for direct chat lookups."""

from typing import Protocol

from src.domain.entities import ChatParticipation


class ChatRepository(Protocol):
    """Direct chat repository protocol (port).

    Methods:
        exists: Check a direct chat exists
        find_participation: Retrieve a user's participation in a chat
    """

    async def exists(self, chat_id: int) -> bool:
        """Check whether a direct chat exists.

        Args:
            chat_id: Chat identifier.

        Returns:
            True if the chat exists.
        """
        ...

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
        ...
