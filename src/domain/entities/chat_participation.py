"""Direct chat participation entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChatParticipation:
    """Link between a user and a direct chat they take part in.

    Attributes:
        chat_id: Direct chat id.
        user_id: Participant user id.
    """

    chat_id: int
    user_id: int
