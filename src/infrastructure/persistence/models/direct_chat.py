"""Direct chat, participant and direct message database models."""

from sqlalchemy import ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class DirectChat(BaseModel):
    """One-to-one chat between users, outside any project."""

    __tablename__ = "direct_chats"


class DirectChatParticipant(BaseModel):
    """Participation of a user in a direct chat.

    A user appears at most once per chat.
    """

    __tablename__ = "direct_chat_participants"
    __table_args__ = (
        UniqueConstraint("chat_id", "user_id", name="uq_direct_chat_participants"),
    )

    chat_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("direct_chats.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )


class DirectMessage(BaseModel):
    """Message in a direct chat (parent: chat, owner: sender_id)."""

    __tablename__ = "direct_messages"

    chat_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("direct_chats.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    sender_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
