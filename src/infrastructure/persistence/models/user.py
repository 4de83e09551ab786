"""User database model.

Only the columns the access pipeline reads (plus display fields) are mapped.
The global role lives on the user row; project-level roles live on
project_members and are informational.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class User(BaseModel):
    """User model.

    Fields:
        id: Integer primary key (from BaseModel)
        created_at: Timestamp when user registered (from BaseModel)
        email: Unique email address (indexed)
        name: Display name
        role: Global role (developer, supervisor, tutor, team_leader,
            project_manager, admin)
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    role: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default="developer",
    )
