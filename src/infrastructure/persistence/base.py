"""Declarative base for the Orquestra tables.

Every table the access pipeline reads (users, projects, project_members and
the nested resources) has an integer surrogate key and a creation timestamp.
Repositories map rows to frozen domain entities; nothing above
infrastructure sees these classes.

Usage:
    class ProjectModel(BaseModel):
        __tablename__ = "projects"
        name: Mapped[str]
        # Inherits: id, created_at
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides common fields that ALL database models need:
    - id: Integer primary key (autoincrement)
    - created_at: Timestamp when record was created (UTC)
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),  # Database sets this on INSERT
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"
