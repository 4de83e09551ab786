"""Project domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Project:
    """Tenant boundary for tasks, documents, chat and tags.

    Attributes:
        id: Unique project identifier.
        name: Project name.
        created_by: User id of the creator.
    """

    id: int
    name: str
    created_by: int | None = None
