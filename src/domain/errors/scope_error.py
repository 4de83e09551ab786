"""Scope verification errors.

Codes:
    PROJECT_NOT_FOUND: The addressed project does not exist.
    NOT_PROJECT_MEMBER: Project exists but the principal is not a member.
    CHAT_NOT_FOUND: The addressed direct chat does not exist.
    NOT_CHAT_PARTICIPANT: Chat exists but the principal takes no part in it.
    RESOURCE_NOT_FOUND: Resource missing OR recorded under another parent.
        Both cases share this code so foreign ids are indistinguishable
        from missing ones.
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ScopeError(DomainError):
    """Request addressed something outside the principal's scope.

    Attributes:
        code: One of the scope ErrorCodes.
        message: Human-readable message.
        details: Additional context (project_id, chat_id, resource_type, resource_id).
    """

    pass
