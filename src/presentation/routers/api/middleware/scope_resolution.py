"""Turn path parameters into a ResolvedScope.

This is the only place raw identifiers from the URL are parsed. The result
is a ScopeSource that the access pipeline calls right after authentication,
so a malformed id is reported as 400 only to authenticated callers and
before any repository lookup.

Recognized path parameters:

    project_id                        -> project membership
    chat_id                           -> direct chat participation
    task_id, document_id, tag_id      -> resource in project
    message_id                        -> message in chat, else in project
    comment_id                        -> comment in task
    notification_id                   -> notification of the caller
    user_id, template_id,
    version_number                    -> validated, not scoped

Only matched parameters are read, never the raw URL, so the outcome does
not depend on where the application is mounted. A nested identifier whose
parent is missing from the route fails closed.
"""

from collections.abc import Mapping

from src.application.services import ScopeSource
from src.core.enums import ErrorCode
from src.core.errors import DomainError, FieldError, InternalError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.enums import ParentType, ResourceType
from src.domain.value_objects import Principal, ResolvedScope, ResourceRef

type _Children = tuple[tuple[str, ResourceType], ...]

# (parent parameter, parent kind, children) in verification order. A child
# name is claimed by the first parent present in the path.
_PARENTS: tuple[tuple[str, ParentType, _Children], ...] = (
    ("chat_id", ParentType.CHAT, (("message_id", ResourceType.DIRECT_MESSAGE),)),
    (
        "project_id",
        ParentType.PROJECT,
        (
            ("task_id", ResourceType.TASK),
            ("document_id", ResourceType.DOCUMENT),
            ("tag_id", ResourceType.TAG),
            ("message_id", ResourceType.MESSAGE),
        ),
    ),
    ("task_id", ParentType.TASK, (("comment_id", ResourceType.COMMENT),)),
)

_NESTED = frozenset(name for _, _, children in _PARENTS for name, _ in children)

# Route template segment -> parameter that must carry the parent id
_TEMPLATE_PARENTS: dict[str, str] = {
    "/projects/{": "project_id",
    "/chats/{": "chat_id",
}

_PLAIN_IDENTIFIERS = ("user_id", "template_id", "version_number")


def parse_identifier(raw: object) -> int | None:
    """Parse a positive integer id written in ASCII digits.

    Returns:
        The id, or None for anything else ("abc", "-1", "0", "1.5", "").
    """
    if not isinstance(raw, str) or not raw.isascii() or not raw.isdigit():
        return None
    value = int(raw)
    return value if value > 0 else None


class _IdentifierParser:
    """Collects every malformed identifier instead of stopping at the first."""

    def __init__(self, path_params: Mapping[str, str]) -> None:
        self.path_params = path_params
        self.errors: list[FieldError] = []
        self._parsed: dict[str, int] = {}

    def parse(self, name: str) -> int:
        if name in self._parsed:
            return self._parsed[name]
        value = parse_identifier(self.path_params[name])
        if value is None:
            self.errors.append(
                FieldError(
                    field=f"path.{name}",
                    code="invalid_identifier",
                    message="Must be a positive integer",
                )
            )
            value = 0
        self._parsed[name] = value
        return value


def _unanchored(template: str | None, names: list[str]) -> Failure[DomainError]:
    return Failure(
        error=InternalError(
            code=ErrorCode.INTERNAL_ERROR,
            message="Route names identifiers without their parent scope",
            details={"route": template or "", "parameters": ",".join(names)},
        )
    )


def resolve_scope(
    path_params: Mapping[str, str],
    template: str | None = None,
) -> ScopeSource:
    """Build the ScopeSource for one request.

    Args:
        path_params: Matched route parameters (raw strings).
        template: Matched route template, e.g.
            "/api/projects/{project_id}/tasks/{task_id}".

    Returns:
        Callable producing Success(ResolvedScope), Failure(ValidationError)
        with code INVALID_IDENTIFIER listing every malformed id, or
        Failure(InternalError) when the route names a nested resource or a
        parent segment without the parent's identifier.
    """

    def source(principal: Principal) -> Result[ResolvedScope, DomainError]:
        missing = [
            param
            for segment, param in _TEMPLATE_PARENTS.items()
            if template and segment in template and param not in path_params
        ]
        if missing:
            return _unanchored(template, missing)

        parser = _IdentifierParser(path_params)
        resources: list[ResourceRef] = []
        claimed: set[str] = set()

        for parent_param, parent_type, children in _PARENTS:
            if parent_param not in path_params:
                continue
            parent_id = parser.parse(parent_param)
            for name, resource_type in children:
                if name not in path_params or name in claimed:
                    continue
                claimed.add(name)
                resources.append(
                    ResourceRef(
                        resource_type, parser.parse(name), parent_type, parent_id
                    )
                )

        orphans = sorted((_NESTED & path_params.keys()) - claimed)
        if orphans:
            return _unanchored(template, orphans)

        project_id = parser.parse("project_id") if "project_id" in path_params else None
        chat_id = parser.parse("chat_id") if "chat_id" in path_params else None

        if "notification_id" in path_params:
            resources.append(
                ResourceRef(
                    ResourceType.NOTIFICATION,
                    parser.parse("notification_id"),
                    ParentType.USER,
                    principal.user_id,
                )
            )

        for name in _PLAIN_IDENTIFIERS:
            if name in path_params:
                parser.parse(name)

        if parser.errors:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_IDENTIFIER,
                    message="Path contains malformed identifiers",
                    fields=tuple(parser.errors),
                )
            )
        return Success(
            value=ResolvedScope(
                project_id=project_id, chat_id=chat_id, resources=tuple(resources)
            )
        )

    return source
