"""Access pipeline runner.

A request's access checks are an explicit, ordered list of stages. Every
stage has the same contract:

    async (AccessContext) -> Result[AccessContext, DomainError]

The runner executes stages strictly in order. Stage N+1 never starts before
stage N returned Success; the first Failure ends the run and is returned
unchanged. Nothing is retried.

Usage:
    pipeline = AccessPipeline(
        stages=[authenticate, membership, resource_scope, permission],
        logger=logger,
    )
    result = await pipeline.run(AccessContext(authorization=header, scope=scope))
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field, replace

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import ChatParticipation, OwnedResource, ProjectMembership
from src.domain.enums import DenialReason, ResourceType
from src.domain.protocols import LoggerProtocol
from src.domain.value_objects import (
    AuthorizationDecision,
    Principal,
    ResolvedScope,
)


@dataclass(frozen=True, slots=True)
class AccessContext:
    """Per-request state threaded through the stages.

    Each stage returns an updated copy; instances are never shared between
    requests.

    Attributes:
        authorization: Raw Authorization header. Never logged.
        scope: Scope normalized at the transport boundary (set by the
            resolve_scope stage once the principal is known).
        request_id: Correlation id of the request.
        principal: Set by the authentication stage.
        membership: Set by the membership stage (None if no project scope).
        participation: Set by the participant stage (None if no chat scope).
        resources: Verified resources, outermost first.
        decision: Final authorization decision.
    """

    authorization: str | None = field(default=None, repr=False)
    scope: ResolvedScope = field(default_factory=ResolvedScope)
    request_id: str | None = None
    principal: Principal | None = None
    membership: ProjectMembership | None = None
    participation: ChatParticipation | None = None
    resources: tuple[OwnedResource, ...] = ()
    decision: AuthorizationDecision | None = None

    def evolve(self, **changes: object) -> "AccessContext":
        """Copy with some fields replaced."""
        return replace(self, **changes)  # type: ignore[arg-type]

    def resource(self, resource_type: ResourceType) -> OwnedResource | None:
        """Innermost verified resource of a type, None if not in scope."""
        for resource in reversed(self.resources):
            if resource.resource_type == resource_type:
                return resource
        return None


type StageCheck = Callable[
    [AccessContext], Awaitable[Result[AccessContext, DomainError]]
]


@dataclass(frozen=True, slots=True)
class Stage:
    """Named pipeline stage.

    Attributes:
        name: Stage name used in logs (authenticate, membership, ...).
        check: Async function implementing the stage contract.
    """

    name: str
    check: StageCheck


_DENIAL_REASONS: dict[ErrorCode, DenialReason] = {
    ErrorCode.MISSING_OR_MALFORMED_CREDENTIAL: DenialReason.NOT_AUTHENTICATED,
    ErrorCode.TOKEN_EXPIRED: DenialReason.NOT_AUTHENTICATED,
    ErrorCode.TOKEN_INVALID: DenialReason.NOT_AUTHENTICATED,
    ErrorCode.PRINCIPAL_NOT_FOUND: DenialReason.NOT_AUTHENTICATED,
    ErrorCode.NOT_PROJECT_MEMBER: DenialReason.NOT_PROJECT_MEMBER,
    ErrorCode.PROJECT_NOT_FOUND: DenialReason.RESOURCE_NOT_IN_SCOPE,
    ErrorCode.NOT_CHAT_PARTICIPANT: DenialReason.NOT_CHAT_PARTICIPANT,
    ErrorCode.CHAT_NOT_FOUND: DenialReason.RESOURCE_NOT_IN_SCOPE,
    ErrorCode.RESOURCE_NOT_FOUND: DenialReason.RESOURCE_NOT_IN_SCOPE,
    ErrorCode.PERMISSION_DENIED: DenialReason.PERMISSION_DENIED,
    ErrorCode.NOT_OWNER: DenialReason.NOT_OWNER,
}


def denial_reason_for(error: DomainError) -> DenialReason | None:
    """Denial reason for an error, None for non-authorization failures."""
    return _DENIAL_REASONS.get(error.code)


class AccessPipeline:
    """Runs access stages in order and logs the outcome.

    Attributes:
        stages: Stages in execution order.
    """

    def __init__(self, stages: Sequence[Stage], logger: LoggerProtocol) -> None:
        """Initialize pipeline.

        Args:
            stages: Stages in execution order.
            logger: Structured logger.
        """
        self.stages: tuple[Stage, ...] = tuple(stages)
        self._logger = logger

    async def run(self, context: AccessContext) -> Result[AccessContext, DomainError]:
        """Run every stage until one fails.

        Args:
            context: Initial context (header, scope, request id).

        Returns:
            Success(AccessContext) with an allow decision, or the first
            stage Failure.
        """
        for stage in self.stages:
            result = await stage.check(context)
            if isinstance(result, Failure):
                reason = denial_reason_for(result.error)
                self._logger.warning(
                    "access_denied",
                    request_id=context.request_id,
                    user_id=context.principal.user_id if context.principal else None,
                    stage=stage.name,
                    reason=reason.value if reason else result.error.code.value,
                )
                return result
            context = result.value

        if context.decision is None:
            context = context.evolve(decision=AuthorizationDecision.allow())

        self._logger.info(
            "access_granted",
            request_id=context.request_id,
            user_id=context.principal.user_id if context.principal else None,
            stages=[stage.name for stage in self.stages],
        )
        return Success(value=context)
