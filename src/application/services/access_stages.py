"""Stage factories for the access pipeline.

Each factory closes over its collaborator and returns a named Stage. The
canonical order for a resource-scoped route is:

    authenticate -> resolve_scope -> membership -> participant
        -> resource_scope -> permission | ownership

AccessPipelineFactory assembles that order from a short route description
so routers never wire stages by hand.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from src.application.services.access_pipeline import (
    AccessContext,
    AccessPipeline,
    Stage,
)
from src.application.services.ownership_authorizer import OwnershipAuthorizer
from src.application.services.principal_resolver import PrincipalResolver
from src.application.services.scope_verifier import ScopeVerifier
from src.core.enums import ErrorCode
from src.core.errors import DomainError, InternalError
from src.core.result import Failure, Result, Success
from src.domain.enums import DenialReason, ResourceType
from src.domain.errors import AccessDeniedError
from src.domain.protocols import LoggerProtocol, PermissionMatrixProtocol
from src.domain.value_objects import AuthorizationDecision, Principal, ResolvedScope

type ScopeSource = Callable[[Principal], Result[ResolvedScope, DomainError]]
"""Builds the request scope once the principal is known (transport boundary)."""


def _unauthenticated(stage: str) -> Failure[DomainError]:
    """Failure for a stage that ran before authentication."""
    return Failure(
        error=InternalError(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Stage '{stage}' requires an authenticated principal",
        )
    )


def _permission_denied(
    principal: Principal, permissions: Sequence[str]
) -> Failure[DomainError]:
    return Failure(
        error=AccessDeniedError(
            code=ErrorCode.PERMISSION_DENIED,
            message="Role lacks the required permission",
            details={"role": principal.role, "permission": ",".join(permissions)},
        )
    )


def authenticate_stage(resolver: PrincipalResolver) -> Stage:
    """Resolve the principal from the Authorization header."""

    async def check(ctx: AccessContext) -> Result[AccessContext, DomainError]:
        result = await resolver.resolve(ctx.authorization)
        if isinstance(result, Failure):
            return result
        return Success(value=ctx.evolve(principal=result.value))

    return Stage(name="authenticate", check=check)


def resolve_scope_stage(source: ScopeSource) -> Stage:
    """Normalize path identifiers into a ResolvedScope.

    Runs right after authentication so malformed identifiers are reported
    only to authenticated callers, and before any repository lookup.
    """

    async def check(ctx: AccessContext) -> Result[AccessContext, DomainError]:
        if ctx.principal is None:
            return _unauthenticated("resolve_scope")
        result = source(ctx.principal)
        if isinstance(result, Failure):
            return result
        return Success(value=ctx.evolve(scope=result.value))

    return Stage(name="resolve_scope", check=check)


def membership_stage(verifier: ScopeVerifier) -> Stage:
    """Verify project existence and membership (no-op without a project)."""

    async def check(ctx: AccessContext) -> Result[AccessContext, DomainError]:
        if ctx.scope.project_id is None:
            return Success(value=ctx)
        if ctx.principal is None:
            return _unauthenticated("membership")
        result = await verifier.verify_membership(ctx.scope.project_id, ctx.principal)
        if isinstance(result, Failure):
            return result
        return Success(value=ctx.evolve(membership=result.value))

    return Stage(name="membership", check=check)


def participant_stage(verifier: ScopeVerifier) -> Stage:
    """Verify direct chat existence and participation (no-op without a chat)."""

    async def check(ctx: AccessContext) -> Result[AccessContext, DomainError]:
        if ctx.scope.chat_id is None:
            return Success(value=ctx)
        if ctx.principal is None:
            return _unauthenticated("participant")
        result = await verifier.verify_participant(ctx.scope.chat_id, ctx.principal)
        if isinstance(result, Failure):
            return result
        return Success(value=ctx.evolve(participation=result.value))

    return Stage(name="participant", check=check)


def resource_scope_stage(verifier: ScopeVerifier) -> Stage:
    """Verify every resource-in-parent claim, outermost first."""

    async def check(ctx: AccessContext) -> Result[AccessContext, DomainError]:
        if not ctx.scope.resources:
            return Success(value=ctx)
        if ctx.principal is None:
            return _unauthenticated("resource_scope")
        unverified_project = ctx.scope.project_id is not None and ctx.membership is None
        unverified_chat = ctx.scope.chat_id is not None and ctx.participation is None
        if unverified_project or unverified_chat:
            # Resource checks only follow a passed membership or participant check
            return Failure(
                error=InternalError(
                    code=ErrorCode.INTERNAL_ERROR,
                    message="Resource scope checked before its parent scope",
                )
            )
        result = await verifier.verify_resources(ctx.scope.resources)
        if isinstance(result, Failure):
            return result
        return Success(value=ctx.evolve(resources=result.value))

    return Stage(name="resource_scope", check=check)


def permission_stage(matrix: PermissionMatrixProtocol, permission: str) -> Stage:
    """Require a single permission key."""

    async def check(ctx: AccessContext) -> Result[AccessContext, DomainError]:
        if ctx.principal is None:
            return _unauthenticated("permission")
        if not matrix.has_permission(ctx.principal.role, permission):
            return _permission_denied(ctx.principal, [permission])
        return Success(value=ctx.evolve(decision=AuthorizationDecision.allow()))

    return Stage(name="permission", check=check)


def any_permission_stage(
    matrix: PermissionMatrixProtocol, permissions: Sequence[str]
) -> Stage:
    """Require at least one of the keys (an empty list never passes)."""
    keys = tuple(permissions)

    async def check(ctx: AccessContext) -> Result[AccessContext, DomainError]:
        if ctx.principal is None:
            return _unauthenticated("any_permission")
        if not matrix.has_any_permission(ctx.principal.role, keys):
            return _permission_denied(ctx.principal, keys)
        return Success(value=ctx.evolve(decision=AuthorizationDecision.allow()))

    return Stage(name="any_permission", check=check)


def all_permissions_stage(
    matrix: PermissionMatrixProtocol, permissions: Sequence[str]
) -> Stage:
    """Require every key (an empty list always passes)."""
    keys = tuple(permissions)

    async def check(ctx: AccessContext) -> Result[AccessContext, DomainError]:
        if ctx.principal is None:
            return _unauthenticated("all_permissions")
        if not matrix.has_all_permissions(ctx.principal.role, keys):
            return _permission_denied(ctx.principal, keys)
        return Success(value=ctx.evolve(decision=AuthorizationDecision.allow()))

    return Stage(name="all_permissions", check=check)


def ownership_stage(
    authorizer: OwnershipAuthorizer,
    resource_type: ResourceType,
    any_permission: str | None,
) -> Stage:
    """Owner of the verified resource passes, others need any_permission."""

    async def check(ctx: AccessContext) -> Result[AccessContext, DomainError]:
        if ctx.principal is None:
            return _unauthenticated("ownership")
        resource = ctx.resource(resource_type)
        if resource is None:
            return Failure(
                error=InternalError(
                    code=ErrorCode.INTERNAL_ERROR,
                    message=f"Ownership check needs a verified {resource_type.value}",
                )
            )
        decision = authorizer.authorize(ctx.principal, resource, any_permission)
        if not decision.allowed:
            return Failure(
                error=AccessDeniedError(
                    code=ErrorCode.NOT_OWNER,
                    message=f"Only the owner may modify this {resource_type.value}",
                    details={"reason": DenialReason.NOT_OWNER.value},
                )
            )
        return Success(value=ctx.evolve(decision=decision))

    return Stage(name="ownership", check=check)


@dataclass(frozen=True, slots=True)
class OwnershipRule:
    """Ownership requirement for a route.

    Attributes:
        resource_type: Verified resource whose owner is compared.
        any_permission: Key that lets non-owners through, None for owner-only.
    """

    resource_type: ResourceType
    any_permission: str | None = None


class AccessPipelineFactory:
    """Builds AccessPipeline instances in canonical stage order.

    Dependencies (injected via constructor):
        - PrincipalResolver, ScopeVerifier, OwnershipAuthorizer
        - PermissionMatrixProtocol
        - LoggerProtocol
    """

    def __init__(
        self,
        resolver: PrincipalResolver,
        verifier: ScopeVerifier,
        authorizer: OwnershipAuthorizer,
        matrix: PermissionMatrixProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._resolver = resolver
        self._verifier = verifier
        self._authorizer = authorizer
        self._matrix = matrix
        self._logger = logger

    def build(
        self,
        *,
        scope: ScopeSource | None = None,
        permission: str | None = None,
        any_of: Sequence[str] | None = None,
        all_of: Sequence[str] | None = None,
        ownership: OwnershipRule | None = None,
    ) -> AccessPipeline:
        """Assemble the stages for one route.

        Authentication, membership, participant and resource scope are
        always present (the last three pass through when the scope names
        nothing).

        Args:
            scope: Builds the ResolvedScope from path identifiers.
            permission: Single required key.
            any_of: Keys of which at least one is required.
            all_of: Keys that are all required.
            ownership: Ownership requirement on a verified resource.

        Returns:
            AccessPipeline ready to run.
        """
        stages: list[Stage] = [authenticate_stage(self._resolver)]
        if scope is not None:
            stages.append(resolve_scope_stage(scope))
        stages += [
            membership_stage(self._verifier),
            participant_stage(self._verifier),
            resource_scope_stage(self._verifier),
        ]
        if permission is not None:
            stages.append(permission_stage(self._matrix, permission))
        if any_of is not None:
            stages.append(any_permission_stage(self._matrix, any_of))
        if all_of is not None:
            stages.append(all_permissions_stage(self._matrix, all_of))
        if ownership is not None:
            stages.append(
                ownership_stage(
                    self._authorizer, ownership.resource_type, ownership.any_permission
                )
            )
        return AccessPipeline(stages=stages, logger=self._logger)
