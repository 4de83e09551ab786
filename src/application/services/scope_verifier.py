"""Scope verification (tenant isolation).

Confirms that the principal may operate inside the project or direct chat a
request names, and that every nested resource the request names actually
lives under the parent it is addressed through.

Ordering:
    membership or participation first, then resources in the order given
    (outermost first). A resource check never runs for a parent scope whose
    membership or participation check did not pass.

Missing resources and resources recorded under another parent produce the
same RESOURCE_NOT_FOUND failure, so foreign ids reveal nothing.
"""

from collections.abc import Sequence

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities import ChatParticipation, OwnedResource, ProjectMembership
from src.domain.errors import ScopeError
from src.domain.protocols import (
    ChatRepository,
    ProjectRepository,
    ResourceRepository,
)
from src.domain.value_objects import Principal, ResourceRef


class ScopeVerifier:
    """Verifies membership, participation and resource-in-parent claims.

    Dependencies (injected via constructor):
        - ProjectRepository: project and membership lookup
        - ChatRepository: direct chat and participant lookup
        - ResourceRepository: owner/parent lookup of nested resources
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        chat_repo: ChatRepository,
        resource_repo: ResourceRepository,
    ) -> None:
        """Initialize verifier with dependencies.

        Args:
            project_repo: Repository for project and membership lookup.
            chat_repo: Repository for direct chat participation lookup.
            resource_repo: Repository for nested resource lookup.
        """
        self._project_repo = project_repo
        self._chat_repo = chat_repo
        self._resource_repo = resource_repo

    async def verify_membership(
        self,
        project_id: int,
        principal: Principal,
    ) -> Result[ProjectMembership, ScopeError]:
        """Verify the project exists and the principal is a member.

        Args:
            project_id: Project addressed by the request.
            principal: Authenticated principal.

        Returns:
            Success(ProjectMembership): Principal is a member.
            Failure(ScopeError): PROJECT_NOT_FOUND or NOT_PROJECT_MEMBER.
        """
        project = await self._project_repo.find_by_id(project_id)
        if project is None:
            return Failure(
                error=ScopeError(
                    code=ErrorCode.PROJECT_NOT_FOUND,
                    message="Project not found",
                    details={"project_id": str(project_id)},
                )
            )

        membership = await self._project_repo.find_membership(
            project_id, principal.user_id
        )
        if membership is None:
            return Failure(
                error=ScopeError(
                    code=ErrorCode.NOT_PROJECT_MEMBER,
                    message="User is not a member of this project",
                    details={"project_id": str(project_id)},
                )
            )

        return Success(value=membership)

    async def verify_participant(
        self,
        chat_id: int,
        principal: Principal,
    ) -> Result[ChatParticipation, ScopeError]:
        """Verify the direct chat exists and the principal takes part in it.

        Returns:
            Success(ChatParticipation), or Failure(ScopeError) with
            CHAT_NOT_FOUND or NOT_CHAT_PARTICIPANT.
        """
        if not await self._chat_repo.exists(chat_id):
            return Failure(
                error=ScopeError(
                    code=ErrorCode.CHAT_NOT_FOUND,
                    message="Chat not found",
                    details={"chat_id": str(chat_id)},
                )
            )

        participation = await self._chat_repo.find_participation(
            chat_id, principal.user_id
        )
        if participation is None:
            return Failure(
                error=ScopeError(
                    code=ErrorCode.NOT_CHAT_PARTICIPANT,
                    message="User does not take part in this chat",
                    details={"chat_id": str(chat_id)},
                )
            )

        return Success(value=participation)

    async def verify_resource(
        self, ref: ResourceRef
    ) -> Result[OwnedResource, ScopeError]:
        """Verify one resource exists under the asserted parent.

        The asserted parent kind must be the kind the resource is recorded
        under; a claim naming any other kind never reaches the repository.

        Args:
            ref: Resource-in-parent claim.

        Returns:
            Success(OwnedResource): Resource found under that parent.
            Failure(ScopeError): RESOURCE_NOT_FOUND (missing or foreign).
        """
        resource = None
        if ref.parent_type is ref.resource_type.parent_type:
            resource = await self._resource_repo.find_owner_and_parent(
                ref.resource_type, ref.resource_id
            )
        if resource is None or resource.parent_id != ref.parent_id:
            return Failure(
                error=ScopeError(
                    code=ErrorCode.RESOURCE_NOT_FOUND,
                    message=f"{ref.resource_type.value.capitalize()} not found",
                    details={
                        "resource_type": ref.resource_type.value,
                        "resource_id": str(ref.resource_id),
                    },
                )
            )
        return Success(value=resource)

    async def verify_resources(
        self, refs: Sequence[ResourceRef]
    ) -> Result[tuple[OwnedResource, ...], ScopeError]:
        """Verify a chain of resources, outermost first, stopping at the first miss."""
        verified: list[OwnedResource] = []
        for ref in refs:
            result = await self.verify_resource(ref)
            if isinstance(result, Failure):
                return result
            verified.append(result.value)
        return Success(value=tuple(verified))
