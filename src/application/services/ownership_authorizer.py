"""Ownership authorization service.

Decides whether a principal may modify a resource: owners always may,
everyone else needs the matching "any" permission from the matrix.

Ownership rule:
    owner id == current user id (after normalization)  -> allowed
    otherwise -> matrix.has_permission(role, any_permission)
    any_permission None -> owner-only, no matrix fallback

Id normalization:
    ints and ASCII digit strings compare by integer value; None, bools and
    anything else never equal any id.

Usage:
    authorizer = OwnershipAuthorizer(matrix)

    authorizer.can_edit_resource(
        role="developer",
        resource_owner_id=comment.owner_id,
        current_user_id=principal.user_id,
        any_permission="comments:edit_any",
    )
"""

from typing import Any

from src.domain.entities import OwnedResource
from src.domain.enums import DenialReason
from src.domain.protocols import PermissionMatrixProtocol
from src.domain.value_objects import AuthorizationDecision, Principal


def normalize_id(value: Any) -> int | None:
    """Normalize a user id for comparison, None if it can never match."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.isascii() and stripped.isdigit():
            return int(stripped)
    return None


def is_same_user(resource_owner_id: Any, current_user_id: Any) -> bool:
    """True only if both ids normalize to the same integer."""
    owner = normalize_id(resource_owner_id)
    current = normalize_id(current_user_id)
    return owner is not None and owner == current


class OwnershipAuthorizer:
    """Self-ownership bypass with permission-matrix fallback.

    Dependencies (injected via constructor):
        - PermissionMatrixProtocol: role permission lookups
    """

    def __init__(self, matrix: PermissionMatrixProtocol) -> None:
        """Initialize authorizer.

        Args:
            matrix: Permission matrix used for the non-owner fallback.
        """
        self._matrix = matrix

    def can_edit_resource(
        self,
        role: str | None,
        resource_owner_id: Any,
        current_user_id: Any,
        any_permission: str | None,
    ) -> bool:
        """Check whether a user may modify a resource.

        Args:
            role: Global role of the current user.
            resource_owner_id: Owner id recorded on the resource.
            current_user_id: Id of the current user.
            any_permission: Key that allows editing other users' resources,
                None for owner-only resources.

        Returns:
            bool: True for owners, else the matrix answer for any_permission.
        """
        if is_same_user(resource_owner_id, current_user_id):
            return True
        if any_permission is None:
            return False
        return self._matrix.has_permission(role, any_permission)

    def authorize(
        self,
        principal: Principal,
        resource: OwnedResource,
        any_permission: str | None,
    ) -> AuthorizationDecision:
        """Decide modification access to a verified resource.

        Args:
            principal: Authenticated principal.
            resource: Resource that already passed scope verification.
            any_permission: Key for non-owners, None for owner-only.

        Returns:
            AuthorizationDecision: allowed, or denied with NOT_OWNER.
        """
        if self.can_edit_resource(
            principal.role, resource.owner_id, principal.user_id, any_permission
        ):
            return AuthorizationDecision.allow()
        return AuthorizationDecision.deny(DenialReason.NOT_OWNER)
