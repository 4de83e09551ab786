"""Reasons recorded on a negative authorization decision."""

from enum import Enum


class DenialReason(str, Enum):
    """Why the pipeline refused a request.

    Recorded on AuthorizationDecision and in access_denied log events.
    """

    NOT_AUTHENTICATED = "not_authenticated"
    NOT_PROJECT_MEMBER = "not_project_member"
    NOT_CHAT_PARTICIPANT = "not_chat_participant"
    RESOURCE_NOT_IN_SCOPE = "resource_not_in_scope"
    PERMISSION_DENIED = "permission_denied"
    NOT_OWNER = "not_owner"
