"""Tests for path identifier parsing and scope resolution.

Reference:
    - src/presentation/routers/api/middleware/scope_resolution.py
"""

import pytest

from src.core.enums import ErrorCode
from src.core.errors import InternalError, ValidationError
from src.core.result import Failure, Success
from src.domain.enums import ParentType, ResourceType
from src.domain.value_objects import ResolvedScope, ResourceRef
from src.presentation.routers.api.middleware.scope_resolution import (
    parse_identifier,
    resolve_scope,
)
from tests.conftest import make_principal

PRINCIPAL = make_principal(user_id=3)


def run(path_params: dict[str, str], template: str | None = None):
    return resolve_scope(path_params, template)(PRINCIPAL)


@pytest.mark.unit
class TestParseIdentifier:
    @pytest.mark.parametrize("raw,expected", [("1", 1), ("42", 42), ("007", 7)])
    def test_valid(self, raw, expected):
        assert parse_identifier(raw) == expected

    @pytest.mark.parametrize(
        "raw", ["", "0", "-1", "abc", "1.5", "1e3", " 1", "٣", None, 5]
    )
    def test_invalid(self, raw):
        assert parse_identifier(raw) is None


@pytest.mark.unit
class TestResolveScope:
    def test_no_identifiers(self):
        result = run({})

        assert isinstance(result, Success)
        assert result.value == ResolvedScope()

    def test_project_parameter(self):
        result = run({"project_id": "7"}, "/api/projects/{project_id}")

        assert result.value == ResolvedScope(project_id=7)

    def test_same_scope_under_any_mount_prefix(self):
        params = {"project_id": "7", "task_id": "42"}

        bare = run(params, "/api/projects/{project_id}/tasks/{task_id}")
        mounted = run(params, "/v1/api/projects/{project_id}/tasks/{task_id}")

        assert bare.value == mounted.value
        assert mounted.value.project_id == 7

    def test_comment_chain(self):
        result = run({"project_id": "7", "task_id": "42", "comment_id": "5"})

        assert result.value == ResolvedScope(
            project_id=7,
            resources=(
                ResourceRef(ResourceType.TASK, 42, ParentType.PROJECT, 7),
                ResourceRef(ResourceType.COMMENT, 5, ParentType.TASK, 42),
            ),
        )

    @pytest.mark.parametrize(
        "param,resource_type",
        [
            ("document_id", ResourceType.DOCUMENT),
            ("tag_id", ResourceType.TAG),
            ("message_id", ResourceType.MESSAGE),
        ],
    )
    def test_project_children(self, param, resource_type):
        result = run({"project_id": "7", param: "9"})

        assert result.value.resources == (
            ResourceRef(resource_type, 9, ParentType.PROJECT, 7),
        )

    def test_task_siblings_share_the_project(self):
        """A tag linked to a task is checked against the path project."""
        result = run({"project_id": "7", "task_id": "42", "tag_id": "81"})

        assert result.value.resources == (
            ResourceRef(ResourceType.TASK, 42, ParentType.PROJECT, 7),
            ResourceRef(ResourceType.TAG, 81, ParentType.PROJECT, 7),
        )

    def test_chat_message_is_a_direct_message(self):
        result = run({"chat_id": "70", "message_id": "71"})

        assert result.value == ResolvedScope(
            chat_id=70,
            resources=(
                ResourceRef(ResourceType.DIRECT_MESSAGE, 71, ParentType.CHAT, 70),
            ),
        )

    def test_chat_without_children(self):
        result = run({"chat_id": "70"}, "/api/chats/{chat_id}")

        assert result.value == ResolvedScope(chat_id=70)

    def test_notification_belongs_to_principal(self):
        result = run({"notification_id": "11"})

        assert result.value == ResolvedScope(
            resources=(
                ResourceRef(ResourceType.NOTIFICATION, 11, ParentType.USER, 3),
            )
        )

    def test_plain_identifiers_do_not_scope(self):
        result = run({"user_id": "4", "template_id": "2", "version_number": "3"})

        assert result.value == ResolvedScope()

    def test_all_malformed_identifiers_reported(self):
        result = run({"project_id": "abc", "task_id": "-1", "comment_id": "5"})

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.INVALID_IDENTIFIER
        assert [f.field for f in result.error.fields] == [
            "path.project_id",
            "path.task_id",
        ]
        assert {f.code for f in result.error.fields} == {"invalid_identifier"}

    @pytest.mark.parametrize("param", ["user_id", "version_number", "chat_id"])
    def test_malformed_plain_or_chat_identifier(self, param):
        result = run({param: "me"})

        assert isinstance(result, Failure)
        assert result.error.fields[0].field == f"path.{param}"


@pytest.mark.unit
class TestUnanchoredRoutes:
    """Routes that name a scoped segment without its parent id fail closed."""

    @pytest.mark.parametrize(
        "template,params",
        [
            ("/api/projects/{id}", {"id": "7"}),
            ("/v1/api/projects/{id}/members", {"id": "7"}),
            ("/api/chats/{id}/messages", {"id": "70"}),
        ],
    )
    def test_parent_segment_without_parent_parameter(self, template, params):
        result = run(params, template)

        assert isinstance(result, Failure)
        assert isinstance(result.error, InternalError)
        assert result.error.code == ErrorCode.INTERNAL_ERROR
        assert result.error.details["route"] == template

    @pytest.mark.parametrize(
        "params,orphans",
        [
            ({"task_id": "42"}, "task_id"),
            ({"comment_id": "5"}, "comment_id"),
            ({"message_id": "1", "tag_id": "2"}, "message_id,tag_id"),
        ],
    )
    def test_nested_identifier_without_parent(self, params, orphans):
        result = run(params)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INTERNAL_ERROR
        assert result.error.details["parameters"] == orphans

    def test_unanchored_route_fails_before_parsing(self):
        """Even a malformed id is not reported for a broken route."""
        result = run({"id": "abc"}, "/api/projects/{id}")

        assert isinstance(result.error, InternalError)
