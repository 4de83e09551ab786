"""Integration tests for ConsoleAdapter with real structlog.

Tests cover:
- JSON output and log levels
- Credential redaction
- Exceptions recorded by type only
- Request id merged from structlog contextvars
- Context binding

Architecture:
- Integration tests with REAL structlog (not mocked)
- Fresh ConsoleAdapter instances per test (bypass singleton)
"""

import json
import sys
from io import StringIO
from unittest.mock import patch

import pytest
import structlog

from src.infrastructure.logging.console_adapter import ConsoleAdapter


def capture(log_call, *, level: str = "DEBUG") -> list[dict]:
    """Run log_call(adapter) with stdout captured, return parsed JSON lines."""
    captured_output = StringIO()
    with patch.object(sys, "stdout", captured_output):
        adapter = ConsoleAdapter(use_json=True, level=level)
        log_call(adapter)
    return [
        json.loads(line)
        for line in captured_output.getvalue().splitlines()
        if line.strip()
    ]


@pytest.mark.integration
class TestConsoleAdapterIntegration:
    """Integration tests for ConsoleAdapter with real structlog."""

    def test_json_mode_produces_valid_json(self):
        logs = capture(lambda log: log.info("access_granted", user_id=1, stages=["a"]))

        assert logs[0]["event"] == "access_granted"
        assert logs[0]["user_id"] == 1
        assert logs[0]["level"] == "info"
        assert "timestamp" in logs[0]

    def test_level_filtering(self):
        def emit(log):
            log.debug("hidden")
            log.info("hidden_too")
            log.warning("shown")

        logs = capture(emit, level="WARNING")

        assert [entry["event"] for entry in logs] == ["shown"]

    @pytest.mark.parametrize("key", ["authorization", "token", "Authorization"])
    def test_credentials_are_redacted(self, key):
        logs = capture(lambda log: log.warning("access_denied", **{key: "Bearer abc"}))

        assert logs[0][key] == "[REDACTED]"
        assert "abc" not in json.dumps(logs[0])

    def test_exception_recorded_by_type_only(self):
        error = ValueError("user input: secret-value")

        logs = capture(lambda log: log.error("unhandled_exception", error=error))

        assert logs[0]["error_type"] == "ValueError"
        assert "secret-value" not in json.dumps(logs[0])

    def test_request_id_from_contextvars(self):
        structlog.contextvars.bind_contextvars(request_id="req-123")
        try:
            logs = capture(lambda log: log.info("access_granted"))
        finally:
            structlog.contextvars.unbind_contextvars("request_id")

        assert logs[0]["request_id"] == "req-123"

    def test_bind_adds_context(self):
        logs = capture(lambda log: log.bind(stage="membership").info("checked"))

        assert logs[0]["stage"] == "membership"

    def test_unknown_level_falls_back_to_info(self):
        def emit(log):
            log.debug("hidden")
            log.info("shown")

        logs = capture(emit, level="LOUD")

        assert [entry["event"] for entry in logs] == ["shown"]
