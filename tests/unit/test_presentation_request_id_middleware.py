"""Tests for RequestIdMiddleware.

Reference:
    - src/presentation/routers/api/middleware/request_id_middleware.py
"""

from uuid import UUID

import pytest
import structlog
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from src.presentation.routers.api.middleware.request_id_middleware import (
    RequestIdMiddleware,
    get_request_id,
)


@pytest.fixture
def client() -> TestClient:
    """Minimal app echoing what a handler sees."""
    app = FastAPI()
    app.add_middleware(RequestIdMiddleware)

    @app.get("/echo")
    async def echo(request: Request) -> dict[str, str | None]:
        bound = structlog.contextvars.get_contextvars().get("request_id")
        return {
            "state": request.state.request_id,
            "context": get_request_id(),
            "log": bound,
        }

    return TestClient(app)


@pytest.mark.unit
class TestRequestIdMiddleware:
    def test_header_matches_what_handler_sees(self, client):
        response = client.get("/echo")

        request_id = response.headers["X-Request-ID"]
        body = response.json()
        assert body == {"state": request_id, "context": request_id, "log": request_id}

    def test_id_is_uuid7(self, client):
        response = client.get("/echo")

        assert UUID(response.headers["X-Request-ID"]).version == 7

    def test_new_id_per_request(self, client):
        first = client.get("/echo").headers["X-Request-ID"]
        second = client.get("/echo").headers["X-Request-ID"]

        assert first != second

    def test_client_supplied_id_is_ignored(self, client):
        response = client.get("/echo", headers={"X-Request-ID": "forged"})

        assert response.headers["X-Request-ID"] != "forged"
        assert response.json()["state"] != "forged"

    def test_header_on_unknown_route(self, client):
        response = client.get("/missing")

        assert response.status_code == 404
        assert "X-Request-ID" in response.headers

    def test_context_cleared_after_request(self, client):
        client.get("/echo")

        assert get_request_id() is None

    def test_custom_header_name(self):
        app = FastAPI()
        app.add_middleware(RequestIdMiddleware, header_name="X-Correlation-ID")

        @app.get("/ping")
        async def ping() -> dict[str, str]:
            return {"status": "ok"}

        response = TestClient(app).get("/ping")

        assert "X-Correlation-ID" in response.headers
