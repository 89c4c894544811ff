"""
Tests for the FastAPI application: health probes and error translation.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.api.main import app
from jobly.core.errors import NotFoundError, ValidationError
from jobly.db.session import get_async_session


# Routes that raise on purpose, to exercise the global exception handlers
_error_router = APIRouter(prefix="/_errors")


@_error_router.get("/not-found")
async def _raise_not_found():
    raise NotFoundError("No job: 7")


@_error_router.get("/bad-request")
async def _raise_validation_error():
    raise ValidationError("Company handle does not exist: nope")


@_error_router.get("/crash")
async def _raise_unexpected():
    raise RuntimeError("boom")


@_error_router.get("/typed")
async def _typed(min_salary: int):
    return {"min_salary": min_salary}


app.include_router(_error_router)


@pytest.fixture
def client():
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


class TestHealth:

    def test_health_check(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["message"] == "Healthy"
        assert response.headers["X-Correlation-ID"]

    def test_correlation_id_is_echoed(self, client):
        response = client.get("/api/v1/health", headers={"X-Correlation-ID": "abc-123"})

        assert response.headers["X-Correlation-ID"] == "abc-123"

    def test_database_health_uses_injected_session(self, client):
        session = AsyncMock(spec=AsyncSession)

        async def override_get_async_session():
            yield session

        app.dependency_overrides[get_async_session] = override_get_async_session

        response = client.get("/api/v1/health/db")

        assert response.status_code == 200
        assert response.json()["message"] == "Database reachable"
        session.execute.assert_awaited_once()


class TestErrorTranslation:

    def test_not_found_error(self, client):
        response = client.get("/_errors/not-found", headers={"X-Request-ID": "req-1"})

        assert response.status_code == 404
        body = response.json()
        assert body["status"] == 404
        assert body["error"] == {"type": "not_found", "message": "No job: 7", "details": None}
        assert body["correlation_id"] == "req-1"
        assert body["path"] == "/_errors/not-found"
        assert body["method"] == "GET"

    def test_validation_error(self, client):
        response = client.get("/_errors/bad-request")

        assert response.status_code == 400
        assert response.json()["error"]["type"] == "bad_request"
        assert "nope" in response.json()["error"]["message"]

    def test_unknown_route(self, client):
        response = client.get("/api/v1/nothing-here")

        assert response.status_code == 404
        assert response.json()["error"]["type"] == "http_error"

    def test_request_validation_error(self, client):
        response = client.get("/_errors/typed", params={"min_salary": "lots"})

        assert response.status_code == 422
        body = response.json()
        assert body["error"]["type"] == "validation_error"
        assert body["error"]["details"]

    def test_unexpected_error_is_hidden(self, client):
        response = client.get("/_errors/crash")

        assert response.status_code == 500
        body = response.json()
        assert body["error"]["type"] == "internal_error"
        assert "boom" not in body["error"]["message"]
