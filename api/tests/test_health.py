"""Tests for health, readiness and version endpoints, plus the generic 500 contract."""

import re
from dataclasses import replace
from datetime import datetime

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from roaster.main import app


@pytest_asyncio.fixture
async def client():
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def settings_with_key():
    original = app.state.settings
    app.state.settings = replace(original, gemini_api_key="test-key")
    yield app.state.settings
    app.state.settings = original


@pytest.mark.asyncio
async def test_health_api_contract(client: AsyncClient):
    """GET /api/health: 200, exact keys, status ok, semver, ISO8601 UTC."""
    response = await client.get("/api/health")
    assert response.status_code == 200
    assert response.headers.get("content-type", "").startswith("application/json")
    data = response.json()
    assert set(data.keys()) == {"status", "version", "timestamp", "uptime_seconds"}
    assert data["status"] == "ok"
    assert re.fullmatch(r"\d+\.\d+\.\d+", data["version"])
    ts = data["timestamp"]
    assert ts.endswith("Z")
    assert datetime.fromisoformat(ts.replace("Z", "+00:00")).tzinfo is not None
    assert isinstance(data["uptime_seconds"], int) and data["uptime_seconds"] >= 0


@pytest.mark.asyncio
async def test_version(client: AsyncClient):
    response = await client.get("/api/version")
    assert response.status_code == 200
    assert re.fullmatch(r"\d+\.\d+\.\d+", response.json()["version"])


@pytest.mark.asyncio
async def test_ready_reports_model_when_key_configured(client: AsyncClient, settings_with_key):
    response = await client.get("/api/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["model"] == settings_with_key.gemini_model


@pytest.mark.asyncio
async def test_ready_is_503_without_key(client: AsyncClient):
    original = app.state.settings
    app.state.settings = replace(original, gemini_api_key="")
    try:
        response = await client.get("/api/ready")
    finally:
        app.state.settings = original
    assert response.status_code == 503
    assert list(response.json().keys()) == ["detail"]


@pytest.mark.asyncio
async def test_cors_allows_configured_origin(client: AsyncClient):
    response = await client.get("/api/health", headers={"Origin": "http://localhost:3000"})
    assert response.status_code == 200
    assert "access-control-allow-origin" in [h.lower() for h in response.headers.keys()]


@pytest.mark.asyncio
async def test_unhandled_exception_returns_500(client: AsyncClient):
    """Unhandled exceptions return 500 with a generic message and no stack trace."""
    from roaster.routers.roast import get_roast_service

    class Exploding:
        def roast(self, raw_input):
            raise RuntimeError("kaboom")

    app.dependency_overrides[get_roast_service] = lambda: Exploding()
    try:
        response = await client.post("/api/roast", json={"input": "octocat"})
    finally:
        app.dependency_overrides.pop(get_roast_service, None)

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
