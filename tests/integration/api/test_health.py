"""Tests for health check endpoints."""

import warnings

import pytest
from httpx import AsyncClient


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    @pytest.mark.asyncio
    async def test_health_returns_200(self, client: AsyncClient) -> None:
        """Test that health endpoint returns 200 OK."""
        response = await client.get("/health")

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_health_returns_correct_structure(self, client: AsyncClient) -> None:
        """Test that health endpoint returns expected structure."""
        response = await client.get("/health")
        data = response.json()

        assert "status" in data
        assert "version" in data
        assert "timestamp" in data
        assert "environment" in data

    @pytest.mark.asyncio
    async def test_health_status_is_healthy(self, client: AsyncClient) -> None:
        """Test that health status is 'healthy'."""
        response = await client.get("/health")
        data = response.json()

        assert data["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_health_version_format(self, client: AsyncClient) -> None:
        """Test that version has expected format."""
        response = await client.get("/health")
        data = response.json()

        # Check version follows semver pattern
        assert data["version"] == "1.0.0"


class TestDetailedHealthEndpoint:
    """Tests for the detailed health check endpoint."""

    @pytest.mark.asyncio
    async def test_reports_storage_and_counts(self, api_client: AsyncClient) -> None:
        await api_client.post(
            "/api/v1/profiles", json={"handle": "ada"}, headers={"X-Actor-Id": "1"}
        )

        response = await api_client.get("/health/detailed")
        data = response.json()

        assert response.status_code == 200
        assert data["status"] == "healthy"
        assert data["persistence"] == "healthy"
        assert data["profiles"] == 1
        assert data["teams"] == 0


class TestResponseRendering:
    @pytest.mark.asyncio
    async def test_no_response_class_deprecation(self, client: AsyncClient) -> None:
        """Responses are rendered without a deprecated response class."""
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            response = await client.get("/health")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert not [w for w in caught if "orjson" in str(w.message).lower()]
