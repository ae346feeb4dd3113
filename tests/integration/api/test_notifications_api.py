"""Integration tests for Notifications API."""

import pytest
from httpx import AsyncClient

from tests.conftest import actor, register


class TestNotificationsAPI:
    """Integration tests for draining the notification outbox."""

    @pytest.mark.asyncio
    async def test_empty_inbox(self, api_client: AsyncClient):
        response = await api_client.get("/api/v1/notifications", headers=actor("1"))

        assert response.status_code == 200
        assert response.json() == {"data": [], "meta": {"total": 0}}

    @pytest.mark.asyncio
    async def test_drain_is_destructive(self, api_client: AsyncClient):
        """Test GET /api/v1/notifications returns each notification once."""
        await register(api_client, "1")
        await register(api_client, "2")
        create = await api_client.post(
            "/api/v1/teams", json={"name": "Rocket"}, headers=actor("1")
        )
        team_id = create.json()["data"]["id"]
        await api_client.post(f"/api/v1/teams/{team_id}/members", headers=actor("2"))
        await api_client.delete("/api/v1/teams/mine/members/me", headers=actor("2"))

        first = await api_client.get("/api/v1/notifications", headers=actor("1"))
        second = await api_client.get("/api/v1/notifications", headers=actor("1"))

        assert [n["type"] for n in first.json()["data"]] == [
            "team.member_joined",
            "team.member_left",
        ]
        assert first.json()["data"][1]["message"] == 'User 2 has left your team "Rocket".'
        assert second.json()["data"] == []

    @pytest.mark.asyncio
    async def test_founder_creating_team_gets_nothing(self, api_client: AsyncClient):
        await register(api_client, "1")
        await api_client.post("/api/v1/teams", json={"name": "Rocket"}, headers=actor("1"))

        response = await api_client.get("/api/v1/notifications", headers=actor("1"))

        assert response.json()["data"] == []
