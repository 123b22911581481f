"""
Catalog API - Health Endpoint Tests
===================================

What we test:
    ✅ 200 + healthy when the database answers SELECT 1
    ✅ 503 + unhealthy when the connection fails
"""

from unittest.mock import MagicMock, patch

import pytest

from catalog import __version__


class TestHealthEndpoint:

    @pytest.mark.asyncio
    async def test_healthy(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["version"] == __version__
        assert body["uptime_seconds"] >= 0

    @pytest.mark.asyncio
    async def test_database_unreachable(self, test_client):
        broken_engine = MagicMock()
        broken_engine.connect.side_effect = OSError("connection refused")

        with patch("catalog.routes.health.engine", broken_engine):
            response = await test_client.get("/health")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"
        assert response.json()["database"] == "disconnected"
