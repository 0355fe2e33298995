"""Tests for the health check endpoint."""
from unittest.mock import AsyncMock, patch

from httpx import AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession


async def test_health_endpoint_returns_200(client: AsyncClient) -> None:
    """Test that the health endpoint returns 200 OK."""
    response = await client.get("/health")
    assert response.status_code == 200


async def test_health_endpoint_returns_healthy_status(client: AsyncClient) -> None:
    """Test that the health endpoint returns healthy status."""
    response = await client.get("/health")
    assert response.json() == {"status": "healthy", "database": "healthy"}


async def test_health_endpoint_database_unavailable(client: AsyncClient) -> None:
    """A failing database probe reports degraded instead of raising."""
    with patch.object(
        AsyncSession,
        "execute",
        new_callable=AsyncMock,
        side_effect=OperationalError("SELECT 1", {}, Exception("unreachable")),
    ):
        response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "degraded", "database": "unhealthy"}
