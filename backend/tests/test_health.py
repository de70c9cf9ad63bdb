"""
Testes para os endpoints de healthcheck e menu de entidades.
"""

from unittest.mock import AsyncMock, patch

import pytest
from httpx import AsyncClient, ASGITransport

from app.main import app


@pytest.fixture
async def client():
    """Cliente HTTP assíncrono para testes."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.mark.anyio
async def test_health_check_returns_healthy_status(client: AsyncClient):
    """Verifica se o endpoint /health retorna status 'healthy'."""
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["app_name"] == "Library Catalog API"
    assert "environment" in data


@pytest.mark.anyio
async def test_readiness_all_up(client: AsyncClient):
    """Com banco e Redis no ar, readiness deve retornar 200."""
    with patch("app.main.check_database_connection", AsyncMock(return_value=(True, None))), \
         patch("app.main.check_redis_connection", AsyncMock(return_value=True)):
        response = await client.get("/health/ready")

    assert response.status_code == 200
    assert response.json()["database"] == "up"
    assert response.json()["redis"] == "up"


@pytest.mark.anyio
async def test_readiness_redis_down_returns_503(client: AsyncClient):
    """Com Redis fora do ar, readiness deve retornar 503."""
    with patch("app.main.check_database_connection", AsyncMock(return_value=(True, None))), \
         patch("app.main.check_redis_connection", AsyncMock(return_value=False)):
        response = await client.get("/health/ready")

    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"
    assert response.json()["redis"] == "down"


@pytest.mark.anyio
async def test_entities_menu_lists_routes_in_order(client: AsyncClient):
    """Menu deve listar autor, livro, comentário e editora, nessa ordem."""
    response = await client.get("/api/menu/entities")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == "entity-menu"
    assert data["label_key"] == "global.menu.entities.main"
    assert data["icon"] == "th-list"
    assert [item["route"] for item in data["items"]] == [
        "/entity/author",
        "/entity/book",
        "/entity/comment",
        "/entity/publisher",
    ]
    assert data["items"][1] == {
        "route": "/entity/book",
        "label_key": "global.menu.entities.book",
        "icon": "asterisk",
    }
