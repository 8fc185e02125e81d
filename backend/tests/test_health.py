"""Test health check endpoints and app lifecycle."""

import socket
from unittest.mock import patch

import pytest
from httpx import AsyncClient

from wakegate.config import Settings
from wakegate.exceptions import ResolutionError
from wakegate.main import create_app


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    resp = await client.get("/api/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["service"] == "wakegate"
    assert data["wol_enabled"] is True
    assert "version" in data


@pytest.mark.asyncio
async def test_health_check_disabled(disabled_client: AsyncClient):
    resp = await disabled_client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["wol_enabled"] is False


@pytest.mark.asyncio
async def test_ping(client: AsyncClient):
    resp = await client.get("/api/ping")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.asyncio
@patch("wakegate.utils.wol.socket.getaddrinfo")
async def test_startup_fails_on_unresolvable_host(mock_gai):
    mock_gai.side_effect = socket.gaierror(socket.EAI_NONAME, "Name or service not known")
    app = create_app(Settings(_env_file=None, wol_mac="10:ff:e0:cf:e6:0e", wol_host="nas.example"))

    with pytest.raises(ResolutionError):
        async with app.router.lifespan_context(app):
            pass


@pytest.mark.asyncio
async def test_startup_without_preflight():
    app = create_app(
        Settings(_env_file=None, wol_mac="10:ff:e0:cf:e6:0e", wol_host="nas.example", wol_preflight=False)
    )
    async with app.router.lifespan_context(app):
        pass
