"""Test fixtures — settings and FastAPI test clients."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from wakegate.config import Settings
from wakegate.main import create_app

TEST_MAC = "10:ff:e0:cf:e6:0e"


@pytest.fixture
def wol_settings():
    """Dev-mode settings with a WoL target configured (nothing is sent)."""
    return Settings(
        _env_file=None,
        mode="dev",
        wol_mac=TEST_MAC,
        wol_host="127.0.0.1",
        wol_preflight=False,
    )


@pytest_asyncio.fixture
async def client(wol_settings: Settings):
    """Async test client for an app with the WoL trigger enabled."""
    app = create_app(wol_settings)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def disabled_client():
    """Async test client for an app without a WoL target."""
    app = create_app(Settings(_env_file=None, wol_mac=""))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
