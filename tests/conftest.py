"""Shared fixtures: a fresh application and an httpx client over ASGI.

Invariants:
    - Every test gets its own app built by create_app()
    - Requests never leave the process (ASGITransport)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from marketplace_api.app.core.config import Settings
from marketplace_api.app.main import create_app


@pytest.fixture
def settings(monkeypatch):
    """Settings built from a clean environment."""
    for name in (
        "PROJECT_NAME", "API_VERSION", "DEBUG", "LOG_LEVEL", "LOG_FILE",
        "API_HOST", "API_PORT", "CORS_ORIGINS",
        "FRONTEND_PORT", "FRONTEND_PROXY_TARGET", "FRONTEND_OUT_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    return Settings.from_env()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
