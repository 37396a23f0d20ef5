import pytest
from httpx import ASGITransport, AsyncClient

from app.core.config import Settings
from app.main import app


@pytest.mark.asyncio
async def test_health_endpoint() -> None:
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get("/api/health")
        head = await client.head("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert head.status_code == 200


@pytest.mark.asyncio
async def test_robots_keeps_crawlers_off_the_api() -> None:
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        robots = await client.get("/robots.txt")
        favicon = await client.get("/favicon.ico")

    assert robots.status_code == 200
    assert "Disallow: /api/" in robots.text
    assert favicon.headers.get("content-type") == "image/png"


def test_settings_normalize_database_url_and_origins(monkeypatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgres://user:pw@db:5432/catalog")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://emlak.example, https://admin.example")

    settings = Settings(_env_file=None)

    assert settings.database_async_url == "postgresql+asyncpg://user:pw@db:5432/catalog"
    assert settings.cors_allow_origins == ["https://emlak.example", "https://admin.example"]
