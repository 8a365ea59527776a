from collections.abc import AsyncGenerator

import pytest
from dishka import make_async_container
from dishka.integrations.fastapi import FastapiProvider
from httpx import ASGITransport, AsyncClient

from app.common.logger import LoggerType
from app.infrastructure.ioc.api_ioc import ApiProvider, HealthCheckProvider
from app.infrastructure.providers import LoggerProvider
from app.settings.config import AppSettings, Settings
from tests.utils import create_test_app

pytestmark = pytest.mark.integration


@pytest.fixture(params=[False, True], ids=["sequential", "concurrent"])
async def live_client(request: pytest.FixtureRequest) -> AsyncGenerator[AsyncClient]:
    """Клиент приложения с настоящими проверками БД"""
    app_settings = AppSettings(mode="test", concurrent_probes=request.param)
    container = make_async_container(
        ApiProvider(),
        FastapiProvider(),
        LoggerProvider(),
        HealthCheckProvider(),
        context={
            AppSettings: app_settings,
            Settings: Settings(app=app_settings),
            LoggerType: LoggerType.TEST,
        },
    )
    async with AsyncClient(
        transport=ASGITransport(app=create_test_app(container)),
        base_url="http://testserver",
    ) as client:
        yield client
    await container.close()


class TestHealthIntegration:
    """Проверка запущенных в контейнерах БД"""

    async def test_all_alive(self, live_client: AsyncClient, live_payload: dict) -> None:
        res = await live_client.post("/health", json=live_payload)

        assert res.status_code == 200
        assert res.json() == {
            "postgresql": "PostgreSQL is alive",
            "mysql": "MySQL is alive",
            "mongodb": "MongoDB is alive",
            "redis": "Redis is alive",
        }

    async def test_postgres_refused(
        self, live_client: AsyncClient, live_payload: dict
    ) -> None:
        live_payload["postgresql"]["host"] = "localhost"
        live_payload["postgresql"]["port"] = "1"

        body = (await live_client.post("/health", json=live_payload)).json()

        assert body["postgresql"].startswith(
            ("Failed to connect to PostgreSQL: ", "Failed to ping PostgreSQL: ")
        )
        assert body["mysql"] == "MySQL is alive"
        assert body["mongodb"] == "MongoDB is alive"
        assert body["redis"] == "Redis is alive"

    async def test_redis_refused(self, live_client: AsyncClient, live_payload: dict) -> None:
        live_payload["redis"]["address"] = "127.0.0.1:1"

        body = (await live_client.post("/health", json=live_payload)).json()

        assert body["redis"].startswith("Failed to connect to Redis: ")
        assert body["postgresql"] == "PostgreSQL is alive"
        assert body["mongodb"] == "MongoDB is alive"

    async def test_mongodb_unreachable(
        self, live_client: AsyncClient, live_payload: dict
    ) -> None:
        live_payload["mongodb"]["uri"] = "mongodb://127.0.0.1:1/?serverSelectionTimeoutMS=500"

        body = (await live_client.post("/health", json=live_payload)).json()

        assert body["mongodb"].startswith("Failed to ping MongoDB: ")
        assert body["postgresql"] == "PostgreSQL is alive"
        assert body["redis"] == "Redis is alive"

    async def test_wrong_password(self, live_client: AsyncClient, live_payload: dict) -> None:
        live_payload["postgresql"]["password"] = "wrong"
        live_payload["mysql"]["password"] = "wrong"

        body = (await live_client.post("/health", json=live_payload)).json()

        assert body["postgresql"].startswith("Failed to ping PostgreSQL: ")
        assert body["mysql"].startswith("Failed to ping MySQL: ")
        assert body["mongodb"] == "MongoDB is alive"
