import logging
from collections.abc import AsyncGenerator

import pytest
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider
from faker import Faker
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.common.logger import LoggerType
from app.infrastructure.ioc.api_ioc import ApiProvider
from app.infrastructure.providers import LoggerProvider
from app.settings.config import AppSettings, Settings
from tests.mocks.healthchecks import FakeBackendState, MockHealthCheckProvider
from tests.utils import create_test_app

pytest_plugins = ["tests.fixtures.containers"]


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="Запуск интеграционных тестов с БД в testcontainers",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    if config.getoption("--integration"):
        return
    skip_integration = pytest.mark.skip(reason="нужен флаг --integration")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture()
def faker() -> Faker:
    """Фикстура для наполнения тестовых данных"""
    return Faker()


@pytest.fixture()
def logger() -> logging.Logger:
    """Логгер для тестов"""
    return LoggerType.TEST.get_logger()


@pytest.fixture()
def app_settings() -> AppSettings:
    """Настройки приложения для тестов"""
    return AppSettings(mode="test", concurrent_probes=False)


@pytest.fixture()
def backend_state() -> FakeBackendState:
    """Поведение фейковых БД"""
    return FakeBackendState()


@pytest.fixture()
async def container(
    app_settings: AppSettings, backend_state: FakeBackendState
) -> AsyncGenerator[AsyncContainer]:
    """Фикстура контейнера зависимостей с фейковыми БД"""
    container = make_async_container(
        ApiProvider(),
        FastapiProvider(),
        LoggerProvider(),
        MockHealthCheckProvider(),
        context={
            AppSettings: app_settings,
            Settings: Settings(app=app_settings),
            LoggerType: LoggerType.TEST,
            FakeBackendState: backend_state,
        },
    )
    yield container
    await container.close()


@pytest.fixture()
def app(container: AsyncContainer) -> FastAPI:
    """Фикстура для создания тестового приложения FastAPI."""
    return create_test_app(container)


@pytest.fixture()
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Фикстура для тестового клиента FastAPI."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as client:
        yield client


@pytest.fixture()
def health_payload() -> dict:
    """Полное тело запроса проверки"""
    return {
        "postgresql": {
            "user": "postgres",
            "password": "password",
            "dbname": "query-bridge",
            "host": "localhost",
            "port": "5432",
            "sslmode": "disable",
        },
        "mysql": {
            "user": "username",
            "password": "password",
            "dbname": "mydb",
            "host": "localhost",
            "port": "3306",
        },
        "mongodb": {"uri": "mongodb://localhost:27017"},
        "redis": {"address": "localhost:6379", "password": "", "db": 0},
    }
