from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI

from app.api.v1.routers.health import router as health_router
from app.domain.exception_handler import exception_config


def create_test_app(container: AsyncContainer) -> FastAPI:
    """Инициализация тестового приложения."""
    application = FastAPI(title="Query Bridge Health")
    setup_dishka(container, application)
    application.include_router(health_router)
    for exception, handler in exception_config.items():
        application.add_exception_handler(exception, handler)
    return application
