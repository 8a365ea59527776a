from dishka import make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from app.api.v1.routers.health import router as health_router
from app.common.logger import LoggerType
from app.domain.exception_handler import exception_config
from app.infrastructure.ioc.api_ioc import ApiProvider, HealthCheckProvider
from app.infrastructure.providers import LoggerProvider
from app.settings.config import AppSettings, Settings, settings
from app.settings.logging_config import setup_logging


def create_app() -> FastAPI:
    """Инициализация приложения"""
    application = FastAPI(title="Query Bridge Health", root_path=settings.app.prefix)
    container = make_async_container(
        ApiProvider(),
        FastapiProvider(),
        LoggerProvider(),
        HealthCheckProvider(),
        context={
            AppSettings: settings.app,
            LoggerType: LoggerType.APP,
            Settings: settings,
        },
    )
    setup_dishka(container, application)
    application.include_router(health_router)

    for exception, handler in exception_config.items():
        application.add_exception_handler(exception, handler)
    return application


setup_logging()

app = create_app()
