import logging

from dishka import Provider, Scope, from_context, provide

from app.common.logger import LoggerType


class LoggerProvider(Provider):
    """Провайдер для логгера."""

    logger_type = from_context(provides=LoggerType, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_logger(self, logger_type: LoggerType) -> logging.Logger:
        return logger_type.get_logger()
