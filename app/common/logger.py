import logging
from enum import Enum


class LoggerType(Enum):
    """Имя логгера в иерархии logging"""

    APP = "app"
    TEST = "test"

    @property
    def logger_name(self) -> str:
        return self.value

    def get_logger(self) -> logging.Logger:
        """Логгер из dictConfig с именем этого типа"""
        return logging.getLogger(self.logger_name)
