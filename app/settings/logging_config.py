import logging
import os
from logging.config import dictConfig
from pathlib import Path

from app.settings.config import AppSettings, settings


def setup_logging(app_settings: AppSettings | None = None) -> None:
    """Настраивает логирование через dictConfig для APP, uvicorn/gunicorn и Warnings."""
    app_settings = app_settings or settings.app
    app_log_level = app_settings.log_level.upper()
    app_logs_path = app_settings.logs_path
    app_logs_access_path = app_settings.logs_access_path

    handlers_config = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "stream": "ext://sys.stdout",
        },
    }

    app_handlers = ["console"]
    app_access_handlers = ["console"]

    if app_logs_path is not None:
        os.makedirs(os.path.dirname(app_logs_path) or ".", exist_ok=True)
        handlers_config["app_file"] = {
            "class": "logging.handlers.WatchedFileHandler",
            "formatter": "default",
            "filename": app_logs_path,
        }
        app_handlers.append("app_file")

    if app_logs_access_path is not None:
        os.makedirs(os.path.dirname(app_logs_access_path) or ".", exist_ok=True)
        handlers_config["access_file"] = {
            "class": "logging.handlers.WatchedFileHandler",
            "formatter": "access",
            "filename": app_logs_access_path,
        }
        app_access_handlers.append("access_file")

    loggers_config = {
        "app": {
            "handlers": app_handlers,
            "level": app_log_level,
            "propagate": False,
        },
        "uvicorn.error": {
            "handlers": app_handlers,
            "level": app_log_level,
            "propagate": False,
        },
        "uvicorn.access": {
            "handlers": app_access_handlers,
            "level": "INFO",
            "propagate": False,
        },
        "gunicorn.error": {
            "handlers": app_handlers,
            "level": app_log_level,
            "propagate": False,
        },
        "gunicorn.access": {
            "handlers": app_access_handlers,
            "level": "INFO",
            "propagate": False,
        },
        # Драйверы БД шумят при каждом неудачном подключении
        "pymongo": {"level": "WARNING"},
        "sqlalchemy.engine": {"level": "WARNING"},
        "py.warnings": {
            "handlers": app_handlers,
            "level": "WARNING",
            "propagate": False,
        },
    }

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s [%(process)d] [%(levelname)s]: %(message)s"
                },
                "access": {"format": "%(asctime)s [%(process)d] %(message)s"},
            },
            "handlers": handlers_config,
            "loggers": loggers_config,
        }
    )

    logging.captureWarnings(True)

    app_logger = logging.getLogger("app")
    if app_logs_path is not None:
        app_logger.info(
            f"Логирование APP настроено. Уровень: {app_log_level}, Файл: {Path(app_logs_path)}"
        )
    else:
        app_logger.debug("Логи APP не настроены на файл. Логи будут только в консоли.")
