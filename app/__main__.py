import logging
import sys

import uvicorn

from app.settings.config import settings
from app.settings.logging_config import setup_logging


def main() -> None:
    """Запуск сервера uvicorn"""
    setup_logging()
    logger = logging.getLogger("app")

    logger.info(f"Server starting on port {settings.app.port}...")
    try:
        uvicorn.run(
            "app.main:app",
            host=settings.app.host,
            port=settings.app.port,
            log_config=None,
        )
    except SystemExit as e:
        # uvicorn завершает процесс через sys.exit(1), если порт занят
        if e.code:
            logger.critical(f"Failed to start server on port {settings.app.port}")
        raise
    except OSError as e:
        logger.critical(f"Failed to start server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
