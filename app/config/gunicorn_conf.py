import logging

from app.settings.config import settings
from app.settings.logging_config import setup_logging

setup_logging()

bind = f"{settings.app.host}:{settings.app.port}"
workers = settings.app.workers_num
worker_class = "uvicorn.workers.UvicornWorker"

# dictConfig уже настроен, gunicorn пишет в логгеры gunicorn.*
accesslog = None
errorlog = None


def on_starting(server) -> None:
    logging.getLogger("app").info(f"Server starting on port {settings.app.port}...")
