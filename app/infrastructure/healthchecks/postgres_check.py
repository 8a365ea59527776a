import psycopg
from psycopg.conninfo import conninfo_to_dict
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool

from app.domain.schemas.healthcheck import HealthCheckRequest, PostgresParams
from app.infrastructure.healthchecks.base import BaseHealthCheck


class PostgresHealthCheck(BaseHealthCheck[PostgresParams, AsyncEngine]):
    @property
    def name(self) -> str:
        return "postgresql"

    @property
    def title(self) -> str:
        return "PostgreSQL"

    def select_params(self, request: HealthCheckRequest) -> PostgresParams:
        return request.postgresql

    async def connect(self, params: PostgresParams) -> AsyncEngine:
        """Движок SQLAlchemy поверх psycopg. Соединение открывается только при ping"""
        dsn = params.dsn
        # Синтаксис строки подключения проверяется до создания движка
        conninfo_to_dict(dsn)
        self.logger.debug(
            f"Подключение к PostgreSQL: {params.model_copy(update={'password': '***'}).dsn}"
        )

        async def async_creator() -> psycopg.AsyncConnection:
            return await psycopg.AsyncConnection.connect(dsn)

        return create_async_engine(
            "postgresql+psycopg://",
            async_creator=async_creator,
            poolclass=NullPool,
        )

    async def ping(self, client: AsyncEngine) -> None:
        async with client.connect() as connection:
            await connection.execute(text("SELECT 1"))

    async def release(self, client: AsyncEngine) -> None:
        await client.dispose()
