from sqlalchemy import URL, text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool

from app.domain.schemas.healthcheck import HealthCheckRequest, MySQLParams
from app.infrastructure.healthchecks.base import BaseHealthCheck


class MySQLHealthCheck(BaseHealthCheck[MySQLParams, AsyncEngine]):
    @property
    def name(self) -> str:
        return "mysql"

    @property
    def title(self) -> str:
        return "MySQL"

    def select_params(self, request: HealthCheckRequest) -> MySQLParams:
        return request.mysql

    @staticmethod
    def build_url(params: MySQLParams) -> URL:
        """URL SQLAlchemy из тех же полей, что и DSN"""
        if not params.port.isdigit():
            raise ValueError(f"invalid port {params.port!r}")
        return URL.create(
            "mysql+aiomysql",
            username=params.user,
            password=params.password,
            host=params.host,
            port=int(params.port),
            database=params.dbname,
        )

    async def connect(self, params: MySQLParams) -> AsyncEngine:
        """Движок SQLAlchemy поверх aiomysql. Соединение открывается только при ping"""
        url = self.build_url(params)
        self.logger.debug(
            f"Подключение к MySQL: {params.model_copy(update={'password': '***'}).dsn}"
        )
        return create_async_engine(url, poolclass=NullPool)

    async def ping(self, client: AsyncEngine) -> None:
        async with client.connect() as connection:
            await connection.execute(text("SELECT 1"))

    async def release(self, client: AsyncEngine) -> None:
        await client.dispose()
