from redis.asyncio import Redis

from app.domain.schemas.healthcheck import HealthCheckRequest, RedisParams
from app.infrastructure.healthchecks.base import BaseHealthCheck


def split_address(address: str) -> tuple[str, int]:
    """Разбор адреса host:port"""
    host, sep, port = address.rpartition(":")
    if not sep or not host or not port.isdigit():
        raise ValueError(f"invalid address {address!r}, expected host:port")
    return host.strip("[]"), int(port)


class RedisHealthCheck(BaseHealthCheck[RedisParams, Redis]):
    """Для Redis ping выполняется при создании клиента"""

    @property
    def name(self) -> str:
        return "redis"

    @property
    def title(self) -> str:
        return "Redis"

    def select_params(self, request: HealthCheckRequest) -> RedisParams:
        return request.redis

    async def connect(self, params: RedisParams) -> Redis:
        host, port = split_address(params.address)
        client = Redis(
            host=host,
            port=port,
            password=params.password or None,
            db=params.db,
        )
        try:
            await client.ping()
        except BaseException:
            await client.aclose()
            raise
        return client

    async def ping(self, client: Redis) -> None:
        pass

    async def release(self, client: Redis) -> None:
        await client.aclose()
