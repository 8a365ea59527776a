from pymongo import AsyncMongoClient

from app.domain.schemas.healthcheck import HealthCheckRequest, MongoDBParams
from app.infrastructure.healthchecks.base import BaseHealthCheck


class MongoDBHealthCheck(BaseHealthCheck[MongoDBParams, AsyncMongoClient]):
    @property
    def name(self) -> str:
        return "mongodb"

    @property
    def title(self) -> str:
        return "MongoDB"

    def select_params(self, request: HealthCheckRequest) -> MongoDBParams:
        return request.mongodb

    async def connect(self, params: MongoDBParams) -> AsyncMongoClient:
        # Клиент ленивый: разбор URI здесь, сетевое подключение при ping
        return AsyncMongoClient(params.uri)

    async def ping(self, client: AsyncMongoClient) -> None:
        await client.admin.command("ping")

    async def release(self, client: AsyncMongoClient) -> None:
        await client.close()
