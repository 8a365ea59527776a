import abc

from app.domain.schemas.healthcheck import HealthCheckRequest, HealthCheckResponse


class IHealthCheckService(abc.ABC):
    """Интерфейс сервиса проверки доступности БД"""

    @abc.abstractmethod
    async def check(self, request: HealthCheckRequest) -> HealthCheckResponse:
        """Проверка всех БД из запроса"""
