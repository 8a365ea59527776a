import contextlib
from abc import ABC, abstractmethod
from collections.abc import Iterator

from app.domain.schemas.healthcheck import HealthCheckRequest, ProbeOutcome


class IHealthCheck(ABC):
    @abstractmethod
    async def check(
        self, request: HealthCheckRequest, stack: contextlib.AsyncExitStack
    ) -> ProbeOutcome:
        """Выполнить проверку здоровья. Освобождение клиента регистрируется в stack"""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Имя проверки (поле ответа)"""
        pass

    @property
    @abstractmethod
    def title(self) -> str:
        """Название БД в тексте ответа"""
        pass


class HealthCheckSuite:
    """Упорядоченный набор проверок"""

    def __init__(self, *checks: IHealthCheck):
        names = [check.name for check in checks]
        if len(set(names)) != len(names):
            raise ValueError(f"Имена проверок должны быть уникальны: {names}")
        self.checks = checks

    def __iter__(self) -> Iterator[IHealthCheck]:
        return iter(self.checks)

    def __len__(self) -> int:
        return len(self.checks)
