import asyncio
import contextlib
import logging

from app.domain.schemas.healthcheck import (
    HealthCheckRequest,
    HealthCheckResponse,
    ProbeOutcome,
)
from app.infrastructure.healthchecks.interfaces import HealthCheckSuite
from app.services.interfaces import IHealthCheckService
from app.settings.config import AppSettings


class HealthCheckService(IHealthCheckService):
    """Оркестратор проверок: по одному клиенту на БД в рамках запроса.

    Все созданные клиенты освобождаются до того, как собран ответ,
    независимо от результатов проверок.
    """

    def __init__(
        self,
        suite: HealthCheckSuite,
        app_config: AppSettings,
        logger: logging.Logger,
    ):
        self.suite = suite
        self.concurrent = app_config.concurrent_probes
        self.logger = logger

    async def check(self, request: HealthCheckRequest) -> HealthCheckResponse:
        """Проверка всех БД из запроса"""
        async with contextlib.AsyncExitStack() as stack:
            outcomes = await self._run_checks(request, stack)

        rendered = {
            check.name: outcome.render(check.title)
            for check, outcome in zip(self.suite, outcomes, strict=True)
        }
        alive = sum(outcome.is_alive for outcome in outcomes)
        self.logger.info(f"Проверка БД завершена: доступно {alive} из {len(outcomes)}")
        return HealthCheckResponse(**rendered)

    async def _run_checks(
        self, request: HealthCheckRequest, stack: contextlib.AsyncExitStack
    ) -> list[ProbeOutcome]:
        if self.concurrent:
            return list(
                await asyncio.gather(*(check.check(request, stack) for check in self.suite))
            )
        return [await check.check(request, stack) for check in self.suite]
