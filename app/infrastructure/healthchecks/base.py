import contextlib
import logging
import typing as tp
from abc import abstractmethod

from sqlalchemy.exc import DBAPIError

from app.common.arbitrary_model import ArbitraryModel
from app.domain.exceptions import ConnectFailure, PingFailure, ProbeException
from app.domain.schemas.healthcheck import HealthCheckRequest, ProbeOutcome
from app.infrastructure.healthchecks.interfaces import IHealthCheck

ParamsT = tp.TypeVar("ParamsT", bound=ArbitraryModel)
ClientT = tp.TypeVar("ClientT")


def describe_error(exc: BaseException) -> str:
    """Текст ошибки драйвера для ответа"""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        exc = exc.orig
    return str(exc) or exc.__class__.__name__


class BaseHealthCheck(IHealthCheck, tp.Generic[ParamsT, ClientT]):
    """Проверка БД в три шага: создание клиента, ping, освобождение.

    Наследники реализуют только работу с драйвером; перевод ошибок
    в ProbeOutcome и регистрация освобождения клиента сделаны здесь.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    @abstractmethod
    def select_params(self, request: HealthCheckRequest) -> ParamsT:
        """Параметры своей БД из тела запроса"""

    @abstractmethod
    async def connect(self, params: ParamsT) -> ClientT:
        """Создание клиента"""

    @abstractmethod
    async def ping(self, client: ClientT) -> None:
        """Проверка доступности через созданный клиент"""

    @abstractmethod
    async def release(self, client: ClientT) -> None:
        """Освобождение клиента"""

    async def check(
        self, request: HealthCheckRequest, stack: contextlib.AsyncExitStack
    ) -> ProbeOutcome:
        """Выполнить проверку здоровья"""
        try:
            await self.probe(self.select_params(request), stack)
        except ConnectFailure as e:
            self.logger.warning(f"Не удалось подключиться к {self.title}: {e.reason}")
            return ProbeOutcome.connect_failed(e.reason)
        except PingFailure as e:
            self.logger.warning(f"{self.title} не ответил на ping: {e.reason}")
            return ProbeOutcome.ping_failed(e.reason)

        self.logger.info(f"{self.title} доступен")
        return ProbeOutcome.alive()

    async def probe(self, params: ParamsT, stack: contextlib.AsyncExitStack) -> None:
        """Создание клиента и ping. Ошибки драйвера оборачиваются в ProbeException"""
        try:
            client = await self.connect(params)
        except Exception as e:
            raise ConnectFailure(self.name, describe_error(e)) from e

        stack.push_async_callback(self._release_quietly, client)

        try:
            await self.ping(client)
        except ProbeException:
            raise
        except Exception as e:
            raise PingFailure(self.name, describe_error(e)) from e

    async def _release_quietly(self, client: ClientT) -> None:
        try:
            await self.release(client)
        except Exception as e:
            self.logger.warning(
                f"Ошибка освобождения клиента {self.title}: {describe_error(e)}"
            )
