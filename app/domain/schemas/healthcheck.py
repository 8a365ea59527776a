import typing as tp
from enum import Enum

from pydantic import ConfigDict, model_validator

from app.common.arbitrary_model import ArbitraryModel


class StrictRequestModel(ArbitraryModel):
    """Часть тела запроса: типы JSON не приводятся, лишние ключи игнорируются"""

    model_config = ConfigDict(strict=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def normalize_keys(cls, data: tp.Any) -> tp.Any:
        """Ключи сопоставляются с полями без учета регистра, null равен пропуску ключа"""
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data

        fields_by_lower = {name.lower(): name for name in cls.model_fields}
        normalized = {}
        for key, value in data.items():
            if value is None:
                continue
            if key not in cls.model_fields:
                key = fields_by_lower.get(key.lower(), key)
            normalized[key] = value
        return normalized


class PostgresParams(StrictRequestModel):
    """Параметры подключения к PostgreSQL"""

    user: str = ""
    password: str = ""
    dbname: str = ""
    host: str = ""
    port: str = ""
    sslmode: str = ""

    @property
    def dsn(self) -> str:
        """DSN в формате ключ=значение libpq"""
        return (
            f"user={self.user} password={self.password} dbname={self.dbname} "
            f"host={self.host} port={self.port} sslmode={self.sslmode}"
        )


class MySQLParams(StrictRequestModel):
    """Параметры подключения к MySQL"""

    user: str = ""
    password: str = ""
    dbname: str = ""
    host: str = ""
    port: str = ""

    @property
    def dsn(self) -> str:
        """DSN в формате <user>:<password>@tcp(<host>:<port>)/<dbname>"""
        return f"{self.user}:{self.password}@tcp({self.host}:{self.port})/{self.dbname}"


class MongoDBParams(StrictRequestModel):
    """Параметры подключения к MongoDB"""

    uri: str = ""


class RedisParams(StrictRequestModel):
    """Параметры подключения к Redis"""

    address: str = ""
    password: str = ""
    db: int = 0


class HealthCheckRequest(StrictRequestModel):
    """Тело запроса проверки доступности БД"""

    postgresql: PostgresParams = PostgresParams()
    mysql: MySQLParams = MySQLParams()
    mongodb: MongoDBParams = MongoDBParams()
    redis: RedisParams = RedisParams()


class HealthCheckResponse(ArbitraryModel):
    """Ответ проверки доступности БД"""

    postgresql: str
    mysql: str
    mongodb: str
    redis: str


class ProbeStatus(str, Enum):
    """Исход проверки одной БД"""

    ALIVE = "alive"
    CONNECT_FAILED = "connect_failed"
    PING_FAILED = "ping_failed"


class ProbeOutcome(ArbitraryModel):
    """Результат проверки одной БД"""

    status: ProbeStatus
    reason: str = ""

    @classmethod
    def alive(cls) -> "ProbeOutcome":
        return cls(status=ProbeStatus.ALIVE)

    @classmethod
    def connect_failed(cls, reason: str) -> "ProbeOutcome":
        return cls(status=ProbeStatus.CONNECT_FAILED, reason=reason)

    @classmethod
    def ping_failed(cls, reason: str) -> "ProbeOutcome":
        return cls(status=ProbeStatus.PING_FAILED, reason=reason)

    @property
    def is_alive(self) -> bool:
        return self.status is ProbeStatus.ALIVE

    def render(self, title: str) -> str:
        """Строка для поля ответа"""
        if self.status is ProbeStatus.CONNECT_FAILED:
            return f"Failed to connect to {title}: {self.reason}"
        if self.status is ProbeStatus.PING_FAILED:
            return f"Failed to ping {title}: {self.reason}"
        return f"{title} is alive"
