import logging

from dishka import Provider, Scope, from_context, provide

from app.infrastructure.healthchecks.interfaces import HealthCheckSuite
from app.infrastructure.healthchecks.mongodb_check import MongoDBHealthCheck
from app.infrastructure.healthchecks.mysql_check import MySQLHealthCheck
from app.infrastructure.healthchecks.postgres_check import PostgresHealthCheck
from app.infrastructure.healthchecks.redis_check import RedisHealthCheck
from app.services.healthcheck import HealthCheckService
from app.services.interfaces import IHealthCheckService
from app.settings.config import AppSettings, Settings


class ApiProvider(Provider):
    """API - app провайдер"""

    settings = from_context(Settings, scope=Scope.APP)
    app_config = from_context(provides=AppSettings, scope=Scope.APP)
    healthcheck_service = provide(
        HealthCheckService, scope=Scope.REQUEST, provides=IHealthCheckService
    )


class HealthCheckProvider(Provider):
    """Провайдер для health checks"""

    @provide(scope=Scope.APP)
    def provide_postgres_health_check(
        self, logger: logging.Logger
    ) -> PostgresHealthCheck:
        return PostgresHealthCheck(logger)

    @provide(scope=Scope.APP)
    def provide_mysql_health_check(self, logger: logging.Logger) -> MySQLHealthCheck:
        return MySQLHealthCheck(logger)

    @provide(scope=Scope.APP)
    def provide_mongodb_health_check(
        self, logger: logging.Logger
    ) -> MongoDBHealthCheck:
        return MongoDBHealthCheck(logger)

    @provide(scope=Scope.APP)
    def provide_redis_health_check(self, logger: logging.Logger) -> RedisHealthCheck:
        return RedisHealthCheck(logger)

    @provide(scope=Scope.APP)
    def provide_health_check_suite(
        self,
        postgres_check: PostgresHealthCheck,
        mysql_check: MySQLHealthCheck,
        mongodb_check: MongoDBHealthCheck,
        redis_check: RedisHealthCheck,
    ) -> HealthCheckSuite:
        """Порядок проверок совпадает с порядком полей ответа"""
        return HealthCheckSuite(postgres_check, mysql_check, mongodb_check, redis_check)
