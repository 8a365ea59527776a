from pydantic import ValidationError

from app.domain.exceptions import RequestDecodeException
from app.domain.schemas.healthcheck import HealthCheckRequest


def format_validation_error(exception: ValidationError) -> str:
    """Краткое описание ошибок валидации в одну строку"""
    parts = []
    for error in exception.errors(include_url=False):
        location = ".".join(str(item) for item in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


def decode_health_request(body: bytes) -> HealthCheckRequest:
    """Разбор тела запроса проверки доступности БД"""
    try:
        return HealthCheckRequest.model_validate_json(body)
    except ValidationError as e:
        raise RequestDecodeException(format_validation_error(e)) from e
