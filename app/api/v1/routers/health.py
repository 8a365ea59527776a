from dishka import FromDishka
from dishka.integrations.fastapi import inject
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.api.v1.dto.requests.health import decode_health_request
from app.common.fastapi_utils import TolerantAPIRouter
from app.domain.schemas.healthcheck import HealthCheckResponse
from app.services.interfaces import IHealthCheckService

router = TolerantAPIRouter(prefix="", tags=["health"])


@router.post("/health", response_model=HealthCheckResponse)
@inject
async def healthcheck(
    request: Request,
    healthcheck_service: FromDishka[IHealthCheckService],
) -> JSONResponse:
    """Проверка доступности БД по параметрам из тела запроса"""
    health_request = decode_health_request(await request.body())
    response = await healthcheck_service.check(health_request)
    return JSONResponse(content=jsonable_encoder(response), status_code=200)


router.reject_other_methods("/health", allowed=["POST"])
