from fastapi import Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.exceptions import MethodNotAllowedException, RequestDecodeException


def method_not_allowed_response() -> PlainTextResponse:
    return PlainTextResponse(
        "Method not allowed", status_code=status.HTTP_405_METHOD_NOT_ALLOWED
    )


async def method_not_allowed_exception_handler(
    request: Request, exception: MethodNotAllowedException
) -> PlainTextResponse:
    """Обработчик вызова недопустимым методом"""
    return method_not_allowed_response()


async def starlette_http_exception_handler(
    request: Request, exception: StarletteHTTPException
) -> Response:
    """405 от маршрутизатора Starlette для методов вне списка роутера"""
    if exception.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return method_not_allowed_response()
    return await http_exception_handler(request, exception)


async def request_decode_exception_handler(
    request: Request, exception: RequestDecodeException
) -> PlainTextResponse:
    """Обработчик ошибки разбора тела запроса"""
    return PlainTextResponse(
        f"Failed to decode request body: {exception.detail}",
        status_code=status.HTTP_400_BAD_REQUEST,
    )


async def any_exception_handler(request: Request, exception: Exception) -> Response:
    """Обработчик Exception"""
    return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


exception_config = {
    Exception: any_exception_handler,
    StarletteHTTPException: starlette_http_exception_handler,
    MethodNotAllowedException: method_not_allowed_exception_handler,
    RequestDecodeException: request_decode_exception_handler,
}
