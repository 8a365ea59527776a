import typing as tp

from fastapi import APIRouter
from fastapi.types import DecoratedCallable

from app.domain.exceptions import MethodNotAllowedException

HTTP_METHODS = ("GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS")


async def method_not_allowed() -> None:
    """Заглушка для недопустимых методов"""
    raise MethodNotAllowedException


class TolerantAPIRouter(APIRouter):
    """Роутер, который автоматически создает альтернативные пути со слешами,
    скрытые из документации Swagger
    """

    def add_api_route(
        self,
        path: str,
        endpoint: DecoratedCallable,
        **kwargs: tp.Any,
    ) -> None:
        super().add_api_route(path, endpoint, **kwargs)

        if path != "/" and not path.endswith("/"):
            slash_kwargs = kwargs.copy()
            slash_kwargs["include_in_schema"] = False
            super().add_api_route(path + "/", endpoint, **slash_kwargs)

    def reject_other_methods(self, path: str, allowed: tp.Iterable[str]) -> None:
        """Отвечает 405 на все методы пути, кроме allowed.

        Регистрировать после основных обработчиков пути.
        """
        allowed_methods = {method.upper() for method in allowed}
        self.add_api_route(
            path,
            method_not_allowed,
            methods=[m for m in HTTP_METHODS if m not in allowed_methods],
            include_in_schema=False,
        )
