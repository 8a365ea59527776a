class DomainException(Exception):
    """Базовая ошибка предметной области"""


class MethodNotAllowedException(DomainException):
    """Эндпоинт вызван недопустимым HTTP-методом"""


class RequestDecodeException(DomainException):
    """Тело запроса не удалось разобрать"""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ProbeException(DomainException):
    """Ошибка проверки одной БД. Не выходит за пределы слоя проверок"""

    def __init__(self, backend: str, reason: str):
        super().__init__(f"{backend}: {reason}")
        self.backend = backend
        self.reason = reason


class ConnectFailure(ProbeException):
    """Не удалось создать клиент БД"""


class PingFailure(ProbeException):
    """Клиент создан, но БД не ответила на ping"""
