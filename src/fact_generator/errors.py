class FactGenerationError(Exception):
    """Failure that ends a request with a plain-text error body."""

    status_code = 500
    headers: dict[str, str] | None = None

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MethodNotAllowed(FactGenerationError):
    status_code = 405
    headers = {"Allow": "POST"}

    def __init__(self) -> None:
        super().__init__("Метод не разрешен")


class InvalidTopicRequest(FactGenerationError):
    status_code = 400

    def __init__(self, detail: str) -> None:
        super().__init__(f"Ошибка чтения запроса: {detail}")


class MissingCredentialError(FactGenerationError):
    def __init__(self) -> None:
        super().__init__("API ключ не найден")


class RequestBuildError(FactGenerationError):
    """Raised while serializing the payload or assembling the HTTP request."""


class UpstreamTransportError(FactGenerationError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Ошибка при отправке запроса к API: {detail}")


class UpstreamReadError(FactGenerationError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Ошибка при чтении ответа: {detail}")


class UpstreamParseError(FactGenerationError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Ошибка при парсинге JSON ответа: {detail}")


class UpstreamApiError(FactGenerationError):
    def __init__(self, api_message: str) -> None:
        super().__init__(f"Ошибка от API: {api_message}")
        self.api_message = api_message


class InvalidResponseFormat(FactGenerationError):
    """The completion payload is missing a field at ``stage``.

    ``stage`` is one of ``ответа``, ``choice``, ``message`` or ``content``.
    """

    def __init__(self, stage: str) -> None:
        super().__init__(f"Не удалось получить факт: неверный формат {stage}.")
        self.stage = stage
