"""Исключения клиента Cloud OCR SDK"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Mapping, Optional, Union

import httpx

if TYPE_CHECKING:
    from ocrsdk_client.models import ErrorData, TaskInfo


class OcrSdkError(Exception):
    """Базовая ошибка клиента"""

    pass


class TransportError(OcrSdkError):
    """Сетевая ошибка до получения ответа (соединение, DNS, таймаут)"""

    pass


class PreconditionError(OcrSdkError):
    """Локальная ошибка: вызов невалиден, запрос на сервер не отправлялся"""

    pass


class ApiError(OcrSdkError):
    """
    Ошибка API: сервер вернул не-2xx ответ или тело, которое не удалось разобрать

    Attributes:
        status_code: HTTP статус ответа
        headers: заголовки ответа (httpx.Headers, повторяющиеся сохраняются)
        error: детали ошибки из тела ответа (или сырой текст тела)
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        error: "ErrorData",
        headers: Union[httpx.Headers, Mapping[str, str], None] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error = error
        self.headers = httpx.Headers(headers)

    def __str__(self) -> str:
        return f"{self.message}: {self.error}"


class TaskFailedError(OcrSdkError):
    """Задача перешла в терминальный статус, отличный от Completed"""

    def __init__(self, message: str, task: "TaskInfo"):
        super().__init__(message)
        self.task = task

    @property
    def error(self) -> Optional["ErrorData"]:
        return self.task.error


class TaskProcessingFailedError(TaskFailedError):
    """Статус ProcessingFailed"""

    pass


class NotEnoughCreditsError(TaskFailedError):
    """Статус NotEnoughCredits: на счёте недостаточно средств"""

    pass


class TaskDeletedError(TaskFailedError):
    """Задача удалена во время ожидания"""

    pass


class DecodeErrorKind(Enum):
    """Вид ошибки декодирования XML результата"""

    SYNTAX = "syntax"  # XML не разбирается
    STRUCTURE = "structure"  # корневой элемент не document


class ResultDecodeError(OcrSdkError):
    """Не удалось декодировать XML результат распознавания"""

    def __init__(
        self,
        message: str,
        kind: DecodeErrorKind,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.line = line
        self.column = column
