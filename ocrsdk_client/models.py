"""Модели данных Cloud OCR SDK: задача, ошибка, информация о приложении"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Optional

# Дробная часть секунд: сервер отдаёт до 7 знаков, datetime понимает 6
_FRACTION_RE = re.compile(r"(\.\d{6})\d+")


class TaskStatus(Enum):
    """Статус задачи на сервере"""

    SUBMITTED = "Submitted"  # Зарегистрирована, не передана в обработку
    QUEUED = "Queued"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"  # Доступны resultUrls
    PROCESSING_FAILED = "ProcessingFailed"
    DELETED = "Deleted"
    NOT_ENOUGH_CREDITS = "NotEnoughCredits"

    @property
    def is_terminal(self) -> bool:
        return self in _TERMINAL_STATUSES

    @property
    def is_in_process(self) -> bool:
        return self in (TaskStatus.QUEUED, TaskStatus.IN_PROGRESS)

    @property
    def is_failure(self) -> bool:
        """Статусы, для которых сервер заполняет error"""
        return self in (TaskStatus.PROCESSING_FAILED, TaskStatus.NOT_ENOUGH_CREDITS)


_TERMINAL_STATUSES = frozenset(
    {
        TaskStatus.COMPLETED,
        TaskStatus.PROCESSING_FAILED,
        TaskStatus.DELETED,
        TaskStatus.NOT_ENOUGH_CREDITS,
    }
)


def _lower_keys(data: dict) -> dict:
    """JSON сервера не стабилен по регистру ключей (taskId / TaskId)"""
    return {str(k).lower(): v for k, v in data.items()}


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Разобрать ISO-8601 время сервера (2019-07-11T09:46:03.0471538Z)"""
    if not value:
        return None
    text = _FRACTION_RE.sub(r"\1", value.strip())
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass
class ErrorData:
    """
    Описание ошибки сервера

    Attributes:
        code: код ошибки
        message: текст ошибки
        target: где возникла ошибка (например, имя параметра)
        details: вложенные ошибки валидации
    """

    code: str = ""
    message: str = ""
    target: str = ""
    details: List["ErrorData"] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict) -> "ErrorData":
        """Создать из объекта error (без обёртки {"error": ...})"""
        if not isinstance(data, dict):
            raise TypeError(f"Ожидался объект ошибки, получено {type(data).__name__}")
        d = _lower_keys(data)
        return cls(
            code=d.get("code") or "",
            message=d.get("message") or "",
            target=d.get("target") or "",
            details=[cls.from_api_response(x) for x in d.get("details") or []],
        )

    @classmethod
    def from_text(cls, text: str) -> "ErrorData":
        """Фоллбек, когда тело ответа не является JSON ошибкой"""
        return cls(message=text)

    def __str__(self) -> str:
        return f"({self.code}) {self.message} [{self.target}]"


@dataclass
class TaskInfo:
    """
    Задача на сервере

    Attributes:
        task_id: идентификатор задачи (назначается сервером)
        status: текущий статус
        registration_time: время создания
        status_change_time: время последнего изменения статуса
        error: описание ошибки, только для ProcessingFailed/NotEnoughCredits
        files_count: количество загруженных файлов
        request_status_delay: рекомендуемая пауза перед следующим опросом, мс
        result_urls: ссылки на результаты, только для Completed (ограниченное время жизни)
        description: описание, переданное при создании задачи
    """

    task_id: str
    status: TaskStatus
    registration_time: Optional[datetime] = None
    status_change_time: Optional[datetime] = None
    error: Optional[ErrorData] = None
    files_count: int = 0
    request_status_delay: int = 0
    result_urls: List[str] = field(default_factory=list)
    description: str = ""

    @classmethod
    def from_api_response(cls, data: dict) -> "TaskInfo":
        """
        Создать из JSON ответа сервера.

        result_urls сохраняются только для Completed, error только для
        ProcessingFailed/NotEnoughCredits. Если сервер прислал статус ошибки
        без тела ошибки, error заполняется кодом статуса.

        Raises:
            KeyError, ValueError, TypeError: ответ не соответствует схеме
        """
        if not isinstance(data, dict):
            raise TypeError(f"Ожидался объект задачи, получено {type(data).__name__}")
        d = _lower_keys(data)
        status = TaskStatus(d["status"])

        error = None
        if status.is_failure:
            raw_error = d.get("error")
            if isinstance(raw_error, dict) and raw_error:
                # Встречаются оба варианта: {"error": {...}} и сразу {...}
                inner = _lower_keys(raw_error).get("error", raw_error)
                error = ErrorData.from_api_response(inner)
            else:
                error = ErrorData(code=status.value, message=f"Task status is {status.value}")

        result_urls: List[str] = []
        if status is TaskStatus.COMPLETED:
            result_urls = [str(u) for u in d.get("resulturls") or []]

        return cls(
            task_id=str(d["taskid"]),
            status=status,
            registration_time=parse_timestamp(d.get("registrationtime")),
            status_change_time=parse_timestamp(d.get("statuschangetime")),
            error=error,
            files_count=int(d.get("filescount") or 0),
            request_status_delay=int(d.get("requeststatusdelay") or 0),
            result_urls=result_urls,
            description=d.get("description") or "",
        )

    @property
    def is_completed(self) -> bool:
        return self.status is TaskStatus.COMPLETED

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    @property
    def is_in_process(self) -> bool:
        return self.status.is_in_process


@dataclass
class ApplicationInfo:
    """Информация о приложении: тип, баланс, срок действия"""

    id: str
    name: str = ""
    pages: int = 0
    fields: int = 0
    expires: Optional[datetime] = None
    type: str = ""

    @classmethod
    def from_api_response(cls, data: dict) -> "ApplicationInfo":
        if not isinstance(data, dict):
            raise TypeError(f"Ожидался объект приложения, получено {type(data).__name__}")
        d = _lower_keys(data)
        return cls(
            id=str(d["id"]),
            name=d.get("name") or "",
            pages=int(d.get("pages") or 0),
            fields=int(d.get("fields") or 0),
            expires=parse_timestamp(d.get("expires")),
            type=d.get("type") or "",
        )


def parse_task_list(payload: Any) -> List[TaskInfo]:
    """Список задач: JSON массив или объект {"tasks": [...]}"""
    if isinstance(payload, dict):
        payload = _lower_keys(payload).get("tasks") or []
    if not isinstance(payload, list):
        raise TypeError(f"Ожидался список задач, получено {type(payload).__name__}")
    return [TaskInfo.from_api_response(item) for item in payload]
