"""Конфигурация логирования для приложений на базе ocrsdk_client.

Библиотека сама обработчики не настраивает: модули пишут в
logging.getLogger(__name__), а точка входа (скрипт, сервис) один раз
вызывает setup_logging().

Использование:
    from ocrsdk_client.logging_config import setup_logging

    setup_logging()
    logger.info("Задача создана", extra={"task_id": task.task_id})

Переменные окружения:
    LOG_LEVEL - уровень логирования (DEBUG, INFO, WARNING, ERROR). По умолчанию: INFO
    LOG_FORMAT - формат логов (json, text). По умолчанию: text
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Optional


class JSONFormatter(logging.Formatter):
    """JSON formatter для structured logging."""

    # Поля, которые клиент передаёт в extra
    EXTRA_FIELDS = frozenset({
        "task_id",
        "status",
        "status_code",
        "endpoint",
        "duration_ms",
    })

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for field in self.EXTRA_FIELDS:
            if hasattr(record, field):
                value = getattr(record, field)
                if value is not None:
                    log_data[field] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class HumanReadableFormatter(logging.Formatter):
    """Читаемый форматтер для консоли."""

    FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

    def __init__(self) -> None:
        super().__init__(self.FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def get_log_level() -> int:
    """Получить уровень логирования из env."""
    level_str = os.getenv("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_str, logging.INFO)


def get_log_format() -> str:
    """Получить формат логов из env: 'json' или 'text'."""
    return os.getenv("LOG_FORMAT", "text").lower()


_logging_initialized = False


def setup_logging(level: Optional[int] = None, log_format: Optional[str] = None) -> None:
    """Настроить root logger.

    Аргументы имеют приоритет над LOG_LEVEL / LOG_FORMAT.
    Повторный вызов ничего не делает.
    """
    global _logging_initialized
    if _logging_initialized:
        return

    log_level = level if level is not None else get_log_level()
    fmt = (log_format or get_log_format()).lower()

    if fmt == "json":
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = HumanReadableFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # httpx на INFO пишет каждый запрос вместе с query (там бывает pdfPassword)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    _logging_initialized = True

