"""Разбор ответов сервера: успешный JSON или ApiError"""
from __future__ import annotations

import json
import logging
from typing import Any, BinaryIO, Callable, Optional, TypeVar, Union

import httpx

from ocrsdk_client.exceptions import ApiError
from ocrsdk_client.models import ErrorData

logger = logging.getLogger(__name__)

T = TypeVar("T")

FilePayload = Union[bytes, bytearray, memoryview, BinaryIO, None]


def read_payload(file: FilePayload) -> Optional[bytes]:
    """
    Прочитать тело запроса. Файловый объект только читается:
    закрывать его - забота вызывающего кода.
    """
    if file is None:
        return None
    if isinstance(file, (bytes, bytearray, memoryview)):
        return bytes(file)
    if hasattr(file, "read"):
        return file.read()
    raise TypeError(f"Неподдерживаемый тип файла: {type(file).__name__}")


def try_deserialize_error(body: bytes) -> ErrorData:
    """Ошибка из тела {"error": {...}}, иначе весь текст тела как message"""
    text = body.decode("utf-8", errors="replace")
    try:
        data = json.loads(text)
    except ValueError:
        return ErrorData.from_text(text)
    if not isinstance(data, dict):
        return ErrorData.from_text(text)
    inner = next((v for k, v in data.items() if str(k).lower() == "error"), None)
    if not isinstance(inner, dict):
        return ErrorData.from_text(text)
    try:
        return ErrorData.from_api_response(inner)
    except (AttributeError, TypeError):
        return ErrorData.from_text(text)


def raise_for_api_error(resp: httpx.Response) -> None:
    """Превратить не-2xx ответ в ApiError"""
    if resp.is_success:
        return
    raise ApiError(
        f"Server responded with {resp.status_code} {resp.reason_phrase} status code.",
        resp.status_code,
        try_deserialize_error(resp.content),
        resp.headers,
    )


def decoding_error(resp: httpx.Response, exc: httpx.DecodingError) -> ApiError:
    """ApiError для ответа, тело которого не удалось распаковать (Content-Encoding)"""
    return ApiError(
        f"Could not decode the response body: {exc}",
        resp.status_code,
        ErrorData.from_text(str(exc)),
        resp.headers,
    )


def parse_response(resp: httpx.Response, parser: Callable[[Any], T]) -> T:
    """
    Разобрать успешный JSON ответ.

    Raises:
        ApiError: не-2xx ответ или тело не соответствует ожидаемой схеме
    """
    raise_for_api_error(resp)
    try:
        return parser(resp.json())
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        raise ApiError(
            f"Could not deserialize the response body: {e}",
            resp.status_code,
            ErrorData.from_text(resp.text),
            resp.headers,
        ) from e


def log_exchange(
    resp: httpx.Response, duration_ms: float, log_bodies: bool, params: Optional[dict] = None
) -> None:
    """Отладочный лог запроса. Тела пишутся только при log_http_bodies"""
    request = resp.request
    logger.debug(
        f"{request.method} {request.url.path} -> {resp.status_code} ({duration_ms:.0f}ms)",
        extra={"status_code": resp.status_code, "duration_ms": round(duration_ms)},
    )
    if log_bodies:
        logger.debug(f"Request params: {params}")
        logger.debug(f"Response body: {resp.text[:2000]}")
