"""Базовый HTTP клиент Cloud OCR SDK"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, TypeVar

import httpx

from ocrsdk_client.exceptions import TransportError
from ocrsdk_client.http_pool import basic_auth, create_http_client
from ocrsdk_client.models import TaskInfo
from ocrsdk_client.params import QueryParams
from ocrsdk_client.response import (
    FilePayload,
    decoding_error,
    log_exchange,
    parse_response,
    read_payload,
)
from ocrsdk_client.settings import OcrClientSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class OcrClientCore:
    """Базовый клиент с HTTP методами"""

    settings: OcrClientSettings
    http_client: Optional[httpx.Client] = None
    _owns_http_client: bool = field(default=False, init=False, repr=False)

    def __post_init__(self):
        if self.http_client is None:
            self.http_client = create_http_client(self.settings)
            self._owns_http_client = True
        logger.info(
            f"OcrClient initialized: host={self.settings.host}, "
            f"application_id={self.settings.application_id}, "
            f"password={'***' if self.settings.password else 'None'}"
        )

    def _request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, str]] = None,
        content: Optional[bytes] = None,
        timeout: Optional[float] = None,
        authenticated: bool = True,
    ) -> httpx.Response:
        """
        Один HTTP запрос без повторов.

        Сетевые ошибки заворачиваются в TransportError, тело с битым
        Content-Encoding в ApiError. Статус ответа не проверяется.
        authenticated=False для ссылок на результаты: они уже подписаны
        и не принимают Basic auth.
        """
        started = time.monotonic()
        request = self.http_client.build_request(
            method,
            url,
            params=params,
            content=content,
            timeout=timeout or self.settings.timeout,
        )
        try:
            resp = self.http_client.send(
                request,
                auth=basic_auth(self.settings) if authenticated else None,
                stream=True,
            )
            try:
                resp.read()
            except httpx.DecodingError as e:
                raise decoding_error(resp, e) from e
            finally:
                resp.close()
        except httpx.RequestError as e:
            logger.error(
                f"Сетевая ошибка при запросе {method.upper()} {url}: {e}",
                extra={"endpoint": url},
            )
            raise TransportError(f"Ошибка соединения с {url}: {e}") from e
        log_exchange(
            resp,
            (time.monotonic() - started) * 1000,
            self.settings.log_http_bodies and authenticated,
            params,
        )
        return resp

    def _call(
        self,
        method: str,
        url: str,
        params: Optional[QueryParams],
        parser: Callable[[Any], T],
        file: FilePayload = None,
    ) -> T:
        """Запрос к API с разбором JSON ответа"""
        query = params.to_params() if params is not None else None
        content = read_payload(file)
        timeout = self.settings.upload_timeout if content is not None else None
        resp = self._request(method, url, params=query, content=content, timeout=timeout)
        return parse_response(resp, parser)

    def _start_task(
        self, url: str, params: QueryParams, file: FilePayload = None, file_name: str = ""
    ) -> TaskInfo:
        """Создать/обновить задачу и вернуть её состояние"""
        if file_name:
            logger.info(f"Загрузка файла {file_name} -> {url}", extra={"endpoint": url})
        task = self._call("post", url, params, TaskInfo.from_api_response, file)
        logger.info(
            f"Задача {task.task_id}: {task.status.value}",
            extra={"task_id": task.task_id, "status": task.status.value, "endpoint": url},
        )
        return task

    def close(self) -> None:
        """Закрыть пул соединений, если он создан клиентом"""
        if self._owns_http_client and self.http_client is not None:
            self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
