"""HTTP клиенты с connection pooling для Cloud OCR SDK"""
from __future__ import annotations

import httpx
from httpx import Limits

from ocrsdk_client.settings import OcrClientSettings


def _limits(settings: OcrClientSettings) -> Limits:
    return Limits(
        max_connections=settings.max_connections,
        max_keepalive_connections=settings.max_keepalive_connections,
    )


def create_http_client(settings: OcrClientSettings) -> httpx.Client:
    """Создать HTTP клиент. Пулом владеет OcrClient, глобального клиента нет"""
    return httpx.Client(
        base_url=settings.host,
        limits=_limits(settings),
        timeout=settings.timeout,
    )


def create_async_http_client(settings: OcrClientSettings) -> httpx.AsyncClient:
    """Асинхронный вариант create_http_client"""
    return httpx.AsyncClient(
        base_url=settings.host,
        limits=_limits(settings),
        timeout=httpx.Timeout(settings.timeout, connect=30.0),
    )


def basic_auth(settings: OcrClientSettings) -> httpx.BasicAuth:
    """Basic auth: application id + пароль приложения"""
    return httpx.BasicAuth(settings.application_id, settings.password)
