from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_HOST = "https://cloud-eu.ocrsdk.com"


def _env_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class OcrClientSettings:
    """Настройки клиента Cloud OCR SDK"""

    application_id: str
    password: str
    host: str = DEFAULT_HOST

    timeout: float = 120.0
    upload_timeout: float = 600.0  # Для загрузки изображений
    download_timeout: float = 300.0  # Для скачивания результатов

    # Пул соединений
    max_connections: int = 10
    max_keepalive_connections: int = 5

    # Логировать параметры запросов и тела ответов (только для диагностики)
    log_http_bodies: bool = False

    @classmethod
    def from_env(cls, prefix: str = "OCRSDK_") -> "OcrClientSettings":
        """Собрать настройки из переменных окружения OCRSDK_*"""
        env = os.environ
        return cls(
            application_id=env.get(f"{prefix}APPLICATION_ID", ""),
            password=env.get(f"{prefix}PASSWORD", ""),
            host=env.get(f"{prefix}HOST", DEFAULT_HOST),
            timeout=float(env.get(f"{prefix}TIMEOUT", "120")),
            upload_timeout=float(env.get(f"{prefix}UPLOAD_TIMEOUT", "600")),
            download_timeout=float(env.get(f"{prefix}DOWNLOAD_TIMEOUT", "300")),
            log_http_bodies=_env_bool(env.get(f"{prefix}LOG_HTTP_BODIES", "false")),
        )

    def __repr__(self) -> str:
        return (
            f"OcrClientSettings(host={self.host!r}, application_id={self.application_id!r}, "
            f"password={'***' if self.password else 'None'})"
        )
