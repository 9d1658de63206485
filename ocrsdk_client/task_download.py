"""Миксин скачивания результатов распознавания."""
from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import List, Optional, Union

import httpx

from ocrsdk_client.exceptions import PreconditionError, TransportError
from ocrsdk_client.models import TaskInfo, TaskStatus
from ocrsdk_client.response import decoding_error, raise_for_api_error

logger = logging.getLogger(__name__)


def ensure_downloadable(task: TaskInfo) -> None:
    """Проверка до любого сетевого вызова"""
    if task.status is not TaskStatus.COMPLETED:
        raise PreconditionError(
            f"Задача {task.task_id} в статусе {task.status.value}, результаты недоступны"
        )
    if not task.result_urls:
        raise PreconditionError(f"У задачи {task.task_id} нет ссылок на результаты")


def result_file_name(task: TaskInfo, index: int, url: str, base_name: Optional[str] = None) -> str:
    """Имя файла результата: <base>[_<n>]<расширение из ссылки>"""
    suffix = PurePosixPath(httpx.URL(url).path).suffix
    stem = base_name or task.task_id
    if len(task.result_urls) > 1:
        return f"{stem}_{index}{suffix}"
    return f"{stem}{suffix}"


class TaskDownloadMixin:
    """Скачивание результатов по resultUrls завершённой задачи."""

    def download_result(self, url: str) -> bytes:
        """Скачать один результат. Ссылка уже подписана, Basic auth не нужен."""
        resp = self._request(
            "get", url, timeout=self.settings.download_timeout, authenticated=False
        )
        raise_for_api_error(resp)
        return resp.content

    def download_results(self, task: TaskInfo) -> List[bytes]:
        """Скачать все результаты в порядке result_urls."""
        ensure_downloadable(task)
        results = [self.download_result(url) for url in task.result_urls]
        logger.info(
            f"Скачано результатов задачи {task.task_id}: {len(results)}",
            extra={"task_id": task.task_id},
        )
        return results

    def save_results(
        self,
        task: TaskInfo,
        target_dir: Union[str, Path],
        base_name: Optional[str] = None,
    ) -> List[Path]:
        """Скачать результаты потоком на диск, вернуть пути к файлам."""
        ensure_downloadable(task)
        target = Path(target_dir)
        target.mkdir(parents=True, exist_ok=True)

        paths: List[Path] = []
        for index, url in enumerate(task.result_urls):
            path = target / result_file_name(task, index, url, base_name)
            self._stream_to_file(url, path)
            paths.append(path)
            logger.info(f"Результат сохранён: {path}", extra={"task_id": task.task_id})
        return paths

    def _stream_to_file(self, url: str, path: Path) -> None:
        try:
            with self.http_client.stream(
                "GET", url, timeout=self.settings.download_timeout, auth=None
            ) as resp:
                if not resp.is_success:
                    resp.read()
                    raise_for_api_error(resp)
                try:
                    with open(path, "wb") as f:
                        for chunk in resp.iter_bytes():
                            f.write(chunk)
                except httpx.DecodingError as e:
                    path.unlink(missing_ok=True)
                    raise decoding_error(resp, e) from e
                except BaseException:
                    # Недокачанный файл не оставляем
                    path.unlink(missing_ok=True)
                    raise
        except httpx.RequestError as e:
            logger.error(f"Сетевая ошибка при скачивании {path.name}: {e}")
            raise TransportError(f"Ошибка скачивания результата: {e}") from e
