"""Асинхронный клиент Cloud OCR SDK"""
from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, TypeVar, Union

import aiofiles
import httpx

from ocrsdk_client import urls
from ocrsdk_client.exceptions import TransportError
from ocrsdk_client.http_pool import basic_auth, create_async_http_client
from ocrsdk_client.models import ApplicationInfo, TaskInfo, parse_task_list
from ocrsdk_client.params import (
    BarcodeFieldProcessingParams,
    BusinessCardProcessingParams,
    CheckmarkFieldProcessingParams,
    DocumentProcessingParams,
    FieldsProcessingParams,
    ImageProcessingParams,
    ImageSubmittingParams,
    MrzProcessingParams,
    QueryParams,
    ReceiptProcessingParams,
    TaskIdParams,
    TasksListingParams,
    TextFieldProcessingParams,
)
from ocrsdk_client.response import (
    FilePayload,
    decoding_error,
    log_exchange,
    parse_response,
    raise_for_api_error,
    read_payload,
)
from ocrsdk_client.settings import OcrClientSettings
from ocrsdk_client.task_download import ensure_downloadable, result_file_name
from ocrsdk_client.task_lifecycle import check_polled_task, poll_delay_seconds

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AsyncOcrClient:
    """
    Асинхронный клиент Cloud OCR SDK поверх httpx.AsyncClient.

    Те же операции, что у OcrClient. wait_for_task ждёт через asyncio.sleep,
    отмена корутины срабатывает на паузе или на текущем запросе.
    """

    def __init__(
        self,
        settings: OcrClientSettings,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings
        self._owns_http_client = http_client is None
        self.http_client = http_client or create_async_http_client(settings)
        logger.info(
            f"AsyncOcrClient инициализирован: host={settings.host}, "
            f"application_id={settings.application_id}"
        )

    async def aclose(self):
        """Закрыть пул соединений, если он создан клиентом"""
        if self._owns_http_client and not self.http_client.is_closed:
            await self.http_client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    async def _request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, str]] = None,
        content: Optional[bytes] = None,
        timeout: Optional[float] = None,
        authenticated: bool = True,
    ) -> httpx.Response:
        started = time.monotonic()
        request = self.http_client.build_request(
            method,
            url,
            params=params,
            content=content,
            timeout=timeout or self.settings.timeout,
        )
        try:
            resp = await self.http_client.send(
                request,
                auth=basic_auth(self.settings) if authenticated else None,
                stream=True,
            )
            try:
                await resp.aread()
            except httpx.DecodingError as e:
                raise decoding_error(resp, e) from e
            finally:
                await resp.aclose()
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

    async def _call(
        self,
        method: str,
        url: str,
        params: Optional[QueryParams],
        parser: Callable[[Any], T],
        file: FilePayload = None,
    ) -> T:
        query = params.to_params() if params is not None else None
        content = read_payload(file)
        timeout = self.settings.upload_timeout if content is not None else None
        resp = await self._request(method, url, params=query, content=content, timeout=timeout)
        return parse_response(resp, parser)

    async def _start_task(
        self, url: str, params: QueryParams, file: FilePayload = None, file_name: str = ""
    ) -> TaskInfo:
        if file_name:
            logger.info(f"Загрузка файла {file_name} -> {url}", extra={"endpoint": url})
        task = await self._call("post", url, params, TaskInfo.from_api_response, file)
        logger.info(
            f"Задача {task.task_id}: {task.status.value}",
            extra={"task_id": task.task_id, "status": task.status.value, "endpoint": url},
        )
        return task

    # --- Создание задач ---

    async def process_image(
        self, params: ImageProcessingParams, file: FilePayload, file_name: str = ""
    ) -> TaskInfo:
        return await self._start_task(urls.PROCESS_IMAGE_URL, params, file, file_name)

    async def submit_image(
        self, params: ImageSubmittingParams, file: FilePayload, file_name: str = ""
    ) -> TaskInfo:
        return await self._start_task(urls.SUBMIT_IMAGE_URL, params, file, file_name)

    async def process_document(self, params: DocumentProcessingParams) -> TaskInfo:
        return await self._start_task(urls.PROCESS_DOCUMENT_URL, params)

    async def process_business_card(
        self, params: BusinessCardProcessingParams, file: FilePayload, file_name: str = ""
    ) -> TaskInfo:
        return await self._start_task(urls.PROCESS_BUSINESS_CARD_URL, params, file, file_name)

    async def process_text_field(
        self, params: TextFieldProcessingParams, file: FilePayload, file_name: str = ""
    ) -> TaskInfo:
        return await self._start_task(urls.PROCESS_TEXT_FIELD_URL, params, file, file_name)

    async def process_barcode_field(
        self, params: BarcodeFieldProcessingParams, file: FilePayload, file_name: str = ""
    ) -> TaskInfo:
        return await self._start_task(urls.PROCESS_BARCODE_FIELD_URL, params, file, file_name)

    async def process_checkmark_field(
        self, params: CheckmarkFieldProcessingParams, file: FilePayload, file_name: str = ""
    ) -> TaskInfo:
        return await self._start_task(urls.PROCESS_CHECKMARK_FIELD_URL, params, file, file_name)

    async def process_fields(
        self, params: FieldsProcessingParams, settings_xml: FilePayload, file_name: str = ""
    ) -> TaskInfo:
        return await self._start_task(urls.PROCESS_FIELDS_URL, params, settings_xml, file_name)

    async def process_mrz(
        self, params: MrzProcessingParams, file: FilePayload, file_name: str = ""
    ) -> TaskInfo:
        return await self._start_task(urls.PROCESS_MRZ_URL, params, file, file_name)

    async def process_receipt(
        self, params: ReceiptProcessingParams, file: FilePayload, file_name: str = ""
    ) -> TaskInfo:
        return await self._start_task(urls.PROCESS_RECEIPT_URL, params, file, file_name)

    # --- Чтение ---

    async def get_task_status(self, task_id: str) -> TaskInfo:
        return await self._call(
            "get", urls.GET_TASK_STATUS_URL, TaskIdParams(task_id), TaskInfo.from_api_response
        )

    async def list_tasks(self, params: Optional[TasksListingParams] = None) -> List[TaskInfo]:
        return await self._call(
            "get", urls.LIST_TASKS_URL, params or TasksListingParams(), parse_task_list
        )

    async def list_finished_tasks(self) -> List[TaskInfo]:
        return await self._call("get", urls.LIST_FINISHED_TASKS_URL, None, parse_task_list)

    async def get_application_info(self) -> ApplicationInfo:
        return await self._call(
            "get", urls.GET_APPLICATION_INFO_URL, None, ApplicationInfo.from_api_response
        )

    # --- Жизненный цикл ---

    async def delete_task(self, task_id: str) -> TaskInfo:
        task = await self._call(
            "post", urls.DELETE_TASK_URL, TaskIdParams(task_id), TaskInfo.from_api_response
        )
        logger.info(
            f"Задача {task.task_id} удалена",
            extra={"task_id": task.task_id, "status": task.status.value},
        )
        return task

    async def wait_for_task(self, task: TaskInfo) -> TaskInfo:
        """Асинхронный поллинг до Completed (см. OcrClient.wait_for_task)"""
        current = task
        while True:
            await asyncio.sleep(poll_delay_seconds(current))
            current = await self.get_task_status(current.task_id)
            if check_polled_task(current):
                return current

    # --- Скачивание ---

    async def download_result(self, url: str) -> bytes:
        resp = await self._request(
            "get", url, timeout=self.settings.download_timeout, authenticated=False
        )
        raise_for_api_error(resp)
        return resp.content

    async def download_results(self, task: TaskInfo) -> List[bytes]:
        ensure_downloadable(task)
        return [await self.download_result(url) for url in task.result_urls]

    async def save_results(
        self,
        task: TaskInfo,
        target_dir: Union[str, Path],
        base_name: Optional[str] = None,
    ) -> List[Path]:
        ensure_downloadable(task)
        target = Path(target_dir)
        target.mkdir(parents=True, exist_ok=True)

        paths: List[Path] = []
        for index, url in enumerate(task.result_urls):
            path = target / result_file_name(task, index, url, base_name)
            await self._stream_to_file(url, path)
            paths.append(path)
            logger.info(f"Результат сохранён: {path}", extra={"task_id": task.task_id})
        return paths

    async def _stream_to_file(self, url: str, path: Path) -> None:
        try:
            async with self.http_client.stream(
                "GET", url, timeout=self.settings.download_timeout, auth=None
            ) as resp:
                if not resp.is_success:
                    await resp.aread()
                    raise_for_api_error(resp)
                try:
                    async with aiofiles.open(path, "wb") as f:
                        async for chunk in resp.aiter_bytes():
                            await f.write(chunk)
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
