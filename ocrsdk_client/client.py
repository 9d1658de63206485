"""Синхронный клиент Cloud OCR SDK"""
from __future__ import annotations

from dataclasses import dataclass

from ocrsdk_client.core import OcrClientCore
from ocrsdk_client.task_download import TaskDownloadMixin
from ocrsdk_client.task_lifecycle import TaskLifecycleMixin
from ocrsdk_client.task_read import TaskReadMixin
from ocrsdk_client.task_submit import TaskSubmitMixin


@dataclass
class OcrClient(
    OcrClientCore,
    TaskSubmitMixin,
    TaskReadMixin,
    TaskLifecycleMixin,
    TaskDownloadMixin,
):
    """
    Клиент Cloud OCR SDK.

    Пример:
        settings = OcrClientSettings.from_env()
        with OcrClient(settings) as client:
            task = client.process_image(ImageProcessingParams(language="English"), data)
            task = client.wait_for_task(task)
            results = client.download_results(task)
    """

    pass
