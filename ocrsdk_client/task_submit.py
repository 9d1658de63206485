"""Миксин создания задач: загрузка изображений и запуск обработки."""
from __future__ import annotations

import logging

from ocrsdk_client.models import TaskInfo
from ocrsdk_client.params import (
    BarcodeFieldProcessingParams,
    BusinessCardProcessingParams,
    CheckmarkFieldProcessingParams,
    DocumentProcessingParams,
    FieldsProcessingParams,
    ImageProcessingParams,
    ImageSubmittingParams,
    MrzProcessingParams,
    ReceiptProcessingParams,
    TextFieldProcessingParams,
)
from ocrsdk_client.response import FilePayload
from ocrsdk_client.urls import (
    PROCESS_BARCODE_FIELD_URL,
    PROCESS_BUSINESS_CARD_URL,
    PROCESS_CHECKMARK_FIELD_URL,
    PROCESS_DOCUMENT_URL,
    PROCESS_FIELDS_URL,
    PROCESS_IMAGE_URL,
    PROCESS_MRZ_URL,
    PROCESS_RECEIPT_URL,
    PROCESS_TEXT_FIELD_URL,
    SUBMIT_IMAGE_URL,
)

logger = logging.getLogger(__name__)


class TaskSubmitMixin:
    """Эндпоинты, которые создают задачу или добавляют в неё работу.

    Все методы возвращают TaskInfo в том состоянии, которое сообщил сервер
    (обычно Submitted или Queued). Дождаться результата - wait_for_task.
    """

    def process_image(
        self, params: ImageProcessingParams, file: FilePayload, file_name: str = ""
    ) -> TaskInfo:
        """Загрузить изображение и сразу поставить его в обработку."""
        return self._start_task(PROCESS_IMAGE_URL, params, file, file_name)

    def submit_image(
        self, params: ImageSubmittingParams, file: FilePayload, file_name: str = ""
    ) -> TaskInfo:
        """Загрузить изображение без обработки (новая задача или task_id из params)."""
        return self._start_task(SUBMIT_IMAGE_URL, params, file, file_name)

    def process_document(self, params: DocumentProcessingParams) -> TaskInfo:
        """Обработать все изображения задачи, загруженные через submit_image."""
        return self._start_task(PROCESS_DOCUMENT_URL, params)

    def process_business_card(
        self, params: BusinessCardProcessingParams, file: FilePayload, file_name: str = ""
    ) -> TaskInfo:
        return self._start_task(PROCESS_BUSINESS_CARD_URL, params, file, file_name)

    def process_text_field(
        self, params: TextFieldProcessingParams, file: FilePayload, file_name: str = ""
    ) -> TaskInfo:
        return self._start_task(PROCESS_TEXT_FIELD_URL, params, file, file_name)

    def process_barcode_field(
        self, params: BarcodeFieldProcessingParams, file: FilePayload, file_name: str = ""
    ) -> TaskInfo:
        return self._start_task(PROCESS_BARCODE_FIELD_URL, params, file, file_name)

    def process_checkmark_field(
        self, params: CheckmarkFieldProcessingParams, file: FilePayload, file_name: str = ""
    ) -> TaskInfo:
        return self._start_task(PROCESS_CHECKMARK_FIELD_URL, params, file, file_name)

    def process_fields(
        self, params: FieldsProcessingParams, settings_xml: FilePayload, file_name: str = ""
    ) -> TaskInfo:
        """Распознать несколько полей задачи по XML описанию полей."""
        return self._start_task(PROCESS_FIELDS_URL, params, settings_xml, file_name)

    def process_mrz(
        self, params: MrzProcessingParams, file: FilePayload, file_name: str = ""
    ) -> TaskInfo:
        """Распознать машиночитаемую зону документа (паспорт, ID карта)."""
        return self._start_task(PROCESS_MRZ_URL, params, file, file_name)

    def process_receipt(
        self, params: ReceiptProcessingParams, file: FilePayload, file_name: str = ""
    ) -> TaskInfo:
        return self._start_task(PROCESS_RECEIPT_URL, params, file, file_name)
