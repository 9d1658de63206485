"""
Клиент Cloud OCR SDK.

Компоненты:
- client.py - OcrClient (синхронный, собран из миксинов task_*.py)
- async_client.py - AsyncOcrClient
- params.py - параметры запросов по эндпоинтам
- models.py - TaskInfo, TaskStatus, ErrorData, ApplicationInfo
- exceptions.py - OcrSdkError, ApiError, TaskFailedError, etc.
- http_pool.py - Connection pooling
- xml_result/ - модель и декодер XML результата распознавания
"""

__version__ = "0.1.0"

from ocrsdk_client.async_client import AsyncOcrClient
from ocrsdk_client.client import OcrClient
from ocrsdk_client.enums import (
    BarcodeType,
    BusinessCardExportFormat,
    CheckmarkType,
    ExportFormat,
    FieldRegionExportMode,
    ImageSource,
    MarkingType,
    ProcessingProfile,
    ReceiptRecognizingCountry,
    TextType,
    WriteTags,
    WritingStyle,
)
from ocrsdk_client.exceptions import (
    ApiError,
    DecodeErrorKind,
    NotEnoughCreditsError,
    OcrSdkError,
    PreconditionError,
    ResultDecodeError,
    TaskDeletedError,
    TaskFailedError,
    TaskProcessingFailedError,
    TransportError,
)
from ocrsdk_client.models import ApplicationInfo, ErrorData, TaskInfo, TaskStatus
from ocrsdk_client.params import (
    BarcodeFieldProcessingParams,
    BusinessCardProcessingParams,
    CheckmarkFieldProcessingParams,
    DocumentProcessingParams,
    FieldRegion,
    FieldsProcessingParams,
    ImageProcessingParams,
    ImageSubmittingParams,
    MrzProcessingParams,
    ReceiptProcessingParams,
    TasksListingParams,
    TextFieldProcessingParams,
)
from ocrsdk_client.settings import OcrClientSettings

__all__ = [
    "OcrClient",
    "AsyncOcrClient",
    "OcrClientSettings",
    # Модели
    "TaskInfo",
    "TaskStatus",
    "ErrorData",
    "ApplicationInfo",
    # Параметры
    "ImageProcessingParams",
    "ImageSubmittingParams",
    "DocumentProcessingParams",
    "BusinessCardProcessingParams",
    "TextFieldProcessingParams",
    "BarcodeFieldProcessingParams",
    "CheckmarkFieldProcessingParams",
    "FieldsProcessingParams",
    "MrzProcessingParams",
    "ReceiptProcessingParams",
    "TasksListingParams",
    "FieldRegion",
    # Перечисления
    "ExportFormat",
    "ProcessingProfile",
    "TextType",
    "ImageSource",
    "WriteTags",
    "BusinessCardExportFormat",
    "MarkingType",
    "WritingStyle",
    "BarcodeType",
    "CheckmarkType",
    "ReceiptRecognizingCountry",
    "FieldRegionExportMode",
    # Ошибки
    "OcrSdkError",
    "TransportError",
    "PreconditionError",
    "ApiError",
    "TaskFailedError",
    "TaskProcessingFailedError",
    "NotEnoughCreditsError",
    "TaskDeletedError",
    "ResultDecodeError",
    "DecodeErrorKind",
]
