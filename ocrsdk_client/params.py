"""
Параметры запросов Cloud OCR SDK.

Каждый тип параметров отвечает за один эндпоинт и умеет только одно:
собрать словарь query-параметров (to_params). Флаги трёхзначные:
None - не передавать (действует значение сервера по умолчанию),
True/False - передать явно.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Iterable, Optional, Protocol, Sequence, Union

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
from ocrsdk_client.exceptions import PreconditionError

MAX_DESCRIPTION_LENGTH = 255


class QueryParams(Protocol):
    """Всё, что можно передать в запрос как query-параметры"""

    def to_params(self) -> Dict[str, str]:
        ...


def _wire(value: Union[Enum, str]) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def _join(values: Iterable[Union[Enum, str]]) -> str:
    return ",".join(_wire(v) for v in values)


def _set(params: Dict[str, str], key: str, value: Union[Enum, str, None]) -> None:
    if value:
        params[key] = _wire(value)


def _set_flag(params: Dict[str, str], key: str, value: Optional[bool]) -> None:
    if value is not None:
        params[key] = "true" if value else "false"


def _set_list(params: Dict[str, str], key: str, values: Sequence) -> None:
    if values:
        params[key] = _join(values)


def _set_description(params: Dict[str, str], description: str) -> None:
    if not description:
        return
    if len(description) > MAX_DESCRIPTION_LENGTH:
        raise PreconditionError(
            f"description длиннее {MAX_DESCRIPTION_LENGTH} символов ({len(description)})"
        )
    params["description"] = description


def _require_task_id(task_id: str) -> str:
    if not task_id:
        raise PreconditionError("task_id обязателен для этого запроса")
    return task_id


def format_datetime(value: datetime) -> str:
    """Дата для listTasks: yyyy-mm-ddThh:mm:ssZ в UTC (naive считается UTC)"""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass(frozen=True)
class FieldRegion:
    """
    Область поля на изображении в пикселях от левого верхнего угла.

    FieldRegion.whole_image() (-1,-1,-1,-1) - всё изображение.
    """

    left: int
    top: int
    right: int
    bottom: int

    def __post_init__(self):
        if self.is_whole_image:
            return
        if self.left > self.right or self.top > self.bottom:
            raise PreconditionError(
                f"Некорректная область: left={self.left}, top={self.top}, "
                f"right={self.right}, bottom={self.bottom}"
            )

    @classmethod
    def whole_image(cls) -> "FieldRegion":
        return cls(-1, -1, -1, -1)

    @property
    def is_whole_image(self) -> bool:
        return (self.left, self.top, self.right, self.bottom) == (-1, -1, -1, -1)

    def __str__(self) -> str:
        return f"{self.left},{self.top},{self.right},{self.bottom}"


RegionLike = Union[FieldRegion, str, None]


def _set_region(params: Dict[str, str], region: RegionLike) -> None:
    if region:
        params["region"] = str(region)


@dataclass(frozen=True)
class TaskIdParams:
    """taskId для getTaskStatus и deleteTask"""

    task_id: str

    def to_params(self) -> Dict[str, str]:
        return {"taskId": _require_task_id(self.task_id)}


@dataclass(frozen=True)
class ImageProcessingParams:
    """processImage: загрузка изображения и запуск обработки одним вызовом"""

    language: str = ""  # "English,French,German"
    profile: Optional[ProcessingProfile] = None
    text_types: Sequence[TextType] = ()
    image_source: Optional[ImageSource] = None
    correct_orientation: Optional[bool] = None
    correct_skew: Optional[bool] = None
    export_formats: Sequence[ExportFormat] = ()  # до трёх форматов
    read_barcodes: Optional[bool] = None
    write_formatting: Optional[bool] = None  # только для xml экспорта
    write_recognition_variants: Optional[bool] = None  # только для xml экспорта
    write_tags: Optional[WriteTags] = None  # только для pdf экспорта
    description: str = ""
    pdf_password: str = ""

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        _set(params, "language", self.language)
        _set(params, "profile", self.profile)
        _set_list(params, "textType", self.text_types)
        _set(params, "imageSource", self.image_source)
        _set_flag(params, "correctOrientation", self.correct_orientation)
        _set_flag(params, "correctSkew", self.correct_skew)
        _set_list(params, "exportFormat", self.export_formats)
        _set_flag(params, "readBarcodes", self.read_barcodes)
        _set_flag(params, "xml:writeFormatting", self.write_formatting)
        _set_flag(params, "xml:writeRecognitionVariants", self.write_recognition_variants)
        _set(params, "pdf:writeTags", self.write_tags)
        _set_description(params, self.description)
        _set(params, "pdfPassword", self.pdf_password)
        return params


@dataclass(frozen=True)
class ImageSubmittingParams:
    """submitImage: добавить изображение в новую или существующую задачу"""

    task_id: str = ""  # пусто - сервер создаст новую задачу
    pdf_password: str = ""

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        _set(params, "taskId", self.task_id)
        _set(params, "pdfPassword", self.pdf_password)
        return params


@dataclass(frozen=True)
class DocumentProcessingParams:
    """processDocument: запуск обработки ранее загруженных изображений"""

    task_id: str
    language: str = ""
    profile: Optional[ProcessingProfile] = None
    text_types: Sequence[TextType] = ()
    image_source: Optional[ImageSource] = None
    correct_orientation: Optional[bool] = None
    correct_skew: Optional[bool] = None
    read_barcodes: Optional[bool] = None
    export_formats: Sequence[ExportFormat] = ()
    write_formatting: Optional[bool] = None
    write_recognition_variants: Optional[bool] = None
    write_tags: Optional[WriteTags] = None
    description: str = ""

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {"taskId": _require_task_id(self.task_id)}
        _set(params, "language", self.language)
        _set(params, "profile", self.profile)
        _set_list(params, "textType", self.text_types)
        _set(params, "imageSource", self.image_source)
        _set_flag(params, "correctOrientation", self.correct_orientation)
        _set_flag(params, "correctSkew", self.correct_skew)
        _set_flag(params, "readBarcodes", self.read_barcodes)
        _set_list(params, "exportFormat", self.export_formats)
        _set_flag(params, "xml:writeFormatting", self.write_formatting)
        _set_flag(params, "xml:writeRecognitionVariants", self.write_recognition_variants)
        _set(params, "pdf:writeTags", self.write_tags)
        _set_description(params, self.description)
        return params


@dataclass(frozen=True)
class BusinessCardProcessingParams:
    language: str = ""
    image_source: Optional[ImageSource] = None
    correct_orientation: Optional[bool] = None
    correct_skew: Optional[bool] = None
    export_format: Optional[BusinessCardExportFormat] = None  # сервер: vCard
    write_extended_character_info: Optional[bool] = None
    write_field_components: Optional[bool] = None
    description: str = ""
    pdf_password: str = ""

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        _set(params, "language", self.language)
        _set(params, "imageSource", self.image_source)
        _set_flag(params, "correctOrientation", self.correct_orientation)
        _set_flag(params, "correctSkew", self.correct_skew)
        _set(params, "exportFormat", self.export_format)
        _set_flag(params, "xml:writeExtendedCharacterInfo", self.write_extended_character_info)
        _set_flag(params, "xml:writeFieldComponents", self.write_field_components)
        _set_description(params, self.description)
        _set(params, "pdfPassword", self.pdf_password)
        return params


@dataclass(frozen=True)
class TextFieldProcessingParams:
    """processTextField: распознавание одного текстового поля"""

    region: RegionLike = None
    language: str = ""
    letter_set: str = ""  # например "ABCDabcd'-."
    reg_exp: str = ""
    text_types: Sequence[TextType] = ()
    one_text_line: Optional[bool] = None
    one_word_per_text_line: Optional[bool] = None
    marking_type: Optional[MarkingType] = None
    placeholders_count: Optional[int] = None  # сервер: 1
    writing_style: Optional[WritingStyle] = None
    description: str = ""
    pdf_password: str = ""

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        _set_region(params, self.region)
        _set(params, "language", self.language)
        _set(params, "letterSet", self.letter_set)
        _set(params, "regExp", self.reg_exp)
        _set_list(params, "textType", self.text_types)
        _set_flag(params, "oneTextLine", self.one_text_line)
        _set_flag(params, "oneWordPerTextLine", self.one_word_per_text_line)
        _set(params, "markingType", self.marking_type)
        if self.placeholders_count is not None:
            params["placeholdersCount"] = str(self.placeholders_count)
        _set(params, "writingStyle", self.writing_style)
        _set_description(params, self.description)
        _set(params, "pdfPassword", self.pdf_password)
        return params


@dataclass(frozen=True)
class BarcodeFieldProcessingParams:
    region: RegionLike = None
    barcode_types: Sequence[BarcodeType] = ()  # пусто - автоопределение
    contains_binary_data: Optional[bool] = None  # для pdf417 и aztec
    description: str = ""
    pdf_password: str = ""

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        _set_region(params, self.region)
        _set_list(params, "barcodeType", self.barcode_types)
        _set_flag(params, "containsBinaryData", self.contains_binary_data)
        _set_description(params, self.description)
        _set(params, "pdfPassword", self.pdf_password)
        return params


@dataclass(frozen=True)
class CheckmarkFieldProcessingParams:
    region: RegionLike = None
    checkmark_type: Optional[CheckmarkType] = None
    correction_allowed: Optional[bool] = None
    description: str = ""
    pdf_password: str = ""

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        _set_region(params, self.region)
        _set(params, "checkmarkType", self.checkmark_type)
        _set_flag(params, "correctionAllowed", self.correction_allowed)
        _set_description(params, self.description)
        _set(params, "pdfPassword", self.pdf_password)
        return params


@dataclass(frozen=True)
class FieldsProcessingParams:
    """processFields: настройки полей передаются XML файлом в теле запроса"""

    task_id: str
    write_recognition_variants: Optional[bool] = None
    description: str = ""

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {"taskId": _require_task_id(self.task_id)}
        _set_flag(params, "writeRecognitionVariants", self.write_recognition_variants)
        _set_description(params, self.description)
        return params


@dataclass(frozen=True)
class MrzProcessingParams:
    description: str = ""
    pdf_password: str = ""

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        _set_description(params, self.description)
        _set(params, "pdfPassword", self.pdf_password)
        return params


@dataclass(frozen=True)
class ReceiptProcessingParams:
    countries: Sequence[ReceiptRecognizingCountry] = ()  # сервер: usa
    image_source: Optional[ImageSource] = None
    correct_orientation: Optional[bool] = None
    correct_skew: Optional[bool] = None
    write_extended_character_info: Optional[bool] = None
    field_region_export_mode: Optional[FieldRegionExportMode] = None
    description: str = ""
    pdf_password: str = ""

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        _set_list(params, "country", self.countries)
        _set(params, "imageSource", self.image_source)
        _set_flag(params, "correctOrientation", self.correct_orientation)
        _set_flag(params, "correctSkew", self.correct_skew)
        _set_flag(params, "xml:writeExtendedCharacterInfo", self.write_extended_character_info)
        _set(params, "xml:fieldRegionExportMode", self.field_region_export_mode)
        _set_description(params, self.description)
        _set(params, "pdfPassword", self.pdf_password)
        return params


@dataclass(frozen=True)
class TasksListingParams:
    """listTasks: по умолчанию сервер отдаёт задачи за последние 7 дней"""

    from_date: Optional[datetime] = None
    to_date: Optional[datetime] = None
    exclude_deleted: Optional[bool] = None

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self.from_date is not None:
            params["fromDate"] = format_datetime(self.from_date)
        if self.to_date is not None:
            params["toDate"] = format_datetime(self.to_date)
        _set_flag(params, "excludeDeleted", self.exclude_deleted)
        return params
