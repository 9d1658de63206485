"""Перечисления параметров обработки Cloud OCR SDK"""
from enum import Enum


class ExportFormat(Enum):
    """Формат экспорта результата (можно указать несколько)"""

    TXT = "txt"
    TXT_UNSTRUCTURED = "txtUnstructured"  # Текст в порядке исходных блоков
    RTF = "rtf"
    DOCX = "docx"
    XLSX = "xlsx"
    PPTX = "pptx"
    PDF_SEARCHABLE = "pdfSearchable"  # Изображение + текст под ним
    PDF_TEXT_AND_IMAGES = "pdfTextAndImages"
    PDF_A = "pdfA"  # PDF/A-1b
    XML = "xml"  # Координаты относительно исходного изображения
    XML_FOR_CORRECTED_IMAGE = "xmlForCorrectedImage"  # Координаты после коррекции геометрии
    ALTO = "alto"

    @property
    def is_xml(self) -> bool:
        """Результат можно разобрать через ocrsdk_client.xml_result"""
        return self in (ExportFormat.XML, ExportFormat.XML_FOR_CORRECTED_IMAGE)


class ProcessingProfile(Enum):
    """Профиль с предустановленными настройками обработки"""

    DOCUMENT_CONVERSION = "documentConversion"
    DOCUMENT_ARCHIVING = "documentArchiving"
    TEXT_EXTRACTION = "textExtraction"
    BARCODE_RECOGNITION = "barcodeRecognition"


class TextType(Enum):
    """Тип текста на странице (можно указать несколько)"""

    NORMAL = "normal"
    TYPEWRITER = "typewriter"
    MATRIX = "matrix"
    INDEX = "index"
    HANDPRINTED = "handprinted"
    OCR_A = "ocrA"
    OCR_B = "ocrB"
    E13B = "e13b"
    CMC7 = "cmc7"
    GOTHIC = "gothic"


class ImageSource(Enum):
    """Источник изображения"""

    AUTO = "auto"
    PHOTO = "photo"
    SCANNER = "scanner"


class WriteTags(Enum):
    """Запись тегов в PDF"""

    AUTO = "auto"
    WRITE = "write"
    DONT_WRITE = "dontWrite"


class BusinessCardExportFormat(Enum):
    XML = "xml"
    VCARD = "vCard"
    CSV = "csv"


class MarkingType(Enum):
    """Тип разметки вокруг символов (только для handprinted)"""

    SIMPLE_TEXT = "simpleText"
    UNDERLINED_TEXT = "underlinedText"
    TEXT_IN_FRAME = "textInFrame"
    GREY_BOXES = "greyBoxes"
    CHAR_BOX_SERIES = "charBoxSeries"
    SIMPLE_COMB = "simpleComb"
    COMB_IN_FRAME = "combInFrame"
    PARTITIONED_FRAME = "partitionedFrame"


class WritingStyle(Enum):
    """Стиль написания рукопечатных символов"""

    DEFAULT = "default"
    AMERICAN = "american"
    GERMAN = "german"
    RUSSIAN = "russian"
    POLISH = "polish"
    THAI = "thai"
    JAPANESE = "japanese"
    ARABIC = "arabic"
    BALTIC = "baltic"
    BRITISH = "british"
    BULGARIAN = "bulgarian"
    CANADIAN = "canadian"
    CZECH = "czech"
    CROATIAN = "croatian"
    FRENCH = "french"
    GREEK = "greek"
    HUNGARIAN = "hungarian"
    ITALIAN = "italian"
    ROMANIAN = "romanian"
    SLOVAK = "slovak"
    SPANISH = "spanish"
    TURKISH = "turkish"
    UKRAINIAN = "ukrainian"
    COMMON = "common"
    CHINESE = "chinese"
    AZERBAIJAN = "azerbaijan"
    KAZAKH = "kazakh"
    KIRGIZ = "kirgiz"
    LATVIAN = "latvian"


class BarcodeType(Enum):
    """Тип штрихкода (можно указать несколько)"""

    AZTEC = "aztec"
    CODABAR = "codabar"
    CODE128 = "code128"
    CODE39 = "code39"
    CODE93 = "code93"
    DATA_MATRIX = "dataMatrix"
    EAN8 = "ean8"
    EAN13 = "ean13"
    IATA25 = "iata25"
    INDUSTRIAL25 = "industrial25"
    INTERLEAVED25 = "interleaved25"
    MATRIX25 = "matrix25"
    PATCH = "patch"
    PDF417 = "pdf417"
    POSTNET = "postNet"
    QR_CODE = "qrCode"
    UCC128 = "ucc128"
    UPC_A = "upcA"
    UPC_E = "upcE"


class CheckmarkType(Enum):
    EMPTY = "empty"
    CIRCLE = "circle"
    SQUARE = "square"


class ReceiptRecognizingCountry(Enum):
    """Страна, в которой напечатан чек. Полностью поддержаны USA и France"""

    UK = "uk"
    USA = "usa"
    AUSTRALIA = "australia"
    CANADA = "canada"
    JAPAN = "japan"
    GERMANY = "germany"
    ITALY = "italy"
    FRANCE = "france"
    BRAZIL = "brazil"
    RUSSIA = "russia"
    CHINA = "china"
    KOREA = "korea"
    NETHERLANDS = "netherlands"
    SPAIN = "spain"
    SINGAPORE = "singapore"
    TAIWAN = "taiwan"
    TURKEY = "turkey"
    POLAND = "poland"


class FieldRegionExportMode(Enum):
    """Сохранение координат полей в XML результате"""

    DO_NOT_EXPORT = "doNotExport"
    FOR_ORIGINAL_IMAGE = "forOriginalImage"
    FOR_CORRECTED_IMAGE = "forCorrectedImage"
