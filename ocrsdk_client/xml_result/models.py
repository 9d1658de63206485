"""
Модель XML результата распознавания (exportFormat=xml / xmlForCorrectedImage).

Дерево строго иерархическое: каждый узел принадлежит родителю, дети
хранятся в кортежах, обратных ссылок нет. Ссылки на стили (paragraph.style,
formatting.style) слабые: разрешаются через Document.paragraph_style /
Document.font_style и при декодировании не проверяются.

Обязательная геометрия (l, t, r, b, width, height ...) по умолчанию 0,
необязательные числовые атрибуты - None, флаги - False.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple


class BlockType(Enum):
    """Тип блока на странице"""

    TEXT = "Text"
    TABLE = "Table"
    PICTURE = "Picture"
    BARCODE = "Barcode"
    SEPARATOR = "Separator"
    SEPARATORS_BOX = "SeparatorsBox"
    CHECKMARK = "Checkmark"
    GROUP_CHECKMARK = "GroupCheckmark"

    @classmethod
    def parse(cls, value: str) -> Optional["BlockType"]:
        try:
            return cls(value)
        except ValueError:
            return None


# --- Геометрия ---


@dataclass(frozen=True)
class Rect:
    l: int = 0
    t: int = 0
    r: int = 0
    b: int = 0

    @property
    def width(self) -> int:
        return self.r - self.l

    @property
    def height(self) -> int:
        return self.b - self.t


@dataclass(frozen=True)
class Region:
    rects: Tuple[Rect, ...] = ()


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0


# --- Символы и слова ---


@dataclass(frozen=True)
class CharRecognitionVariant:
    """Альтернативный вариант распознавания символа"""

    char: str = ""
    char_confidence: Optional[int] = None
    serif_probability: Optional[int] = None


@dataclass(frozen=True)
class CharParams:
    """Параметры одного символа: рамка, уверенность, признаки слова"""

    char: str = ""
    l: int = 0
    t: int = 0
    r: int = 0
    b: int = 0
    suspicious: bool = False
    proofed: bool = False
    word_start: bool = False
    word_first: bool = False
    word_left_most: bool = False
    word_from_dictionary: bool = False
    word_normal: bool = False
    word_numeric: bool = False
    word_identifier: bool = False
    char_confidence: Optional[int] = None
    serif_probability: Optional[int] = None
    word_penalty: Optional[int] = None
    mean_stroke_width: Optional[int] = None
    character_height: Optional[int] = None
    has_uncertain_height: bool = False
    base_line: Optional[int] = None
    is_tab: bool = False
    tab_leader_count: Optional[int] = None
    variants: Tuple[CharRecognitionVariant, ...] = ()

    @property
    def rect(self) -> Rect:
        return Rect(self.l, self.t, self.r, self.b)


@dataclass(frozen=True)
class VariantText:
    text: str = ""
    char_params: Tuple[CharParams, ...] = ()


@dataclass(frozen=True)
class WordRecognitionVariant:
    """Альтернативный вариант распознавания слова"""

    word_from_dictionary: bool = False
    word_normal: bool = False
    word_numeric: bool = False
    word_identifier: bool = False
    word_penalty: Optional[int] = None
    mean_stroke_width: Optional[int] = None
    variant_texts: Tuple[VariantText, ...] = ()


# --- Текст ---


@dataclass(frozen=True)
class Formatting:
    """
    Участок строки с одинаковым форматированием.

    value - текст, записанный прямо в элементе (без charParams);
    при xml:writeFormatting с посимвольной информацией текст лежит в char_params.
    """

    lang: str = ""
    ff: str = ""
    fs: Optional[float] = None
    bold: bool = False
    italic: bool = False
    subscript: bool = False
    superscript: bool = False
    smallcaps: bool = False
    underline: bool = False
    strikeout: bool = False
    color: Optional[int] = None
    scaling: Optional[int] = None
    spacing: Optional[int] = None
    style: str = ""
    base64encoded: bool = False
    value: str = ""
    char_params: Tuple[CharParams, ...] = ()
    word_variants: Tuple[WordRecognitionVariant, ...] = ()

    @property
    def text(self) -> str:
        if self.char_params:
            return "".join(c.char for c in self.char_params)
        return self.value


@dataclass(frozen=True)
class Line:
    baseline: int = 0
    l: int = 0
    t: int = 0
    r: int = 0
    b: int = 0
    formattings: Tuple[Formatting, ...] = ()

    @property
    def rect(self) -> Rect:
        return Rect(self.l, self.t, self.r, self.b)

    @property
    def text(self) -> str:
        return "".join(f.text for f in self.formattings)


@dataclass(frozen=True)
class Paragraph:
    """Абзац: выравнивание, отступы, признаки списка"""

    id: str = ""
    style: str = ""  # id стиля в DocumentData, слабая ссылка
    align: str = ""
    left_indent: Optional[int] = None
    right_indent: Optional[int] = None
    start_indent: Optional[int] = None
    line_spacing: Optional[int] = None
    drop_cap_chars_count: Optional[int] = None
    drop_cap_l: Optional[int] = None
    drop_cap_t: Optional[int] = None
    drop_cap_r: Optional[int] = None
    drop_cap_b: Optional[int] = None
    has_overflowed_head: bool = False
    has_overflowed_tail: bool = False
    is_list_item: bool = False
    lst_lvl: Optional[int] = None
    lst_num: Optional[int] = None
    lines: Tuple[Line, ...] = ()

    @property
    def text(self) -> str:
        return "\n".join(line.text for line in self.lines)


@dataclass(frozen=True)
class Text:
    id: str = ""
    orientation: str = ""
    paragraphs: Tuple[Paragraph, ...] = ()

    @property
    def text(self) -> str:
        return "\n".join(p.text for p in self.paragraphs)


# --- Таблицы, разделители, штрихкоды ---


@dataclass(frozen=True)
class Cell:
    width: int = 0
    height: int = 0
    col_span: Optional[int] = None
    row_span: Optional[int] = None
    align: str = ""
    picture: bool = False
    left_border: str = ""
    top_border: str = ""
    right_border: str = ""
    bottom_border: str = ""
    texts: Tuple[Text, ...] = ()

    @property
    def text(self) -> str:
        return "\n".join(t.text for t in self.texts)


@dataclass(frozen=True)
class TableRow:
    cells: Tuple[Cell, ...] = ()


@dataclass(frozen=True)
class SeparatorBlock:
    thickness: int = 0
    type: str = ""
    start: Optional[Point] = None
    end: Optional[Point] = None


@dataclass(frozen=True)
class SeparatorsBox:
    separators: Tuple[SeparatorBlock, ...] = ()


@dataclass(frozen=True)
class BarcodeInfo:
    type: str = ""
    supplement: str = ""


@dataclass(frozen=True)
class Block:
    """
    Блок страницы. block_type_raw хранит значение атрибута как есть,
    block_type - None для типов, которых нет в BlockType.
    """

    block_type_raw: str = ""
    l: int = 0
    t: int = 0
    r: int = 0
    b: int = 0
    page_elem_id: str = ""
    block_name: str = ""
    is_hidden: bool = False
    region: Optional[Region] = None
    texts: Tuple[Text, ...] = ()
    rows: Tuple[TableRow, ...] = ()
    separators_boxes: Tuple[SeparatorsBox, ...] = ()
    separators: Tuple[SeparatorBlock, ...] = ()
    barcode_info: Tuple[BarcodeInfo, ...] = ()

    @property
    def block_type(self) -> Optional[BlockType]:
        return BlockType.parse(self.block_type_raw)

    @property
    def rect(self) -> Rect:
        return Rect(self.l, self.t, self.r, self.b)

    @property
    def text(self) -> str:
        if self.rows:
            return "\n".join(
                "\t".join(cell.text for cell in row.cells) for row in self.rows
            )
        return "\n".join(t.text for t in self.texts)


# --- Логическая разметка страницы ---


@dataclass(frozen=True)
class Barcode:
    barcode_value: str = ""


@dataclass(frozen=True)
class Caption:
    elements: Tuple["PageElement", ...] = ()


@dataclass(frozen=True)
class Picture:
    id: str = ""
    captions: Tuple[Caption, ...] = ()


@dataclass(frozen=True)
class TableCell:
    top_pos: int = 0
    bottom_pos: int = 0
    left_pos: int = 0
    right_pos: int = 0
    vertical_alignment: str = ""
    texts: Tuple["PageElement", ...] = ()


@dataclass(frozen=True)
class Table:
    id: str = ""
    captions: Tuple[Caption, ...] = ()
    cells: Tuple[TableCell, ...] = ()


@dataclass(frozen=True)
class PageElement:
    page_elem_id: str = ""
    texts: Tuple[Text, ...] = ()
    tables: Tuple[Table, ...] = ()
    barcodes: Tuple[Barcode, ...] = ()
    pictures: Tuple[Picture, ...] = ()


@dataclass(frozen=True)
class PageStream:
    stream_type: str = ""
    elements: Tuple[PageElement, ...] = ()


@dataclass(frozen=True)
class PageSection:
    streams: Tuple[PageStream, ...] = ()


@dataclass(frozen=True)
class Page:
    width: int = 0
    height: int = 0
    resolution: int = 0
    original_coords: bool = False
    rotation: str = ""
    blocks: Tuple[Block, ...] = ()
    sections: Tuple[PageSection, ...] = ()
    streams: Tuple[PageStream, ...] = ()

    @property
    def text(self) -> str:
        return "\n\n".join(b.text for b in self.blocks if b.text)


# --- Стили и секции документа ---


@dataclass(frozen=True)
class FontStyle:
    id: str = ""
    ff: str = ""
    fs: Optional[float] = None
    base_font: bool = False
    italic: bool = False
    bold: bool = False
    underline: bool = False
    strikeout: bool = False
    smallcaps: bool = False
    scaling: Optional[int] = None
    spacing: Optional[int] = None
    color: Optional[int] = None
    background_color: Optional[int] = None


@dataclass(frozen=True)
class ParagraphStyle:
    id: str = ""
    name: str = ""
    main_font_style_id: str = ""
    role: str = ""
    font_styles: Tuple[FontStyle, ...] = ()


@dataclass(frozen=True)
class MainText:
    rtl: bool = False
    column_count: int = 0


@dataclass(frozen=True)
class ElemId:
    id: str = ""


@dataclass(frozen=True)
class TextStream:
    role: str = ""
    main_texts: Tuple[MainText, ...] = ()
    elem_ids: Tuple[ElemId, ...] = ()


@dataclass(frozen=True)
class Section:
    streams: Tuple[TextStream, ...] = ()


@dataclass(frozen=True)
class DocumentData:
    paragraph_styles: Tuple[ParagraphStyle, ...] = ()
    sections: Tuple[Section, ...] = ()


@dataclass(frozen=True)
class Document:
    version: str = ""
    producer: str = ""
    pages_count: Optional[int] = None
    main_language: str = ""
    languages: str = ""
    document_data: Tuple[DocumentData, ...] = ()
    pages: Tuple[Page, ...] = ()

    def iter_blocks(self) -> Iterator[Block]:
        for page in self.pages:
            yield from page.blocks

    def paragraph_style(self, style_id: str) -> Optional[ParagraphStyle]:
        """Найти стиль абзаца по id. None, если каталога или id нет."""
        for data in self.document_data:
            for style in data.paragraph_styles:
                if style.id == style_id:
                    return style
        return None

    def font_style(self, style_id: str) -> Optional[FontStyle]:
        for data in self.document_data:
            for style in data.paragraph_styles:
                for font in style.font_styles:
                    if font.id == style_id:
                        return font
        return None

    @property
    def text(self) -> str:
        return "\n\n".join(p.text for p in self.pages if p.text)
