"""Декодирование XML результата распознавания в модель xml_result.models"""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import BinaryIO, Callable, Iterator, List, Optional, Tuple, TypeVar, Union

from ocrsdk_client.exceptions import DecodeErrorKind, ResultDecodeError
from ocrsdk_client.xml_result.models import (
    Barcode,
    BarcodeInfo,
    Block,
    Caption,
    Cell,
    CharParams,
    CharRecognitionVariant,
    Document,
    DocumentData,
    ElemId,
    FontStyle,
    Formatting,
    Line,
    MainText,
    Page,
    PageElement,
    PageSection,
    PageStream,
    Paragraph,
    ParagraphStyle,
    Picture,
    Point,
    Rect,
    Region,
    Section,
    SeparatorBlock,
    SeparatorsBox,
    Table,
    TableCell,
    TableRow,
    Text,
    TextStream,
    VariantText,
    WordRecognitionVariant,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_TRUE = ("true", "1")
_FALSE = ("false", "0")


# --- Доступ к элементам без учёта namespace ---


def _local(name: str) -> str:
    """'{http://...}page' -> 'page'"""
    return name.rsplit("}", 1)[-1]


def _children(elem: ET.Element, name: str) -> Iterator[ET.Element]:
    for child in elem:
        if isinstance(child.tag, str) and _local(child.tag) == name:
            yield child


def _first(elem: ET.Element, name: str) -> Optional[ET.Element]:
    return next(_children(elem, name), None)


def _all(elem: ET.Element, name: str, build: Callable[[ET.Element], T]) -> Tuple[T, ...]:
    return tuple(build(child) for child in _children(elem, name))


def _attr(elem: ET.Element, name: str) -> Optional[str]:
    value = elem.get(name)
    if value is not None:
        return value
    for key, value in elem.attrib.items():
        if _local(key) == name:
            return value
    return None


def _str(elem: ET.Element, name: str) -> str:
    return _attr(elem, name) or ""


def _opt_int(elem: ET.Element, name: str) -> Optional[int]:
    raw = _attr(elem, name)
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        logger.debug(f"Некорректное целое {name}={raw!r} в <{_local(elem.tag)}>, пропущено")
        return None


def _int(elem: ET.Element, name: str) -> int:
    value = _opt_int(elem, name)
    return 0 if value is None else value


def _opt_float(elem: ET.Element, name: str) -> Optional[float]:
    raw = _attr(elem, name)
    if raw is None:
        return None
    try:
        return float(raw.strip())
    except ValueError:
        logger.debug(f"Некорректное число {name}={raw!r} в <{_local(elem.tag)}>, пропущено")
        return None


def _bool(elem: ET.Element, name: str) -> bool:
    raw = _attr(elem, name)
    if raw is None:
        return False
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value not in _FALSE:
        logger.debug(f"Некорректный флаг {name}={raw!r} в <{_local(elem.tag)}>, пропущено")
    return False


def _own_text(elem: ET.Element) -> str:
    """Текст элемента без текста дочерних элементов"""
    if len(elem) == 0:
        return elem.text or ""
    # Рядом с дочерними элементами пробелы - это отступы форматирования XML
    parts: List[str] = [elem.text or ""]
    parts.extend(child.tail or "" for child in elem)
    return "".join(part.strip() for part in parts)


def _char_text(elem: ET.Element) -> str:
    """Текст символа как есть: пробел тоже символ. Пробельные хвосты дочерних отбрасываются"""
    parts: List[str] = [elem.text or ""]
    parts.extend(child.tail for child in elem if child.tail and child.tail.strip())
    return "".join(parts)


# --- Символы и слова ---


def _char_variant(elem: ET.Element) -> CharRecognitionVariant:
    return CharRecognitionVariant(
        char=_char_text(elem),
        char_confidence=_opt_int(elem, "charConfidence"),
        serif_probability=_opt_int(elem, "serifProbability"),
    )


def _char_params(elem: ET.Element) -> CharParams:
    variants: Tuple[CharRecognitionVariant, ...] = ()
    container = _first(elem, "charRecVariants")
    if container is not None:
        variants = _all(container, "charRecVariant", _char_variant)
    return CharParams(
        char=_char_text(elem),
        l=_int(elem, "l"),
        t=_int(elem, "t"),
        r=_int(elem, "r"),
        b=_int(elem, "b"),
        suspicious=_bool(elem, "suspicious"),
        proofed=_bool(elem, "proofed"),
        word_start=_bool(elem, "wordStart"),
        word_first=_bool(elem, "wordFirst"),
        word_left_most=_bool(elem, "wordLeftMost"),
        word_from_dictionary=_bool(elem, "wordFromDictionary"),
        word_normal=_bool(elem, "wordNormal"),
        word_numeric=_bool(elem, "wordNumeric"),
        word_identifier=_bool(elem, "wordIdentifier"),
        char_confidence=_opt_int(elem, "charConfidence"),
        serif_probability=_opt_int(elem, "serifProbability"),
        word_penalty=_opt_int(elem, "wordPenalty"),
        mean_stroke_width=_opt_int(elem, "meanStrokeWidth"),
        character_height=_opt_int(elem, "characterHeight"),
        has_uncertain_height=_bool(elem, "hasUncertainHeight"),
        base_line=_opt_int(elem, "baseLine"),
        is_tab=_bool(elem, "isTab"),
        tab_leader_count=_opt_int(elem, "tabLeaderCount"),
        variants=variants,
    )


def _variant_text(elem: ET.Element) -> VariantText:
    return VariantText(
        text=_own_text(elem).strip(),
        char_params=_all(elem, "charParams", _char_params),
    )


def _word_variant(elem: ET.Element) -> WordRecognitionVariant:
    return WordRecognitionVariant(
        word_from_dictionary=_bool(elem, "wordFromDictionary"),
        word_normal=_bool(elem, "wordNormal"),
        word_numeric=_bool(elem, "wordNumeric"),
        word_identifier=_bool(elem, "wordIdentifier"),
        word_penalty=_opt_int(elem, "wordPenalty"),
        mean_stroke_width=_opt_int(elem, "meanStrokeWidth"),
        variant_texts=_all(elem, "variantText", _variant_text),
    )


# --- Текст ---


def _formatting(elem: ET.Element) -> Formatting:
    word_variants: List[WordRecognitionVariant] = []
    for container in _children(elem, "wordRecVariants"):
        word_variants.extend(_all(container, "wordRecVariant", _word_variant))

    char_params = _all(elem, "charParams", _char_params)
    # Без charParams текст лежит прямо в элементе
    value = "" if char_params else _own_text(elem)
    return Formatting(
        lang=_str(elem, "lang"),
        ff=_str(elem, "ff"),
        fs=_opt_float(elem, "fs"),
        bold=_bool(elem, "bold"),
        italic=_bool(elem, "italic"),
        subscript=_bool(elem, "subscript"),
        superscript=_bool(elem, "superscript"),
        smallcaps=_bool(elem, "smallcaps"),
        underline=_bool(elem, "underline"),
        strikeout=_bool(elem, "strikeout"),
        color=_opt_int(elem, "color"),
        scaling=_opt_int(elem, "scaling"),
        spacing=_opt_int(elem, "spacing"),
        style=_str(elem, "style"),
        base64encoded=_bool(elem, "base64encoded"),
        value=value,
        char_params=char_params,
        word_variants=tuple(word_variants),
    )


def _line(elem: ET.Element) -> Line:
    return Line(
        baseline=_int(elem, "baseline"),
        l=_int(elem, "l"),
        t=_int(elem, "t"),
        r=_int(elem, "r"),
        b=_int(elem, "b"),
        formattings=_all(elem, "formatting", _formatting),
    )


def _paragraph(elem: ET.Element) -> Paragraph:
    return Paragraph(
        id=_str(elem, "id"),
        style=_str(elem, "style"),
        align=_str(elem, "align"),
        left_indent=_opt_int(elem, "leftIndent"),
        right_indent=_opt_int(elem, "rightIndent"),
        start_indent=_opt_int(elem, "startIndent"),
        line_spacing=_opt_int(elem, "lineSpacing"),
        drop_cap_chars_count=_opt_int(elem, "dropCapCharsCount"),
        drop_cap_l=_opt_int(elem, "dropCap-l"),
        drop_cap_t=_opt_int(elem, "dropCap-t"),
        drop_cap_r=_opt_int(elem, "dropCap-r"),
        drop_cap_b=_opt_int(elem, "dropCap-b"),
        has_overflowed_head=_bool(elem, "hasOverflowedHead"),
        has_overflowed_tail=_bool(elem, "hasOverflowedTail"),
        is_list_item=_bool(elem, "isListItem"),
        lst_lvl=_opt_int(elem, "lstLvl"),
        lst_num=_opt_int(elem, "lstNum"),
        lines=_all(elem, "line", _line),
    )


def _text(elem: ET.Element) -> Text:
    return Text(
        id=_str(elem, "id"),
        orientation=_str(elem, "orientation"),
        paragraphs=_all(elem, "par", _paragraph),
    )


# --- Блоки ---


def _rect(elem: ET.Element) -> Rect:
    return Rect(l=_int(elem, "l"), t=_int(elem, "t"), r=_int(elem, "r"), b=_int(elem, "b"))


def _point(elem: ET.Element) -> Point:
    return Point(x=_int(elem, "x"), y=_int(elem, "y"))


def _cell(elem: ET.Element) -> Cell:
    return Cell(
        width=_int(elem, "width"),
        height=_int(elem, "height"),
        col_span=_opt_int(elem, "colSpan"),
        row_span=_opt_int(elem, "rowSpan"),
        align=_str(elem, "align"),
        picture=_bool(elem, "picture"),
        left_border=_str(elem, "leftBorder"),
        top_border=_str(elem, "topBorder"),
        right_border=_str(elem, "rightBorder"),
        bottom_border=_str(elem, "bottomBorder"),
        texts=_all(elem, "text", _text),
    )


def _row(elem: ET.Element) -> TableRow:
    return TableRow(cells=_all(elem, "cell", _cell))


def _separator(elem: ET.Element) -> SeparatorBlock:
    start = _first(elem, "start")
    end = _first(elem, "end")
    return SeparatorBlock(
        thickness=_int(elem, "thickness"),
        type=_str(elem, "type"),
        start=_point(start) if start is not None else None,
        end=_point(end) if end is not None else None,
    )


def _separators_box(elem: ET.Element) -> SeparatorsBox:
    return SeparatorsBox(separators=_all(elem, "separator", _separator))


def _barcode_info(elem: ET.Element) -> BarcodeInfo:
    return BarcodeInfo(type=_str(elem, "type"), supplement=_str(elem, "supplement"))


def _block(elem: ET.Element) -> Block:
    region = _first(elem, "region")
    return Block(
        block_type_raw=_str(elem, "blockType"),
        l=_int(elem, "l"),
        t=_int(elem, "t"),
        r=_int(elem, "r"),
        b=_int(elem, "b"),
        page_elem_id=_str(elem, "pageElemId"),
        block_name=_str(elem, "blockName"),
        is_hidden=_bool(elem, "isHidden"),
        region=Region(rects=_all(region, "rect", _rect)) if region is not None else None,
        texts=_all(elem, "text", _text),
        rows=_all(elem, "row", _row),
        separators_boxes=_all(elem, "separatorsBox", _separators_box),
        separators=_all(elem, "separator", _separator),
        barcode_info=_all(elem, "barcodeInfo", _barcode_info),
    )


# --- Логическая разметка страницы ---


def _caption(elem: ET.Element) -> Caption:
    return Caption(elements=_all(elem, "pageElement", _page_element))


def _table_cell(elem: ET.Element) -> TableCell:
    return TableCell(
        top_pos=_int(elem, "topPos"),
        bottom_pos=_int(elem, "bottomPos"),
        left_pos=_int(elem, "leftPos"),
        right_pos=_int(elem, "rightPos"),
        vertical_alignment=_str(elem, "VerticalAlignment"),
        texts=_all(elem, "text", _page_element),
    )


def _table(elem: ET.Element) -> Table:
    return Table(
        id=_str(elem, "id"),
        captions=_all(elem, "caption", _caption),
        cells=_all(elem, "tableCell", _table_cell),
    )


def _picture(elem: ET.Element) -> Picture:
    return Picture(id=_str(elem, "id"), captions=_all(elem, "caption", _caption))


def _barcode(elem: ET.Element) -> Barcode:
    return Barcode(barcode_value=_str(elem, "BarcodeValue"))


def _page_element(elem: ET.Element) -> PageElement:
    return PageElement(
        page_elem_id=_str(elem, "pageElemId"),
        texts=_all(elem, "text", _text),
        tables=_all(elem, "table", _table),
        barcodes=_all(elem, "barcode", _barcode),
        pictures=_all(elem, "picture", _picture),
    )


def _page_stream(elem: ET.Element) -> PageStream:
    return PageStream(
        stream_type=_str(elem, "streamType"),
        elements=_all(elem, "pageElement", _page_element),
    )


def _page_section(elem: ET.Element) -> PageSection:
    return PageSection(streams=_all(elem, "pageStream", _page_stream))


def _page(elem: ET.Element) -> Page:
    return Page(
        width=_int(elem, "width"),
        height=_int(elem, "height"),
        resolution=_int(elem, "resolution"),
        original_coords=_bool(elem, "originalCoords"),
        rotation=_str(elem, "rotation"),
        blocks=_all(elem, "block", _block),
        sections=_all(elem, "pageSection", _page_section),
        streams=_all(elem, "pageStream", _page_stream),
    )


# --- Стили и секции ---


def _font_style(elem: ET.Element) -> FontStyle:
    return FontStyle(
        id=_str(elem, "id"),
        ff=_str(elem, "ff"),
        fs=_opt_float(elem, "fs"),
        base_font=_bool(elem, "baseFont"),
        italic=_bool(elem, "italic"),
        bold=_bool(elem, "bold"),
        underline=_bool(elem, "underline"),
        strikeout=_bool(elem, "strikeout"),
        smallcaps=_bool(elem, "smallcaps"),
        scaling=_opt_int(elem, "scaling"),
        spacing=_opt_int(elem, "spacing"),
        color=_opt_int(elem, "color"),
        background_color=_opt_int(elem, "backgroundColor"),
    )


def _paragraph_style(elem: ET.Element) -> ParagraphStyle:
    return ParagraphStyle(
        id=_str(elem, "id"),
        name=_str(elem, "name"),
        main_font_style_id=_str(elem, "mainFontStyleId"),
        role=_str(elem, "role"),
        font_styles=_all(elem, "fontStyle", _font_style),
    )


def _text_stream(elem: ET.Element) -> TextStream:
    return TextStream(
        role=_str(elem, "role"),
        main_texts=_all(
            elem,
            "mainText",
            lambda e: MainText(rtl=_bool(e, "rtl"), column_count=_int(e, "columnCount")),
        ),
        elem_ids=_all(elem, "elemId", lambda e: ElemId(id=_str(e, "id"))),
    )


def _document_data(elem: ET.Element) -> DocumentData:
    styles: List[ParagraphStyle] = []
    for container in _children(elem, "paragraphStyles"):
        styles.extend(_all(container, "paragraphStyle", _paragraph_style))
    sections: List[Section] = []
    for container in _children(elem, "sections"):
        sections.extend(
            _all(container, "section", lambda e: Section(streams=_all(e, "stream", _text_stream)))
        )
    return DocumentData(paragraph_styles=tuple(styles), sections=tuple(sections))


def _document(root: ET.Element) -> Document:
    if _local(root.tag) != "document":
        raise ResultDecodeError(
            f"Ожидался корневой элемент <document>, получен <{_local(root.tag)}>",
            DecodeErrorKind.STRUCTURE,
        )
    doc = Document(
        version=_str(root, "version"),
        producer=_str(root, "producer"),
        pages_count=_opt_int(root, "pagesCount"),
        main_language=_str(root, "mainLanguage"),
        languages=_str(root, "languages"),
        document_data=_all(root, "documentData", _document_data),
        pages=_all(root, "page", _page),
    )
    logger.debug(f"XML результат декодирован: страниц {len(doc.pages)}")
    return doc


def _syntax_error(e: ET.ParseError) -> ResultDecodeError:
    line, column = getattr(e, "position", (None, None))
    return ResultDecodeError(
        f"Некорректный XML: {e}", DecodeErrorKind.SYNTAX, line=line, column=column
    )


def decode(data: Union[bytes, str]) -> Document:
    """
    Декодировать XML результат распознавания.

    Неизвестные элементы и атрибуты пропускаются, namespace не учитывается.

    Raises:
        ResultDecodeError: SYNTAX - XML не разбирается,
            STRUCTURE - корневой элемент не document
    """
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise _syntax_error(e) from e
    return _document(root)


def decode_stream(fp: BinaryIO) -> Document:
    """Декодировать XML из файлового объекта (файл не закрывается)"""
    try:
        root = ET.parse(fp).getroot()
    except ET.ParseError as e:
        raise _syntax_error(e) from e
    return _document(root)
