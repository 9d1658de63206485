"""XML результат распознавания: модель и декодер"""
from ocrsdk_client.xml_result.decoder import decode, decode_stream
from ocrsdk_client.xml_result.models import (
    Block,
    BlockType,
    CharParams,
    Document,
    Formatting,
    Line,
    Page,
    Paragraph,
    Text,
)

__all__ = [
    "decode",
    "decode_stream",
    "Document",
    "Page",
    "Block",
    "BlockType",
    "Text",
    "Paragraph",
    "Line",
    "Formatting",
    "CharParams",
]
