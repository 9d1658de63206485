"""Tests for the XML recognition result decoder."""

import io

import pytest

from ocrsdk_client import DecodeErrorKind, ResultDecodeError
from ocrsdk_client.xml_result import BlockType, decode, decode_stream

NS = "http://www.abbyy.com/FineReader_xml/FineReader10-schema-v1.xml"

MINIMAL = f"""<?xml version="1.0" encoding="UTF-8"?>
<document xmlns="{NS}" version="1.0" producer="ABBYY Cloud OCR SDK" pagesCount="1"
          mainLanguage="English" languages="English">
  <page width="2480" height="3508" resolution="300" originalCoords="1" rotation="Normal">
    <block blockType="Text" blockName="" l="100" t="200" r="900" b="260">
      <region><rect l="100" t="200" r="900" b="260"/></region>
      <text orientation="Normal">
        <par align="Justified" leftIndent="0" startIndent="120" lineSpacing="1200" style="ps1">
          <line baseline="250" l="100" t="200" r="900" b="260">
            <formatting lang="EnglishUnitedStates" ff="Arial" fs="11." bold="1">Hello world</formatting>
          </line>
        </par>
      </text>
    </block>
  </page>
</document>
"""


class TestMinimalDocument:
    def test_page_attributes(self):
        doc = decode(MINIMAL.encode("utf-8"))

        page = doc.pages[0]
        assert (page.width, page.height, page.resolution) == (2480, 3508, 300)
        assert page.original_coords is True
        assert page.rotation == "Normal"

    def test_document_attributes(self):
        doc = decode(MINIMAL)

        assert doc.version == "1.0"
        assert doc.producer == "ABBYY Cloud OCR SDK"
        assert doc.pages_count == 1
        assert doc.main_language == "English"

    def test_block_paragraph_line_formatting(self):
        doc = decode(MINIMAL)

        block = doc.pages[0].blocks[0]
        assert block.block_type is BlockType.TEXT
        assert (block.l, block.t, block.r, block.b) == (100, 200, 900, 260)
        assert block.region.rects[0].width == 800

        par = block.texts[0].paragraphs[0]
        assert par.align == "Justified"
        assert par.left_indent == 0
        assert par.start_indent == 120
        assert par.line_spacing == 1200
        assert par.right_indent is None
        assert par.is_list_item is False

        line = par.lines[0]
        assert (line.baseline, line.l, line.t, line.r, line.b) == (250, 100, 200, 900, 260)

        run = line.formattings[0]
        assert run.lang == "EnglishUnitedStates"
        assert run.ff == "Arial"
        assert run.fs == 11.0
        assert run.bold is True
        assert run.italic is False
        assert run.color is None
        assert run.text == "Hello world"

    def test_plain_text(self):
        assert decode(MINIMAL).text == "Hello world"

    def test_decode_stream(self):
        doc = decode_stream(io.BytesIO(MINIMAL.encode("utf-8")))
        assert doc.pages[0].width == 2480


class TestCharParams:
    XML = """<document>
  <page width="10" height="10" resolution="72">
    <block blockType="Text">
      <text><par><line baseline="8" l="0" t="0" r="10" b="10">
        <formatting lang="English">
          <charParams l="0" t="0" r="4" b="8" wordStart="1" charConfidence="87" suspicious="true">O<charRecVariants><charRecVariant charConfidence="87">O</charRecVariant><charRecVariant charConfidence="40">0</charRecVariant></charRecVariants></charParams>
          <charParams l="5" t="0" r="9" b="8" wordStart="0" charConfidence="100">K</charParams>
          <wordRecVariants>
            <wordRecVariant wordFromDictionary="1" wordPenalty="3">
              <variantText>OK</variantText>
            </wordRecVariant>
          </wordRecVariants>
        </formatting>
      </line></par></text>
    </block>
  </page>
</document>"""

    def test_characters(self):
        run = decode(self.XML).pages[0].blocks[0].texts[0].paragraphs[0].lines[0].formattings[0]

        assert run.text == "OK"
        first, second = run.char_params
        assert first.char == "O"
        assert first.word_start is True
        assert first.suspicious is True
        assert first.char_confidence == 87
        assert first.word_penalty is None
        assert [v.char for v in first.variants] == ["O", "0"]
        assert first.variants[1].char_confidence == 40
        assert second.rect.width == 4

    def test_word_variants(self):
        run = decode(self.XML).pages[0].blocks[0].texts[0].paragraphs[0].lines[0].formattings[0]

        variant = run.word_variants[0]
        assert variant.word_from_dictionary is True
        assert variant.word_penalty == 3
        assert variant.variant_texts[0].text == "OK"

    def test_space_character_with_variants(self):
        xml = """<document><page width="10" height="10" resolution="72"><block blockType="Text">
<text><par><line><formatting>
  <charParams l="0" t="0" r="1" b="1">a</charParams>
  <charParams l="1" t="0" r="2" b="1"> <charRecVariants><charRecVariant charConfidence="90"> </charRecVariant></charRecVariants>
  </charParams>
  <charParams l="2" t="0" r="3" b="1">b</charParams>
</formatting></line></par></text></block></page></document>"""
        run = decode(xml).pages[0].blocks[0].texts[0].paragraphs[0].lines[0].formattings[0]

        assert [c.char for c in run.char_params] == ["a", " ", "b"]
        assert run.char_params[1].variants[0].char == " "
        assert run.text == "a b"


class TestTablesAndSeparators:
    XML = """<document>
  <page width="100" height="100" resolution="300">
    <block blockType="Table" l="0" t="0" r="100" b="50">
      <row>
        <cell width="50" height="20" colSpan="2" leftBorder="Black">
          <text><par><line><formatting>A1</formatting></line></par></text>
        </cell>
        <cell width="50" height="20"><text><par><line><formatting>B1</formatting></line></par></text></cell>
      </row>
    </block>
    <block blockType="SeparatorsBox">
      <separatorsBox>
        <separator thickness="2" type="Solid"><start x="0" y="60"/><end x="100" y="60"/></separator>
      </separatorsBox>
    </block>
    <block blockType="Barcode"><barcodeInfo type="QRCode" supplement="None"/></block>
    <block blockType="FancyNewType"/>
  </page>
</document>"""

    def test_table(self):
        block = decode(self.XML).pages[0].blocks[0]

        assert block.block_type is BlockType.TABLE
        first, second = block.rows[0].cells
        assert first.col_span == 2
        assert first.row_span is None
        assert first.left_border == "Black"
        assert first.text == "A1"
        assert block.text == "A1\tB1"

    def test_separator(self):
        block = decode(self.XML).pages[0].blocks[1]

        separator = block.separators_boxes[0].separators[0]
        assert separator.thickness == 2
        assert (separator.start.x, separator.start.y) == (0, 60)
        assert (separator.end.x, separator.end.y) == (100, 60)

    def test_barcode_info(self):
        block = decode(self.XML).pages[0].blocks[2]
        assert block.barcode_info[0].type == "QRCode"

    def test_unknown_block_type_keeps_raw_value(self):
        block = decode(self.XML).pages[0].blocks[3]
        assert block.block_type is None
        assert block.block_type_raw == "FancyNewType"


class TestStyles:
    XML = """<document>
  <documentData>
    <paragraphStyles>
      <paragraphStyle id="ps1" name="Body" mainFontStyleId="fs1" role="text">
        <fontStyle id="fs1" ff="Times New Roman" fs="12.5" italic="1"/>
      </paragraphStyle>
    </paragraphStyles>
    <sections>
      <section><stream role="text"><mainText columnCount="2"/><elemId id="e1"/></stream></section>
    </sections>
  </documentData>
  <page width="1" height="1" resolution="1"/>
</document>"""

    def test_style_lookup(self):
        doc = decode(self.XML)

        style = doc.paragraph_style("ps1")
        assert style.name == "Body"
        font = doc.font_style(style.main_font_style_id)
        assert font.ff == "Times New Roman"
        assert font.fs == 12.5
        assert font.italic is True

    def test_unresolved_style_is_none(self):
        doc = decode(self.XML)
        assert doc.paragraph_style("missing") is None
        assert doc.font_style("missing") is None

    def test_sections(self):
        stream = decode(self.XML).document_data[0].sections[0].streams[0]
        assert stream.role == "text"
        assert stream.main_texts[0].column_count == 2
        assert stream.elem_ids[0].id == "e1"


class TestTolerance:
    def test_unknown_elements_skipped(self):
        xml = """<document>
  <vendorExtension><whatever a="1"/></vendorExtension>
  <page width="10" height="20" resolution="30">
    <unexpected/>
    <block blockType="Text"><text><par><line><formatting>ok</formatting></line></par></text></block>
  </page>
</document>"""

        doc = decode(xml)

        assert len(doc.pages) == 1
        assert doc.pages[0].height == 20
        assert doc.pages[0].blocks[0].text == "ok"

    def test_invalid_number_treated_as_absent(self):
        doc = decode('<document pagesCount="many"><page width="abc" height="5" resolution="1"/></document>')

        assert doc.pages_count is None
        assert doc.pages[0].width == 0
        assert doc.pages[0].height == 5

    def test_empty_document(self):
        doc = decode("<document/>")
        assert doc.pages == ()
        assert doc.text == ""


class TestErrors:
    def test_unterminated_tag_is_syntax_error(self):
        with pytest.raises(ResultDecodeError) as exc_info:
            decode("<document><page width='1'>")

        assert exc_info.value.kind is DecodeErrorKind.SYNTAX
        assert exc_info.value.line is not None

    def test_wrong_root_is_structure_error(self):
        with pytest.raises(ResultDecodeError) as exc_info:
            decode("<html><body/></html>")

        assert exc_info.value.kind is DecodeErrorKind.STRUCTURE

    def test_stream_syntax_error(self):
        with pytest.raises(ResultDecodeError) as exc_info:
            decode_stream(io.BytesIO(b"<document"))

        assert exc_info.value.kind is DecodeErrorKind.SYNTAX
