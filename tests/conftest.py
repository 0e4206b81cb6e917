from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Mapping, Optional, Sequence
import sys

import pytest
from pypdf import PdfWriter
from pypdf.generic import DecodedStreamObject, DictionaryObject, NameObject, StreamObject

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


# 2001 名, 2002 犬, 2003 ．, 2004 猫, 2005 形, 2006 →
IDEOGRAPH_CMAP = b"""/CIDInit /ProcSet findresource begin
12 dict begin
begincmap
/CMapName /Adobe-Identity-UCS def
/CMapType 2 def
1 begincodespacerange
<0000> <FFFF>
endcodespacerange
3 beginbfchar
<2001> <540D>
<2002> <72AC>
<2003> <FF0E>
endbfchar
2 beginbfrange
<2004> <2005> [<732B> <5F62>]
<2006> <2006> <2192>
endbfrange
endcmap
CMapName currentdict /CMap defineresource pop
end
end
"""

# A title outside every known left margin.
FRONT_MATTER = rb"BT /F1 9 Tf 1 0 0 1 200 700 Tm (FORORD) Tj ET"

# Page number, section heading, two entries (the second continued on an
# indented line), a blank separator row and a cross-reference.
ENTRIES_PAGE = rb"""
BT /F1 9 Tf 1 0 0 1 300 30 Tm (12) Tj ET
BT /F1 14 Tf 1 0 0 1 71 760 Tm (H) Tj ET
BT
/F1 9 Tf 1 0 0 1 71 740 Tm (hund [) Tj
/F3 9 Tf <2001> Tj
/F1 9 Tf (] [) Tj
/F2 9 Tf <04> Tj
/F1 9 Tf (hun\222]: ) Tj
/F3 9 Tf <20022003> Tj
ET
BT
/F1 9 Tf 1 0 0 1 71 728 Tm [(kat) -250 ( [)] TJ
/F3 9 Tf <2001> Tj
/F1 9 Tf (] [) Tj
/F2 9 Tf <04> Tj
/F1 9 Tf (kad]: ) Tj
10 -12 Td
/F3 9 Tf <20042003> Tj
ET
BT /F1 9 Tf 1 0 0 1 71 704 Tm ( ) Tj ET
BT
/F1 9 Tf 1 0 0 1 71 692 Tm (hunde ) Tj
/F3 9 Tf <2006> Tj
/F1 9 Tf ( hund) Tj
ET
"""

# One line outside the grammar followed by a well-formed entry.
BAD_ENTRY_PAGE = rb"""
BT /F1 9 Tf 1 0 0 1 71 740 Tm (qqq zzz) Tj ET
BT
/F1 9 Tf 1 0 0 1 71 728 Tm (hus [) Tj
/F3 9 Tf <2001> Tj
/F1 9 Tf (] [) Tj
/F2 9 Tf <04> Tj
/F1 9 Tf (hu\222s]: ) Tj
/F3 9 Tf <20022003> Tj
ET
"""


def simple_font(base_font: str, encoding: Optional[object] = NameObject("/WinAnsiEncoding")) -> DictionaryObject:
    font = DictionaryObject(
        {
            NameObject("/Type"): NameObject("/Font"),
            NameObject("/Subtype"): NameObject("/TrueType"),
            NameObject("/BaseFont"): NameObject(base_font),
        }
    )
    if encoding is not None:
        font[NameObject("/Encoding")] = encoding
    return font


def composite_font(base_font: str, cmap: bytes) -> DictionaryObject:
    to_unicode = DecodedStreamObject()
    to_unicode.set_data(cmap)
    return DictionaryObject(
        {
            NameObject("/Type"): NameObject("/Font"),
            NameObject("/Subtype"): NameObject("/Type0"),
            NameObject("/BaseFont"): NameObject(base_font),
            NameObject("/Encoding"): NameObject("/Identity-H"),
            NameObject("/ToUnicode"): to_unicode,
        }
    )


def dictionary_fonts() -> Dict[str, DictionaryObject]:
    return {
        "F1": simple_font("/Century"),
        "F2": simple_font("/DXNKCI+Ipa-samdUclphon1SILDoulosL", encoding=None),
        "F3": composite_font("/MS-Mincho", IDEOGRAPH_CMAP),
    }


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(
        filename: str,
        pages: Sequence[Optional[bytes]],
        fonts: Optional[Mapping[str, DictionaryObject]] = None,
        *,
        password: Optional[str] = None,
    ) -> Path:
        writer = PdfWriter()
        font_refs = DictionaryObject()
        for key, font in (fonts or {}).items():
            to_unicode = font.get("/ToUnicode")
            if isinstance(to_unicode, StreamObject):
                font[NameObject("/ToUnicode")] = writer._add_object(to_unicode)
            font_refs[NameObject(f"/{key}")] = writer._add_object(font)

        for content in pages:
            page = writer.add_blank_page(width=595, height=842)
            page[NameObject("/Resources")] = DictionaryObject({NameObject("/Font"): font_refs})
            if content is not None:
                stream = DecodedStreamObject()
                stream.set_data(content)
                page[NameObject("/Contents")] = writer._add_object(stream)

        if password:
            writer.encrypt(password)

        path = tmp_path / filename
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create


@pytest.fixture()
def dictionary_pdf(pdf_factory: Callable[..., Path]) -> Path:
    return pdf_factory(
        "dictionary.pdf",
        [FRONT_MATTER, ENTRIES_PAGE, BAD_ENTRY_PAGE],
        dictionary_fonts(),
    )


@pytest.fixture()
def entries_pdf(pdf_factory: Callable[..., Path]) -> Path:
    return pdf_factory("entries.pdf", [ENTRIES_PAGE], dictionary_fonts())
