"""pypdf backend implementation for PDF Lexicon."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from pypdf import PageObject, PdfReader, _cmap
from pypdf.errors import PdfReadError, PyPdfError
from pypdf.generic import DictionaryObject, IndirectObject, NameObject

from ..exceptions import EncryptedPDFError, InvalidPDFError, MissingContentStream, UnsupportedFontError
from ..operators import operator_name
from ..types import BaseEncoding, FontDescriptor, FontSubtype, RawOperation
from .base import BackendDocument, BackendPage, DocumentBackend

LOGGER = logging.getLogger("pdf_lexicon.backends.pypdf")

_SIMPLE_SUBTYPES = frozenset({"TrueType", "Type1", "MMType1", "Type3"})
_COMPOSITE_SUBTYPES = frozenset({"Type0"})
_STANDARD_ENCODING = "/StandardEncoding"


def _resolve(value: Any) -> Any:
    return value.get_object() if isinstance(value, IndirectObject) else value


def _strip_name(value: Any) -> Optional[str]:
    if value is None:
        return None
    name = str(value)
    return name[1:] if name.startswith("/") else name


def _font_subtype(raw_subtype: Optional[str]) -> FontSubtype:
    if raw_subtype in _SIMPLE_SUBTYPES:
        return FontSubtype.SIMPLE
    if raw_subtype in _COMPOSITE_SUBTYPES:
        return FontSubtype.COMPOSITE
    return FontSubtype.OTHER


def _cmap_code(source: str) -> int:
    # pypdf keys 1-byte sources as latin-1 text and wider ones as UTF-16BE text.
    if len(source) == 1:
        return ord(source)
    return int.from_bytes(source.encode("utf-16-be", "surrogatepass"), "big")


def _unicode_table(cmap: Mapping[Any, Any]) -> Dict[int, str]:
    table: Dict[int, str] = {}
    for source, target in cmap.items():
        if not isinstance(source, str):
            continue
        if isinstance(target, bytes):
            target = target.decode("utf-16-be", "surrogatepass")
        table[_cmap_code(source)] = str(target)
    return table


def _base_encoding(
    value: Any, decoded: Any, mapped: Mapping[int, str]
) -> Optional[BaseEncoding]:
    value = _resolve(value)
    if isinstance(value, NameObject):
        return BaseEncoding(_strip_name(value))
    if not isinstance(value, DictionaryObject):
        return None

    base = _resolve(value.get("/BaseEncoding"))
    differences: Dict[int, str] = {}
    if "/Differences" in value and isinstance(decoded, dict):
        standard = _cmap.charset_encoding[_STANDARD_ENCODING]
        reference = _cmap.charset_encoding.get(str(base), standard)
        for code, text in decoded.items():
            if code in mapped or text == reference[code]:
                continue
            # Glyph names missing from the Adobe list come back as raw names.
            differences[code] = text[1:] if isinstance(text, NameObject) else text
    return BaseEncoding(_strip_name(base), differences)


def font_descriptor(key: str, font: DictionaryObject) -> FontDescriptor:
    """Describe a font dictionary through pypdf's encoding and ToUnicode readers."""

    raw_subtype = _strip_name(font.get("/Subtype"))
    name = _strip_name(font.get("/BaseFont"))

    try:
        decoded, cmap = _cmap.get_encoding(font)
    except (PyPdfError, ValueError) as exc:
        raise UnsupportedFontError(
            f"Malformed encoding for font {name!r} ({key}): {exc}",
            font_name=name,
        ) from exc

    mapped = _unicode_table(cmap)
    return FontDescriptor(
        key=key,
        subtype=_font_subtype(raw_subtype),
        raw_subtype=raw_subtype,
        name=name,
        to_unicode=mapped if "/ToUnicode" in font else None,
        encoding=_base_encoding(font.get("/Encoding"), decoded, mapped),
    )


@dataclass
class PypdfPage(BackendPage):
    page: PageObject

    def operations(self) -> List[RawOperation]:
        contents = self.page.get_contents()
        if contents is None:
            raise MissingContentStream(
                f"Page {self.number} does not have contents", page=self.number
            )
        return [
            RawOperation(
                operator_name(operator),
                tuple(operands) if isinstance(operands, list) else (operands,),
            )
            for operands, operator in contents.operations
        ]

    def fonts(self) -> Dict[str, FontDescriptor]:
        resources = _resolve(self.page.get("/Resources"))
        if not isinstance(resources, DictionaryObject):
            return {}
        fonts = _resolve(resources.get("/Font"))
        if not isinstance(fonts, DictionaryObject):
            return {}

        descriptors: Dict[str, FontDescriptor] = {}
        for raw_key, value in fonts.items():
            font = _resolve(value)
            if not isinstance(font, DictionaryObject):
                continue
            key = _strip_name(raw_key) or ""
            descriptors[key] = font_descriptor(key, font)
        LOGGER.debug("Page %d declares %d font(s)", self.number, len(descriptors))
        return descriptors


@dataclass
class PypdfDocument(BackendDocument):
    reader: PdfReader

    def get_page(self, index: int) -> PypdfPage:
        return PypdfPage(number=index, page=self.reader.pages[index])


class PypdfBackend(DocumentBackend):
    """Backend implementation that uses `pypdf` under the hood."""

    def load(self, pdf_path: str) -> PypdfDocument:
        path = Path(pdf_path)
        if not path.exists() or not path.is_file():
            raise InvalidPDFError(f"PDF file not found: {pdf_path}")

        try:
            raw_bytes = path.read_bytes()
        except OSError as exc:
            raise InvalidPDFError(f"Unable to read PDF file: {pdf_path}. Error: {exc}") from exc

        try:
            reader = PdfReader(io.BytesIO(raw_bytes))
        except PdfReadError as exc:
            raise InvalidPDFError(f"Corrupted or invalid PDF file: {pdf_path}. Error: {exc}") from exc
        except Exception as exc:
            raise InvalidPDFError(f"Unexpected error reading PDF: {pdf_path}. Error: {exc}") from exc

        if reader.is_encrypted:
            raise EncryptedPDFError(f"PDF is encrypted and cannot be processed: {pdf_path}")

        num_pages = len(reader.pages)
        if num_pages == 0:
            raise InvalidPDFError(f"PDF has no pages: {pdf_path}")

        LOGGER.debug("Loaded %s (%d pages)", path, num_pages)
        return PypdfDocument(num_pages=num_pages, reader=reader)


__all__ = ["PypdfBackend", "PypdfDocument", "PypdfPage", "font_descriptor"]
