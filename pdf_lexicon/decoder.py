"""Decode raw text run bytes through a resolved font table."""

from __future__ import annotations

from typing import Iterator

from .exceptions import TruncatedCodeError, UnicodeMappingMissingError
from .fonts import FontTable, ResolvedFont
from .types import FontSubtype

__all__ = ["character_codes", "decode", "decode_run"]


def character_codes(subtype: FontSubtype, raw_text: bytes) -> Iterator[int]:
    """Split ``raw_text`` into character codes according to the font's code width."""

    if subtype is FontSubtype.SIMPLE:
        yield from raw_text
    elif subtype is FontSubtype.COMPOSITE:
        if len(raw_text) % 2:
            raise TruncatedCodeError(
                f"Odd-length string for a 2-byte font: {len(raw_text)} bytes"
            )
        for index in range(0, len(raw_text), 2):
            yield int.from_bytes(raw_text[index : index + 2], "big")
    else:
        raise ValueError(f"Unsupported font type {subtype!r}")


def decode(table: FontTable, subtype: FontSubtype, raw_text: bytes) -> Iterator[str]:
    """Lazily map each character code to its Unicode string.

    A code missing from ``table`` raises :class:`UnicodeMappingMissingError`.
    """

    for code in character_codes(subtype, raw_text):
        try:
            yield table[code]
        except KeyError:
            raise UnicodeMappingMissingError(
                f"No Unicode mapping for code {code} ({code:#06x})", code=code
            ) from None


def decode_run(font: ResolvedFont, raw_text: bytes) -> str:
    return "".join(decode(font.table, font.subtype, raw_text))
