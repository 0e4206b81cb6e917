"""Per-page font resolution: character code to Unicode tables.

A table is chosen by trying, in order:

1. a hand-authored override for embedded symbol fonts whose glyphs cannot be
   recovered from the file (matched on the exact font name),
2. the font's embedded ToUnicode table,
3. for simple fonts declaring ``WinAnsiEncoding``, Latin-1 plus the
   Windows-1252 specific characters, overlaid with the font's differences.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .exceptions import UnsupportedFontError
from .types import FontDescriptor, FontSubtype

__all__ = [
    "FontTable",
    "ResolvedFont",
    "NAMED_OVERRIDES",
    "WINANSI_SPECIFIC",
    "resolve_font",
    "resolve_fonts",
    "winansi_table",
]

LOGGER = logging.getLogger("pdf_lexicon.fonts")

FontTable = Mapping[int, str]

NAMED_OVERRIDES: Mapping[str, FontTable] = MappingProxyType(
    {
        # Gaiji (external character) fonts embedded without any mapping.
        "DXNKCI+GaijiL": MappingProxyType(
            {
                65: "\u0227",
                67: "ᒑ",  # palatal glide, no Unicode equivalent
                68: ";",  # long vowel with stød, no Unicode equivalent
                69: "\u0283",
            }
        ),
        "NZLSMO+GaijiL2": MappingProxyType({76: "\u0329"}),
        # IPA font whose private use area codes are mapped back to standard IPA.
        "DXNKCI+Ipa-samdUclphon1SILDoulosL": MappingProxyType(
            {
                4: "ˈ",
                7: "ˌ",
                34: "ə",
                35: "ɑ",
                38: "ð",
                48: "ŋ",
                49: "ɔ",
                73: "g",
                80: "n",
                132: "ɹ",
                186: "\u0329",
                194: "\u030a",
                196: "\u0308",
                229: "【？】",
                254: "【？】",
                256: "【？】",
            }
        ),
    }
)

WINANSI_SPECIFIC: Mapping[int, str] = MappingProxyType(
    {
        128: "€",
        130: "‚",
        131: "ƒ",
        132: "„",
        133: "…",
        134: "†",
        135: "‡",
        136: "ˆ",
        137: "‰",
        138: "Š",
        139: "‹",
        140: "Œ",
        142: "Ž",
        145: "‘",
        146: "’",
        147: "“",
        148: "”",
        149: "•",
        150: "–",
        151: "—",
        152: "˜",
        153: "™",
        154: "š",
        155: "›",
        158: "ž",
        159: "Ÿ",
    }
)

_WINANSI = "WinAnsiEncoding"


@dataclass(frozen=True)
class ResolvedFont:
    """A page font together with its immutable Unicode table."""

    descriptor: FontDescriptor
    table: FontTable

    @property
    def subtype(self) -> FontSubtype:
        return self.descriptor.subtype


def winansi_table(differences: Mapping[int, str] | None = None) -> dict[int, str]:
    table = {code: chr(code) for code in range(32, 255)}
    table.update(WINANSI_SPECIFIC)
    table.update(differences or {})
    return table


def resolve_font(font: FontDescriptor) -> ResolvedFont:
    """Build the Unicode table for a single font."""

    if font.subtype is FontSubtype.OTHER:
        raise UnsupportedFontError(
            f"Unsupported font type {font.raw_subtype!r} for font {font.name!r}",
            font_name=font.name,
        )

    override = NAMED_OVERRIDES.get(font.name or "")
    if override is not None:
        LOGGER.debug("Using hand-authored table for %s", font.name)
        return ResolvedFont(font, override)

    if font.to_unicode is not None:
        return ResolvedFont(font, MappingProxyType(dict(font.to_unicode)))

    encoding = font.encoding
    if (
        font.subtype is FontSubtype.SIMPLE
        and encoding is not None
        and encoding.base == _WINANSI
    ):
        return ResolvedFont(font, MappingProxyType(winansi_table(encoding.differences)))

    raise UnsupportedFontError(
        f"Cannot generate ToUnicode map from font {font.name!r} ({font.key})",
        font_name=font.name,
    )


def resolve_fonts(fonts: Mapping[str, FontDescriptor]) -> dict[str, ResolvedFont]:
    """Resolve every font of a page, keyed by in-page font key."""

    resolved = {key: resolve_font(font) for key, font in fonts.items()}
    LOGGER.debug("Resolved %d font(s): %s", len(resolved), ", ".join(sorted(resolved)))
    return resolved
