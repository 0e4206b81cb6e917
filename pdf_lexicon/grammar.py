"""Entry grammar: turn a raw dictionary entry into an :class:`Entry`.

The grammar is composed once, at import time, from the named sub-patterns
below.  Sub-patterns are embedded without capture groups; the named variants
used to recover the structure of forms are compiled separately.

An entry looks like::

    word[1-4] [pos], [pos] [pronunciation, ...] [不変化]
        , form [pronunciation]/form [pronunciation] ...
        , adjective form [pronunciation]/adjective form ...
        (en):
"""

from __future__ import annotations

import logging
import re
from typing import List, Union

from .corrections import correct
from .exceptions import EntryGrammarMismatchError
from .types import CROSS_REFERENCE_ARROW, CrossReferenceAlias, Entry, NounCount, OtherForm, PartOfSpeech, PosTag

__all__ = [
    "CROSS_REFERENCE_ARROW",
    "ENTRY_PATTERN",
    "parse_entry",
    "parse_pos_list",
    "parse_pronunciation_list",
]

LOGGER = logging.getLogger("pdf_lexicon.grammar")

# -- Sub-patterns ------------------------------------------------------------

EXTENDED_WORD_CHARS = r"[a-zA-Z7éøæåØÆÅ\-.,’()/＝]+"
EXTENDED_HEADING_WORDS = rf"{EXTENDED_WORD_CHARS}(?: {EXTENDED_WORD_CHARS})*"

WORD_CHARS = r"[a-zA-ZøæåØÆÅ]+"
HEADING_WORDS = rf"{WORD_CHARS}(?: {WORD_CHARS})*"

POS_TAG = (
    r"(?:[\[［](?:名(?:・[単複])?|固|代|数|形|動|副|前|接|間"
    r"|不定詞マーカー|冠|不定冠詞|形式主語)[\]］]"
    r"|\[形\]\s*\[無変化\])"
)
POS_LIST = rf"{POS_TAG}(?:[,，]\s*{POS_TAG})*"

# U+F0D9 is a private use glyph of the embedded phonetic font.
PRONUNCIATION = (
    r"(?:[a-z’å\u0227äæöøα:ˈˌəɑðŋɔgnɹ"
    r"\u0329\u030a\u0308\u0227ᒑ;\u0283()\uf0d9]| )+"
)
# Items keep their own spaces, so the separator is a bare comma.
PRONUNCIATION_LIST = rf"{PRONUNCIATION}(?:[,，]{PRONUNCIATION})*"

WORD_AND_PRONUNCIATION = rf"{HEADING_WORDS}\s*\[{PRONUNCIATION_LIST}\]\s*"

OTHER_FORM = (
    rf",\s*\+?{EXTENDED_HEADING_WORDS}!?\s*"
    rf"\[{PRONUNCIATION_LIST}\]\s*"
    rf"(?:/{WORD_AND_PRONUNCIATION})*"
)

OTHER_ADJECTIVE_FORM = (
    rf",\s*{HEADING_WORDS}"
    rf"(?:\s*\[{PRONUNCIATION_LIST}\](?:\s*(?=/))?)?"
    rf"(?:/{HEADING_WORDS})*\s*"
)

ENTRY_PATTERN = re.compile(
    r"\+?"
    rf"(?P<word>{EXTENDED_HEADING_WORDS})"
    r"(?:\s*[1-4])?\s*"
    rf"(?P<pos>{POS_LIST})?\s*"
    rf"\[(?P<pronunciation>{PRONUNCIATION_LIST})\]\s*"
    r"(?P<invariant_adjective>[\[［]不変化[\]］]\s*)?"
    r"(?:en\s*)?"
    rf"(?P<other_forms>(?:{OTHER_FORM})*)"
    rf"(?P<other_adjective_forms>(?:{OTHER_ADJECTIVE_FORM})*)"
    r"(?:\(en\))?"
    r"[:：]"
)

_WORD_AND_PRONUNCIATION = re.compile(
    rf"(?P<word>{HEADING_WORDS})\s*\[(?P<pronunciation>{PRONUNCIATION_LIST})\]\s*"
)

_OTHER_FORM = re.compile(
    r",\s*\+?"
    rf"(?P<word>{EXTENDED_HEADING_WORDS})!?\s*"
    rf"\[(?P<pronunciation>{PRONUNCIATION_LIST})\]\s*"
    rf"(?P<slashed>(?:/{WORD_AND_PRONUNCIATION})*)"
)

_OTHER_ADJECTIVE_FORM = re.compile(
    rf",\s*(?P<word>{HEADING_WORDS})"
    rf"(?:\s*\[(?P<pronunciation>{PRONUNCIATION_LIST})\](?:\s*(?=/))?)?"
    rf"(?P<slashed>(?:/{HEADING_WORDS})*)\s*"
)

_COMMA = re.compile(r"[,，]")
_INVARIANT_ADJECTIVE_TAG = re.compile(r"形[\]］]\s*[\[［]無変化")

_POS_TAGS = {
    "名": PosTag(PartOfSpeech.NOUN),
    "名・単": PosTag(PartOfSpeech.NOUN, count=NounCount.SINGLE),
    "名・複": PosTag(PartOfSpeech.NOUN, count=NounCount.MULTIPLE),
    "固": PosTag(PartOfSpeech.PROPER_NOUN),
    "代": PosTag(PartOfSpeech.PRONOUN),
    "数": PosTag(PartOfSpeech.NUMERAL),
    "動": PosTag(PartOfSpeech.VERB),
    "副": PosTag(PartOfSpeech.ADVERB),
    "前": PosTag(PartOfSpeech.PREPOSITION),
    "接": PosTag(PartOfSpeech.CONJUNCTION),
    "間": PosTag(PartOfSpeech.INTERJECTION),
    "不定詞マーカー": PosTag(PartOfSpeech.INFINITIVE_MARKER),
    "冠": PosTag(PartOfSpeech.ARTICLE),
    "不定冠詞": PosTag(PartOfSpeech.INDEFINITE_ARTICLE),
    "形式主語": PosTag(PartOfSpeech.FORMAL_SUBJECT),
}


# -- Projection --------------------------------------------------------------


def parse_pronunciation_list(text: str) -> List[str]:
    return [item.strip() for item in _COMMA.split(text)]


def parse_pos_list(text: str, *, invariant_adjective: bool = False) -> List[PosTag]:
    """Map a captured part-of-speech list onto :class:`PosTag` values.

    The grammar only captures tags from the closed set, so an unknown tag
    means the grammar and this table disagree.
    """

    tags: List[PosTag] = []
    for tag in _COMMA.split(text):
        inner = tag.strip()[1:-1]
        if inner == "形":
            tags.append(PosTag(PartOfSpeech.ADJECTIVE, invariant=invariant_adjective))
        elif _INVARIANT_ADJECTIVE_TAG.fullmatch(inner):
            tags.append(PosTag(PartOfSpeech.ADJECTIVE, invariant=True))
        elif inner in _POS_TAGS:
            tags.append(_POS_TAGS[inner])
        else:
            raise RuntimeError(f"Unexpected part of speech {tag!r}")
    return tags


def _slashed_pairs(text: str) -> List[OtherForm]:
    forms: List[OtherForm] = []
    for pair in text.split("/")[1:]:
        match = _WORD_AND_PRONUNCIATION.match(pair.strip())
        if match is None:
            raise RuntimeError(f"Cross-referenced form {pair!r} no longer matches")
        forms.append(
            OtherForm(
                word=match.group("word"),
                pronunciations=parse_pronunciation_list(match.group("pronunciation")),
            )
        )
    return forms


def _other_forms(text: str) -> List[OtherForm]:
    return [
        OtherForm(
            word=match.group("word"),
            pronunciations=parse_pronunciation_list(match.group("pronunciation")),
            cross_references=_slashed_pairs(match.group("slashed")),
        )
        for match in _OTHER_FORM.finditer(text)
    ]


def _other_adjective_forms(text: str) -> List[OtherForm]:
    forms: List[OtherForm] = []
    for match in _OTHER_ADJECTIVE_FORM.finditer(text):
        pronunciation = match.group("pronunciation")
        forms.append(
            OtherForm(
                word=match.group("word"),
                pronunciations=parse_pronunciation_list(pronunciation) if pronunciation else [],
                cross_references=[
                    OtherForm(word=word.strip())
                    for word in match.group("slashed").split("/")[1:]
                ],
            )
        )
    return forms


def parse_entry(raw: str) -> Union[Entry, CrossReferenceAlias]:
    """Correct and parse one raw entry.

    Returns a :class:`CrossReferenceAlias` for unparsed entries that consist
    of a single ``→`` reference; raises :class:`EntryGrammarMismatchError`
    for anything else the grammar rejects.
    """

    text = correct(raw)
    match = ENTRY_PATTERN.match(text)
    if match is None:
        if text.count(CROSS_REFERENCE_ARROW) == 1:
            LOGGER.debug("Cross-reference alias %r", text)
            return CrossReferenceAlias(text)
        raise EntryGrammarMismatchError(text=text)

    invariant_adjective = match.group("invariant_adjective") is not None
    pos = match.group("pos")
    return Entry(
        word=match.group("word"),
        pos=parse_pos_list(pos, invariant_adjective=invariant_adjective) if pos else [],
        pronunciations=parse_pronunciation_list(match.group("pronunciation")),
        other_forms=_other_forms(match.group("other_forms")),
        other_adjective_forms=_other_adjective_forms(match.group("other_adjective_forms")),
    )
