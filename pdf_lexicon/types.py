"""
Type definitions and dataclasses for PDF Lexicon.

This module defines data structures shared by the extraction stages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class FontSubtype(str, Enum):
    """Character encoding model of a font."""

    SIMPLE = "simple"
    COMPOSITE = "composite"
    OTHER = "other"


@dataclass(frozen=True)
class BaseEncoding:
    """
    Named base encoding plus explicit per-code overrides.

    Attributes:
        base: Base encoding identifier such as ``WinAnsiEncoding``
        differences: Code to Unicode text reassignments, with glyph names
            already resolved through the Adobe glyph list
    """
    base: Optional[str]
    differences: Dict[int, str] = field(default_factory=dict)


@dataclass(frozen=True)
class FontDescriptor:
    """
    Font resource as exposed by a document backend.

    Attributes:
        key: In-page resource key (without the leading ``/``)
        subtype: Simple (1-byte codes) or composite (2-byte codes)
        raw_subtype: Subtype name as declared in the document
        name: Declared font name (``BaseFont``)
        to_unicode: Embedded code to Unicode table, if any
        encoding: Base encoding descriptor, if any
    """
    key: str
    subtype: FontSubtype
    raw_subtype: Optional[str] = None
    name: Optional[str] = None
    to_unicode: Optional[Dict[int, str]] = None
    encoding: Optional[BaseEncoding] = None


@dataclass(frozen=True)
class RawOperation:
    """A content stream operator with its untyped operands."""

    operator: str
    operands: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class TextDrawEvent:
    """
    One positioned text run emitted by the text-state machine.

    Attributes:
        position: Origin of the text matrix when the run was drawn
        glyph_size: Font size scaled by the text matrix
        font_key: In-page key of the current font
        raw_text: Undecoded character codes
    """
    position: Tuple[float, float]
    glyph_size: float
    font_key: str
    raw_text: bytes

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]


@dataclass(frozen=True)
class DecodedRun:
    """A text draw event together with its Unicode text."""

    event: TextDrawEvent
    text: str

    @property
    def x(self) -> float:
        return self.event.position[0]

    @property
    def y(self) -> float:
        return self.event.position[1]

    @property
    def glyph_size(self) -> float:
        return self.event.glyph_size

    @property
    def font_key(self) -> str:
        return self.event.font_key


@dataclass
class Line:
    """Runs sharing one baseline, in stream order."""

    runs: List[DecodedRun]

    def __post_init__(self) -> None:
        if not self.runs:
            raise ValueError("A line must contain at least one run")

    @property
    def first(self) -> DecodedRun:
        return self.runs[0]

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)


class PartOfSpeech(str, Enum):
    """Grammatical categories used by the dictionary."""

    NOUN = "noun"
    PROPER_NOUN = "proper_noun"
    PRONOUN = "pronoun"
    NUMERAL = "numeral"
    ADJECTIVE = "adjective"
    VERB = "verb"
    ADVERB = "adverb"
    PREPOSITION = "preposition"
    CONJUNCTION = "conjunction"
    INTERJECTION = "interjection"
    INFINITIVE_MARKER = "infinitive_marker"
    ARTICLE = "article"
    INDEFINITE_ARTICLE = "indefinite_article"
    FORMAL_SUBJECT = "formal_subject"


class NounCount(str, Enum):
    SINGLE = "single"
    MULTIPLE = "multiple"


@dataclass(frozen=True)
class PosTag:
    """
    Part-of-speech tag of an entry.

    Attributes:
        part: Grammatical category
        count: Singular/plural restriction, nouns only
        invariant: Whether an adjective is invariant
    """
    part: PartOfSpeech
    count: Optional[NounCount] = None
    invariant: bool = False


@dataclass
class OtherForm:
    """Inflected or alternate form of a headword."""

    word: str
    pronunciations: List[str] = field(default_factory=list)
    cross_references: List["OtherForm"] = field(default_factory=list)


@dataclass
class Entry:
    """
    Structured dictionary entry.

    Attributes:
        word: Headword
        pos: Part-of-speech tags in document order
        pronunciations: Pronunciations of the headword
        other_forms: Inflected forms with their pronunciations
        other_adjective_forms: Comparative/superlative style forms
    """
    word: str
    pos: List[PosTag] = field(default_factory=list)
    pronunciations: List[str] = field(default_factory=list)
    other_forms: List[OtherForm] = field(default_factory=list)
    other_adjective_forms: List[OtherForm] = field(default_factory=list)


CROSS_REFERENCE_ARROW = "→"


@dataclass(frozen=True)
class CrossReferenceAlias:
    """Entry that only points to another headword (``a → b``)."""

    text: str

    @property
    def source(self) -> str:
        return self.text.split(CROSS_REFERENCE_ARROW, 1)[0].strip()

    @property
    def target(self) -> str:
        return self.text.split(CROSS_REFERENCE_ARROW, 1)[1].strip()


@dataclass
class ExtractionFailure:
    """
    A failure recorded instead of raised under a skipping error policy.

    Attributes:
        page: Zero-based page index
        stage: What was skipped (``page`` or ``entry``)
        error_type: Exception class name
        message: Exception message
        text: Offending entry text, for entry-level failures
    """
    page: int
    stage: str
    error_type: str
    message: str
    text: Optional[str] = None


@dataclass
class ExtractionResult:
    """Outcome of an extraction run."""

    entries: List[Entry] = field(default_factory=list)
    aliases: List[CrossReferenceAlias] = field(default_factory=list)
    failures: List[ExtractionFailure] = field(default_factory=list)
    pages_processed: int = 0

    def __str__(self) -> str:
        return (
            "ExtractionResult(entries={entries}, aliases={aliases}, "
            "failures={failures}, pages={pages})"
        ).format(
            entries=len(self.entries),
            aliases=len(self.aliases),
            failures=len(self.failures),
            pages=self.pages_processed,
        )
