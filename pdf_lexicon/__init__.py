"""
PDF Lexicon - Extract structured dictionary entries from typeset PDFs.

This library reads the text drawing operators of a dictionary PDF, decodes
the glyph codes of its embedded fonts back to Unicode, rebuilds visual lines
from their coordinates, groups them into entries, and parses each entry into
a headword with parts of speech, pronunciations, and inflected forms.

Quick Start:
    >>> from pdf_lexicon import DictionaryExtractor
    >>> extractor = DictionaryExtractor('dictionary.pdf', policy='skip-entry')
    >>> result = extractor.extract(skip=3)
    >>> result.entries[0].word

Main Classes:
    - DictionaryExtractor: Runs the whole pipeline over selected pages
    - LayoutProfile: Document-specific line and indentation thresholds

Data Classes:
    - Entry, OtherForm, PosTag: Parsed dictionary entries
    - CrossReferenceAlias: Entry that only points to another headword
    - ExtractionResult, ExtractionFailure: Outcome of an extraction

Exceptions:
    - PDFLexiconError: Base exception
    - InvalidPDFError: Invalid or corrupted PDF
    - EncryptedPDFError: Encrypted PDF
    - EntryGrammarMismatchError: Entry text outside the dictionary grammar

For CLI usage, use the 'pdf-lexicon' command after installation.
"""

# Core classes
from pdf_lexicon.extractor import DictionaryExtractor, ErrorPolicy
from pdf_lexicon.grammar import parse_entry
from pdf_lexicon.layout import DEFAULT_PROFILE, LayoutProfile

# Data types
from pdf_lexicon.types import (
    CrossReferenceAlias,
    Entry,
    ExtractionFailure,
    ExtractionResult,
    NounCount,
    OtherForm,
    PartOfSpeech,
    PosTag,
)

# Exceptions
from pdf_lexicon.exceptions import (
    PDFLexiconError,
    InvalidPDFError,
    EncryptedPDFError,
    PageOutOfBoundsError,
    InvalidProfileError,
    MissingContentStream,
    OperatorParseError,
    TextStateError,
    UnsupportedFontError,
    FontNotFoundForRun,
    UnicodeMappingMissingError,
    TruncatedCodeError,
    UnexpectedCoordinateError,
    OrphanContinuationError,
    EntryGrammarMismatchError,
)

__version__ = "1.0.0"
__author__ = "PDF Lexicon Contributors"
__license__ = "MIT"

__all__ = [
    # Main classes
    "DictionaryExtractor",
    "ErrorPolicy",
    "LayoutProfile",
    "DEFAULT_PROFILE",
    "parse_entry",
    # Data types
    "CrossReferenceAlias",
    "Entry",
    "ExtractionFailure",
    "ExtractionResult",
    "NounCount",
    "OtherForm",
    "PartOfSpeech",
    "PosTag",
    # Exceptions
    "PDFLexiconError",
    "InvalidPDFError",
    "EncryptedPDFError",
    "PageOutOfBoundsError",
    "InvalidProfileError",
    "MissingContentStream",
    "OperatorParseError",
    "TextStateError",
    "UnsupportedFontError",
    "FontNotFoundForRun",
    "UnicodeMappingMissingError",
    "TruncatedCodeError",
    "UnexpectedCoordinateError",
    "OrphanContinuationError",
    "EntryGrammarMismatchError",
    # Version info
    "__version__",
]
