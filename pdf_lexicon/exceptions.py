"""
Custom exceptions for PDF Lexicon.

This module defines all custom exceptions used throughout the library.
Every error is terminal for the unit of work it occurs in; callers choose
through :class:`pdf_lexicon.extractor.ErrorPolicy` whether that unit is the
whole run, a page, or a single entry.
"""

from __future__ import annotations

from typing import Any, Optional


class PDFLexiconError(Exception):
    """Base exception for all PDF Lexicon errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown dictionary extraction error occurred."


class InvalidPDFError(PDFLexiconError):
    """Raised when PDF file is invalid or corrupted."""

    @property
    def default_message(self) -> str:
        return "Invalid or corrupted PDF file."


class EncryptedPDFError(PDFLexiconError):
    """Raised when PDF is encrypted and cannot be processed."""

    @property
    def default_message(self) -> str:
        return "PDF is encrypted and cannot be processed without a password."


class PageOutOfBoundsError(PDFLexiconError):
    """Raised when requested page number is out of bounds."""

    @property
    def default_message(self) -> str:
        return "Requested page number is out of bounds."


class InvalidProfileError(PDFLexiconError):
    """Raised when a layout profile cannot be loaded."""

    @property
    def default_message(self) -> str:
        return "Invalid layout profile."


class MissingContentStream(PDFLexiconError):
    """Raised when a page has no content stream to interpret."""

    def __init__(self, message: str = "", *, page: Optional[int] = None) -> None:
        super().__init__(message)
        self.page = page

    @property
    def default_message(self) -> str:
        return "The page does not have contents."


class OperatorParseError(PDFLexiconError):
    """Raised when a content stream operator has unexpected operands."""

    def __init__(self, message: str = "", *, operator: str = "", operands: Any = None) -> None:
        super().__init__(message)
        self.operator = operator
        self.operands = operands

    @property
    def default_message(self) -> str:
        return "Malformed content stream operator."


class TextStateError(PDFLexiconError):
    """Raised when a positioning or drawing operator lacks required state."""

    @property
    def default_message(self) -> str:
        return "Text operator used without the required preceding state."


class UnsupportedFontError(PDFLexiconError):
    """Raised when no Unicode table can be built for a font."""

    def __init__(self, message: str = "", *, font_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.font_name = font_name

    @property
    def default_message(self) -> str:
        return "Unsupported font."


class FontNotFoundForRun(PDFLexiconError):
    """Raised when a text run references a font key missing from the page."""

    def __init__(self, message: str = "", *, font_key: Optional[str] = None) -> None:
        super().__init__(message)
        self.font_key = font_key

    @property
    def default_message(self) -> str:
        return "Text run references an unknown font."


class UnicodeMappingMissingError(PDFLexiconError):
    """Raised when a character code has no entry in the font table."""

    def __init__(self, message: str = "", *, code: Optional[int] = None) -> None:
        super().__init__(message)
        self.code = code

    @property
    def default_message(self) -> str:
        return "Character code has no Unicode mapping."


class TruncatedCodeError(PDFLexiconError, ValueError):
    """Raised when a 2-byte font string ends with a lone byte."""

    @property
    def default_message(self) -> str:
        return "String length is not a multiple of the code width."


class UnexpectedCoordinateError(PDFLexiconError):
    """Raised when a line starts outside every known indentation bucket."""

    def __init__(self, message: str = "", *, x: Optional[float] = None) -> None:
        super().__init__(message)
        self.x = x

    @property
    def default_message(self) -> str:
        return "Line starts at an unexpected x-coordinate."


class OrphanContinuationError(PDFLexiconError):
    """Raised when an indented line appears before any headword line."""

    @property
    def default_message(self) -> str:
        return "Continuation line found before any headword line."


class EntryGrammarMismatchError(PDFLexiconError):
    """Raised when an entry does not match the dictionary grammar."""

    def __init__(self, message: str = "", *, text: str = "") -> None:
        super().__init__(message or f"Could not parse {text!r}")
        self.text = text

    @property
    def default_message(self) -> str:
        return "Entry does not match the dictionary grammar."
