"""Dictionary extraction built around a pluggable document backend.

Each page is processed independently: content stream operations become
typed instructions, the text-state machine positions every run, the page's
fonts decode the runs, and the layout profile groups them into lines and
raw entries, which are finally corrected and parsed.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Union

from .backends import BackendDocument, PypdfBackend
from .backends.base import DocumentBackend
from .decoder import decode_run
from .exceptions import EntryGrammarMismatchError, FontNotFoundForRun, PageOutOfBoundsError, PDFLexiconError
from .fonts import resolve_fonts
from .grammar import parse_entry
from .layout import DEFAULT_PROFILE, LayoutProfile
from .lines import assemble_lines, group_entries
from .operators import parse_operations
from .text_state import walk_text
from .types import CrossReferenceAlias, DecodedRun, Entry, ExtractionFailure, ExtractionResult, Line
from .utils import time_block

__all__ = ["DictionaryExtractor", "ErrorPolicy", "ParsedEntry"]

LOGGER = logging.getLogger("pdf_lexicon.extractor")

ParsedEntry = Union[Entry, CrossReferenceAlias]


class ErrorPolicy(str, Enum):
    """How far an extraction error reaches."""

    ABORT = "abort"
    SKIP_PAGE = "skip-page"
    SKIP_ENTRY = "skip-entry"


class DictionaryExtractor:
    """High-level dictionary extraction operations."""

    def __init__(
        self,
        input_path: str,
        *,
        backend: Optional[DocumentBackend] = None,
        profile: Optional[LayoutProfile] = None,
        policy: Union[ErrorPolicy, str] = ErrorPolicy.ABORT,
    ) -> None:
        self.input_path = input_path
        self.backend: DocumentBackend = backend or PypdfBackend()
        self.profile = profile or DEFAULT_PROFILE
        self.policy = ErrorPolicy(policy)
        self.failures: List[ExtractionFailure] = []
        self._document: BackendDocument = self.backend.load(str(input_path))
        self.num_pages = self._document.num_pages

    @property
    def document(self) -> BackendDocument:
        return self._document

    def select_pages(self, page: Optional[int] = None, skip: int = 0) -> List[int]:
        """Return the zero-based page indices to process.

        A single ``page`` wins over ``skip``; otherwise the first ``skip``
        pages are left out.
        """

        if page is not None:
            if not 0 <= page < self.num_pages:
                raise PageOutOfBoundsError(
                    f"Page {page} is out of bounds (PDF has {self.num_pages} pages, indexed from 0)."
                )
            return [page]
        if skip < 0:
            raise PageOutOfBoundsError(f"Cannot skip a negative number of pages ({skip}).")
        return list(range(min(skip, self.num_pages), self.num_pages))

    # ------------------------------------------------------------------
    # Per-page stages
    # ------------------------------------------------------------------
    def iter_runs(self, page: int) -> Iterator[DecodedRun]:
        """Yield the page's text runs, positioned and decoded to Unicode."""

        backend_page = self._document.get_page(page)
        instructions = parse_operations(
            (operation.operands, operation.operator) for operation in backend_page.operations()
        )
        fonts = resolve_fonts(backend_page.fonts())

        for event in walk_text(instructions):
            font = fonts.get(event.font_key)
            if font is None:
                raise FontNotFoundForRun(
                    f"Font {event.font_key!r} not found on page {page}",
                    font_key=event.font_key,
                )
            yield DecodedRun(event, decode_run(font, event.raw_text))

    def iter_lines(self, page: int) -> Iterator[Line]:
        return assemble_lines(self.iter_runs(page), self.profile)

    def iter_raw_entries(self, page: int) -> Iterator[str]:
        return group_entries(self.iter_lines(page), self.profile)

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------
    def _record(self, page: int, stage: str, exc: PDFLexiconError) -> None:
        failure = ExtractionFailure(
            page=page,
            stage=stage,
            error_type=type(exc).__name__,
            message=exc.message,
            text=getattr(exc, "text", None),
        )
        self.failures.append(failure)
        LOGGER.warning("Skipping %s on page %d: %s", stage, page, exc.message)

    def _page_entries(self, page: int) -> List[ParsedEntry]:
        raw_entries = list(self.iter_raw_entries(page))
        parsed: List[ParsedEntry] = []
        for raw in raw_entries:
            try:
                parsed.append(parse_entry(raw))
            except EntryGrammarMismatchError as exc:
                if self.policy is not ErrorPolicy.SKIP_ENTRY:
                    raise
                self._record(page, "entry", exc)
        LOGGER.debug("Page %d: %d entries", page, len(parsed))
        return parsed

    def iter_entries(self, pages: Iterable[int]) -> Iterator[ParsedEntry]:
        """Yield the parsed entries of ``pages`` in document order.

        A page's entries are only yielded once the whole page has been
        processed, so a page skipped under :attr:`ErrorPolicy.SKIP_PAGE`
        contributes nothing.
        """

        for page in pages:
            try:
                parsed = self._page_entries(page)
            except PDFLexiconError as exc:
                if self.policy is ErrorPolicy.ABORT:
                    raise
                self._record(page, "page", exc)
                continue
            yield from parsed

    def extract(
        self,
        page: Optional[int] = None,
        skip: int = 0,
        progress_callback: Optional[Callable[[int, int], None]] = None,
    ) -> ExtractionResult:
        """Extract every entry of the selected pages."""

        pages = self.select_pages(page, skip)
        result = ExtractionResult()
        self.failures = result.failures

        for index, page_index in enumerate(pages, start=1):
            with time_block(LOGGER, f"page {page_index}"):
                for item in self.iter_entries([page_index]):
                    if isinstance(item, CrossReferenceAlias):
                        result.aliases.append(item)
                    else:
                        result.entries.append(item)
            result.pages_processed += 1

            if progress_callback:
                progress_callback(index, len(pages))

        LOGGER.info("Extracted %s from %s", result, Path(self.input_path).name)
        return result
