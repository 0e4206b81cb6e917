"""Group decoded runs into visual lines, and lines into raw entry texts."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from .exceptions import OrphanContinuationError
from .layout import DEFAULT_PROFILE, LayoutProfile
from .types import DecodedRun, Line

__all__ = ["assemble_lines", "group_entries", "is_blank_separator", "is_heading"]

LOGGER = logging.getLogger("pdf_lexicon.lines")


def is_heading(line: Line, profile: LayoutProfile = DEFAULT_PROFILE) -> bool:
    return line.first.glyph_size > profile.heading_size


def is_blank_separator(line: Line) -> bool:
    return len(line.runs) == 1 and line.runs[0].text == " "


def assemble_lines(
    runs: Iterable[DecodedRun],
    profile: LayoutProfile = DEFAULT_PROFILE,
) -> Iterator[Line]:
    """Split the page's runs into lines on every baseline drop of ``line_gap``.

    Leading runs inside the header band are skipped; section headings and
    blank separator rows are dropped from the output.
    """

    current: List[DecodedRun] = []
    last_y = float("inf")
    in_header = True

    for run in runs:
        if in_header:
            if run.y <= profile.header_cutoff:
                continue
            in_header = False
        if run.y < last_y - profile.line_gap:
            if current:
                yield from _completed(current, profile)
            current = [run]
            last_y = run.y
        else:
            current.append(run)

    if current:
        yield from _completed(current, profile)


def _completed(runs: List[DecodedRun], profile: LayoutProfile) -> Iterator[Line]:
    line = Line(runs)
    if is_heading(line, profile):
        LOGGER.debug("Dropping heading line %r", line.text)
        return
    if is_blank_separator(line):
        return
    yield line


def group_entries(
    lines: Iterable[Line],
    profile: LayoutProfile = DEFAULT_PROFILE,
) -> Iterator[str]:
    """Concatenate each headword line with its indented continuation lines."""

    accumulator: Optional[List[str]] = None
    for line in lines:
        text = line.text
        # A lone space has no meaningful x baseline.
        indented = False if text == " " else profile.is_indented(line.first.x)
        if indented:
            if accumulator is None:
                raise OrphanContinuationError(
                    f"Indented line {text!r} appears before any headword line"
                )
            accumulator.append(text)
            continue
        if accumulator is not None:
            yield from _flush(accumulator)
        accumulator = [text]

    if accumulator is not None:
        yield from _flush(accumulator)


def _flush(parts: List[str]) -> Iterator[str]:
    entry = "".join(parts)
    if entry.strip():
        yield entry
