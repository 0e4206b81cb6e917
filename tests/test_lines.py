from __future__ import annotations

import pytest

from pdf_lexicon.exceptions import OrphanContinuationError, UnexpectedCoordinateError
from pdf_lexicon.layout import DEFAULT_PROFILE, IndentBucket, LayoutProfile
from pdf_lexicon.lines import assemble_lines, group_entries, is_blank_separator
from pdf_lexicon.types import DecodedRun, Line, TextDrawEvent


def run(text: str, x: float, y: float, size: float = 9.0) -> DecodedRun:
    event = TextDrawEvent(position=(x, y), glyph_size=size, font_key="F1", raw_text=b"")
    return DecodedRun(event, text)


def texts(lines):
    return [line.text for line in lines]


def test_runs_on_the_same_baseline_form_one_line() -> None:
    lines = list(assemble_lines([run("hund ", 71, 740), run("[名]", 71, 740), run(" x", 71, 735)]))
    assert texts(lines) == ["hund [名] x"]


def test_new_line_starts_when_y_drops_by_more_than_the_gap() -> None:
    lines = list(assemble_lines([run("a", 71, 740), run("b", 71, 731.9), run("c", 71, 720)]))
    assert texts(lines) == ["a", "b", "c"]


def test_leading_header_runs_are_skipped() -> None:
    lines = list(assemble_lines([run("12", 300, 30), run("13", 300, 50), run("a", 71, 740), run("b", 71, 40)]))
    # Only leading runs are skipped; a low run later on starts a line.
    assert texts(lines) == ["a", "b"]


def test_headings_and_blank_separators_are_dropped() -> None:
    lines = list(
        assemble_lines(
            [run("H", 71, 760, size=14), run(" ", 71, 740), run("a", 71, 728)]
        )
    )
    assert texts(lines) == ["a"]


def test_heading_threshold_is_strict() -> None:
    lines = list(assemble_lines([run("a", 71, 740, size=11.0)]))
    assert texts(lines) == ["a"]


def test_empty_input_produces_no_lines() -> None:
    assert list(assemble_lines([])) == []


def test_line_requires_runs() -> None:
    with pytest.raises(ValueError):
        Line([])


def test_blank_separator_detection() -> None:
    assert is_blank_separator(Line([run(" ", 71, 740)]))
    assert not is_blank_separator(Line([run(" ", 71, 740), run("a", 71, 740)]))


def _lines(*specs):
    return [Line([run(text, x, 700)]) for text, x in specs]


def test_continuation_lines_join_the_previous_entry() -> None:
    entries = list(
        group_entries(_lines(("kat [名] [ˈkad]: ", 71), ("猫．", 81), ("…", 92), ("hund", 71)))
    )
    assert entries == ["kat [名] [ˈkad]: 猫．…", "hund"]


def test_lone_space_line_is_treated_as_an_entry_start() -> None:
    entries = list(group_entries(_lines(("a", 71), (" ", 500), ("b", 71))))
    assert entries == ["a", "b"]


def test_indented_line_without_entry_raises() -> None:
    with pytest.raises(OrphanContinuationError):
        list(group_entries(_lines(("猫．", 81))))


def test_unknown_indentation_raises_with_coordinate() -> None:
    with pytest.raises(UnexpectedCoordinateError) as excinfo:
        list(group_entries(_lines(("a", 71), ("FORORD", 200))))
    assert excinfo.value.x == 200


def test_custom_profile_changes_buckets() -> None:
    profile = LayoutProfile(indent_buckets=(IndentBucket(0, 100, False), IndentBucket(100, 200, True)))
    entries = list(group_entries(_lines(("a", 10), ("b", 150), ("c", 50)), profile))
    assert entries == ["ab", "c"]


def test_default_profile_buckets_are_half_open() -> None:
    assert DEFAULT_PROFILE.is_indented(70.5) is False
    assert DEFAULT_PROFILE.is_indented(80.0) is True
    assert DEFAULT_PROFILE.is_indented(92.4) is True
    with pytest.raises(UnexpectedCoordinateError):
        DEFAULT_PROFILE.is_indented(71.5)
    with pytest.raises(UnexpectedCoordinateError):
        DEFAULT_PROFILE.is_indented(82.5)
