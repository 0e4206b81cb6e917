from __future__ import annotations

import logging
from pathlib import Path

import pytest

from pdf_lexicon import DictionaryExtractor, ErrorPolicy
from pdf_lexicon.exceptions import (
    EntryGrammarMismatchError,
    FontNotFoundForRun,
    InvalidPDFError,
    PageOutOfBoundsError,
    UnexpectedCoordinateError,
)
from pdf_lexicon.layout import IndentBucket, LayoutProfile
from pdf_lexicon.types import CrossReferenceAlias, Entry, PartOfSpeech, PosTag

from conftest import ENTRIES_PAGE, dictionary_fonts

ENTRY_LINES = ["hund [名] [ˈhun’]: 犬．", "kat [名] [ˈkad]: ", "猫．", "hunde → hund"]

HUND = Entry("hund", [PosTag(PartOfSpeech.NOUN)], ["ˈhun’"])
KAT = Entry("kat", [PosTag(PartOfSpeech.NOUN)], ["ˈkad"])
HUS = Entry("hus", [PosTag(PartOfSpeech.NOUN)], ["ˈhu’s"])


def test_select_pages(dictionary_pdf: Path) -> None:
    extractor = DictionaryExtractor(dictionary_pdf)

    assert extractor.num_pages == 3
    assert extractor.select_pages() == [0, 1, 2]
    assert extractor.select_pages(skip=2) == [2]
    assert extractor.select_pages(skip=10) == []
    assert extractor.select_pages(page=1, skip=2) == [1]


@pytest.mark.parametrize(("page", "skip"), [(3, 0), (None, -1)])
def test_select_pages_out_of_bounds(dictionary_pdf: Path, page, skip) -> None:
    extractor = DictionaryExtractor(dictionary_pdf)
    with pytest.raises(PageOutOfBoundsError):
        extractor.select_pages(page, skip)


def test_invalid_input_is_rejected_on_construction(tmp_path: Path) -> None:
    with pytest.raises(InvalidPDFError):
        DictionaryExtractor(tmp_path / "missing.pdf")


def test_iter_runs_decodes_every_font(entries_pdf: Path) -> None:
    runs = list(DictionaryExtractor(entries_pdf).iter_runs(0))

    assert runs[0].text == "12"
    assert runs[0].event.position == (300, 30)
    assert [run.text for run in runs if run.font_key == "F2"] == ["ˈ", "ˈ"]
    assert "".join(run.text for run in runs if run.font_key == "F3") == "名犬．名猫．→"


def test_iter_lines(dictionary_pdf: Path) -> None:
    extractor = DictionaryExtractor(dictionary_pdf)

    assert [line.text for line in extractor.iter_lines(1)] == ENTRY_LINES
    assert [line.text for line in extractor.iter_lines(0)] == ["FORORD"]
    continuation = list(extractor.iter_lines(1))[2]
    assert continuation.first.x == pytest.approx(81)


def test_iter_raw_entries_joins_continuations(entries_pdf: Path) -> None:
    raw = list(DictionaryExtractor(entries_pdf).iter_raw_entries(0))
    assert raw == ["hund [名] [ˈhun’]: 犬．", "kat [名] [ˈkad]: 猫．", "hunde → hund"]


def test_iter_raw_entries_rejects_unknown_margin(dictionary_pdf: Path) -> None:
    extractor = DictionaryExtractor(dictionary_pdf)
    with pytest.raises(UnexpectedCoordinateError) as excinfo:
        list(extractor.iter_raw_entries(0))
    assert excinfo.value.x == pytest.approx(200)


def test_custom_profile_accepts_front_matter_margin(dictionary_pdf: Path) -> None:
    profile = LayoutProfile(
        indent_buckets=(
            IndentBucket(70.5, 71.5, indented=False),
            IndentBucket(80.0, 82.5, indented=True),
            IndentBucket(199.5, 200.5, indented=False),
        )
    )
    extractor = DictionaryExtractor(dictionary_pdf, profile=profile)
    assert list(extractor.iter_raw_entries(0)) == ["FORORD"]


def test_iter_entries(entries_pdf: Path) -> None:
    parsed = list(DictionaryExtractor(entries_pdf).iter_entries([0]))
    assert parsed == [HUND, KAT, CrossReferenceAlias("hunde → hund")]


def test_extract_single_page(dictionary_pdf: Path) -> None:
    progress = []
    result = DictionaryExtractor(dictionary_pdf).extract(
        page=1, progress_callback=lambda current, total: progress.append((current, total))
    )

    assert result.entries == [HUND, KAT]
    assert [(alias.source, alias.target) for alias in result.aliases] == [("hunde", "hund")]
    assert result.failures == []
    assert result.pages_processed == 1
    assert progress == [(1, 1)]


def test_abort_raises_first_error(dictionary_pdf: Path) -> None:
    extractor = DictionaryExtractor(dictionary_pdf)
    with pytest.raises(UnexpectedCoordinateError):
        extractor.extract()
    with pytest.raises(EntryGrammarMismatchError) as excinfo:
        extractor.extract(skip=1)
    assert excinfo.value.text == "qqq zzz"


def test_skip_page_drops_failing_pages(dictionary_pdf: Path) -> None:
    progress = []
    extractor = DictionaryExtractor(dictionary_pdf, policy=ErrorPolicy.SKIP_PAGE)
    result = extractor.extract(progress_callback=lambda current, total: progress.append((current, total)))

    assert result.entries == [HUND, KAT]
    assert len(result.aliases) == 1
    assert result.pages_processed == 3
    assert progress == [(1, 3), (2, 3), (3, 3)]
    assert [(f.page, f.stage, f.error_type) for f in result.failures] == [
        (0, "page", "UnexpectedCoordinateError"),
        (2, "page", "EntryGrammarMismatchError"),
    ]
    assert result.failures[1].text == "qqq zzz"
    assert extractor.failures is result.failures


def test_skip_entry_keeps_the_rest_of_the_page(dictionary_pdf: Path, caplog: pytest.LogCaptureFixture) -> None:
    extractor = DictionaryExtractor(dictionary_pdf, policy="skip-entry")
    with caplog.at_level(logging.WARNING, logger="pdf_lexicon.extractor"):
        result = extractor.extract()

    assert result.entries == [HUND, KAT, HUS]
    assert [(f.page, f.stage, f.error_type) for f in result.failures] == [
        (0, "page", "UnexpectedCoordinateError"),
        (2, "entry", "EntryGrammarMismatchError"),
    ]
    assert result.failures[0].text is None
    assert "Skipping entry on page 2" in caplog.text
    assert str(result) == "ExtractionResult(entries=3, aliases=1, failures=2, pages=3)"


def test_missing_font_fails_the_page(pdf_factory) -> None:
    path = pdf_factory(
        "fonts.pdf",
        [rb"BT /F9 9 Tf 1 0 0 1 71 740 Tm (a) Tj ET", ENTRIES_PAGE],
        dictionary_fonts(),
    )
    extractor = DictionaryExtractor(path)
    with pytest.raises(FontNotFoundForRun) as excinfo:
        list(extractor.iter_runs(0))
    assert excinfo.value.font_key == "F9"

    result = DictionaryExtractor(path, policy=ErrorPolicy.SKIP_ENTRY).extract()
    assert [(f.page, f.error_type) for f in result.failures] == [(0, "FontNotFoundForRun")]
    assert result.entries == [HUND, KAT]


def test_missing_contents_fails_the_page(pdf_factory) -> None:
    path = pdf_factory("contents.pdf", [ENTRIES_PAGE, None], dictionary_fonts())
    result = DictionaryExtractor(path, policy=ErrorPolicy.SKIP_PAGE).extract()

    assert result.entries == [HUND, KAT]
    assert [(f.page, f.error_type) for f in result.failures] == [(1, "MissingContentStream")]
