from __future__ import annotations

import json
from pathlib import Path

from pdf_lexicon.serialization import FORMAT_VERSION, entries_to_dict, entry_to_dict, write_entries
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


def sample_result() -> ExtractionResult:
    return ExtractionResult(
        entries=[
            Entry(
                word="øre",
                pos=[PosTag(PartOfSpeech.NOUN, count=NounCount.SINGLE)],
                pronunciations=["ˈø:ɔ"],
                other_forms=[OtherForm("ører", ["ˈø:ɔ"], [OtherForm("øren", ["ˈø:ɔn"])])],
            ),
            Entry(
                word="spændende",
                pos=[PosTag(PartOfSpeech.ADJECTIVE, invariant=True)],
                pronunciations=["ˈsbænənə"],
                other_adjective_forms=[OtherForm("mere spændende")],
            ),
        ],
        aliases=[CrossReferenceAlias("hunde → hund")],
        failures=[ExtractionFailure(page=2, stage="entry", error_type="EntryGrammarMismatchError", message="Could not parse 'qqq'", text="qqq")],
        pages_processed=3,
    )


def test_entry_to_dict() -> None:
    entry = sample_result().entries[0]
    assert entry_to_dict(entry) == {
        "word": "øre",
        "pos": [{"part": "noun", "count": "single"}],
        "pronunciations": ["ˈø:ɔ"],
        "other_forms": [
            {
                "word": "ører",
                "pronunciations": ["ˈø:ɔ"],
                "cross_references": [
                    {"word": "øren", "pronunciations": ["ˈø:ɔn"], "cross_references": []}
                ],
            }
        ],
        "other_adjective_forms": [],
    }


def test_invariant_flag_only_when_set() -> None:
    result = sample_result()
    assert entry_to_dict(result.entries[1])["pos"] == [{"part": "adjective", "invariant": True}]


def test_entries_to_dict() -> None:
    payload = entries_to_dict(sample_result())

    assert payload["version"] == FORMAT_VERSION
    assert payload["pages_processed"] == 3
    assert len(payload["entries"]) == 2
    assert payload["aliases"] == [{"text": "hunde → hund", "source": "hunde", "target": "hund"}]
    assert payload["failures"] == [
        {
            "page": 2,
            "stage": "entry",
            "error_type": "EntryGrammarMismatchError",
            "message": "Could not parse 'qqq'",
            "text": "qqq",
        }
    ]


def test_write_entries(tmp_path: Path) -> None:
    target = tmp_path / "out" / "entries.json"
    written = write_entries(sample_result(), target)

    assert written == target
    text = target.read_text(encoding="utf-8")
    assert "spændende" in text
    assert json.loads(text) == entries_to_dict(sample_result())
    assert list(target.parent.glob("*.tmp")) == []


def test_write_entries_replaces_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "entries.json"
    target.write_text("stale", encoding="utf-8")
    write_entries(ExtractionResult(), target)
    assert json.loads(target.read_text(encoding="utf-8"))["entries"] == []
