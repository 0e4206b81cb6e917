"""JSON output for extraction results."""

from __future__ import annotations

import json
import tempfile
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict

from .types import Entry, ExtractionResult, PosTag

__all__ = ["FORMAT_VERSION", "entries_to_dict", "entry_to_dict", "write_entries"]

FORMAT_VERSION = 1


def _pos_to_dict(tag: PosTag) -> Dict[str, Any]:
    data: Dict[str, Any] = {"part": tag.part.value}
    if tag.count is not None:
        data["count"] = tag.count.value
    if tag.invariant:
        data["invariant"] = True
    return data


def entry_to_dict(entry: Entry) -> Dict[str, Any]:
    data = asdict(entry)
    data["pos"] = [_pos_to_dict(tag) for tag in entry.pos]
    return data


def entries_to_dict(result: ExtractionResult) -> Dict[str, Any]:
    return {
        "version": FORMAT_VERSION,
        "pages_processed": result.pages_processed,
        "entries": [entry_to_dict(entry) for entry in result.entries],
        "aliases": [
            {"text": alias.text, "source": alias.source, "target": alias.target}
            for alias in result.aliases
        ],
        "failures": [asdict(failure) for failure in result.failures],
    }


def write_entries(result: ExtractionResult, path: Path) -> Path:
    """Write ``result`` as JSON, replacing ``path`` atomically."""

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = entries_to_dict(result)
    with tempfile.NamedTemporaryFile(
        "w", delete=False, dir=path.parent, suffix=".tmp", encoding="utf-8"
    ) as handle:
        json.dump(payload, handle, indent=2, ensure_ascii=False)
        temp_path = Path(handle.name)
    temp_path.replace(path)
    return path
