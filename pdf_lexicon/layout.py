"""Layout profile: document-specific thresholds for line and entry segmentation."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple

from .exceptions import InvalidProfileError, UnexpectedCoordinateError

__all__ = ["IndentBucket", "LayoutProfile", "DEFAULT_PROFILE"]

LOGGER = logging.getLogger("pdf_lexicon.layout")


@dataclass(frozen=True)
class IndentBucket:
    """Half-open x-coordinate range ``[low, high)`` with its indentation class."""

    low: float
    high: float
    indented: bool

    def contains(self, x: float) -> bool:
        return self.low <= x < self.high


_DEFAULT_BUCKETS: Tuple[IndentBucket, ...] = (
    IndentBucket(70.5, 71.5, indented=False),
    IndentBucket(80.0, 82.5, indented=True),
    IndentBucket(91.5, 92.5, indented=True),
)


@dataclass(frozen=True)
class LayoutProfile:
    """
    Thresholds governing how runs become lines and lines become entries.

    Attributes:
        header_cutoff: Leading runs at or below this y-coordinate are skipped
        line_gap: A drop in y larger than this starts a new line
        heading_size: Lines whose first run is larger than this are headings
        indent_buckets: Known left margins and whether they are continuations
    """
    header_cutoff: float = 50.0
    line_gap: float = 8.0
    heading_size: float = 11.0
    indent_buckets: Tuple[IndentBucket, ...] = field(default=_DEFAULT_BUCKETS)

    def is_indented(self, x: float) -> bool:
        """Return whether a line starting at ``x`` continues the previous entry."""

        for bucket in self.indent_buckets:
            if bucket.contains(x):
                return bucket.indented
        raise UnexpectedCoordinateError(f"Unexpected line x-coordinate {x}", x=x)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["indent_buckets"] = [asdict(bucket) for bucket in self.indent_buckets]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LayoutProfile":
        try:
            buckets = data.get("indent_buckets")
            kwargs: Dict[str, Any] = {
                key: float(data[key])
                for key in ("header_cutoff", "line_gap", "heading_size")
                if key in data
            }
            if buckets is not None:
                kwargs["indent_buckets"] = tuple(
                    IndentBucket(float(item["low"]), float(item["high"]), bool(item["indented"]))
                    for item in buckets
                )
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidProfileError(f"Invalid layout profile: {exc}") from exc
        unknown = set(data) - {"header_cutoff", "line_gap", "heading_size", "indent_buckets"}
        if unknown:
            raise InvalidProfileError(
                f"Unknown layout profile keys: {', '.join(sorted(unknown))}"
            )
        return cls(**kwargs)

    @classmethod
    def load(cls, path: Path) -> "LayoutProfile":
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except OSError as exc:
            raise InvalidProfileError(f"Unable to read layout profile: {path}. Error: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise InvalidProfileError(f"Layout profile is not valid JSON: {path}. Error: {exc}") from exc
        if not isinstance(data, dict):
            raise InvalidProfileError(f"Layout profile must be a JSON object: {path}")
        LOGGER.debug("Loaded layout profile from %s", path)
        return cls.from_dict(data)

    def save(self, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")


DEFAULT_PROFILE = LayoutProfile()
