"""Backend protocol for reading dictionary PDFs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Mapping, Protocol

from ..types import FontDescriptor, RawOperation


@dataclass
class BackendPage:
    """A single page with its content stream and font resources."""

    number: int

    def operations(self) -> List[RawOperation]:
        raise NotImplementedError

    def fonts(self) -> Mapping[str, FontDescriptor]:
        raise NotImplementedError


@dataclass
class BackendDocument:
    """Represents a loaded PDF document with backend-specific helpers."""

    num_pages: int

    def iter_pages(self) -> Iterator[BackendPage]:
        return (self.get_page(index) for index in range(self.num_pages))

    def get_page(self, index: int) -> BackendPage:
        raise NotImplementedError


class DocumentBackend(Protocol):
    """Protocol defining the document operations the extractor relies on."""

    def load(self, pdf_path: str) -> BackendDocument:
        """Load a PDF file and return a backend document wrapper."""
