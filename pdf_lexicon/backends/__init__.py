"""Document backends for PDF Lexicon."""

from .base import BackendDocument, BackendPage, DocumentBackend
from .pypdf_backend import PypdfBackend, font_descriptor

__all__ = [
    "BackendDocument",
    "BackendPage",
    "DocumentBackend",
    "PypdfBackend",
    "font_descriptor",
]
