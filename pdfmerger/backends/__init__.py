"""Backend abstractions for :mod:`pdfmerger`."""

from .base import PDFBackend, SourceDocument
from .pypdf_backend import PypdfBackend, PypdfDocument

__all__ = [
    "PDFBackend",
    "SourceDocument",
    "PypdfBackend",
    "PypdfDocument",
]
