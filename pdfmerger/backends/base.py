"""Backend protocol for the PDF operations :mod:`pdfmerger` delegates."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Tuple


@dataclass
class SourceDocument:
    """An opened source PDF with its page count."""

    path: Path
    page_count: int


class PDFBackend(Protocol):
    """Operations needed to compose a merged document page by page."""

    def open_document(self, path: Path) -> SourceDocument:
        """Open *path* and return a document exposing its page count."""

    def import_page(self, document: SourceDocument, page_number: int) -> object:
        """Return a template for the 1-indexed *page_number* of *document*."""

    def measure(self, template: object) -> Tuple[float, float]:
        """Return the ``(width, height)`` of *template* in points."""

    def new_document(self) -> object:
        """Return an empty output document."""

    def create_page(
        self,
        document: object,
        width: float,
        height: float,
        orientation: str = "P",
    ) -> object:
        """Append a blank page to *document* and return it."""

    def place_template(self, page: object, template: object) -> None:
        """Draw *template* onto *page*."""

    def serialize(self, document: object) -> bytes:
        """Return the encoded bytes of *document*."""
