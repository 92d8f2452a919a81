"""pypdf backend implementation for :mod:`pdfmerger`."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from pypdf import PageObject, PdfReader, PdfWriter, Transformation
from pypdf.errors import PdfReadError

from ..exceptions import PageImportError
from .base import PDFBackend, SourceDocument

LOGGER = logging.getLogger("pdfmerger.backends")

PORTRAIT = "P"
LANDSCAPE = "L"


@dataclass
class PypdfDocument(SourceDocument):
    reader: PdfReader


class PypdfBackend(PDFBackend):
    """Backend implementation that uses `pypdf` under the hood."""

    def open_document(self, path: Path) -> PypdfDocument:
        try:
            reader = PdfReader(str(path))
        except (OSError, PdfReadError) as exc:
            LOGGER.error("Failed to read PDF %s: %s", path, exc)
            raise PageImportError(
                None, path, f"Unable to read PDF '{path}': {exc}"
            ) from exc

        if reader.is_encrypted:
            LOGGER.debug("Attempting to decrypt encrypted PDF %s", path)
            try:
                decrypted = reader.decrypt("")
            except Exception as exc:  # pragma: no cover - decrypt errors vary
                LOGGER.error("Failed to decrypt PDF %s: %s", path, exc)
                raise PageImportError(
                    None, path, f"Unable to decrypt encrypted PDF '{path}'"
                ) from exc
            if not decrypted:
                raise PageImportError(
                    None, path, f"Unable to decrypt encrypted PDF '{path}'"
                )

        try:
            page_count = len(reader.pages)
        except PdfReadError as exc:
            raise PageImportError(
                None, path, f"Unable to read pages of PDF '{path}': {exc}"
            ) from exc
        return PypdfDocument(path=path, page_count=page_count, reader=reader)

    def import_page(self, document: PypdfDocument, page_number: int) -> PageObject:
        if page_number < 1 or page_number > document.page_count:
            raise PageImportError(page_number, document.path)
        try:
            page = document.reader.pages[page_number - 1]
            if page.rotation:
                page.transfer_rotation_to_content()
        except (IndexError, PdfReadError) as exc:
            raise PageImportError(page_number, document.path) from exc
        return page

    def measure(self, template: PageObject) -> Tuple[float, float]:
        box = template.mediabox
        return float(box.width), float(box.height)

    def new_document(self) -> PdfWriter:
        return PdfWriter()

    def create_page(
        self,
        document: PdfWriter,
        width: float,
        height: float,
        orientation: str = PORTRAIT,
    ) -> PageObject:
        # "P" keeps the measured size as is, "L" swaps the two sides.
        if orientation.upper() == LANDSCAPE:
            width, height = height, width
        return document.add_blank_page(width=width, height=height)

    def place_template(self, page: PageObject, template: PageObject) -> None:
        box = template.mediabox
        offset = Transformation().translate(-float(box.left), -float(box.bottom))
        page.merge_transformed_page(template, offset)

    def serialize(self, document: PdfWriter) -> bytes:
        buffer = io.BytesIO()
        document.write(buffer)
        return buffer.getvalue()
