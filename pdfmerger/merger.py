"""Merge functionality for the :mod:`pdfmerger` package."""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from fastapi.responses import Response

from .backends import PDFBackend, PypdfBackend, SourceDocument
from .exceptions import (
    NoSourcesError,
    OutputError,
    SourceNotFoundError,
    TempFileError,
)
from .output import mode_name, write_output
from .pages import ALL, PageSelector, normalize_selector, resolve_pages
from .utils import PathLike, ensure_path

LOGGER = logging.getLogger("pdfmerger.merge")

TEMP_PREFIX = "pdfmerger"


@dataclass(frozen=True)
class SourceEntry:
    """A source PDF queued for merging.

    ``pages`` is ``None`` when every page of the source is requested.
    ``temporary`` marks files created from raw bytes by :meth:`PDFMerger.add_raw`.
    """

    path: Path
    pages: Optional[Tuple[int, ...]]
    temporary: bool = False


@dataclass(frozen=True)
class PlannedPage:
    """One page of the merged output: which source and which page of it."""

    source: Path
    page: int


class PDFMerger:
    """Merge PDFs, or selected pages of PDFs, into a single document.

    Sources are merged in the order they are added and pages in the order
    their selector lists them, so pages ``12-14`` requested before ``1-5``
    come first in the output.

    Args:
        clean: Delete every source file and forget all sources once a merge
            has composed its pages.
        temp_dir: Directory for files created by :meth:`add_raw`. Defaults
            to the platform temporary directory.
        backend: PDF backend used to read, compose and serialize documents.
    """

    def __init__(
        self,
        clean: bool = False,
        *,
        temp_dir: PathLike | None = None,
        backend: PDFBackend | None = None,
    ) -> None:
        self._clean = clean
        self._temp_dir = ensure_path(temp_dir) if temp_dir is not None else None
        self._backend: PDFBackend = backend or PypdfBackend()
        self._entries: List[SourceEntry] = []

    @property
    def clean(self) -> bool:
        return self._clean

    @property
    def temp_dir(self) -> Path:
        if self._temp_dir is not None:
            return self._temp_dir
        return Path(tempfile.gettempdir())

    @property
    def entries(self) -> Tuple[SourceEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def add_pdf(self, path: PathLike, pages: PageSelector = ALL) -> "PDFMerger":
        """Queue the PDF at *path* for merging and return ``self``.

        *pages* is ``"all"``, a selector string such as ``"1,3,6,12-16"`` or
        a sequence of page numbers.

        Raises:
            SourceNotFoundError: If *path* does not point to a file.
            PageSelectorError: If *pages* cannot be parsed.
        """

        return self._add(path, pages, temporary=False)

    def add_raw(self, data: bytes, pages: PageSelector = ALL) -> "PDFMerger":
        """Persist raw PDF *data* to a temporary file and queue it for merging.

        Raises:
            TempFileError: If the temporary file cannot be written.
        """

        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("Raw PDF content must be bytes")

        path = self._write_temp_file(bytes(data))
        try:
            return self._add(path, pages, temporary=True)
        except Exception:
            path.unlink(missing_ok=True)
            raise

    def _add(self, path: PathLike, pages: PageSelector, *, temporary: bool) -> "PDFMerger":
        pdf_path = ensure_path(path)
        if not pdf_path.is_file():
            LOGGER.error("PDF not found: %s", pdf_path)
            raise SourceNotFoundError(path)

        selector = normalize_selector(pages)
        entry = SourceEntry(
            path=pdf_path,
            pages=tuple(selector) if selector is not None else None,
            temporary=temporary,
        )
        self._entries.append(entry)
        LOGGER.debug(
            "Added %s (%s)",
            pdf_path,
            "all pages" if selector is None else f"{len(selector)} page(s)",
        )
        return self

    def _write_temp_file(self, data: bytes) -> Path:
        try:
            handle, name = tempfile.mkstemp(prefix=TEMP_PREFIX, dir=self.temp_dir)
        except OSError as exc:
            LOGGER.error("Failed to create temporary file in %s: %s", self.temp_dir, exc)
            raise TempFileError("Unable to create temporary file") from exc

        try:
            with os.fdopen(handle, "wb") as stream:
                stream.write(data)
        except OSError as exc:
            LOGGER.error("Failed to write temporary file %s: %s", name, exc)
            Path(name).unlink(missing_ok=True)
            raise TempFileError("Unable to create temporary file") from exc

        LOGGER.debug("Stored %d raw bytes in %s", len(data), name)
        return Path(name)

    def _iter_sources(self) -> Iterator[Tuple[SourceEntry, SourceDocument, List[int]]]:
        if not self._entries:
            raise NoSourcesError()

        for entry in self._entries:
            document = self._backend.open_document(entry.path)
            selector = list(entry.pages) if entry.pages is not None else None
            yield entry, document, resolve_pages(selector, document.page_count)

    def plan(self) -> List[PlannedPage]:
        """Return the ordered list of pages a merge would produce.

        Selectors of ``"all"`` are resolved against each source's page count.
        Page bounds are only checked by :meth:`merge`.
        """

        return [
            PlannedPage(source=entry.path, page=page)
            for entry, _, pages in self._iter_sources()
            for page in pages
        ]

    def merge(
        self,
        output_mode: str = "browser",
        output_path: PathLike = "newfile.pdf",
    ) -> Union[Path, bytes, Response]:
        """Merge the queued PDFs and deliver the result.

        Args:
            output_mode: ``"file"`` writes to *output_path*, ``"string"``
                returns the PDF bytes, ``"download"`` returns an attachment
                response and anything else, ``"browser"`` included, returns
                an inline response.
            output_path: Target path in ``file`` mode, file name otherwise.

        Raises:
            NoSourcesError: If no PDFs were added.
            PageImportError: If a requested page is missing from its source.
            OutputError: If the merged document cannot be delivered.
        """

        backend = self._backend
        writer = backend.new_document()
        page_total = 0

        for entry, document, pages in self._iter_sources():
            LOGGER.debug("Processing input PDF %s", entry.path)
            for page_number in pages:
                template = backend.import_page(document, page_number)
                width, height = backend.measure(template)
                page = backend.create_page(writer, width, height, "P")
                backend.place_template(page, template)
                LOGGER.debug("Added page %s from %s", page_number, entry.path)
                page_total += 1

        sources = len(self._entries)
        if self._clean:
            self._remove_sources(self._entries)
            self._entries = []

        try:
            data = backend.serialize(writer)
        except Exception as exc:
            LOGGER.error("Failed to serialize merged PDF: %s", exc)
            raise OutputError(mode_name(output_mode)) from exc

        result = write_output(data, output_mode, output_path)
        LOGGER.info("Merged %d page(s) from %d PDF(s)", page_total, sources)
        return result

    def cleanup(self) -> None:
        """Delete the temporary files created by :meth:`add_raw`.

        Their entries are dropped; entries for caller-owned files are kept.
        """

        temporary = [entry for entry in self._entries if entry.temporary]
        self._remove_sources(temporary)
        self._entries = [entry for entry in self._entries if not entry.temporary]

    def _remove_sources(self, entries: List[SourceEntry]) -> None:
        for entry in entries:
            LOGGER.debug("Removing %s", entry.path)
            entry.path.unlink(missing_ok=True)


__all__ = ["PDFMerger", "PlannedPage", "SourceEntry", "TEMP_PREFIX"]
