"""Custom exceptions for the :mod:`pdfmerger` package."""

from __future__ import annotations

from pathlib import Path


class PDFMergerError(Exception):
    """Base exception for all errors raised by :mod:`pdfmerger`."""


class SourceNotFoundError(PDFMergerError):
    """Raised when a source PDF cannot be located at add time."""

    def __init__(self, path: str | Path) -> None:
        self.path = path
        super().__init__(f"Could not locate PDF on '{path}'")


class TempFileError(PDFMergerError):
    """Raised when raw PDF bytes cannot be persisted to a temporary file."""


class PageSelectorError(PDFMergerError):
    """Raised when a page selector cannot be parsed."""

    def __init__(self, token: object, message: str | None = None) -> None:
        self.token = token
        super().__init__(message or f"Invalid page selector token: {token!r}")


class RangeOrderError(PageSelectorError):
    """Raised when a page range starts after it ends."""

    def __init__(self, start: int, end: int) -> None:
        self.start = start
        self.end = end
        super().__init__(
            f"{start}-{end}",
            f"Starting page, '{start}' is greater than ending page '{end}'.",
        )


class PageImportError(PDFMergerError):
    """Raised when a requested page cannot be imported from its source."""

    def __init__(self, page: int | None, source: str | Path, message: str | None = None) -> None:
        self.page = page
        self.source = source
        if message is None:
            message = (
                f"Could not load page '{page}' in PDF '{source}'. "
                "Check that the page exists."
            )
        super().__init__(message)


class NoSourcesError(PDFMergerError):
    """Raised when a merge is requested without any source PDFs."""

    def __init__(self) -> None:
        super().__init__("No PDFs to merge.")


class OutputError(PDFMergerError):
    """Raised when the merged document cannot be delivered."""

    def __init__(self, mode: str) -> None:
        self.mode = mode
        super().__init__(f"Error outputting PDF to '{mode}'.")


__all__ = [
    "PDFMergerError",
    "SourceNotFoundError",
    "TempFileError",
    "PageSelectorError",
    "RangeOrderError",
    "PageImportError",
    "NoSourcesError",
    "OutputError",
]
