"""Merge PDFs, or selected pages of PDFs, into a single document.

Output goes to a file, a download or inline response, or is returned as
bytes.
"""

from __future__ import annotations

from .exceptions import (
    NoSourcesError,
    OutputError,
    PageImportError,
    PageSelectorError,
    PDFMergerError,
    RangeOrderError,
    SourceNotFoundError,
    TempFileError,
)
from .merger import PDFMerger, PlannedPage, SourceEntry
from .output import OutputMode, resolve_mode
from .pages import ALL, normalize_selector, parse_pages

__all__ = [
    "PDFMerger",
    "PlannedPage",
    "SourceEntry",
    "OutputMode",
    "resolve_mode",
    "ALL",
    "parse_pages",
    "normalize_selector",
    "PDFMergerError",
    "SourceNotFoundError",
    "TempFileError",
    "PageSelectorError",
    "RangeOrderError",
    "PageImportError",
    "NoSourcesError",
    "OutputError",
]

__version__ = "0.1.0"
