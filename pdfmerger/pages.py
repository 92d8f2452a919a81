"""Page selector parsing for :mod:`pdfmerger`.

A selector is either the sentinel ``"all"`` or a comma-separated list of
page numbers and inclusive ``start-end`` ranges such as ``"1,3,6,12-16"``.
Selectors keep the order in which pages were written: ``"12-14,1-5"``
expands to ``[12, 13, 14, 1, 2, 3, 4, 5]``. Ranges always expand
ascending and nothing is sorted or deduplicated.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Union

from .exceptions import PageSelectorError, RangeOrderError

ALL = "all"

PageSelector = Union[str, Iterable[Union[int, str]], None]

_NUMBER = re.compile(r"[0-9]+")


def _parse_number(text: str, token: str) -> int:
    if not _NUMBER.fullmatch(text):
        raise PageSelectorError(token)
    number = int(text)
    if number < 1:
        raise PageSelectorError(
            token, f"Invalid page number in {token!r}: pages start at 1."
        )
    return number


def is_all(pages: PageSelector) -> bool:
    """Return ``True`` when *pages* selects every page of a source."""

    if pages is None:
        return True
    return isinstance(pages, str) and pages.strip().lower() == ALL


def parse_pages(selector: str) -> List[int]:
    """Expand a selector string into an ordered list of page numbers.

    Raises:
        RangeOrderError: If a range starts after it ends.
        PageSelectorError: If a token is empty, non-numeric, has more than
            one hyphen or names page ``0``.
    """

    compact = "".join(selector.split())
    if not compact:
        raise PageSelectorError(selector, "Page selector cannot be empty")

    pages: List[int] = []
    for token in compact.split(","):
        parts = token.split("-")
        if len(parts) == 2:
            start = _parse_number(parts[0], token)
            end = _parse_number(parts[1], token)
            if start > end:
                raise RangeOrderError(start, end)
            pages.extend(range(start, end + 1))
        elif len(parts) == 1:
            pages.append(_parse_number(token, token))
        else:
            raise PageSelectorError(token)
    return pages


def normalize_selector(pages: PageSelector) -> Optional[List[int]]:
    """Normalise *pages* into an explicit page list, or ``None`` for all pages.

    Strings are parsed with :func:`parse_pages`. Iterables of integers are
    validated and kept verbatim, duplicates and order included.
    """

    if is_all(pages):
        return None
    if isinstance(pages, str):
        return parse_pages(pages)
    if isinstance(pages, (bytes, bytearray)):
        raise PageSelectorError(pages)

    try:
        items = list(pages)  # type: ignore[arg-type]
    except TypeError as exc:
        raise PageSelectorError(pages) from exc

    normalised: List[int] = []
    for item in items:
        if isinstance(item, bool):
            raise PageSelectorError(item)
        if isinstance(item, int):
            if item < 1:
                raise PageSelectorError(
                    item, f"Invalid page number {item}: pages start at 1."
                )
            normalised.append(item)
        elif isinstance(item, str):
            text = item.strip()
            normalised.append(_parse_number(text, text))
        else:
            raise PageSelectorError(item)

    if not normalised:
        raise PageSelectorError(items, "Page selector cannot be empty")
    return normalised


def resolve_pages(selector: Optional[List[int]], page_count: int) -> List[int]:
    """Return the pages *selector* refers to in a source of *page_count* pages."""

    if selector is None:
        return list(range(1, page_count + 1))
    return list(selector)


__all__ = [
    "ALL",
    "PageSelector",
    "is_all",
    "parse_pages",
    "normalize_selector",
    "resolve_pages",
]
