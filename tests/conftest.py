from __future__ import annotations

import io
from pathlib import Path
from typing import Callable, Union
import sys

import pytest
from pypdf import PdfReader, PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Page ``n`` of a generated PDF is ``width`` wide and ``PAGE_BASE_HEIGHT + n``
# high, so every output page can be traced back to its source and page.
PAGE_BASE_HEIGHT = 100


def build_pdf(pages: int, width: float) -> bytes:
    writer = PdfWriter()
    for number in range(1, pages + 1):
        writer.add_blank_page(width=width, height=PAGE_BASE_HEIGHT + number)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def page_sizes(source: Union[Path, bytes]) -> list[tuple[float, float]]:
    stream = io.BytesIO(source) if isinstance(source, bytes) else str(source)
    reader = PdfReader(stream)
    return [
        (float(page.mediabox.width), float(page.mediabox.height))
        for page in reader.pages
    ]


def traced(width: float, *pages: int) -> list[tuple[float, float]]:
    return [(float(width), float(PAGE_BASE_HEIGHT + page)) for page in pages]


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(filename: str, pages: int = 1, width: float = 72) -> Path:
        path = tmp_path / filename
        path.write_bytes(build_pdf(pages, width))
        return path

    return _create


@pytest.fixture()
def sample_pdfs(pdf_factory: Callable[..., Path]) -> list[Path]:
    pdf1 = pdf_factory("one.pdf", pages=3, width=200)
    pdf2 = pdf_factory("two.pdf", pages=3, width=300)
    return [pdf1, pdf2]


@pytest.fixture()
def temp_dir(tmp_path: Path) -> Path:
    path = tmp_path / "scratch"
    path.mkdir()
    return path
