from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from pypdf import PdfReader, PdfWriter

from pdfmerger.backends import PypdfBackend
from pdfmerger.exceptions import PageImportError


@pytest.fixture()
def backend() -> PypdfBackend:
    return PypdfBackend()


def test_open_document_counts_pages(
    backend: PypdfBackend, pdf_factory: Callable[..., Path]
) -> None:
    source = pdf_factory("four.pdf", pages=4)

    document = backend.open_document(source)

    assert document.path == source
    assert document.page_count == 4


@pytest.mark.parametrize("page_number", [0, 3, 99])
def test_import_page_out_of_bounds(
    backend: PypdfBackend, pdf_factory: Callable[..., Path], page_number: int
) -> None:
    document = backend.open_document(pdf_factory("two.pdf", pages=2))

    with pytest.raises(PageImportError) as excinfo:
        backend.import_page(document, page_number)

    assert excinfo.value.page == page_number


def test_measure_and_create_page(
    backend: PypdfBackend, pdf_factory: Callable[..., Path]
) -> None:
    document = backend.open_document(pdf_factory("wide.pdf", pages=2, width=400))
    template = backend.import_page(document, 2)
    writer = backend.new_document()

    width, height = backend.measure(template)
    portrait = backend.create_page(writer, width, height)
    landscape = backend.create_page(writer, width, height, "L")

    assert (width, height) == (400.0, 102.0)
    assert (float(portrait.mediabox.width), float(portrait.mediabox.height)) == (400.0, 102.0)
    assert (float(landscape.mediabox.width), float(landscape.mediabox.height)) == (102.0, 400.0)
    assert len(writer.pages) == 2


def test_rotated_page_keeps_displayed_size(backend: PypdfBackend, tmp_path: Path) -> None:
    writer = PdfWriter()
    page = writer.add_blank_page(width=300, height=100)
    page.rotate(90)
    source = tmp_path / "rotated.pdf"
    with source.open("wb") as handle:
        writer.write(handle)

    document = backend.open_document(source)
    template = backend.import_page(document, 1)
    width, height = backend.measure(template)

    assert width == pytest.approx(100.0)
    assert height == pytest.approx(300.0)


def test_place_template_and_serialize(
    backend: PypdfBackend, pdf_factory: Callable[..., Path], tmp_path: Path
) -> None:
    document = backend.open_document(pdf_factory("one.pdf", pages=1, width=200))
    template = backend.import_page(document, 1)
    writer = backend.new_document()
    page = backend.create_page(writer, *backend.measure(template))

    backend.place_template(page, template)
    data = backend.serialize(writer)

    output = tmp_path / "out.pdf"
    output.write_bytes(data)
    assert len(PdfReader(str(output)).pages) == 1
