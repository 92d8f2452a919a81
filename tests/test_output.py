from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.responses import Response

from pdfmerger.exceptions import OutputError
from pdfmerger.output import OutputMode, mode_name, resolve_mode, write_output

PDF_BYTES = b"%PDF-1.4\n%%EOF\n"


@pytest.mark.parametrize(
    ("mode", "expected"),
    [
        ("file", OutputMode.FILE),
        ("File", OutputMode.FILE),
        ("download", OutputMode.DOWNLOAD),
        ("STRING", OutputMode.STRING),
        ("browser", OutputMode.INLINE),
        ("", OutputMode.INLINE),
        ("printer", OutputMode.INLINE),
        (OutputMode.DOWNLOAD, OutputMode.DOWNLOAD),
    ],
)
def test_resolve_mode(mode: str, expected: OutputMode) -> None:
    assert resolve_mode(mode) is expected


def test_write_output_file_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "out.pdf"

    result = write_output(PDF_BYTES, "file", target)

    assert result == target
    assert target.read_bytes() == PDF_BYTES


def test_write_output_string() -> None:
    assert write_output(PDF_BYTES, "string", "ignored.pdf") == PDF_BYTES


def test_write_output_download_uses_file_name(tmp_path: Path) -> None:
    response = write_output(PDF_BYTES, "download", tmp_path / "invoice.pdf")

    assert isinstance(response, Response)
    assert response.body == PDF_BYTES
    assert response.headers["content-disposition"] == 'attachment; filename="invoice.pdf"'
    assert response.headers["content-type"] == "application/pdf"


def test_write_output_failure(tmp_path: Path) -> None:
    with pytest.raises(OutputError) as excinfo:
        write_output(PDF_BYTES, "file", tmp_path)

    assert excinfo.value.mode == "file"
    assert str(excinfo.value) == "Error outputting PDF to 'file'."


@pytest.mark.parametrize(
    ("mode", "expected"),
    [
        (OutputMode.FILE, "file"),
        (OutputMode.INLINE, "inline"),
        ("browser", "browser"),
    ],
)
def test_mode_name(mode: object, expected: str) -> None:
    assert mode_name(mode) == expected  # type: ignore[arg-type]


def test_write_output_failure_with_enum_mode(tmp_path: Path) -> None:
    with pytest.raises(OutputError) as excinfo:
        write_output(PDF_BYTES, OutputMode.FILE, tmp_path)

    assert excinfo.value.mode == "file"
    assert str(excinfo.value) == "Error outputting PDF to 'file'."
