"""Delivery of merged documents in the supported output modes."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Union

from fastapi.responses import Response

from .exceptions import OutputError
from .utils import PathLike, ensure_path

LOGGER = logging.getLogger("pdfmerger.output")

PDF_MEDIA_TYPE = "application/pdf"


class OutputMode(str, Enum):
    """Where a merged document goes once it is composed."""

    FILE = "F"
    DOWNLOAD = "D"
    STRING = "S"
    INLINE = "I"


_MODE_NAMES = {
    "file": OutputMode.FILE,
    "download": OutputMode.DOWNLOAD,
    "string": OutputMode.STRING,
}


def mode_name(mode: Union[str, OutputMode]) -> str:
    """Return the descriptive name of *mode* for messages."""

    if isinstance(mode, OutputMode):
        return mode.name.lower()
    return str(mode)


def resolve_mode(mode: Union[str, OutputMode]) -> OutputMode:
    """Map a descriptive mode name onto an :class:`OutputMode`.

    Unknown names, ``"browser"`` included, fall back to inline display.
    """

    if isinstance(mode, OutputMode):
        return mode
    return _MODE_NAMES.get(str(mode).strip().lower(), OutputMode.INLINE)


def _pdf_response(data: bytes, filename: str, disposition: str) -> Response:
    return Response(
        content=data,
        media_type=PDF_MEDIA_TYPE,
        headers={"Content-Disposition": f'{disposition}; filename="{filename}"'},
    )


def write_output(
    data: bytes,
    mode: Union[str, OutputMode],
    output_path: PathLike,
) -> Union[Path, bytes, Response]:
    """Deliver *data* according to *mode*.

    ``file`` writes to *output_path* and returns the path, ``string``
    returns the bytes, ``download`` and inline display return a
    :class:`fastapi.responses.Response` whose disposition header carries
    the file name of *output_path*.

    Raises:
        OutputError: If the document cannot be delivered.
    """

    resolved = resolve_mode(mode)
    try:
        if resolved is OutputMode.STRING:
            return bytes(data)
        if resolved is OutputMode.FILE:
            path = ensure_path(output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("wb") as handle:
                handle.write(data)
            LOGGER.info("Wrote merged PDF to %s", path)
            return path

        filename = Path(output_path).name
        disposition = "attachment" if resolved is OutputMode.DOWNLOAD else "inline"
        return _pdf_response(data, filename, disposition)
    except Exception as exc:
        LOGGER.error("Failed to output merged PDF to %s: %s", mode, exc)
        raise OutputError(mode_name(mode)) from exc


__all__ = ["OutputMode", "PDF_MEDIA_TYPE", "mode_name", "resolve_mode", "write_output"]
