"""Utility helpers shared by :mod:`pdfmerger` modules."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def ensure_path(path: PathLike) -> Path:
    """Return a :class:`~pathlib.Path` instance for *path*.

    User-home references are expanded and relative paths are resolved
    against the current working directory.
    """

    resolved = Path(path).expanduser()
    try:
        return resolved.resolve(strict=False)
    except FileNotFoundError:  # pragma: no cover - defensive
        return resolved


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    return logger


__all__ = ["PathLike", "ensure_path", "get_logger"]
