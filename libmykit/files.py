"""Small helpers to create, open, read and measure files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO, Union

PathLike = Union[str, "os.PathLike[str]"]


def create_file(path: PathLike, mode: int = 0o666) -> BinaryIO:
    """Create (or truncate) ``path`` with permission ``mode``, open for writing."""
    fd = os.open(path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, mode)
    return os.fdopen(fd, "wb")


def open_file(path: PathLike) -> BinaryIO:
    """Open ``path`` for reading."""
    return open(path, "rb")


def read_file(path: PathLike) -> str:
    """Return the whole content of ``path`` as text."""
    return Path(path).read_text(encoding="utf-8")


def file_size(path: PathLike) -> int:
    """Return the size of ``path`` in bytes."""
    return os.stat(path).st_size