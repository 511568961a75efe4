"""Whole-file and segment file access, and writing to the standard streams."""

from __future__ import annotations

import os
import sys
from typing import TextIO, Union

__all__ = [
    "file_size",
    "read_file",
    "read_segment",
    "std_output",
    "std_output_error",
    "write_file",
    "write_segment",
]

PathLike = Union[str, "os.PathLike[str]"]


def _as_bytes(data: bytes | str) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def read_file(filename: PathLike) -> bytes:
    """Return the whole content of a file.

    A file that does not exist is created empty, and empty content is returned.
    """
    with open(filename, "a+b") as handle:
        handle.seek(0)
        return handle.read()


def write_file(filename: PathLike, data: bytes | str) -> None:
    """Replace the content of a file, creating it if needed."""
    with open(filename, "wb") as handle:
        handle.write(_as_bytes(data))


def file_size(filename: PathLike) -> int:
    """Size of a file in bytes; 0 when it cannot be reached."""
    try:
        return os.path.getsize(filename)
    except OSError:
        return 0


def read_segment(filename: PathLike, offset: int, size: int) -> bytes:
    """Read up to ``size`` bytes starting at ``offset``.

    An offset past the end of the file gives empty content.
    """
    if offset < 0 or size < 0:
        raise ValueError("offset and size must not be negative")
    with open(filename, "rb") as handle:
        total = os.fstat(handle.fileno()).st_size
        if offset > total:
            return b""
        handle.seek(offset)
        return handle.read(min(size, total - offset))


def write_segment(filename: PathLike, data: bytes | str, offset: int) -> None:
    """Overwrite an existing file at ``offset`` without truncating it."""
    if offset < 0:
        raise ValueError("offset must not be negative")
    with open(filename, "r+b") as handle:
        handle.seek(offset)
        handle.write(_as_bytes(data))


def _write(stream: TextIO, text: bytes | str) -> None:
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("utf-8", errors="replace")
    stream.write(text)
    stream.flush()


def std_output(text: bytes | str) -> None:
    """Write text to standard output."""
    _write(sys.stdout, text)


def std_output_error(text: bytes | str) -> None:
    """Write text to standard error."""
    _write(sys.stderr, text)