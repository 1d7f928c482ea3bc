"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os

from treeshell.chars import itoa


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char(c: int | str, fd: int) -> None:
    """Write one character to ``fd``; an int is taken as a byte value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        _write_all(fd, c.encode("utf-8"))
    else:
        _write_all(fd, bytes([int(c) & 0xFF]))


def put_str(s: str | None, fd: int) -> None:
    """Write ``s`` to ``fd``; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8"))


def put_endl(s: str | None, fd: int) -> None:
    """Write ``s`` and a newline to ``fd``; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8") + b"\n")


def put_nbr(n: int, fd: int) -> None:
    """Write the decimal text of a signed 32-bit integer to ``fd``."""
    _write_all(fd, itoa(n).encode("ascii"))