"""Byte-buffer operations over bytearray objects."""

from __future__ import annotations

_SIZE_MAX = (1 << 64) - 1


def _check_span(buf: bytes | bytearray, n: int, offset: int = 0) -> None:
    if n < 0 or offset < 0 or offset + n > len(buf):
        raise IndexError(
            f"span of {n} bytes at offset {offset} exceeds buffer of {len(buf)}"
        )


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``."""
    _check_span(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buf``."""
    return memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises OverflowError when the total size does not fit in a 64-bit size.
    """
    if count != 0 and _SIZE_MAX // count < size:
        raise OverflowError(f"{count} * {size} bytes overflows the size range")
    return bytearray(count * size)


def memchr(buf: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _check_span(buf, n)
    index = buf.find(c & 0xFF, 0, n)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first differing pair, or 0."""
    _check_span(a, n)
    _check_span(b, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    _check_span(dst, n)
    _check_span(src, n)
    dst[:n] = src[:n]
    return dst


def memmove(dst: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``dst`` from ``src_offset`` to ``dst_offset``; overlap is safe."""
    _check_span(dst, n, dst_offset)
    _check_span(dst, n, src_offset)
    dst[dst_offset:dst_offset + n] = dst[src_offset:src_offset + n]
    return dst