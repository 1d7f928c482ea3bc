"""String helpers with the semantics of the classic C string routines.

Positions are returned as indices rather than pointers, and functions that
fill a caller's buffer in C return the new string instead.
"""

from __future__ import annotations

from collections.abc import Callable
from itertools import islice, zip_longest

_NUL = "\0"


def _as_char(c: int | str) -> str:
    """Return ``c`` as a one-character string; ints are taken as character codes."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _c_string(s: str) -> str:
    """Return ``s`` up to its first NUL, as C would see it."""
    return s.partition(_NUL)[0]


def split(s: str | None, separators: str) -> list[str] | None:
    """Split ``s`` on any of the characters in ``separators``, dropping empty words.

    Returns None when ``s`` is None or empty, matching the source's NULL result.
    """
    if not s:
        return None
    words: list[str] = []
    current: list[str] = []
    for ch in s:
        if ch in separators:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        words.append("".join(current))
    return words


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first ``c`` in ``s``; a NUL ``c`` gives ``len(s)``; None if absent."""
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last ``c`` in ``s``; a NUL ``c`` gives ``len(s)``; None if absent."""
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """Concatenate two strings; a missing one is skipped, both missing gives None."""
    if s1 is None and s2 is None:
        return None
    return (s1 or "") + (s2 or "")


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting string and the length the C routine reports: the
    length it tried to create, or ``len(src) + size`` when ``dst`` already
    fills the buffer.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dst, len(src)
    if len(dst) >= size:
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copied string (at most ``size - 1`` characters) and ``len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    return src[: max(size - 1, 0)], len(src)


def strmapi(s: str | None, func: Callable[[int, str], str] | None) -> str | None:
    """Build a new string from ``func(index, char)`` for every character of ``s``."""
    if s is None or func is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s: str | None, func: Callable[[int, str], str | None] | None) -> str | None:
    """Call ``func(index, char)`` on every character of ``s``.

    Where ``func`` returns a character it replaces the original; where it
    returns None the character is kept. Returns the resulting string.
    """
    if s is None or func is None:
        return s
    result = []
    for index, ch in enumerate(s):
        replacement = func(index, ch)
        result.append(ch if replacement is None else replacement)
    return "".join(result)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch."""
    pairs = zip_longest(_c_string(s1), _c_string(s2), fillvalue=_NUL)
    for a, b in islice(pairs, max(n, 0)):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str | None, needle: str, limit: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``limit`` characters, or None."""
    if haystack is None:
        if limit == 0:
            return None
        raise TypeError("haystack must be a string")
    if not needle:
        return 0
    index = haystack.find(needle, 0, max(limit, 0))
    return None if index < 0 else index


def strtrim(s: str | None, chars: str | None) -> str | None:
    """Strip any of ``chars`` from both ends of ``s``; None ``chars`` returns a copy."""
    if s is None:
        return None
    if chars is None:
        return s
    return s.strip(chars)


def substr(s: str | None, start: int, length: int) -> str | None:
    """Return at most ``length`` characters of ``s`` from ``start``; "" past the end."""
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]