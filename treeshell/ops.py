"""Operator detection and splitting of a command line into segments."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

ALL_OPERATORS: tuple[str, ...] = (">>", "<<", ">", "<", "||", "|", "&&")
"""Operators in the order they are tried; longer forms come first."""

_BLANKS = " \t"


def quotes_balanced(s: str | None) -> bool:
    """True when ``s`` holds an even number of double quotes; None is never balanced."""
    if s is None:
        return False
    return s.count('"') % 2 == 0


def find_operator(haystack: str | None, needle: str, limit: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``limit`` characters.

    A match only counts when the text after it has balanced double quotes,
    so operators inside an open quotation are skipped.
    """
    if haystack is None:
        if limit == 0:
            return None
        raise TypeError("haystack must be a string")
    if not needle:
        return 0
    if len(needle) > len(haystack):
        return None
    start = 0
    while (index := haystack.find(needle, start)) >= 0 and index + len(needle) <= limit:
        if quotes_balanced(haystack[index + len(needle):]):
            return index
        start = index + 1
    return None


def find_any(s: str, chars: str) -> int:
    """Index of the first character of ``s`` found in ``chars``, or ``len(s)``."""
    return next((index for index, ch in enumerate(s) if ch in chars), len(s))


def match_operator(s: str, ops: Sequence[str]) -> int | None:
    """Index in ``ops`` of the first operator that ``s`` starts with, or None."""
    for index, op in enumerate(ops):
        if find_operator(s, op, len(op)) is not None:
            return index
    return None


def _scan(s: str, ops: Sequence[str]) -> Iterator[str]:
    pos = 0
    while pos < len(s):
        index = match_operator(s[pos:], ops)
        if index is None:
            pos += 1
        else:
            yield ops[index]
            pos += len(ops[index])


def count_operators(s: str, ops: Sequence[str]) -> int:
    """Number of operators from ``ops`` that occur in ``s``."""
    return sum(1 for _ in _scan(s, ops))


def extract_operators(s: str) -> list[str] | None:
    """Operators of ``s`` in order of appearance, or None when there are none."""
    return list(_scan(s, ALL_OPERATORS)) or None


def split_segments(command: str, ops: Sequence[str] | None) -> list[str]:
    """Cut ``command`` at each operator of ``ops`` in turn.

    For ``<`` only the first word after the operator is kept as a segment.
    The text left after the last operator is always the final segment.
    """
    if not ops:
        return [command]
    segments: list[str] = []
    for op in ops:
        index = find_operator(command, op, len(command))
        if index is None:
            continue
        if op == "<":
            command = command[index + 1:].lstrip(_BLANKS)
            word = command[:find_any(command, _BLANKS)]
            segments.append(word)
            command = command[len(word):]
        else:
            segments.append(command[:index])
            command = command[index + len(op):]
    segments.append(command)
    return segments