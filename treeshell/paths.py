"""Locating executables through the PATH variable."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping, Sequence

from treeshell.strings import split


def is_path(command: str | None) -> bool:
    """True when ``command`` contains a slash."""
    return command is not None and "/" in command


def check_paths(paths: Iterable[str] | None, words: Sequence[str] | None) -> str | None:
    """Return the executable for the command in ``words[0]``, or None.

    A command holding a slash is checked as given; otherwise each directory
    of ``paths`` is tried in order.
    """
    if not words:
        return None
    command = words[0]
    if is_path(command):
        return command if os.access(command, os.X_OK) else None
    for directory in paths or ():
        candidate = f"{directory}/{command}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def extract_paths(environ: Mapping[str, str] | Iterable[str] | None) -> list[str] | None:
    """Directories listed in PATH, from a mapping or ``KEY=VALUE`` strings."""
    if environ is None:
        return None
    if isinstance(environ, Mapping):
        entries: Iterable[str] = (f"{key}={value}" for key, value in environ.items())
    else:
        entries = environ
    for entry in entries:
        if entry.startswith("PATH="):
            return split(entry[len("PATH="):], ":")
    return None