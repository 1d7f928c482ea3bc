"""Reading a command line, parsing it into a tree and printing the tree."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable, Sequence

from treeshell.ops import extract_operators, quotes_balanced, split_segments
from treeshell.paths import extract_paths
from treeshell.tree import Node, add_paths_to_tree, build_tree, format_tree, format_words, split_tree

PROMPT = "$>"


def read_command(reader: Callable[[str], str | None]) -> str:
    """Read lines from ``reader`` until they form a non-empty, quote-balanced command.

    Lines are joined without separators. Raises EOFError when input ends first.
    """
    phrase: str | None = None
    while not quotes_balanced(phrase) or phrase == "":
        line = reader(PROMPT)
        if line is None:
            raise EOFError("input ended before a complete command")
        phrase = line if phrase is None else phrase + line
    assert phrase is not None
    return phrase


def _parse(text: str) -> tuple[list[str], Node]:
    operators = extract_operators(text)
    segments = split_segments(text, operators)
    return segments, build_tree(segments, operators)


def parse(text: str) -> Node:
    """Parse a command line into its tree."""
    return _parse(text)[1]


def main(argv: Sequence[str] | None = None) -> int:
    """Read one command, then print its segments and its resolved tree."""
    parser = argparse.ArgumentParser(
        prog="treeshell", description="Parse one command line into a tree."
    )
    parser.parse_args(argv)

    paths = extract_paths(os.environ)
    try:
        text = read_command(input)
    except EOFError:
        return 1
    segments, tree = _parse(text)
    sys.stdout.write(format_words(segments))
    split_tree(tree)
    add_paths_to_tree(tree, paths)
    sys.stdout.write(format_tree(tree))
    return 0