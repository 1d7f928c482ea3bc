"""The syntax tree of operators, commands and files."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from treeshell.paths import check_paths
from treeshell.strings import split


class NodeType(IntEnum):
    """Kinds of tree nodes."""

    PIPE = 0
    IREDIRECTION = 1
    APPEND = 2
    OREDIRECTION = 3
    HEREDOC = 4
    AND = 5
    OR = 6
    COMMAND = 7
    FILE = 8
    FILECOMMAND = 9


_OPERATOR_TYPES = {
    "|": NodeType.PIPE,
    "||": NodeType.OR,
    "&&": NodeType.AND,
    ">": NodeType.OREDIRECTION,
    ">>": NodeType.APPEND,
    "<": NodeType.OREDIRECTION,
}

_UNKNOWN_TYPE = -1


@dataclass(eq=False)
class Node:
    """One node of the tree: an operator, a command or a file."""

    data: str
    type: NodeType | None
    left: Node | None = None
    right: Node | None = None
    parent: Node | None = field(default=None, repr=False)
    path: str | None = None
    words: list[str] | None = None


def node_type_of(op: str) -> NodeType | None:
    """Node type for an operator, or None for one without a type."""
    return _OPERATOR_TYPES.get(op)


def is_file_type(node_type: NodeType | None) -> bool:
    """True for operators whose right operand names a file."""
    return node_type in (NodeType.IREDIRECTION, NodeType.APPEND, NodeType.OREDIRECTION)


def build_tree(segments: Sequence[str], operators: Sequence[str] | None) -> Node:
    """Build the tree for ``segments`` separated by ``operators``.

    The last operator is the root; each operator's left child is the one
    before it and its right child the segment after it. The first segment
    hangs on the left of the first operator.
    """
    ops = list(operators or ())
    segs = list(segments)
    if len(segs) != len(ops) + 1:
        raise ValueError(
            f"{len(ops)} operators need {len(ops) + 1} segments, got {len(segs)}"
        )
    if not ops:
        return Node(segs[0], NodeType.FILECOMMAND)

    head: Node | None = None
    deepest: Node | None = None
    for op in reversed(ops):
        node = Node(op, node_type_of(op), parent=deepest)
        if deepest is None:
            head = node
        else:
            deepest.left = node
        deepest = node
    assert head is not None and deepest is not None

    current: Node | None = head
    for segment in reversed(segs[1:]):
        assert current is not None
        kind = NodeType.FILE if is_file_type(current.type) else NodeType.COMMAND
        current.right = Node(segment, kind, parent=current)
        current = current.left

    kind = NodeType.FILE if deepest.type == NodeType.IREDIRECTION else NodeType.COMMAND
    deepest.left = Node(segs[0], kind, parent=deepest)
    return head


def _walk(tree: Node | None) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.left, node.right) if child is not None)


def split_tree(tree: Node | None) -> None:
    """Split the text of every node into words on spaces and tabs."""
    for node in _walk(tree):
        node.words = split(node.data, " \t")


def add_paths_to_tree(tree: Node | None, paths: Iterable[str] | None) -> None:
    """Resolve the executable of every command node."""
    directories = list(paths) if paths is not None else None
    for node in _walk(tree):
        if node.type == NodeType.COMMAND:
            node.path = check_paths(directories, node.words)


def format_words(words: Sequence[str] | None) -> str:
    """Words each followed by a comma, then a newline."""
    if words is None:
        return "double pointer is NULL\n\n"
    return "".join(f"{word}," for word in words) + "\n"


def format_tree(tree: Node | None) -> str:
    """Describe every node, left subtree first, then the node, then the right."""
    if tree is None:
        return ""
    kind = _UNKNOWN_TYPE if tree.type is None else int(tree.type)
    parts = [
        format_tree(tree.left),
        f"{tree.data} {kind}        double :",
        format_words(tree.words),
    ]
    if tree.type == NodeType.COMMAND:
        parts.append(f"      path : {tree.path if tree.path is not None else '(null)'}")
    parts.append("\nnext\n")
    parts.append(format_tree(tree.right))
    return "".join(parts)