import pytest

from treeshell.tree import (
    Node,
    NodeType,
    add_paths_to_tree,
    build_tree,
    format_tree,
    format_words,
    is_file_type,
    node_type_of,
    split_tree,
)


@pytest.mark.parametrize(
    "op, expected",
    [
        ("|", NodeType.PIPE),
        ("||", NodeType.OR),
        ("&&", NodeType.AND),
        (">", NodeType.OREDIRECTION),
        (">>", NodeType.APPEND),
        ("<", NodeType.OREDIRECTION),
        ("<<", None),
    ],
)
def test_node_type_of(op, expected):
    assert node_type_of(op) is expected


def test_is_file_type():
    assert is_file_type(NodeType.APPEND) is True
    assert is_file_type(NodeType.OREDIRECTION) is True
    assert is_file_type(NodeType.IREDIRECTION) is True
    assert is_file_type(NodeType.PIPE) is False
    assert is_file_type(None) is False


def test_single_segment_tree():
    tree = build_tree(["ls -l"], None)
    assert tree.data == "ls -l"
    assert tree.type is NodeType.FILECOMMAND
    assert tree.left is None and tree.right is None


def test_pipe_tree():
    tree = build_tree(["a ", " b"], ["|"])
    assert tree.data == "|"
    assert tree.type is NodeType.PIPE
    assert tree.right.data == " b"
    assert tree.right.type is NodeType.COMMAND
    assert tree.left.data == "a "
    assert tree.left.type is NodeType.COMMAND
    assert tree.left.parent is tree and tree.right.parent is tree


def test_two_operator_tree():
    tree = build_tree(["a", "b", "c"], ["|", ">"])
    assert tree.data == ">"
    assert tree.right.data == "c"
    assert tree.right.type is NodeType.FILE
    inner = tree.left
    assert inner.data == "|"
    assert inner.parent is tree
    assert inner.right.data == "b"
    assert inner.right.type is NodeType.COMMAND
    assert inner.left.data == "a"
    assert inner.left.type is NodeType.COMMAND


def test_build_tree_rejects_mismatch():
    with pytest.raises(ValueError):
        build_tree(["a"], ["|"])
    with pytest.raises(ValueError):
        build_tree(["a", "b"], None)


def test_split_tree_sets_words():
    tree = build_tree(["ls -l ", " wc\t-c"], ["|"])
    split_tree(tree)
    assert tree.words == ["|"]
    assert tree.left.words == ["ls", "-l"]
    assert tree.right.words == ["wc", "-c"]


def test_add_paths_to_tree(tmp_path):
    tool = tmp_path / "tool"
    tool.write_text("#!/bin/sh\n")
    tool.chmod(0o755)
    tree = build_tree(["tool x", "missing", "out"], ["|", ">"])
    split_tree(tree)
    add_paths_to_tree(tree, [str(tmp_path)])
    assert tree.left.left.path == f"{tmp_path}/tool"
    assert tree.left.right.path is None
    assert tree.right.path is None
    assert tree.path is None


def test_format_words():
    assert format_words(None) == "double pointer is NULL\n\n"
    assert format_words(["a", "b"]) == "a,b,\n"
    assert format_words([]) == "\n"


def test_format_tree_visits_every_node_in_order():
    tree = build_tree(["first", "second"], ["|"])
    split_tree(tree)
    text = format_tree(tree)
    assert text.count("\nnext\n") == 3
    assert text.index("first") < text.index("|") < text.index("second")
    assert text.count("path : (null)") == 2


def test_format_tree_unknown_type_and_empty():
    assert format_tree(None) == ""
    node = Node("<<", None)
    assert format_tree(node).startswith("<< -1 ")