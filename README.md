# treeshell

`treeshell` reads a shell command line and turns it into a binary tree.
Operators (`|`, `||`, `&&`, `>`, `>>`, `<`, `<<`) are the inner nodes, and
commands and file names are the leaves. The words of each node are split out
on spaces and tabs. Each command is then looked up in the directories named
by `PATH`.

## Installing

```
pip install .
```

## Command line

```
treeshell
```

The command shows the prompt `$>` and reads a line. If the line is empty, or
its double quotes are not balanced, it reads more lines and joins them on
without a separator. It then prints two things:

- the segments the line was cut into, each followed by a comma;
- the tree in order: the left subtree, then the node, then the right subtree.

For each node it prints the text, the numeric node type, the node's words
and, for command nodes, the resolved path. An operator without a type, such
as `<<`, is shown as `-1`. If input ends before a complete command, the exit
status is 1.

## Library use

```python
from treeshell.cli import parse
from treeshell.tree import split_tree, add_paths_to_tree, format_tree
from treeshell.paths import extract_paths

tree = parse("ls -l | wc -l")
split_tree(tree)
add_paths_to_tree(tree, extract_paths(["PATH=/bin:/usr/bin"]))
print(format_tree(tree))
```

The tree's root is the last operator on the line. Each operator's left child
is the operator before it, and its right child is the segment after it. The
first segment hangs on the left of the first operator. A line with no
operators becomes a single node of type `NodeType.FILECOMMAND`.

The right operand of `>`, `>>` and `<` is a `NodeType.FILE` node. Every other
operand is a `NodeType.COMMAND` node. After `<`, only the first word is kept
as the file segment.

### Modules

- `treeshell.cli`: `read_command(reader)`, `parse(text)` and `main(argv=None)`.
- `treeshell.ops`: `quotes_balanced`, `find_operator`, `find_any`,
  `match_operator`, `count_operators`, `extract_operators`, `split_segments`
  and the `ALL_OPERATORS` tuple. An operator only counts when the text after
  it has balanced double quotes.
- `treeshell.tree`: `Node`, `NodeType`, `node_type_of`, `is_file_type`,
  `build_tree`, `split_tree`, `add_paths_to_tree`, `format_words` and
  `format_tree`.
- `treeshell.paths`: `is_path`, `check_paths` and `extract_paths`.
  `extract_paths` takes a mapping or `KEY=VALUE` strings.
- `treeshell.strings`: string routines (`split`, `strchr`, `strrchr`,
  `strjoin`, `strlcat`, `strlcpy`, `strmapi`, `striteri`, `strncmp`,
  `strnstr`, `strtrim`, `substr`). They return indices and new strings.
- `treeshell.chars`: `atoi`, `itoa`, and the ASCII classification and
  case-mapping helpers.
- `treeshell.memory`: `bytearray` operations (`memset`, `bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy`, `memmove`).
- `treeshell.linkedlist`: `LinkedList`, which supports delete callbacks on
  removal.
- `treeshell.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, which
  write to file descriptors.

## What it does not do

`treeshell` is a parser, not a working shell. It does not run commands,
open or create redirection files, or read here-documents. It does not expand
variables or quotes, and it keeps no history. It parses one command line per
run and then exits.

## Running the tests

```
pip install .[test]
pytest
```