"""A singly linked sequence of arbitrary contents with delete callbacks."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from typing import Any


class LinkedList:
    """An ordered collection that supports adding at both ends.

    Removal hands each removed content to an optional ``delete`` callback,
    so owners can release whatever the content holds.
    """

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(contents)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return list(self._items) == list(other._items)

    def push_front(self, content: Any) -> None:
        """Insert ``content`` before the first element."""
        self._items.appendleft(content)

    def push_back(self, content: Any) -> None:
        """Append ``content`` after the last element."""
        self._items.append(content)

    def last(self) -> Any:
        """Return the content of the last element, or None when empty."""
        return self._items[-1] if self._items else None

    def pop_front(self, delete: Callable[[Any], Any] | None = None) -> Any:
        """Remove the first element, pass its content to ``delete`` and return it.

        Raises IndexError when the list is empty.
        """
        if not self._items:
            raise IndexError("pop from an empty list")
        content = self._items.popleft()
        if delete is not None:
            delete(content)
        return content

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every element in order, passing each content to ``delete``."""
        while self._items:
            content = self._items.popleft()
            if delete is not None:
                delete(content)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content in order."""
        for content in self._items:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> LinkedList:
        """Return a new list of ``func(content)`` for every content.

        If ``func`` yields None for any element, the contents mapped so far
        are passed to ``delete`` and ValueError is raised.
        """
        mapped = LinkedList()
        for content in self._items:
            result = func(content)
            if result is None:
                mapped.clear(delete)
                raise ValueError(f"mapping produced no value for {content!r}")
            mapped.push_back(result)
        return mapped