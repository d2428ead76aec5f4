"""A singly linked list of arbitrary items."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(slots=True)
class _Node:
    content: Any
    next: Optional[_Node] = None


class LinkedList:
    """A singly linked list with constant-time insertion at both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def push_front(self, item: Any) -> None:
        """Insert ``item`` at the front of the list."""
        node = _Node(item, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, item: Any) -> None:
        """Append ``item`` at the end of the list."""
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Any:
        """The item at the end of the list."""
        if self._tail is None:
            raise IndexError("last of an empty list")
        return self._tail.content

    def remove_first(self, release: Optional[Callable[[Any], Any]] = None) -> Any:
        """Unlink the first item, pass it to ``release`` if given, and return it."""
        node = self._head
        if node is None:
            raise IndexError("remove from an empty list")
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        if release is not None:
            release(node.content)
        return node.content

    def clear(self, release: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every item, front to back, passing each to ``release`` if given."""
        while self._head is not None:
            self.remove_first(release)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every item, front to back."""
        for item in self:
            func(item)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """A new list holding ``func(item)`` for every item, in order."""
        return LinkedList(func(item) for item in self)