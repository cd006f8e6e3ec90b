"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the link that follows it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that grows at either end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.append(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self.head is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def append(self, content: Any) -> Node:
        """Add content at the end of the list and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def prepend(self, content: Any) -> Node:
        """Add content at the front of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def last(self) -> Optional[Node]:
        """Return the final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call func on every content, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding func applied to every content, in order."""
        return LinkedList(func(content) for content in self)

    def clear(self, release: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, passing each content to release first when given."""
        node = self.head
        while node is not None:
            following = node.next
            if release is not None:
                release(node.content)
            node.next = None
            node = following
        self.head = None