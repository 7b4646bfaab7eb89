"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

__all__ = ["Node", "LinkedList"]


@dataclass(eq=False)
class Node:
    """One link of a list: a value and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that grows at either end."""

    def __init__(self) -> None:
        self.head: Optional[Node] = None

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: Any) -> Node:
        """Put a new node holding ``content`` at the front and return it."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Put a new node holding ``content`` at the back and return it."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every node, passing each value to ``delete`` first when given."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None

    def iterate(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on every value, front to back."""
        for content in self:
            func(content)