"""A singly linked list of arbitrary data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a LinkedList; nodes compare by identity."""

    data: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list with an exposed head node."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, data: Any) -> Node:
        """Insert data at the front and return its node."""
        node = Node(data, self.head)
        self.head = node
        return node

    def push_back(self, data: Any) -> Node:
        """Append data at the end and return its node."""
        node = Node(data)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.data

    def remove(self, node: Optional[Node]) -> bool:
        """Unlink node from the list; return whether it was found."""
        if node is None or self.head is None:
            return False
        if self.head is node:
            self.head = node.next
            node.next = None
            return True
        for current in self._nodes():
            if current.next is node:
                current.next = node.next
                node.next = None
                return True
        return False

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, passing each item to delete first if given."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.data)
            node.next = None
            node = following

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call func on every item in order."""
        for data in self:
            func(data)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """Return a new list of func applied to every item.

        If func raises, the items already produced are passed to delete
        and the error propagates.
        """
        result = LinkedList()
        try:
            for data in self:
                result.push_back(func(data))
        except Exception:
            result.clear(delete)
            raise
        return result

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"