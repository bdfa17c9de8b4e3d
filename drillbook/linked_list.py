"""A singly linked list of integers that can be reversed in place."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class Node:
    """One cell of a linked list."""

    data: int
    next: Node | None = None


class LinkedList:
    """Singly linked list built from an iterable, in the given order."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        self._size = 0
        tail: Node | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def reverse(self) -> None:
        """Reverse the links in place, so the last node becomes the head."""
        previous: Node | None = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self.head = previous

    def __iter__(self) -> Iterator[int]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"