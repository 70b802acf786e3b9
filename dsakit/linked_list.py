"""Singly linked list with reversal, rotation and odd/even regrouping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    next: Optional[_Node] = None


class LinkedList:
    """A singly linked list of arbitrary values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        new = _Node(value)
        if self._head is None:
            self._head = new
        else:
            tail = self._head
            while tail.next is not None:
                tail = tail.next
            tail.next = new
        self._size += 1

    def push_front(self, value: Any) -> None:
        """Add ``value`` at the start of the list."""
        self._head = _Node(value, self._head)
        self._size += 1

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``.

        Raises ValueError when the list is empty or the value is absent.
        """
        if self._head is None:
            raise ValueError("remove from an empty list")
        previous: Optional[_Node] = None
        node: Optional[_Node] = self._head
        while node is not None and node.value != value:
            previous, node = node, node.next
        if node is None:
            raise ValueError(f"{value!r} not found in list")
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        self._size -= 1

    def __contains__(self, value: Any) -> bool:
        return any(node.value == value for node in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def __len__(self) -> int:
        return self._size

    def reverse(self) -> None:
        """Reverse the list in place; raises ValueError when it is empty."""
        if self._head is None:
            raise ValueError("reverse of an empty list")
        previous: Optional[_Node] = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = previous
            previous, node = node, following
        self._head = previous

    def rotate_last_k(self, k: int) -> None:
        """Move the last ``k`` nodes, in order, to the front of the list.

        ``k`` must satisfy 0 <= k < len(self).
        """
        if not 0 <= k < self._size:
            raise ValueError(f"k must be in [0, {self._size}), got {k}")
        if k == 0:
            return
        fast = self._head
        for _ in range(k):
            fast = fast.next
        slow = self._head
        while fast.next is not None:
            fast = fast.next
            slow = slow.next
        fast.next = self._head
        self._head = slow.next
        slow.next = None

    def odd_even_rearrange(self) -> None:
        """Regroup nodes: 1st, 3rd, 5th, ... followed by 2nd, 4th, ...."""
        if self._size < 2:
            return
        odd = self._head
        even_head = even = odd.next
        while even is not None and even.next is not None:
            odd.next = even.next
            odd = odd.next
            even.next = odd.next
            even = even.next
        odd.next = even_head

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"