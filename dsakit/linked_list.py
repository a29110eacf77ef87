"""A singly linked list with head and tail references, plus sorted merging."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


class EmptyListError(IndexError):
    """Raised when an operation needs at least one element but the list is empty."""


@dataclass(eq=False)
class Node:
    """A single link holding ``data`` and a reference to the next node."""

    data: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps both ends for constant-time appends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        for value in values:
            self.push_back(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first element."""
        node = Node(value, self.head)
        if self.head is None:
            self._tail = node
        self.head = node

    def push_back(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        node = Node(value)
        if self.head is None or self._tail is None:
            self.head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if self.head is None:
            raise EmptyListError("linked list is empty")
        node = self.head
        self.head = node.next
        if self.head is None:
            self._tail = None
        return node.data

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if self.head is None:
            raise EmptyListError("linked list is empty")
        if self.head.next is None:
            value = self.head.data
            self.head = self._tail = None
            return value
        before = self.head
        while before.next is not None and before.next.next is not None:
            before = before.next
        last = before.next
        before.next = None
        self._tail = before
        return last.data if last is not None else None

    def insert(self, value: Any, index: int) -> None:
        """Insert ``value`` so that it ends up at position ``index`` (0-based).

        ``index`` may range from 0 to the current length inclusive.
        """
        if index < 0:
            raise ValueError(f"invalid position {index}")
        if index == 0:
            self.push_front(value)
            return
        before = self.head
        for _ in range(index - 1):
            if before is None or before.next is None:
                raise IndexError(f"position {index} is out of bounds")
            before = before.next
        if before is None or before is self._tail:
            if before is None and index > 1:
                raise IndexError(f"position {index} is out of bounds")
            self.push_back(value)
            return
        before.next = Node(value, before.next)

    def search(self, value: Any) -> int:
        """Return the 0-based index of the first element equal to ``value``, or -1."""
        for index, node in enumerate(self._nodes()):
            if node.data == value:
                return index
        return -1

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: Optional[Node] = None
        current = self.head
        self._tail = current
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self.head = previous

    def middle(self) -> Any:
        """Return the middle element; for an even length, the second of the two."""
        if self.head is None:
            raise EmptyListError("linked list is empty")
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next  # type: ignore[assignment]
            fast = fast.next.next
        return slow.data

    def has_cycle(self) -> bool:
        """True if following ``next`` links from the head ever revisits a node."""
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next  # type: ignore[union-attr]
            fast = fast.next.next
            if slow is fast:
                return True
        return False

    def render(self) -> str:
        """Return the list as ``a->b->...->NULL``."""
        return "".join(f"{value}->" for value in self) + "NULL"

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def merge_sorted(first: LinkedList, second: LinkedList) -> LinkedList:
    """Splice two ascending lists into one ascending list.

    The nodes are moved, not copied: both inputs are left empty. On ties the
    element from ``first`` comes first.
    """
    merged = LinkedList()
    left, right = first.head, second.head
    first.head = first._tail = None
    second.head = second._tail = None

    last: Optional[Node] = None

    def attach(node: Node) -> None:
        nonlocal last
        if last is None:
            merged.head = node
        else:
            last.next = node
        last = node

    while left is not None and right is not None:
        if left.data <= right.data:
            node, left = left, left.next
        else:
            node, right = right, right.next
        node.next = None
        attach(node)

    rest = left if left is not None else right
    if rest is not None:
        attach(rest)
        while last is not None and last.next is not None:
            last = last.next
    merged._tail = last
    return merged