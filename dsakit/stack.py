"""A fixed-capacity last-in, first-out stack."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class StackOverflow(IndexError):
    """Raised when pushing onto a full stack."""


class StackUnderflow(IndexError):
    """Raised when reading from or popping an empty stack."""


class BoundedStack:
    """A stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raise :class:`StackOverflow` if the stack is full."""
        if self.is_full():
            raise StackOverflow(f"stack of capacity {self.capacity} is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item; raise :class:`StackUnderflow` if empty."""
        if self.is_empty():
            raise StackUnderflow("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it; raise :class:`StackUnderflow` if empty."""
        if self.is_empty():
            raise StackUnderflow("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, items={self._items!r})"