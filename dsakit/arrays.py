"""Simple operations on flat sequences: search, reversal and extremes."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from operator import itemgetter
from typing import Any, TypeVar

T = TypeVar("T")


def linear_search(values: Sequence[Any], target: Any) -> int:
    """Return the index of the first element equal to ``target``, or -1 if absent."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return -1


def reverse_in_place(values: MutableSequence[Any]) -> None:
    """Reverse ``values`` in place by swapping elements from both ends inwards."""
    start, end = 0, len(values) - 1
    while start < end:
        values[start], values[end] = values[end], values[start]
        start += 1
        end -= 1


def smallest_and_largest(values: Sequence[T]) -> tuple[tuple[T, int], tuple[T, int]]:
    """Return ``((smallest, index), (largest, index))`` for a non-empty sequence.

    When an extreme value occurs more than once, the first position is reported.
    """
    if not values:
        raise ValueError("cannot find extremes of an empty sequence")
    smallest_index, smallest = min(enumerate(values), key=itemgetter(1))
    largest_index, largest = max(enumerate(values), key=itemgetter(1))
    return (smallest, smallest_index), (largest, largest_index)