"""Enumeration of fixed-size index subsets of a sequence."""

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def combinations(elements: Sequence[T], length: int) -> list[list[T]]:
    """Return every `length`-element subset of `elements`, chosen by position.

    Subsets are produced in lexicographic order of their index tuples and keep the
    original element order.  Equal elements at different positions are distinct, so
    `combinations("aab", 2)` contains `["a", "b"]` twice.

    Args:
        elements: The sequence to choose from.
        length: Number of elements in each subset.

    Returns:
        A list of `C(len(elements), length)` subsets, or an empty list when `length`
        is not in `[1, len(elements)]`.
    """
    size = len(elements)
    if length <= 0 or length > size:
        return []

    subsets: list[list[T]] = []
    indices = list(range(length))
    last = length - 1

    while True:
        subsets.append([elements[i] for i in indices])

        # Fast path: advance the rightmost index while it stays in range
        if indices[last] < size - 1:
            indices[last] += 1
            continue

        # Find the rightmost index that can still move without colliding with its right
        # neighbours; index `i` may advance while indices[i] < size - (length - i)
        pos = last - 1
        while pos >= 0 and indices[pos] == size - (length - pos):
            pos -= 1
        if pos < 0:
            return subsets

        indices[pos] += 1
        for offset, i in enumerate(range(pos + 1, length), start=1):
            indices[i] = indices[pos] + offset
