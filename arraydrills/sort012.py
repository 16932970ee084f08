"""Sorting sequences that hold only the values 0, 1 and 2."""

from __future__ import annotations

from collections import Counter
from collections.abc import MutableSequence, Sequence

_ALLOWED = frozenset((0, 1, 2))


def _check_values(arr: Sequence[int]) -> None:
    for value in arr:
        if value not in _ALLOWED:
            raise ValueError(f"value {value!r} is not 0, 1 or 2")


def sort_012(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place with the Dutch national flag partition."""
    _check_values(arr)
    low = mid = 0
    high = len(arr) - 1
    while mid <= high:
        value = arr[mid]
        if value == 0:
            arr[low], arr[mid] = arr[mid], arr[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        else:
            arr[mid], arr[high] = arr[high], arr[mid]
            high -= 1


def sort_012_counting(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place by counting the 0s, 1s and 2s and rewriting it."""
    _check_values(arr)
    counts = Counter(arr)
    arr[:] = [0] * counts[0] + [1] * counts[1] + [2] * counts[2]