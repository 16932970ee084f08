"""Fundamental array routines: sorting, searching and order statistics."""

from __future__ import annotations

import math
from collections.abc import MutableSequence, Sequence

_NOT_FOUND = -1


def selection_sort(nums: MutableSequence[int]) -> None:
    """Sort ``nums`` in place by repeatedly selecting the smallest remaining item."""
    size = len(nums)
    for start in range(size - 1):
        smallest = min(range(start, size), key=nums.__getitem__)
        if smallest != start:
            nums[start], nums[smallest] = nums[smallest], nums[start]


def largest_element(nums: Sequence[int]) -> int:
    """Return the largest value in ``nums``."""
    if not nums:
        raise ValueError("largest_element() requires a non-empty sequence")
    largest = nums[0]
    for value in nums:
        if value > largest:
            largest = value
    return largest


def linear_search(nums: Sequence[int], target: int) -> int:
    """Return the index of the first occurrence of ``target``, or -1."""
    return next(
        (index for index, value in enumerate(nums) if value == target),
        _NOT_FOUND,
    )


def max_consecutive_ones(nums: Sequence[int]) -> int:
    """Return the length of the longest run of 1s; only a 0 breaks a run."""
    best = run = 0
    for value in nums:
        if value == 1:
            run += 1
        best = max(best, run)
        if value == 0:
            run = 0
    return best


def second_largest(nums: Sequence[int]) -> int:
    """Return the second largest distinct value, or -1 if there is none."""
    if len(nums) < 2:
        return _NOT_FOUND
    first = second = -math.inf
    for value in nums:
        if value > first:
            first, second = value, first
        elif second < value < first:
            second = value
    return _NOT_FOUND if second == -math.inf else second


def third_largest(nums: Sequence[int]) -> int:
    """Return the third largest distinct value, or -1 if there is none."""
    if len(nums) < 3:
        return _NOT_FOUND
    first = second = third = -math.inf
    for value in nums:
        if value > first:
            first, second, third = value, first, second
        elif second < value < first:
            second, third = value, second
        elif third < value < second:
            third = value
    return _NOT_FOUND if third == -math.inf else third