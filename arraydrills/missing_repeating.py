"""Finding the repeated and the missing value in a permutation of 1..n."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from typing import NamedTuple


class MissingRepeating(NamedTuple):
    """The value that appears twice and the value that is absent (-1 if none)."""

    repeating: int
    missing: int


def _check_range(nums: Sequence[int]) -> None:
    size = len(nums)
    for value in nums:
        if not 1 <= value <= size:
            raise ValueError(f"value {value} is outside the range 1..{size}")


def find_missing_repeating(nums: Sequence[int]) -> MissingRepeating:
    """Find both values by marking seen positions with a sign flip."""
    _check_range(nums)
    marks = list(nums)
    repeating = -1
    for value in nums:
        index = value - 1
        if marks[index] < 0:
            repeating = value
        else:
            marks[index] = -marks[index]
    missing = next(
        (index + 1 for index, mark in enumerate(marks) if mark > 0), -1
    )
    return MissingRepeating(repeating, missing)


def find_missing_repeating_counting(nums: Sequence[int]) -> MissingRepeating:
    """Find both values by counting occurrences of each value."""
    _check_range(nums)
    counts = Counter(nums)
    repeating = missing = -1
    for value in range(1, len(nums) + 1):
        if counts[value] == 0:
            missing = value
        if counts[value] == 2:
            repeating = value
    return MissingRepeating(repeating, missing)


def find_missing_repeating_brute(nums: Sequence[int]) -> MissingRepeating:
    """Find both values by scanning the sequence once per candidate."""
    repeating = missing = -1
    for value in range(1, len(nums) + 1):
        count = nums.count(value)
        if count == 2:
            repeating = value
        if count == 0:
            missing = value
    return MissingRepeating(repeating, missing)