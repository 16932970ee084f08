"""Finding an element that occurs in more than half of a sequence."""

from __future__ import annotations

from collections.abc import Sequence

_NOT_FOUND = -1


def majority_element(nums: Sequence[int]) -> int:
    """Return the majority element using Moore's voting, or -1 if none exists."""
    count = 0
    candidate = None
    for value in nums:
        if count == 0:
            candidate, count = value, 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if candidate is not None and nums.count(candidate) > len(nums) // 2:
        return candidate
    return _NOT_FOUND


def majority_element_brute(nums: Sequence[int]) -> int:
    """Return the majority element by counting each value, or -1 if none exists."""
    half = len(nums) // 2
    return next((value for value in nums if nums.count(value) > half), _NOT_FOUND)