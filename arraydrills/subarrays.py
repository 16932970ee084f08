"""Contiguous subarrays and the largest subarray sum."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


def generate_subarrays(nums: Sequence[int]) -> list[list[int]]:
    """Return every non-empty contiguous subarray, ordered by start then end."""
    return [
        list(nums[start:end])
        for start in range(len(nums))
        for end in range(start + 1, len(nums) + 1)
    ]


def _require_items(nums: Sequence[int], name: str) -> None:
    if not nums:
        raise ValueError(f"{name}() requires a non-empty sequence")


def max_subarray_sum(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray (Kadane's algorithm)."""
    _require_items(nums, "max_subarray_sum")
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return best


def max_subarray_sum_better(nums: Sequence[int]) -> int:
    """Return the largest subarray sum by extending a running sum from each start."""
    _require_items(nums, "max_subarray_sum_better")
    return max(max(accumulate(nums[start:])) for start in range(len(nums)))


def max_subarray_sum_brute(nums: Sequence[int]) -> int:
    """Return the largest subarray sum by summing every subarray separately."""
    _require_items(nums, "max_subarray_sum_brute")
    return max(
        sum(nums[start:end])
        for start in range(len(nums))
        for end in range(start + 1, len(nums) + 1)
    )