"""Counting inversions and reverse pairs with merge sort."""

from __future__ import annotations

import heapq
from bisect import bisect_right
from collections.abc import Sequence
from itertools import combinations


def _cross_pairs(left: list[int], right: list[int], scale: int) -> int:
    """Count pairs (l, r) with l > scale * r; both halves are sorted."""
    return sum(len(left) - bisect_right(left, scale * value) for value in right)


def _sort_and_count(values: list[int], scale: int) -> tuple[list[int], int]:
    if len(values) <= 1:
        return values, 0
    middle = (len(values) + 1) // 2
    left, left_count = _sort_and_count(values[:middle], scale)
    right, right_count = _sort_and_count(values[middle:], scale)
    cross = _cross_pairs(left, right, scale)
    return list(heapq.merge(left, right)), left_count + right_count + cross


def count_inversions(nums: Sequence[int]) -> int:
    """Return the number of pairs i < j with nums[i] > nums[j]."""
    return _sort_and_count(list(nums), 1)[1]


def count_inversions_brute(nums: Sequence[int]) -> int:
    """Count inversions by checking every pair."""
    return sum(1 for a, b in combinations(nums, 2) if a > b)


def count_reverse_pairs(nums: Sequence[int]) -> int:
    """Return the number of pairs i < j with nums[i] > 2 * nums[j]."""
    return _sort_and_count(list(nums), 2)[1]


def count_reverse_pairs_brute(nums: Sequence[int]) -> int:
    """Count reverse pairs by checking every pair."""
    return sum(1 for a, b in combinations(nums, 2) if a > 2 * b)