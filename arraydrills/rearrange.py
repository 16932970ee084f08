"""Rearranging a sequence so that signs alternate, starting positive."""

from __future__ import annotations

from collections.abc import Sequence


def _check_balanced(nums: Sequence[int]) -> None:
    positives = sum(1 for value in nums if value > 0)
    if 2 * positives != len(nums):
        raise ValueError("nums must hold equally many positive and non-positive values")


def rearrange_by_sign(nums: Sequence[int]) -> list[int]:
    """Place positives at even and the rest at odd positions, keeping their order."""
    _check_balanced(nums)
    result = [0] * len(nums)
    positive_slot, negative_slot = 0, 1
    for value in nums:
        if value > 0:
            result[positive_slot] = value
            positive_slot += 2
        else:
            result[negative_slot] = value
            negative_slot += 2
    return result


def rearrange_by_sign_split(nums: Sequence[int]) -> list[int]:
    """Split by sign, then interleave the two groups starting with a positive."""
    _check_balanced(nums)
    positives = [value for value in nums if value > 0]
    negatives = [value for value in nums if value <= 0]
    return [value for pair in zip(positives, negatives) for value in pair]