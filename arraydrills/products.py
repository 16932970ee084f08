"""Maximum product over contiguous subarrays."""

from __future__ import annotations

import operator
from collections.abc import Sequence
from itertools import accumulate


def max_product(nums: Sequence[int]) -> int:
    """Return the largest product of a non-empty contiguous subarray.

    Scans prefix and suffix products at once, restarting after a zero.
    """
    if not nums:
        raise ValueError("max_product() requires a non-empty sequence")
    prefix = suffix = 1
    best = nums[0]
    for forward, backward in zip(nums, reversed(nums)):
        prefix = (prefix or 1) * forward
        suffix = (suffix or 1) * backward
        best = max(best, prefix, suffix)
    return best


def max_product_brute(nums: Sequence[int]) -> int:
    """Return the largest subarray product by trying every start position."""
    if not nums:
        raise ValueError("max_product_brute() requires a non-empty sequence")
    return max(
        max(accumulate(nums[start:], operator.mul)) for start in range(len(nums))
    )