"""Leaders: elements strictly greater than everything to their right."""

from __future__ import annotations

from collections.abc import Sequence


def leaders(nums: Sequence[int]) -> list[int]:
    """Return the leaders of ``nums`` in their original order, scanning from the right."""
    found: list[int] = []
    for value in reversed(nums):
        if not found or value > found[-1]:
            found.append(value)
    found.reverse()
    return found


def leaders_brute(nums: Sequence[int]) -> list[int]:
    """Return the leaders of ``nums`` by comparing each element with all later ones."""
    return [
        value
        for index, value in enumerate(nums)
        if all(value > later for later in nums[index + 1 :])
    ]