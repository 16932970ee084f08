"""Finding pairs, triplets and quadruplets that add up to a target."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import combinations

Pair = tuple[int, int]

_NO_PAIR: Pair = (-1, -1)


def two_sum(nums: Sequence[int], target: int) -> Pair:
    """Return indices ``(i, j)``, ``i < j``, whose values add up to ``target``.

    Uses a map from value to its latest index; returns ``(-1, -1)`` if no pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        seen[value] = index
    return _NO_PAIR


def two_sum_brute(nums: Sequence[int], target: int) -> list[Pair]:
    """Return every index pair ``(i, j)``, ``i < j``, whose values add up to ``target``."""
    return [
        (i, j)
        for (i, a), (j, b) in combinations(enumerate(nums), 2)
        if a + b == target
    ]


def two_sum_sorted(nums: Sequence[int], target: int) -> Pair:
    """Return indices of two values adding up to ``target`` in a sorted sequence.

    Walks two pointers inward; returns ``(-1, -1)`` if no pair exists.
    """
    left, right = 0, len(nums) - 1
    while left < right:
        total = nums[left] + nums[right]
        if total == target:
            return left, right
        if total > target:
            right -= 1
        else:
            left += 1
    return _NO_PAIR


def _pairs_summing_to(values: Sequence[int], start: int, goal: int) -> Iterator[Pair]:
    """Yield distinct value pairs from sorted ``values[start:]`` that add up to ``goal``."""
    left, right = start, len(values) - 1
    while left < right:
        total = values[left] + values[right]
        if total == goal:
            yield values[left], values[right]
            left += 1
            right -= 1
            while left < right and values[left] == values[left - 1]:
                left += 1
            while left < right and values[right] == values[right + 1]:
                right -= 1
        elif total > goal:
            right -= 1
        else:
            left += 1


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return the distinct sorted triplets adding up to zero, in ascending order."""
    values = sorted(nums)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        result.extend([first, a, b] for a, b in _pairs_summing_to(values, i + 1, -first))
    return result


def three_sum_hashing(nums: Sequence[int]) -> list[list[int]]:
    """Return the zero-sum triplets, looking up the third value in a set."""
    triplets: set[tuple[int, ...]] = set()
    for i, first in enumerate(nums):
        seen: set[int] = set()
        for second in nums[i + 1 :]:
            third = -(first + second)
            if third in seen:
                triplets.add(tuple(sorted((first, second, third))))
            seen.add(second)
    return [list(triplet) for triplet in sorted(triplets)]


def three_sum_brute(nums: Sequence[int]) -> list[list[int]]:
    """Return the zero-sum triplets by trying every combination of three."""
    triplets = {
        tuple(sorted(combo)) for combo in combinations(nums, 3) if sum(combo) == 0
    }
    return [list(triplet) for triplet in sorted(triplets)]


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return the distinct sorted quadruplets adding up to ``target``, in ascending order."""
    values = sorted(nums)
    size = len(values)
    result: list[list[int]] = []
    for i in range(size):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, size):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            goal = target - values[i] - values[j]
            result.extend(
                [values[i], values[j], a, b]
                for a, b in _pairs_summing_to(values, j + 1, goal)
            )
    return result