"""Merging two sorted sequences."""

from __future__ import annotations

import heapq
from collections.abc import MutableSequence, Sequence


def merge_sorted(
    nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int
) -> None:
    """Merge the first ``n`` items of ``nums2`` into ``nums1`` in place.

    ``nums1`` holds ``m`` sorted items followed by room for ``n`` more.
    """
    if m < 0 or n < 0:
        raise ValueError("m and n must be non-negative")
    if len(nums1) < m + n or len(nums2) < n:
        raise ValueError("sequences are too short for the given counts")
    i, j = m - 1, n - 1
    for k in range(m + n - 1, -1, -1):
        if j < 0:
            break
        if i >= 0 and nums1[i] > nums2[j]:
            nums1[k] = nums1[i]
            i -= 1
        else:
            nums1[k] = nums2[j]
            j -= 1


def merge_without_space(nums1: MutableSequence[int], nums2: MutableSequence[int]) -> None:
    """Rearrange two sorted lists in place so that together they read as sorted.

    The smallest items end up in ``nums1`` and the largest in ``nums2``.
    """
    left, right = len(nums1) - 1, 0
    while left >= 0 and right < len(nums2) and nums1[left] > nums2[right]:
        nums1[left], nums2[right] = nums2[right], nums1[left]
        left -= 1
        right += 1
    nums1[:] = sorted(nums1)
    nums2[:] = sorted(nums2)


def merged(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Return a new sorted list holding the items of two sorted sequences."""
    return list(heapq.merge(nums1, nums2))