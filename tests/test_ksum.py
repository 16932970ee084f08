from collections import Counter

from hypothesis import given
from hypothesis import strategies as st

from arraydrills.ksum import (
    four_sum,
    three_sum,
    three_sum_brute,
    three_sum_hashing,
    two_sum,
    two_sum_brute,
    two_sum_sorted,
)

small_lists = st.lists(st.integers(-6, 6), max_size=10)


def test_two_sum_example():
    assert two_sum([2, 6, 5, 8, 11], 14) == (1, 3)


def test_two_sum_without_pair():
    assert two_sum([1, 2, 3], 100) == (-1, -1)


def test_two_sum_sorted_without_pair():
    assert two_sum_sorted([1, 2, 3], 100) == (-1, -1)


@given(small_lists, st.integers(-12, 12))
def test_two_sum_agrees_with_brute(nums, target):
    pairs = two_sum_brute(nums, target)
    result = two_sum(nums, target)
    if pairs:
        assert result in pairs
    else:
        assert result == (-1, -1)


@given(small_lists, st.integers(-12, 12))
def test_two_sum_brute_pairs_are_valid(nums, target):
    pairs = two_sum_brute(nums, target)
    assert len(set(pairs)) == len(pairs)
    for i, j in pairs:
        assert i < j
        assert nums[i] + nums[j] == target


@given(small_lists, st.integers(-12, 12))
def test_two_sum_sorted_finds_pair_when_one_exists(nums, target):
    values = sorted(nums)
    result = two_sum_sorted(values, target)
    if two_sum_brute(values, target):
        i, j = result
        assert i < j
        assert values[i] + values[j] == target
    else:
        assert result == (-1, -1)


def test_three_sum_example():
    assert three_sum([2, -2, 0, 3, -3, 5]) == [[-3, -2, 5], [-3, 0, 3], [-2, 0, 2]]


def test_three_sum_leaves_input_alone():
    nums = [3, -3, 0, 1]
    before = list(nums)
    three_sum(nums)
    assert nums == before


@given(small_lists)
def test_three_sum_variants_agree(nums):
    expected = three_sum_brute(nums)
    assert three_sum(nums) == expected
    assert three_sum_hashing(nums) == expected


@given(small_lists)
def test_three_sum_triplets_are_valid(nums):
    result = three_sum(nums)
    assert result == sorted(result)
    assert len({tuple(t) for t in result}) == len(result)
    available = Counter(nums)
    for triplet in result:
        assert sum(triplet) == 0
        assert triplet == sorted(triplet)
        assert not Counter(triplet) - available


def test_four_sum_example():
    assert four_sum([1, 0, -1, 0, -2, 2], 0) == [
        [-2, -1, 1, 2],
        [-2, 0, 0, 2],
        [-1, 0, 0, 1],
    ]


@given(small_lists, st.integers(-10, 10))
def test_four_sum_quadruplets_are_valid(nums, target):
    result = four_sum(nums, target)
    assert result == sorted(result)
    assert len({tuple(q) for q in result}) == len(result)
    available = Counter(nums)
    for quad in result:
        assert sum(quad) == target
        assert quad == sorted(quad)
        assert not Counter(quad) - available