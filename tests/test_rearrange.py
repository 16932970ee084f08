import pytest
from hypothesis import given
from hypothesis import strategies as st

from arraydrills.rearrange import rearrange_by_sign, rearrange_by_sign_split


@st.composite
def balanced_lists(draw):
    positives = draw(st.lists(st.integers(1, 50), max_size=8))
    negatives = draw(
        st.lists(st.integers(-50, -1), min_size=len(positives), max_size=len(positives))
    )
    return draw(st.permutations(positives + negatives))


def test_example():
    assert rearrange_by_sign([2, 4, 5, -1, -3, -4]) == [2, -1, 4, -3, 5, -4]


@given(balanced_lists())
def test_variants_agree(nums):
    assert rearrange_by_sign(nums) == rearrange_by_sign_split(nums)


@given(balanced_lists())
def test_signs_alternate_and_order_is_kept(nums):
    result = rearrange_by_sign(nums)
    assert sorted(result) == sorted(nums)
    assert all(value > 0 for value in result[0::2])
    assert all(value < 0 for value in result[1::2])
    assert [v for v in result if v > 0] == [v for v in nums if v > 0]
    assert [v for v in result if v < 0] == [v for v in nums if v < 0]


@pytest.mark.parametrize("nums", [[1, 2, -1], [1, 2], [1, -1, 2], [-1, -2]])
@pytest.mark.parametrize("func", [rearrange_by_sign, rearrange_by_sign_split])
def test_unbalanced_input_is_rejected(func, nums):
    with pytest.raises(ValueError):
        func(nums)