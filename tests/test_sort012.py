import pytest
from hypothesis import given
from hypothesis import strategies as st

from arraydrills.sort012 import sort_012, sort_012_counting

values_012 = st.lists(st.sampled_from([0, 1, 2]), max_size=40)


def test_source_example():
    arr = [0, 1, 2, 0, 1, 2]
    sort_012(arr)
    assert arr == [0, 0, 1, 1, 2, 2]


@given(values_012)
def test_dutch_flag_sorts(arr):
    expected = sorted(arr)
    sort_012(arr)
    assert arr == expected


@given(values_012)
def test_counting_sorts(arr):
    expected = sorted(arr)
    sort_012_counting(arr)
    assert arr == expected


@given(values_012)
def test_both_methods_agree(arr):
    other = list(arr)
    sort_012(arr)
    sort_012_counting(other)
    assert arr == other


def test_empty_list_stays_empty():
    arr = []
    sort_012(arr)
    assert arr == []


@pytest.mark.parametrize("sorter", [sort_012, sort_012_counting])
def test_invalid_value_raises_and_leaves_input(sorter):
    arr = [2, 0, 3, 1]
    with pytest.raises(ValueError):
        sorter(arr)
    assert arr == [2, 0, 3, 1]