from hypothesis import given
from hypothesis import strategies as st

from algodrills.mountain import longest_mountain, longest_mountain_brute

int_lists = st.lists(st.integers(min_value=0, max_value=8), max_size=30)


def test_brute_worked_example():
    assert longest_mountain_brute([2, 1, 4, 7, 3, 2, 5]) == 5


def test_optimal_worked_example():
    assert longest_mountain([2, 1, 4, 7, 3, 2, 5]) == 5


def test_flat_input_has_no_mountain():
    assert longest_mountain([2, 2, 2]) == 0
    assert longest_mountain_brute([2, 2, 2]) == 0


def test_short_inputs():
    assert longest_mountain([]) == longest_mountain_brute([]) == 0
    assert longest_mountain([1, 2]) == longest_mountain_brute([1, 2]) == 0


def test_whole_array_mountain():
    arr = [0, 1, 2, 3, 2, 1, 0]
    assert longest_mountain(arr) == len(arr)


@given(int_lists)
def test_brute_and_optimal_agree(arr):
    assert longest_mountain(arr) == longest_mountain_brute(arr)


@given(int_lists)
def test_result_is_zero_or_valid_length(arr):
    result = longest_mountain(arr)
    assert result == 0 or 3 <= result <= len(arr)


@given(int_lists)
def test_reversal_preserves_length(arr):
    assert longest_mountain(arr) == longest_mountain(arr[::-1])