from hypothesis import given
from hypothesis import strategies as st

from algodrills.spiral import spiral_order


@st.composite
def numbered_matrices(draw):
    rows = draw(st.integers(min_value=1, max_value=7))
    cols = draw(st.integers(min_value=1, max_value=7))
    return [[r * cols + c for c in range(cols)] for r in range(rows)]


def test_worked_example():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert spiral_order(matrix) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


def test_empty_matrix():
    assert spiral_order([]) == []


def test_matrix_with_empty_row():
    assert spiral_order([[]]) == []


@given(row=st.lists(st.integers(), min_size=1, max_size=10))
def test_single_row_is_read_left_to_right(row):
    assert spiral_order([row]) == row


@given(column=st.lists(st.integers(), min_size=1, max_size=10))
def test_single_column_is_read_top_to_bottom(column):
    assert spiral_order([[value] for value in column]) == column


@given(matrix=numbered_matrices())
def test_every_element_visited_once(matrix):
    result = spiral_order(matrix)
    flat = [value for row in matrix for value in row]
    assert sorted(result) == flat


@given(matrix=numbered_matrices())
def test_outer_ring_comes_first(matrix):
    result = spiral_order(matrix)
    cols = len(matrix[0])
    assert result[:cols] == matrix[0]
    right_column = [row[-1] for row in matrix[1:]]
    assert result[cols : cols + len(right_column)] == right_column