import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodrills.points import (
    min_time_to_visit_all_points,
    min_time_to_visit_all_points_brute,
)

coords = st.integers(min_value=-20, max_value=20)
point_lists = st.lists(st.tuples(coords, coords), min_size=1, max_size=10)


def test_brute_worked_example():
    assert min_time_to_visit_all_points_brute([[1, 1], [3, 4], [-1, 0]]) == 7


def test_optimal_worked_example():
    assert min_time_to_visit_all_points([[1, 1], [3, 4], [-1, 0]]) == 7


def test_single_point_takes_no_time():
    assert min_time_to_visit_all_points([[5, 5]]) == 0
    assert min_time_to_visit_all_points_brute([[5, 5]]) == 0


def test_empty_points_rejected():
    with pytest.raises(ValueError):
        min_time_to_visit_all_points([])
    with pytest.raises(ValueError):
        min_time_to_visit_all_points_brute([])


@given(point_lists)
def test_brute_and_optimal_agree(points):
    assert min_time_to_visit_all_points(points) == min_time_to_visit_all_points_brute(points)


@given(point_lists)
def test_reversed_route_takes_same_time(points):
    assert min_time_to_visit_all_points(points) == min_time_to_visit_all_points(points[::-1])


@given(point_lists)
def test_time_at_least_direct_distance(points):
    (x1, y1), (x2, y2) = points[0], points[-1]
    direct = max(abs(x2 - x1), abs(y2 - y1))
    assert min_time_to_visit_all_points(points) >= direct