"""Unit tests for nearest-point selection."""

import numpy as np
import pytest

from pointinterp.core.errors import (
    DegenerateGeometryError,
    InsufficientDataError,
    InvalidInputError,
)
from pointinterp.core.neighbors import (
    closest_three_points,
    closest_two_points,
    neighbor_window,
    select_neighbors,
)


class TestClosestTwoPoints:
    def test_nearest_first(self):
        assert closest_two_points(2.9, [1, 2, 3, 10]) == (3.0, 2.0)

    def test_equal_distance_prefers_smaller_value(self):
        assert closest_two_points(2.5, [3, 2, 1]) == (2.0, 3.0)
        assert closest_two_points(2, [3, 1, 2]) == (2.0, 1.0)

    def test_outside_range(self):
        assert closest_two_points(-4, [5, 0, 1, 2]) == (0.0, 1.0)
        assert closest_two_points(40, [5, 0, 1, 2]) == (5.0, 2.0)

    def test_needs_two_points(self):
        with pytest.raises(InsufficientDataError):
            closest_two_points(1.0, [1.0])

    def test_rejects_missing_candidates_and_query(self):
        with pytest.raises(InvalidInputError):
            closest_two_points(1.0, [1.0, None, 3.0])
        with pytest.raises(InvalidInputError):
            closest_two_points("near", [1.0, 2.0])


class TestNeighborWindow:
    """The window grows forward until it nears the end, then backward."""

    @pytest.mark.parametrize(
        "lo, hi, length, size, expected",
        [
            (2, 3, 10, 5, (2, 6)),
            (8, 9, 10, 5, (5, 9)),
            (7, 8, 10, 5, (4, 8)),
            (6, 7, 10, 5, (4, 8)),
            (0, 1, 5, 5, (0, 4)),
            (0, 1, 3, 3, (0, 2)),
            (1, 2, 3, 3, (0, 2)),
            (3, 4, 10, 3, (3, 5)),
            (7, 8, 10, 3, (6, 8)),
            (4, 5, 10, 2, (4, 5)),
        ],
    )
    def test_bounds(self, lo, hi, length, size, expected):
        assert neighbor_window(lo, hi, length, size) == expected

    def test_size_larger_than_data(self):
        with pytest.raises(InsufficientDataError):
            neighbor_window(0, 1, 4, 5)

    def test_invalid_bounds(self):
        with pytest.raises(ValueError):
            neighbor_window(3, 2, 10, 3)


class TestClosestThreePoints:
    def test_extends_forward(self):
        assert closest_three_points(2.2, [4, 1, 3, 2, 5]) == (2.0, 3.0, 4.0)

    def test_extends_backward_near_the_end(self):
        assert closest_three_points(4.2, [4, 1, 3, 2, 5]) == (3.0, 4.0, 5.0)

    def test_asymmetric_policy_is_kept(self):
        """The pair (3, 4) ends at the second-to-last index, so 2 is chosen over 5."""
        assert closest_three_points(3.6, [1, 2, 3, 4, 5]) == (2.0, 3.0, 4.0)

    def test_before_range(self):
        assert closest_three_points(-10, [1, 2, 3, 4, 5]) == (1.0, 2.0, 3.0)

    def test_exactly_three_points(self):
        assert closest_three_points(10, [3, 1, 2]) == (1.0, 2.0, 3.0)
        assert closest_three_points(-10, [3, 1, 2]) == (1.0, 2.0, 3.0)

    def test_needs_three_points(self):
        with pytest.raises(InsufficientDataError):
            closest_three_points(1.5, [1, 2])

    @pytest.mark.parametrize(
        "sought, points", [(1.0, [1, 1, 2]), (1.6, [1, 2, 2, 5])]
    )
    def test_duplicate_nearest_points(self, sought, points):
        with pytest.raises(DegenerateGeometryError):
            closest_three_points(sought, points)

    def test_repeats_outside_nearest_pair_are_collapsed(self):
        assert closest_three_points(1.0, [1, 2, 2, 3]) == (1.0, 2.0, 3.0)
        assert closest_three_points(2.2, [6, 5, 3, 3, 2, 1, 1]) == (2.0, 3.0, 5.0)

    def test_too_few_distinct_points(self):
        with pytest.raises(InsufficientDataError):
            closest_three_points(1.2, [1, 2, 2])

    @pytest.mark.parametrize(
        "points", [[1, 2, None], [1, 2, float("nan")], [1, 2, float("inf")], [1, 2, "x"]]
    )
    def test_bad_candidates_rejected(self, points):
        with pytest.raises(InvalidInputError):
            closest_three_points(1.0, points)

    @pytest.mark.parametrize("points", [None, "123"])
    def test_candidates_must_be_a_sequence(self, points):
        with pytest.raises(InvalidInputError):
            closest_three_points(1.0, points)

    @pytest.mark.parametrize("sought", ["two", None, float("nan"), float("-inf")])
    def test_bad_query_rejected(self, sought):
        with pytest.raises(InvalidInputError):
            closest_three_points(sought, [1, 2, 3, 4])

    def test_contains_two_nearest_points(self):
        """Random sets: three distinct ascending inputs including the nearest pair."""
        rng = np.random.default_rng(7)
        for _ in range(200):
            points = rng.uniform(-50, 50, size=int(rng.integers(3, 12)))
            sought = float(rng.uniform(-60, 60))
            result = closest_three_points(sought, points)

            assert len(result) == 3
            assert list(result) == sorted(set(result))
            assert set(result) <= set(points.tolist())
            nearest = points[np.argsort(np.abs(points - sought))[:2]]
            assert set(nearest.tolist()) <= set(result)


class TestSelectNeighbors:
    def test_five_point_windows(self, grid_xs):
        np.testing.assert_array_equal(select_neighbors(2.3, grid_xs, 5), [2, 3, 4, 5, 6])
        np.testing.assert_array_equal(select_neighbors(8.6, grid_xs, 5), [5, 6, 7, 8, 9])
        np.testing.assert_array_equal(select_neighbors(7.4, grid_xs, 5), [4, 5, 6, 7, 8])
        np.testing.assert_array_equal(select_neighbors(-3.0, grid_xs, 5), [0, 1, 2, 3, 4])

    def test_two_point_window_is_nearest_pair(self, grid_xs):
        np.testing.assert_array_equal(select_neighbors(4.0, grid_xs, 2), [3, 4])
        np.testing.assert_array_equal(select_neighbors(4.6, grid_xs, 2), [4, 5])

    def test_matches_closest_three_points(self, grid_xs):
        for sought in np.linspace(-2.0, 11.0, 27):
            indexes = select_neighbors(sought, grid_xs, 3)
            assert tuple(grid_xs[indexes].tolist()) == closest_three_points(sought, grid_xs)

    def test_reports_method_name(self, grid_xs):
        with pytest.raises(InsufficientDataError, match="cubic") as excinfo:
            select_neighbors(1.0, grid_xs[:4], 5, method="cubic")
        assert excinfo.value.required == 5
        assert excinfo.value.available == 4


class TestSelectNeighborsValidation:
    """select_neighbors expects finite, unique, ascending known x-values."""

    def test_repeated_known_values(self):
        with pytest.raises(DegenerateGeometryError):
            select_neighbors(1.5, np.array([1.0, 2.0, 2.0, 3.0]), 3)

    def test_unsorted_known_values(self):
        with pytest.raises(InvalidInputError, match="sorted"):
            select_neighbors(1.5, np.array([3.0, 1.0, 2.0]), 3)

    def test_non_finite_known_values(self):
        with pytest.raises(InvalidInputError):
            select_neighbors(1.5, np.array([1.0, np.nan, 3.0]), 2)

    def test_nan_query(self, grid_xs):
        with pytest.raises(InvalidInputError):
            select_neighbors(float("nan"), grid_xs, 3)
