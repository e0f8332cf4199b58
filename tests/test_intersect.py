"""Tests for finding crossings between paths."""

import numpy as np
import pytest

from edgematch.curve.intersect import find_intersections, intersection_points, sort_intersections


def horizontal(y=0.0):
    return np.column_stack([np.linspace(-1, 1, 21), np.full(21, y)])


def vertical(x=0.0, start=-1.0, stop=1.0):
    return np.column_stack([np.full(21, x), np.linspace(start, stop, 21)])


class TestFindIntersections:
    """Tests for the thresholded local-minimum search."""

    def test_single_crossing(self):
        assert find_intersections(horizontal(), vertical()) == [(10, 10)]

    def test_parallel_lines(self):
        assert find_intersections(horizontal(0), horizontal(0.5)) == []

    def test_identical_paths(self, example_path):
        """Every interior sample of a path crosses itself."""
        result = set(find_intersections(example_path, example_path))

        assert {(i, i) for i in range(1, len(example_path) - 1)} <= result

    def test_identical_arc(self):
        theta = np.linspace(0, np.pi / 2, 50)
        arc = np.column_stack([np.cos(theta), np.sin(theta)])

        assert find_intersections(arc, arc) == [(i, i) for i in range(1, 49)]

    def test_tolerance(self):
        # nearest sample of the vertical line to the crossing is 0.02 away
        offset = vertical(start=-0.98, stop=1.02)

        assert find_intersections(horizontal(), offset) == []
        assert find_intersections(horizontal(), offset, tolerance=0.05) == [(10, 10)]

    def test_border_crossing_not_reported(self):
        """Crossings at the first or last sample are a known blind spot."""
        right = np.column_stack([np.linspace(0, 1, 11), np.zeros(11)])
        up = np.column_stack([np.zeros(11), np.linspace(0, 1, 11)])

        assert find_intersections(right, up) == []

    def test_flat_minimum_reports_all(self):
        path1 = np.array([[-1, 0], [0, 0], [0, 0], [1, 0]], dtype=float)
        path2 = np.array([[0, -1], [0, 0], [0, 1]], dtype=float)

        assert find_intersections(path1, path2) == [(1, 1), (2, 1)]

    def test_row_major_order(self):
        # an s-shaped path crossing a line three times
        x = np.linspace(0, 3, 61)
        wave = np.column_stack([x, np.sin(np.pi * x)])
        line = np.column_stack([x, np.zeros_like(x)])

        result = find_intersections(wave, line)

        assert result == [(20, 20), (40, 40)]
        assert result == sort_intersections(result)

    def test_short_paths(self):
        assert find_intersections([(0, 0), (1, 0)], [(0, 0), (1, 0)]) == []
        assert find_intersections([], horizontal()) == []

    def test_crossing_example_edges(self, example_path, second_path):
        result = find_intersections(example_path, second_path)

        for i, j in result:
            assert np.linalg.norm(example_path[i] - second_path[j]) < 0.01


class TestIntersectionHelpers:
    """Tests for sorting and locating intersections."""

    def test_sort_is_stable(self):
        assert sort_intersections([(3, 1), (1, 2), (1, 0)]) == [(1, 2), (1, 0), (3, 1)]

    def test_intersection_points(self):
        path1 = horizontal()
        path2 = vertical()

        points1, points2 = intersection_points(path1, path2, [(10, 10), (0, 20)])

        assert points1 == pytest.approx(np.array([[0, 0], [-1, 0]]))
        assert points2 == pytest.approx(np.array([[0, 0], [0, 1]]))

    def test_no_intersection_points(self):
        points1, points2 = intersection_points(horizontal(), vertical(), [])

        assert points1.shape == (0, 2)
        assert points2.shape == (0, 2)
