# tests/geometry/test_triangle.py
import sys
import os

import numpy as np
import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from pathsearch.geometry import Triangle, point_in_triangle, points_in_triangle

CW = Triangle(0, 0, 0, 4, 4, 0)
CCW = Triangle(0, 0, 4, 0, 0, 4)


@pytest.mark.parametrize("tri", [CW, CCW])
def test_inside_point_either_winding(tri):
    assert tri.contains(1, 1)
    assert tri.contains(0.5, 3.0)


@pytest.mark.parametrize("tri", [CW, CCW])
def test_outside_point(tri):
    assert not tri.contains(3, 3)
    assert not tri.contains(-1, 1)
    assert not tri.contains(1, -0.1)


@pytest.mark.parametrize("px, py", [(0, 0), (2, 0), (0, 2), (2, 2)])
def test_boundary_points_are_not_inside(px, py):
    assert not point_in_triangle(0, 0, 4, 0, 0, 4, px, py)


def test_degenerate_triangle_contains_nothing():
    flat = Triangle(0, 0, 1, 1, 2, 2)
    assert not flat.contains(1, 1)
    assert not flat.contains(0.5, 0.4)


def test_vertices_array():
    assert CCW.vertices.shape == (3, 2)
    assert CCW.vertices[1].tolist() == [4.0, 0.0]


def test_vectorized_matches_scalar():
    rng = np.random.default_rng(0)
    points = rng.uniform(-1, 5, size=(500, 2))
    for tri in (CW, CCW, Triangle(-1, 2, 3, 4.5, 2, -0.5)):
        mask = points_in_triangle(tri, points)
        expected = [tri.contains(x, y) for x, y in points]
        assert mask.dtype == bool
        assert mask.tolist() == expected
