"""Tests for the icosahedron and root quad projection."""

import itertools

import numpy as np
import pytest

from geogrid.globe.icosahedron import (
    FACES,
    NORTH_POLE,
    SOUTH_POLE,
    VERTICES,
    project,
    root_quad_corners,
)
from geogrid.grid import ROOTS


class TestIcosahedron:
    """Tests for the vertex and face tables."""

    def test_vertices_on_unit_sphere(self):
        """All twelve vertices have unit length."""
        np.testing.assert_allclose(np.linalg.norm(VERTICES, axis=1), np.ones(12))

    def test_faces_are_equilateral(self):
        """Every face edge has the same length."""
        lengths = [
            np.linalg.norm(VERTICES[i] - VERTICES[j])
            for face in FACES
            for i, j in itertools.combinations(face, 2)
        ]
        np.testing.assert_allclose(lengths, lengths[0])

    def test_each_vertex_in_five_faces(self):
        """Five faces meet at every vertex."""
        counts = np.bincount(FACES.ravel(), minlength=12)
        np.testing.assert_array_equal(counts, np.full(12, 5))

    def test_faces_are_distinct(self):
        """No face is listed twice."""
        assert len({frozenset(face) for face in FACES.tolist()}) == 20


class TestRootQuads:
    """Tests for root_quad_corners and project."""

    @pytest.mark.parametrize("root", ROOTS)
    def test_poles(self, root):
        """Every root quad runs from the north pole to the south pole."""
        corners = root_quad_corners(root)
        np.testing.assert_array_equal(corners[0], NORTH_POLE)
        np.testing.assert_array_equal(corners[5], SOUTH_POLE)

    @pytest.mark.parametrize("root", ROOTS)
    def test_neighbors_share_corners(self, root):
        """The west corners of a root are the eastern corners of the next root west."""
        mine = root_quad_corners(root)
        west = root_quad_corners(root.next_west())
        np.testing.assert_array_equal(mine[1], west[2])
        np.testing.assert_array_equal(mine[3], west[4])

    @pytest.mark.parametrize("root", ROOTS)
    def test_project_corners(self, root):
        """Projecting a quad's corners lands on its icosahedron vertices."""
        corners = root_quad_corners(root)
        points = [(0, 0), (1, 0), (0, 0.5), (1, 0.5), (0, 1), (1, 1)]
        for corner, point in zip(corners, points):
            np.testing.assert_allclose(project(root, point), corner, atol=1e-12)

    def test_project_is_unit_length(self):
        """Points between the corners are pushed out onto the sphere."""
        for x, y in itertools.product(np.linspace(0, 1, 7), repeat=2):
            assert np.linalg.norm(project(ROOTS[3], (x, y))) == pytest.approx(1.0)
