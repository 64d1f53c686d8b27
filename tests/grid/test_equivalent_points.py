"""Tests for equivalent names and canonical ownership of boundary cells."""

import numpy as np
import pytest

from geogrid.errors import OutOfBoundsError
from geogrid.globe.icosahedron import project
from geogrid.grid import (
    ROOTS,
    Dir,
    GridPoint2,
    GridPoint3,
    Root,
    canonicalize,
    column_count,
    equivalent_points,
    is_canonical,
    rebase_on_owning_root,
)
from geogrid.movement import move_forward

W = 4
RESOLUTION = (W, 2 * W)


def every_name(resolution=RESOLUTION):
    """Every in-bounds point of every root, canonical or not."""
    w, h = resolution
    for root in ROOTS:
        for y in range(h + 1):
            for x in range(w + 1):
                yield GridPoint2(root, x, y)


class TestEquivalentPoints:
    """Tests for equivalent_points."""

    def test_north_pole_has_five_names(self):
        """The north pole is named once in every root, in root order."""
        names = list(equivalent_points(GridPoint2(Root(2), 0, 0), RESOLUTION))
        assert names == [GridPoint2(root, 0, 0) for root in ROOTS]

    def test_south_pole_has_five_names(self):
        """The south pole is named once in every root, in root order."""
        names = list(equivalent_points(GridPoint2(Root(0), W, 2 * W), RESOLUTION))
        assert names == [GridPoint2(root, W, 2 * W) for root in ROOTS]

    def test_boundary_cell_has_two_names(self):
        """A cell on a root edge has its own name first, then its neighbor's."""
        point = GridPoint2(Root(0), 2, 0)
        assert list(equivalent_points(point, RESOLUTION)) == [
            point,
            GridPoint2(Root(4), 0, 2),
        ]

    def test_pentagon_corner_has_two_names(self):
        """Non-polar pentagons are shared by just two roots."""
        names = list(equivalent_points(GridPoint2(Root(1), 0, W), RESOLUTION))
        assert names == [GridPoint2(Root(1), 0, W), GridPoint2(Root(2), W, 0)]

    def test_interior_cell_has_one_name(self):
        """Interior cells only have their own name."""
        point = GridPoint2(Root(3), 1, 5)
        assert list(equivalent_points(point, RESOLUTION)) == [point]

    def test_relation_is_symmetric(self):
        """Every name of a cell lists the others among its own names."""
        for point in every_name():
            for other in equivalent_points(point, RESOLUTION):
                assert point in list(equivalent_points(other, RESOLUTION))

    def test_names_are_the_same_place(self):
        """All names of a cell project to the same point on the sphere."""
        for point in every_name():
            here = project(point.root, (point.x / W, point.y / (2 * W)))
            for other in equivalent_points(point, RESOLUTION):
                there = project(other.root, (other.x / W, other.y / (2 * W)))
                np.testing.assert_allclose(here, there, atol=1e-12)

    def test_out_of_bounds(self):
        """Points outside their root are rejected."""
        with pytest.raises(OutOfBoundsError, match="outside its root"):
            list(equivalent_points(GridPoint2(Root(0), W + 1, 0), RESOLUTION))
        with pytest.raises(OutOfBoundsError):
            list(equivalent_points(GridPoint2(Root(0), 0, -1), RESOLUTION))


class TestCanonicalize:
    """Tests for canonicalize and is_canonical."""

    @pytest.mark.parametrize(
        "point, expected",
        [
            (GridPoint2(Root(3), 0, 0), GridPoint2(Root(0), 0, 0)),
            (GridPoint2(Root(1), W, 2 * W), GridPoint2(Root(4), W, 2 * W)),
            (GridPoint2(Root(0), 2, 0), GridPoint2(Root(4), 0, 2)),
            (GridPoint2(Root(0), W, 1), GridPoint2(Root(4), 0, W + 1)),
            (GridPoint2(Root(0), W, W + 1), GridPoint2(Root(4), 1, 2 * W)),
            (GridPoint2(Root(2), 0, 3), GridPoint2(Root(2), 0, 3)),
            (GridPoint2(Root(2), 2, 2 * W), GridPoint2(Root(2), 2, 2 * W)),
            (GridPoint2(Root(2), 1, 1), GridPoint2(Root(2), 1, 1)),
        ],
    )
    def test_owning_root(self, point, expected):
        """Points are moved to the root that owns their edge."""
        assert canonicalize(point, RESOLUTION) == expected

    def test_idempotent(self):
        """Canonicalizing a canonical point changes nothing."""
        for point in every_name():
            once = canonicalize(point, RESOLUTION)
            assert canonicalize(once, RESOLUTION) == once
            assert is_canonical(once, RESOLUTION)

    def test_all_names_agree(self):
        """Every name of a cell canonicalizes to the same point."""
        for point in every_name():
            canonical = canonicalize(point, RESOLUTION)
            for other in equivalent_points(point, RESOLUTION):
                assert canonicalize(other, RESOLUTION) == canonical

    def test_one_canonical_name_per_cell(self):
        """There are exactly as many canonical names as columns."""
        canonical = {canonicalize(point, RESOLUTION) for point in every_name()}
        assert len(canonical) == column_count(RESOLUTION)

    def test_keeps_z(self):
        """Cells stay cells, with z untouched."""
        cell = GridPoint3(Root(0), 2, 0, 7)
        assert canonicalize(cell, RESOLUTION) == GridPoint3(Root(4), 0, 2, 7)

    def test_out_of_bounds(self):
        """Points outside their root are rejected."""
        with pytest.raises(OutOfBoundsError):
            canonicalize(GridPoint2(Root(0), 1, 2 * W + 1), RESOLUTION)


class TestRebaseOnOwningRoot:
    """Tests for rebase_on_owning_root."""

    def test_owned_point_is_unchanged(self):
        """A point already in its owning root keeps its direction."""
        point = GridPoint2(Root(1), 0, 3)
        assert rebase_on_owning_root(point, Dir(5), RESOLUTION) == (point, Dir(5))

    def test_north_west_edge(self):
        """Crossing to the west over the north-west edge turns by two units."""
        point, dir = rebase_on_owning_root(GridPoint2(Root(0), 2, 0), Dir(0), RESOLUTION)
        assert point == GridPoint2(Root(4), 0, 2)
        assert dir == Dir(2)

    def test_west_edge(self):
        """Crossing the west edge does not turn."""
        point, dir = rebase_on_owning_root(GridPoint2(Root(2), W, 1), Dir(3), RESOLUTION)
        assert point == GridPoint2(Root(1), 0, W + 1)
        assert dir == Dir(3)

    def test_north_pole(self):
        """Each root walked across turns the direction by two units."""
        for root in ROOTS:
            point, dir = rebase_on_owning_root(
                GridPoint2(root, 0, 0), Dir(0), RESOLUTION
            )
            assert point == GridPoint2(Root(0), 0, 0)
            assert dir == Dir(2 * root.index)

    def test_south_pole(self):
        """The south pole is walked east to root 4."""
        for root in ROOTS:
            point, dir = rebase_on_owning_root(
                GridPoint2(root, W, 2 * W), Dir(6), RESOLUTION
            )
            assert point == GridPoint2(Root(4), W, 2 * W)
            assert dir == Dir(6 + 2 * (4 - root.index))

    def test_direction_still_points_at_same_neighbor(self):
        """Moving off the pole along a heading lands where the rebased heading does."""
        resolution = (32, 64)
        start = GridPoint2(Root(0), 0, 0)
        pos, dir = move_forward(start, Dir(0), resolution)
        assert (pos, dir) == (GridPoint2(Root(0), 1, 0), Dir(0))

        pos, dir = rebase_on_owning_root(pos, dir, resolution)
        assert (pos, dir) == (GridPoint2(Root(4), 0, 1), Dir(2))
