"""Tests for GridPoint2 and GridPoint3."""

import dataclasses
import random

import pytest

from geogrid.errors import RootIndexError
from geogrid.grid import (
    GridPoint2,
    GridPoint3,
    Root,
    column_count,
    is_canonical,
    iter_columns,
    random_column,
)


class TestGridPoint2:
    """Tests for GridPoint2."""

    def test_default_is_north_pole_of_root_0(self):
        """The default point is (0, 0) in root 0."""
        assert GridPoint2() == GridPoint2(Root(0), 0, 0)

    def test_int_root_is_converted(self):
        """A raw root index is accepted and validated."""
        assert GridPoint2(3, 1, 2).root == Root(3)
        with pytest.raises(RootIndexError):
            GridPoint2(5, 1, 2)

    def test_setters_return_new_values(self):
        """with_* never changes the original point."""
        p = GridPoint2(Root(1), 2, 3)
        q = p.with_x(7).with_y(8).with_root(4)
        assert p == GridPoint2(Root(1), 2, 3)
        assert q == GridPoint2(Root(4), 7, 8)

    def test_immutable(self):
        """Fields cannot be assigned."""
        p = GridPoint2()
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.x = 3

    def test_with_z_promotes(self):
        """with_z turns a column into a cell."""
        cell = GridPoint2(Root(2), 3, 4).with_z(5)
        assert isinstance(cell, GridPoint3)
        assert cell == GridPoint3(Root(2), 3, 4, 5)

    def test_structural_equality_and_hash(self):
        """Equal coordinates compare and hash equal."""
        assert GridPoint2(1, 2, 3) == GridPoint2(Root(1), 2, 3)
        assert len({GridPoint2(1, 2, 3), GridPoint2(1, 2, 3)}) == 1
        assert GridPoint2(1, 2, 3) != GridPoint2(2, 2, 3)


class TestGridPoint3:
    """Tests for GridPoint3."""

    def test_rxy_drops_z(self):
        """rxy gives the column a cell sits in."""
        assert GridPoint3(Root(2), 3, 4, 5).rxy == GridPoint2(Root(2), 3, 4)

    def test_with_z_replaces(self):
        """with_z on a cell replaces z."""
        assert GridPoint3(1, 2, 3, 4).with_z(9) == GridPoint3(1, 2, 3, 9)

    def test_with_xy(self):
        """with_xy keeps root and z."""
        assert GridPoint3(1, 2, 3, 4).with_xy(5, 6) == GridPoint3(1, 5, 6, 4)

    def test_sort_key_orders_root_z_y_x(self):
        """Cells sort by root, then z, then y, then x."""
        cells = [
            GridPoint3(1, 0, 0, 0),
            GridPoint3(0, 1, 1, 1),
            GridPoint3(0, 2, 0, 1),
            GridPoint3(0, 0, 5, 0),
        ]
        ordered = sorted(cells, key=GridPoint3.sort_key)
        assert ordered == [
            GridPoint3(0, 0, 5, 0),
            GridPoint3(0, 2, 0, 1),
            GridPoint3(0, 1, 1, 1),
            GridPoint3(1, 0, 0, 0),
        ]


class TestColumns:
    """Tests for enumerating and sampling whole-globe columns."""

    @pytest.mark.parametrize("resolution", [(1, 2), (4, 8), (8, 16)])
    def test_iter_columns_count(self, resolution):
        """There are 10 w^2 + 2 distinct columns."""
        columns = list(iter_columns(resolution))
        assert len(columns) == column_count(resolution)
        assert len(set(columns)) == len(columns)
        assert column_count((4, 8)) == 162

    def test_iter_columns_are_canonical(self):
        """Every enumerated column is already in its owning root."""
        resolution = (4, 8)
        assert all(is_canonical(c, resolution) for c in iter_columns(resolution))

    def test_random_column_is_canonical_and_seeded(self):
        """random_column is canonical and reproducible for a given seed."""
        resolution = (4, 8)
        first = [random_column(resolution, random.Random(42)) for _ in range(3)]
        assert first[0] == first[1] == first[2]

        rng = random.Random(42)
        samples = [random_column(resolution, rng) for _ in range(200)]
        assert all(is_canonical(c, resolution) for c in samples)
        assert len({c.root for c in samples}) == 5
