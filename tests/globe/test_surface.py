"""Tests for the whole-globe column index."""

import networkx as nx
import numpy as np
import pytest

from geogrid.globe import GlobeSpec, GlobeSurface
from geogrid.grid import GridPoint2, Root


@pytest.fixture(scope="module")
def surface():
    spec = GlobeSpec(
        seed=7,
        floor_radius=10.0,
        ocean_radius=12.3,
        block_height=0.5,
        root_resolution=(4, 8),
        chunk_resolution=(4, 4, 4),
    )
    return GlobeSurface(spec)


class TestGlobeSurface:
    """Tests for GlobeSurface."""

    def test_size(self, surface):
        """One node per column and one edge per pair of touching columns."""
        assert len(surface) == 162
        assert surface.G.number_of_nodes() == 162
        # Euler: a closed sphere tiled by 12 pentagons and the rest hexagons.
        assert surface.G.number_of_edges() == 3 * 162 - 6
        assert surface.positions.shape == (162, 3)

    def test_connected(self, surface):
        """Every column can be reached from every other."""
        assert nx.is_connected(surface.G)

    def test_twelve_pentagons(self, surface):
        """Exactly twelve columns have five neighbors."""
        degrees = [degree for _, degree in surface.G.degree()]
        assert degrees.count(5) == 12
        assert degrees.count(6) == 150

    def test_node_positions(self, surface):
        """Graph nodes carry their unit-sphere position."""
        pole = GridPoint2(Root(0), 0, 0)
        np.testing.assert_array_equal(surface.G.nodes[pole]["pos"], surface.position_of(pole))
        np.testing.assert_allclose(np.linalg.norm(surface.positions, axis=1), 1.0)

    def test_contains_canonical_names_only(self, surface):
        """Membership is by canonical name."""
        assert GridPoint2(Root(4), 0, 2) in surface
        assert GridPoint2(Root(0), 2, 0) not in surface
        assert list(surface)[0] == GridPoint2(Root(0), 0, 0)

    def test_position_of_any_name(self, surface):
        """Every name of a cell has the same position."""
        np.testing.assert_array_equal(
            surface.position_of(GridPoint2(Root(0), 2, 0)),
            surface.position_of(GridPoint2(Root(4), 0, 2)),
        )

    def test_find_nearest_column(self, surface):
        """Each column is the nearest column to its own center, at any radius."""
        for column in surface:
            position = surface.position_of(column) * 17.5
            assert surface.find_nearest_column(position) == column

    def test_find_nearest_column_at_center(self, surface):
        """The center of the globe has no direction."""
        with pytest.raises(ValueError, match="center"):
            surface.find_nearest_column(np.zeros(3))

    def test_neighbors_of(self, surface):
        """Graph neighbors match neighbor enumeration, for any name."""
        found = surface.neighbors_of(GridPoint2(Root(2), 0, 0))
        assert set(found) == {GridPoint2(Root(i), 0, 1) for i in range(5)}

    def test_shortest_path(self, surface):
        """Paths start and end where asked and only take single steps."""
        start = GridPoint2(Root(3), 0, 0)
        end = GridPoint2(Root(1), 4, 8)
        path = surface.shortest_path(start, end)
        assert path[0] == GridPoint2(Root(0), 0, 0)
        assert path[-1] == GridPoint2(Root(4), 4, 8)
        for a, b in zip(path, path[1:]):
            assert surface.G.has_edge(a, b)
