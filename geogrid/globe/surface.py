"""An index over every column of a small globe.

Builds the unit-sphere position of each canonical column once, so nearest
column lookups go through a KD-tree and adjacency queries go through a
NetworkX graph. Construction visits every column, so this is intended for
globes with a modest root resolution (tens to a few hundreds of cells).
"""

from __future__ import annotations

from collections.abc import Iterator

import networkx as nx
import numpy as np
from scipy.spatial import KDTree

from geogrid.geogrid_logging import create_module_logger, method_logger
from geogrid.globe.spec import GlobeSpec
from geogrid.grid.columns import iter_columns
from geogrid.grid.equivalent_points import canonicalize
from geogrid.grid.grid_point import GridPoint2
from geogrid.grid.neighbors import neighbors

_logger = create_module_logger()


class GlobeSurface:
    """Every column of a globe, with positions and adjacency.

    Attributes:
        spec: the globe being indexed
        columns: canonical columns, in ``iter_columns`` order
        positions: ``(n, 3)`` array of column centers on the unit sphere,
            row ``i`` belonging to ``columns[i]``
        G: undirected graph with one node per column; each node carries its
            unit-sphere position under ``"pos"``
    """

    @method_logger(__name__)
    def __init__(self, spec: GlobeSpec) -> None:
        """Index every column of ``spec``'s globe.

        Args:
            spec: the globe to index
        """
        self.spec = spec
        resolution = spec.root_resolution

        self.columns: list[GridPoint2] = list(iter_columns(resolution))
        self._index = {column: i for i, column in enumerate(self.columns)}
        self.positions = np.array(
            [spec.cell_center_on_unit_sphere(column) for column in self.columns]
        )

        self.G = nx.Graph()
        for column, position in zip(self.columns, self.positions):
            self.G.add_node(column, pos=position)
        for column in self.columns:
            for neighbor in neighbors(column, resolution):
                self.G.add_edge(column, neighbor)

        self._build_kdtree()
        _logger.debug(
            f"indexed {len(self.columns)} columns and "
            f"{self.G.number_of_edges()} edges at resolution {resolution}"
        )

    def _build_kdtree(self) -> None:
        """Build the KD-Tree for fast nearest-column lookups."""
        self._kdtree = KDTree(self.positions)

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self) -> Iterator[GridPoint2]:
        return iter(self.columns)

    def __contains__(self, column: GridPoint2) -> bool:
        return column in self._index

    def position_of(self, column: GridPoint2) -> np.ndarray:
        """Unit-sphere position of ``column``, under any of its names."""
        column = canonicalize(column, self.spec.root_resolution)
        return self.positions[self._index[column]]

    def find_nearest_column(self, position: np.ndarray) -> GridPoint2:
        """Find the column whose center is closest to the direction of ``position``.

        Args:
            position: any non-zero point in space; only its direction from the
                center of the globe matters

        Returns:
            the canonical column

        Raises:
            ValueError: if ``position`` is the zero vector
        """
        position = np.asarray(position, dtype=float)
        norm = np.linalg.norm(position)
        if norm == 0:
            raise ValueError("position must not be the center of the globe")

        _, index = self._kdtree.query(position / norm)
        return self.columns[index]

    def neighbors_of(self, column: GridPoint2) -> list[GridPoint2]:
        """The canonical neighbors of ``column``, under any of its names."""
        column = canonicalize(column, self.spec.root_resolution)
        return list(self.G.neighbors(column))

    def shortest_path(self, start: GridPoint2, end: GridPoint2) -> list[GridPoint2]:
        """Fewest-steps path between two columns, both ends included."""
        resolution = self.spec.root_resolution
        return nx.shortest_path(
            self.G, canonicalize(start, resolution), canonicalize(end, resolution)
        )
