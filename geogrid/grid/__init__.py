"""Coordinates on a geodesic grid.

The globe is an icosahedron cut into five root quads, each subdivided into a
hexagonal grid. This package provides:

- Root and Dir: the five-root ring and the twelve-valued compass
- GridPoint2 and GridPoint3: column and cell coordinates within a root
- The boundary wiring between roots, and canonical names for shared cells
- Neighbor enumeration built on the movement engine
"""

from geogrid.grid.boundary import (
    BOUNDARY_EDGES,
    BoundaryCrossing,
    RootEdge,
    cross_root_edge,
    root_edge_of,
)
from geogrid.grid.cell_shape import NEIGHBOR_OFFSETS
from geogrid.grid.dir import Dir, TurnDir
from geogrid.grid.equivalent_points import (
    canonicalize,
    equivalent_points,
    is_canonical,
    rebase_on_owning_root,
)
from geogrid.grid.grid_point import GridCoord, GridPoint, GridPoint2, GridPoint3
from geogrid.grid.root import ROOTS, Root
from geogrid.grid.columns import column_count, iter_columns, random_column
from geogrid.grid.neighbors import above_and_below, all_neighbors, neighbors

__all__ = [
    "BOUNDARY_EDGES",
    "NEIGHBOR_OFFSETS",
    "ROOTS",
    "BoundaryCrossing",
    "Dir",
    "GridCoord",
    "GridPoint",
    "GridPoint2",
    "GridPoint3",
    "Root",
    "RootEdge",
    "TurnDir",
    "above_and_below",
    "all_neighbors",
    "canonicalize",
    "column_count",
    "cross_root_edge",
    "equivalent_points",
    "is_canonical",
    "iter_columns",
    "neighbors",
    "random_column",
    "rebase_on_owning_root",
    "root_edge_of",
]
