"""Iterating over the cells that share a face with a given cell.

Surface neighbors are yielded counter-clockwise, in increasing direction
index. A hexagonal cell has six of them and a pentagonal cell five; the
count is found by walking around the cell until the first neighbor comes up
again, so callers must not assume a fixed count. Diagonal neighbors (one
across and one up or down) are never included.
"""

from collections.abc import Iterator
from itertools import chain

from geogrid.errors import MovementCaseError
from geogrid.grid.cell_shape import NEIGHBOR_OFFSETS
from geogrid.grid.dir import Dir
from geogrid.grid.equivalent_points import (
    canonicalize,
    check_within_root,
    is_south_pole,
)
from geogrid.grid.grid_point import GridPoint, GridPoint3
from geogrid.movement.step import move_forward
from geogrid.movement.turn import turn_left_by_one_hex_edge

# Enough turns to close the cycle around a hexagon, with one to spare.
_MAX_TURNS = len(NEIGHBOR_OFFSETS) + 1


def neighbors(pos: GridPoint, resolution) -> Iterator[GridPoint]:
    """Yield the canonical name of every surface neighbor of ``pos``.

    Works for both columns and cells; ``z`` is carried through unchanged.

    Raises:
        OutOfBoundsError: if ``pos`` lies outside its root
    """
    check_within_root(pos, resolution)
    w, h = resolution[0], resolution[1]
    if 2 <= pos.x <= w - 2 and 2 <= pos.y <= h - 2:
        # Every neighbor is strictly inside the root, so already canonical.
        return _intra_root_neighbors(pos)
    return _edge_neighbors(pos, resolution)


def _intra_root_neighbors(pos: GridPoint) -> Iterator[GridPoint]:
    for dx, dy in NEIGHBOR_OFFSETS:
        yield pos.with_xy(pos.x + dx, pos.y + dy)


def _edge_neighbors(pos: GridPoint, resolution) -> Iterator[GridPoint]:
    # Once in its owning root, direction 0 is valid everywhere except at the
    # south pole, which has no cell in that direction.
    origin = canonicalize(pos, resolution)
    dir = Dir(6) if is_south_pole(origin, resolution) else Dir(0)

    first_neighbor = None
    for _ in range(_MAX_TURNS):
        neighbor = move_forward(origin, dir, resolution)[0]
        # Compare owning-root names so we can tell when we've come full circle.
        neighbor = canonicalize(neighbor, resolution)
        if first_neighbor is None:
            first_neighbor = neighbor
        elif neighbor == first_neighbor:
            return
        yield neighbor

        origin, dir = turn_left_by_one_hex_edge(origin, dir, resolution)

    raise MovementCaseError(f"walk around {pos} never returned to its first neighbor")


def above_and_below(pos: GridPoint3) -> Iterator[GridPoint3]:
    """Yield the cell above ``pos``, then the one below unless ``z == 0``."""
    yield pos.with_z(pos.z + 1)
    if pos.z > 0:
        yield pos.with_z(pos.z - 1)


def all_neighbors(pos: GridPoint3, resolution) -> Iterator[GridPoint3]:
    """Vertical neighbors followed by surface neighbors."""
    return chain(above_and_below(pos), neighbors(pos, resolution))
