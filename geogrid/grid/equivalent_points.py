"""Canonical names for cells on root boundaries.

Cells on the boundary between two root quads have a name in each root, and
the two poles have a name in all five. Any storage keyed by position must use
a single canonical name per cell, so every boundary cell is *owned* by exactly
one root:

- the north pole is owned by root 0 and the south pole by root 4;
- a root owns its north-east and east edges (``x == 0``) and its south-east
  edge (``y == 2w``);
- it does not own its north-west edge (``y == 0``) or its west and
  south-west edges (``x == w``); those belong to the neighbor to the west.

Pentagon corners other than the poles are shared by exactly two roots, like
any other boundary cell.
"""

from __future__ import annotations

from collections.abc import Iterator

from geogrid.errors import OutOfBoundsError
from geogrid.geogrid_logging import create_module_logger
from geogrid.grid.boundary import BOUNDARY_EDGES, RootEdge, root_edge_of
from geogrid.grid.dir import Dir
from geogrid.grid.grid_point import GridPoint
from geogrid.grid.root import ROOTS

_logger = create_module_logger()

NORTH_POLE_OWNER = ROOTS[0]
SOUTH_POLE_OWNER = ROOTS[-1]


def check_within_root(point: GridPoint, resolution) -> None:
    """Raise ``OutOfBoundsError`` unless ``point`` lies inside its root quad."""
    if not (0 <= point.x <= resolution[0] and 0 <= point.y <= resolution[1]):
        raise OutOfBoundsError(point, tuple(resolution))


def is_north_pole(point: GridPoint, resolution) -> bool:
    return point.x == 0 and point.y == 0


def is_south_pole(point: GridPoint, resolution) -> bool:
    return point.x == resolution[0] and point.y == resolution[1]


def equivalent_points(point: GridPoint, resolution) -> Iterator[GridPoint]:
    """Yield every name for the cell at ``point``, including ``point`` itself.

    A pole has five names (one per root, in root order), any other boundary
    cell has two, and interior cells have only their own.

    Raises:
        OutOfBoundsError: if ``point`` lies outside its root
    """
    check_within_root(point, resolution)

    if is_north_pole(point, resolution) or is_south_pole(point, resolution):
        for root in ROOTS:
            yield point.with_root(root)
        return

    yield point
    edge = root_edge_of(point, resolution)
    if edge is not None:
        yield BOUNDARY_EDGES[edge].map_point(point, resolution[0])


def _disowned_edge(point: GridPoint, resolution) -> RootEdge | None:
    # The edge a non-pole point lies on that its current root does not own.
    w = resolution[0]
    if point.y == 0:
        return RootEdge.NORTH_WEST
    if point.x == w:
        return RootEdge.WEST if point.y < w else RootEdge.SOUTH_WEST
    return None


def canonicalize(point: GridPoint, resolution) -> GridPoint:
    """Express ``point`` in the root that owns it.

    Idempotent, and the same type (2D or 3D) comes back as went in.

    Raises:
        OutOfBoundsError: if ``point`` lies outside its root
    """
    check_within_root(point, resolution)

    if is_north_pole(point, resolution):
        return point.with_root(NORTH_POLE_OWNER)
    if is_south_pole(point, resolution):
        return point.with_root(SOUTH_POLE_OWNER)

    edge = _disowned_edge(point, resolution)
    if edge is None:
        return point
    return BOUNDARY_EDGES[edge].map_point(point, resolution[0])


def is_canonical(point: GridPoint, resolution) -> bool:
    return canonicalize(point, resolution) == point


def rebase_on_owning_root(
    point: GridPoint, dir: Dir, resolution
) -> tuple[GridPoint, Dir]:
    """Canonicalize ``point`` and carry ``dir`` along into the owning root.

    For boundary cells the direction rotates by the crossing's fixed offset.
    A pole is walked root by root to its owner, west for the north pole and
    east for the south pole, and each root crossed turns the direction by two
    units; the deficit of a pentagon means the two walks disagree, so the
    walk direction is fixed.

    Raises:
        OutOfBoundsError: if ``point`` lies outside its root
    """
    check_within_root(point, resolution)

    if is_north_pole(point, resolution):
        steps_west = point.root.index - NORTH_POLE_OWNER.index
        return point.with_root(NORTH_POLE_OWNER), dir.rotated(2 * steps_west)
    if is_south_pole(point, resolution):
        steps_east = SOUTH_POLE_OWNER.index - point.root.index
        return point.with_root(SOUTH_POLE_OWNER), dir.rotated(2 * steps_east)

    edge = _disowned_edge(point, resolution)
    if edge is None:
        return point, dir
    crossing = BOUNDARY_EDGES[edge]
    new_point = crossing.map_point(point, resolution[0])
    _logger.debug(f"rebased {point} onto owning {new_point.root} across {edge.name}")
    return new_point, crossing.map_dir(dir)
