"""How the edges of each root quad are glued to its neighbors.

Every root quad is bounded by six edge segments. Each segment is shared with
exactly one neighboring root, and the cells on it have a second name in that
neighbor's frame. The table below is the single source of truth for that
wiring: for each segment it records which root lies across it, the integer
affine map taking local coordinates into that root's frame, and how far
directions rotate when crossing. The wiring is the same for every root
because the five roots are rotations of one another about the polar axis.

Root quad, with the six pentagon corners marked::

                  (0, 0) north pole
                   /  \\
       NORTH_WEST /    \\ NORTH_EAST
                 /      \\
        (w, 0)  ◌        ◌ (0, w)
                 \\        \\
            WEST  \\        \\  EAST
                   \\        \\
           (w, w)  ◌        ◌ (0, 2w)
                    \\      /
          SOUTH_WEST \\    / SOUTH_EAST
                      \\  /
                   (w, 2w) south pole

The two poles lie on several segments at once and are shared by all five
roots; callers handle them before consulting this table.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from geogrid.grid.dir import Dir
from geogrid.grid.grid_point import GridCoord, GridPoint


class RootEdge(Enum):
    """The six boundary segments of a root quad."""

    NORTH_WEST = "north_west"  # y == 0
    NORTH_EAST = "north_east"  # x == 0, y < w
    EAST = "east"  # x == 0, y >= w
    WEST = "west"  # x == w, y < w
    SOUTH_EAST = "south_east"  # y == 2w
    SOUTH_WEST = "south_west"  # x == w, y >= w


@dataclass(frozen=True, slots=True)
class BoundaryCrossing:
    """Everything needed to re-express a point across one root edge.

    Attributes:
        edge: the segment being crossed
        opposite_edge: the same segment as seen from the neighboring root
        root_offset: +1 when the neighbor is to the east, -1 when to the west
        transform: rows of coefficients over ``(x, y, w)`` giving the new
            ``x`` and ``y``
        dir_rotation: twelfths of a turn added to directions when crossing
    """

    edge: RootEdge
    opposite_edge: RootEdge
    root_offset: int
    transform: tuple[tuple[int, int, int], tuple[int, int, int]]
    dir_rotation: int

    def map_xy(
        self, x: GridCoord, y: GridCoord, w: GridCoord
    ) -> tuple[GridCoord, GridCoord]:
        (ax, bx, cx), (ay, by, cy) = self.transform
        return ax * x + bx * y + cx * w, ay * x + by * y + cy * w

    def map_point(self, point: GridPoint, w: GridCoord) -> GridPoint:
        x, y = self.map_xy(point.x, point.y, w)
        return point.with_root(point.root.offset(self.root_offset)).with_xy(x, y)

    def map_dir(self, dir: Dir) -> Dir:
        return dir.rotated(self.dir_rotation)


BOUNDARY_EDGES: dict[RootEdge, BoundaryCrossing] = {
    crossing.edge: crossing
    for crossing in (
        # (x, 0) in root r is (0, x) in root r - 1.
        BoundaryCrossing(
            RootEdge.NORTH_WEST,
            RootEdge.NORTH_EAST,
            root_offset=-1,
            transform=((0, -1, 0), (1, 1, 0)),
            dir_rotation=2,
        ),
        # (0, y) in root r is (y, 0) in root r + 1.
        BoundaryCrossing(
            RootEdge.NORTH_EAST,
            RootEdge.NORTH_WEST,
            root_offset=1,
            transform=((1, 1, 0), (-1, 0, 0)),
            dir_rotation=-2,
        ),
        # (0, y) in root r is (w, y - w) in root r + 1.
        BoundaryCrossing(
            RootEdge.EAST,
            RootEdge.WEST,
            root_offset=1,
            transform=((1, 0, 1), (0, 1, -1)),
            dir_rotation=0,
        ),
        # (w, y) in root r is (0, y + w) in root r - 1.
        BoundaryCrossing(
            RootEdge.WEST,
            RootEdge.EAST,
            root_offset=-1,
            transform=((1, 0, -1), (0, 1, 1)),
            dir_rotation=0,
        ),
        # (x, 2w) in root r is (w, x + w) in root r + 1.
        BoundaryCrossing(
            RootEdge.SOUTH_EAST,
            RootEdge.SOUTH_WEST,
            root_offset=1,
            transform=((0, -1, 3), (1, 1, -1)),
            dir_rotation=2,
        ),
        # (w, y) in root r is (y - w, 2w) in root r - 1.
        BoundaryCrossing(
            RootEdge.SOUTH_WEST,
            RootEdge.SOUTH_EAST,
            root_offset=-1,
            transform=((1, 1, -2), (-1, 0, 3)),
            dir_rotation=-2,
        ),
    )
}


def root_edge_of(point: GridPoint, resolution) -> RootEdge | None:
    """Which boundary segment ``point`` lies on, or None for interior points.

    Corner points lie on two segments; the first matching segment in
    ``RootEdge`` order wins, which always names the neighbor that shares the
    cell. Poles are not given special treatment here.
    """
    w, h = resolution[0], resolution[1]
    x, y = point.x, point.y
    if x == 0 and y < w:
        return RootEdge.NORTH_EAST
    if y == 0:
        return RootEdge.NORTH_WEST
    if x == 0:
        return RootEdge.EAST
    if x == w and y < w:
        return RootEdge.WEST
    if y == h:
        return RootEdge.SOUTH_EAST
    if x == w:
        return RootEdge.SOUTH_WEST
    return None


def cross_root_edge(point: GridPoint, edge: RootEdge, resolution) -> GridPoint:
    """Re-express ``point`` in the frame of the root across ``edge``."""
    return BOUNDARY_EDGES[edge].map_point(point, resolution[0])
