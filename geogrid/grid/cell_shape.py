"""Offsets from a cell to its neighbors within a single root."""

from geogrid.grid.grid_point import GridCoord

# Indexed by ``dir.index // 2``; each successive offset is one hex edge
# further counter-clockwise, starting from the positive x-axis.
NEIGHBOR_OFFSETS: tuple[tuple[GridCoord, GridCoord], ...] = (
    (1, 0),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (0, -1),
    (1, -1),
)

# Offsets from a cell's center to the middle of each side and each vertex, in
# a grid with six units between neighboring cell centers so that every vertex
# lands on integer coordinates. Indexed by ``dir.index``; even indexes are
# edge midpoints, odd indexes are vertices.
DIR_OFFSETS: tuple[tuple[GridCoord, GridCoord], ...] = (
    (3, 0),
    (2, 2),
    (0, 3),
    (-2, 4),
    (-3, 3),
    (-4, 2),
    (-3, 0),
    (-2, -2),
    (0, -3),
    (2, -4),
    (3, -3),
    (4, -2),
)
