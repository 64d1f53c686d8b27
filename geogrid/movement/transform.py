"""Transforms between root coordinates and the frame of a triangle.

These let most movement calculations assume we're in the arctic triangle of
root 0 (see :mod:`geogrid.movement.triangles`), which keeps the special-case
logic to a minimum. Only ``x`` and ``y`` are transformed; ``z`` rides along
unchanged.
"""

import numpy as np

from geogrid.grid.dir import Dir
from geogrid.grid.grid_point import GridPoint
from geogrid.movement.triangles import Triangle


def local_to_world(
    pos: GridPoint, dir: Dir, resolution, tri: Triangle
) -> tuple[GridPoint, Dir]:
    """Transform ``pos`` and ``dir`` from ``tri``'s frame into root coordinates."""
    new_xy = tri.to_world_matrix() @ np.array([pos.x, pos.y]) + tri.apex_at(
        resolution
    )
    return pos.with_xy(int(new_xy[0]), int(new_xy[1])), dir.rotated(tri.x_dir)


def world_to_local(
    pos: GridPoint, dir: Dir, resolution, tri: Triangle
) -> tuple[GridPoint, Dir]:
    """Transform ``pos`` and ``dir`` to be relative to ``tri``'s apex and axes."""
    from_apex = np.array([pos.x, pos.y]) - tri.apex_at(resolution)
    new_xy = tri.to_local_matrix() @ from_apex
    return pos.with_xy(int(new_xy[0]), int(new_xy[1])), dir.rotated(-tri.x_dir)
