from geogrid.errors import IllegalDirectionError
from geogrid.grid.cell_shape import NEIGHBOR_OFFSETS
from geogrid.grid.dir import Dir
from geogrid.grid.grid_point import GridPoint
from geogrid.movement.transform import local_to_world
from geogrid.movement.triangles import TRIANGLES, Exit, Triangle


def adjacent_pos_in_dir(pos: GridPoint, dir: Dir) -> GridPoint:
    """Get the next cell in the direction faced by ``dir``, ignoring roots.

    The result may therefore lie outside the boundaries of ``pos``'s root.

    Raises:
        IllegalDirectionError: if ``dir`` points at a cell vertex rather
            than at an edge; movement toward vertices is undefined.
    """
    if not dir.points_at_hex_edge():
        raise IllegalDirectionError(dir)

    # Direction 0 points at edge 0, so the edge index is half the direction.
    dx, dy = NEIGHBOR_OFFSETS[dir.index // 2]
    return pos.with_xy(pos.x + dx, pos.y + dy)


def transform_into_exit_triangle(
    pos: GridPoint, dir: Dir, resolution, exit: Exit
) -> tuple[GridPoint, Dir]:
    """Transform local ``pos`` and ``dir`` back out through ``exit``.

    Applies whatever change of root the exit requires.
    """
    pos = pos.with_root(pos.root.offset(exit.root_offset))
    return local_to_world(pos, dir, resolution, TRIANGLES[exit.triangle_index])


def closest_triangle_to_point(pos: GridPoint, resolution) -> Triangle:
    """Pick the closest triangle oriented so ``pos`` lies between its axes.

    If ``pos`` is on a pentagon you probably want
    ``triangle_on_pos_with_closest_mid_axis`` instead.
    """
    # Only consider triangles whose axes embrace `pos`. Picking a differently
    # oriented triangle with the same apex could needlessly push us into a
    # neighboring quad.
    w, h = resolution[0], resolution[1]
    if pos.x + pos.y < w:
        candidates = TRIANGLES[0:3]
    elif pos.y < w:
        candidates = TRIANGLES[3:6]
    elif pos.x + pos.y < h:
        candidates = TRIANGLES[6:9]
    else:
        candidates = TRIANGLES[9:12]

    def distance_from_apex(triangle):
        ax, ay = triangle.apex_at(resolution)
        return abs(pos.x - ax) + abs(pos.y - ay)

    return min(candidates, key=distance_from_apex)


def triangle_on_pos_with_closest_mid_axis(
    pos: GridPoint, dir: Dir, resolution
) -> Triangle:
    """Of the triangles with their apex at ``pos``, pick the one whose middle
    axis (half-way between its x-axis and y-axis) is closest to ``dir``.

    Used for rebasing while sitting on a pentagon, where it is otherwise
    ambiguous which triangle to use.

    Raises:
        ValueError: if no triangle has its apex at ``pos``
    """
    on_apex = [
        triangle
        for triangle in TRIANGLES
        if triangle.is_apex_at(pos.x, pos.y, resolution)
    ]
    if not on_apex:
        raise ValueError(f"{pos} is not a pentagon at resolution {resolution}")

    def angle_to_middle_axis(triangle):
        a = (triangle.x_dir + 1) % 12 - dir.index
        if a > 6:
            a -= 12
        elif a < -6:
            a += 12
        return abs(a)

    return min(on_apex, key=angle_to_middle_axis)


def is_pentagon(pos: GridPoint, resolution) -> bool:
    """Whether ``pos`` is one of the six pentagon corners of its root quad::

                 ◌ north
                / \\
               /   \\
         west ◌     ◌ north-east
               \\     \\
                \\     \\
      south-west ◌     ◌ east
                  \\   /
                   \\ /
              south ◌
    """
    w, h = resolution[0], resolution[1]
    return pos.x in (0, w) and pos.y in (0, w, h)


def is_on_root_edge(pos: GridPoint, resolution) -> bool:
    return pos.x == 0 or pos.y == 0 or pos.x == resolution[0] or pos.y == resolution[1]
