from geogrid.errors import IllegalDirectionError, MovementCaseError
from geogrid.grid.dir import Dir, TurnDir
from geogrid.grid.equivalent_points import check_within_root
from geogrid.grid.grid_point import GridPoint
from geogrid.movement.transform import world_to_local
from geogrid.movement.util import (
    adjacent_pos_in_dir,
    closest_triangle_to_point,
    is_on_root_edge,
    is_pentagon,
    transform_into_exit_triangle,
    triangle_on_pos_with_closest_mid_axis,
)


def turn_left_by_one_hex_edge(
    pos: GridPoint, dir: Dir, resolution
) -> tuple[GridPoint, Dir]:
    """See ``turn_by_one_hex_edge``."""
    return turn_by_one_hex_edge(pos, dir, resolution, TurnDir.LEFT)


def turn_right_by_one_hex_edge(
    pos: GridPoint, dir: Dir, resolution
) -> tuple[GridPoint, Dir]:
    """See ``turn_by_one_hex_edge``."""
    return turn_by_one_hex_edge(pos, dir, resolution, TurnDir.RIGHT)


def turn_by_one_hex_edge(
    pos: GridPoint, dir: Dir, resolution, turn_dir: TurnDir
) -> tuple[GridPoint, Dir]:
    """Turn to face the next hex edge, rebasing onto whichever root quad is
    now faced.

    Only turning from and to directions that are valid for forward movement
    is allowed. The result is unspecified if ``pos`` and ``dir`` are not
    already in their canonical form; i.e. if ``pos`` is on the boundary of two
    root quads, ``dir`` must point into the current quad or along its edge,
    not out of it.

    Args:
        pos: the cell being turned in
        dir: the direction currently faced
        resolution: the root resolution ``(w, 2w)``
        turn_dir: which way to turn

    Returns:
        the new ``(pos, dir)``; ``pos`` names the same cell, possibly in
        another root

    Raises:
        OutOfBoundsError: if ``pos`` is outside its root
        IllegalDirectionError: if ``dir`` points at a cell vertex
    """
    check_within_root(pos, resolution)

    # The special nature of the 12 pentagons only matters at the interface
    # between quads, so here both cells can be treated as hexagons.
    if not dir.points_at_hex_edge():
        raise IllegalDirectionError(dir)

    dir = turn_dir.apply_two_units(dir)
    return _rebase_following_rotation(pos, dir, resolution)


def _rebase_following_rotation(
    pos: GridPoint, dir: Dir, resolution
) -> tuple[GridPoint, Dir]:
    # We only might need to rebase if we're on the boundary of two root quads.
    if not is_on_root_edge(pos, resolution):
        return pos, dir

    if is_pentagon(pos, resolution):
        # Sitting and rotating on a pentagon is the only time it's ambiguous
        # which triangle to use.
        tri = triangle_on_pos_with_closest_mid_axis(pos, dir, resolution)
    else:
        tri = closest_triangle_to_point(pos, resolution)

    pos, dir = world_to_local(pos, dir, resolution, tri)
    next_pos = adjacent_pos_in_dir(pos, dir)

    if next_pos.x >= 0 and next_pos.y >= 0:
        # Still facing into the same quad; transform straight back.
        tri_exit = tri.exits[0]
    elif next_pos.x < 0:
        # Turned left past the local y-axis.
        pos = pos.with_xy(pos.y, 0)
        dir = dir.next_hex_edge_right()
        tri_exit = tri.exits[1]
    elif next_pos.y < 0:
        # Turned right past the local x-axis.
        pos = pos.with_xy(0, pos.x)
        dir = dir.next_hex_edge_left()
        tri_exit = tri.exits[4]
    else:
        raise MovementCaseError(f"no rotation case for {pos} facing {dir}")

    return transform_into_exit_triangle(pos, dir, resolution, tri_exit)


def turn_around_and_face_neighbor(
    pos: GridPoint, dir: Dir, resolution, last_turn_bias: TurnDir
) -> tuple[GridPoint, Dir]:
    """Turn to face the cell directly behind.

    On a pentagon there is no cell directly behind, so turn two hex edges in
    the direction of ``last_turn_bias`` instead of three.

    Raises:
        IllegalDirectionError: if ``dir`` points at a cell vertex
    """
    if is_pentagon(pos, resolution):
        for _ in range(2):
            pos, dir = turn_by_one_hex_edge(pos, dir, resolution, last_turn_bias)
    else:
        for _ in range(3):
            pos, dir = turn_left_by_one_hex_edge(pos, dir, resolution)
    return pos, dir
