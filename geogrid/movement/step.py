from geogrid.errors import IllegalDirectionError, MovementCaseError
from geogrid.geogrid_logging import create_module_logger
from geogrid.grid.dir import Dir, TurnDir
from geogrid.grid.equivalent_points import check_within_root
from geogrid.grid.grid_point import GridPoint
from geogrid.movement.transform import world_to_local
from geogrid.movement.turn import turn_around_and_face_neighbor
from geogrid.movement.util import (
    adjacent_pos_in_dir,
    closest_triangle_to_point,
    is_on_root_edge,
    is_pentagon,
    transform_into_exit_triangle,
    triangle_on_pos_with_closest_mid_axis,
)

_logger = create_module_logger()


def step_forward_and_face_neighbor(
    pos: GridPoint, dir: Dir, resolution, last_turn_bias: TurnDir
) -> tuple[GridPoint, Dir, TurnDir]:
    """Move forward one cell, then make sure ``dir`` faces a neighbor.

    Stepping onto a pentagon can leave us facing a vertex; in that case turn
    one unit, alternating the turn bias each time, so that repeated steps
    spiral neither left nor right on average.

    Returns:
        the new ``(pos, dir, last_turn_bias)``

    Raises:
        OutOfBoundsError: if ``pos`` is outside its root, or the step leaves it
        IllegalDirectionError: if ``dir`` points at a cell vertex
    """
    pos, dir = move_forward(pos, dir, resolution)

    if is_pentagon(pos, resolution):
        last_turn_bias = last_turn_bias.opposite()
        dir = last_turn_bias.apply_one_unit(dir)

    return pos, dir, last_turn_bias


def step_backward_and_face_neighbor(
    pos: GridPoint, dir: Dir, resolution, last_turn_bias: TurnDir
) -> tuple[GridPoint, Dir, TurnDir]:
    """Exactly undo ``step_forward_and_face_neighbor``.

    Turns around, steps forward, and turns around again, flipping the turn
    bias whenever a turn around happens on a pentagon.
    """
    pos, dir = turn_around_and_face_neighbor(pos, dir, resolution, last_turn_bias)
    if is_pentagon(pos, resolution):
        last_turn_bias = last_turn_bias.opposite()

    pos, dir, last_turn_bias = step_forward_and_face_neighbor(
        pos, dir, resolution, last_turn_bias
    )

    pos, dir = turn_around_and_face_neighbor(pos, dir, resolution, last_turn_bias)
    if is_pentagon(pos, resolution):
        last_turn_bias = last_turn_bias.opposite()

    return pos, dir, last_turn_bias


def move_forward(
    pos: GridPoint, dir: Dir, resolution
) -> tuple[GridPoint, Dir]:
    """Move one cell forward in the direction faced.

    Steps that stay within the root are plain coordinate arithmetic. If the
    new cell lies on a root edge, the result is rebased onto whichever root
    quad is being faced, and ``dir`` is rotated to match that root's frame.
    After arriving on a pentagon ``dir`` may point at a vertex; see
    ``step_forward_and_face_neighbor`` for a version that corrects that.

    Raises:
        OutOfBoundsError: if ``pos`` is outside its root, or if the step
            leaves it (``pos`` and ``dir`` were not in canonical form)
        IllegalDirectionError: if ``dir`` points at a cell vertex
    """
    check_within_root(pos, resolution)

    if not dir.points_at_hex_edge():
        raise IllegalDirectionError(dir)

    pos = adjacent_pos_in_dir(pos, dir)
    check_within_root(pos, resolution)

    return _rebase_following_movement(pos, dir, resolution)


def _rebase_following_movement(
    pos: GridPoint, dir: Dir, resolution
) -> tuple[GridPoint, Dir]:
    if not is_on_root_edge(pos, resolution):
        return pos, dir

    if is_pentagon(pos, resolution):
        # Choose by the way we came in, so we stay in the quad we came from.
        tri = triangle_on_pos_with_closest_mid_axis(pos, dir.opposite(), resolution)
    else:
        tri = closest_triangle_to_point(pos, resolution)

    start_root = pos.root
    pos, dir = world_to_local(pos, dir, resolution, tri)
    next_pos = adjacent_pos_in_dir(pos, dir)

    if next_pos.x >= 0 and next_pos.y >= 0:
        tri_exit = tri.exits[0]
    elif pos.x == 0 and pos.y == 0 and dir.index == 6:
        # On the apex, facing back along the x-axis.
        dir = Dir(1)
        tri_exit = tri.exits[2]
    elif pos.x == 0 and pos.y == 0 and dir.index == 8:
        # On the apex, facing back along the y-axis.
        dir = Dir(1)
        tri_exit = tri.exits[3]
    elif next_pos.x < 0:
        pos = pos.with_xy(pos.y, 0)
        dir = dir.next_hex_edge_right()
        tri_exit = tri.exits[1]
    elif next_pos.y < 0:
        pos = pos.with_xy(0, pos.x)
        dir = dir.next_hex_edge_left()
        tri_exit = tri.exits[4]
    else:
        raise MovementCaseError(f"no movement case for {pos} facing {dir}")

    pos, dir = transform_into_exit_triangle(pos, dir, resolution, tri_exit)
    if pos.root != start_root:
        _logger.debug(f"moved from {start_root} onto {pos.root} at {pos}")
    return pos, dir
