"""Stepping and turning across the whole globe.

Positions are always expressed in some root's regular hex-grid coordinates;
pentagon behaviour emerges from the triangle and exit tables in
:mod:`geogrid.movement.triangles` rather than being special-cased.
All operations take and return plain values: ``(pos, dir)`` for moves and
turns, plus the turn bias for the compound step operations.
"""

from geogrid.grid.dir import TurnDir
from geogrid.movement.step import (
    move_forward,
    step_backward_and_face_neighbor,
    step_forward_and_face_neighbor,
)
from geogrid.movement.turn import (
    turn_around_and_face_neighbor,
    turn_by_one_hex_edge,
    turn_left_by_one_hex_edge,
    turn_right_by_one_hex_edge,
)
from geogrid.movement.util import adjacent_pos_in_dir, is_on_root_edge, is_pentagon

__all__ = [
    "TurnDir",
    "adjacent_pos_in_dir",
    "is_on_root_edge",
    "is_pentagon",
    "move_forward",
    "step_backward_and_face_neighbor",
    "step_forward_and_face_neighbor",
    "turn_around_and_face_neighbor",
    "turn_by_one_hex_edge",
    "turn_left_by_one_hex_edge",
    "turn_right_by_one_hex_edge",
]
