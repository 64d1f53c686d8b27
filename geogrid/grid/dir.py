"""Directions for stepping between cells.

A ``Dir`` is one of twelve compass indexes around a hexagonal cell. Even
indexes point at the middle of a hex edge (and therefore at a neighboring
cell); odd indexes point at a vertex between two edges. Index 0 points along
the positive x-axis of the current root and indexes increase
counter-clockwise, so index 2 points along the positive y-axis.
"""

from dataclasses import dataclass
from enum import Enum

DIR_COUNT = 12


@dataclass(frozen=True, slots=True)
class Dir:
    """A direction, always reduced modulo 12 on construction."""

    index: int = 0

    def __post_init__(self):
        object.__setattr__(self, "index", self.index % DIR_COUNT)

    def opposite(self) -> "Dir":
        return Dir(self.index + 6)

    def next_hex_edge_left(self) -> "Dir":
        return Dir(self.index + 2)

    def next_hex_edge_right(self) -> "Dir":
        return Dir(self.index - 2)

    def points_at_hex_edge(self) -> bool:
        """Whether this direction faces a neighboring cell (as if in a hexagon)."""
        return self.index % 2 == 0

    def rotated(self, units: int) -> "Dir":
        """Rotate counter-clockwise by ``units`` twelfths of a turn."""
        return Dir(self.index + units)

    def __repr__(self) -> str:
        return f"Dir({self.index})"


class TurnDir(Enum):
    """Which way to turn; also used as the turn bias when circling pentagons."""

    LEFT = "left"
    RIGHT = "right"

    def opposite(self) -> "TurnDir":
        return TurnDir.RIGHT if self is TurnDir.LEFT else TurnDir.LEFT

    def apply_one_unit(self, dir: Dir) -> Dir:
        """Turn one unit left or right.

        This does not turn from one hexagon edge to another, but from an edge
        to a vertex, or vice versa. It never rebases onto another root quad,
        so the result is not necessarily the canonical form of that direction.
        """
        return dir.rotated(1 if self is TurnDir.LEFT else -1)

    def apply_two_units(self, dir: Dir) -> Dir:
        """Turn two units left or right, from edge to edge or vertex to vertex.

        Like ``apply_one_unit`` this never rebases onto another root quad.
        """
        return dir.rotated(2 if self is TurnDir.LEFT else -2)
