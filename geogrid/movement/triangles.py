"""The twelve triangles movement calculations are reduced to.

Each root quad can be covered by twelve triangles that are congruent to the
arctic triangle of root 0: the triangle with its apex at the north pole whose
x-axis runs along ``y == 0`` and whose y-axis runs along ``x == 0``. Every
point in a root lies between the x-axis and y-axis of at least one of them.

To move or turn near a root edge we pick a triangle, transform the position
and direction into its frame, work out what happens as if we were next to
the north pole, and then transform back out through one of the triangle's
*exits*. The exits list the triangles that share the same apex, travelling
anticlockwise around it; for the five triangles around a pentagon they span
five different frames (some in neighboring roots), for the others only the
first exit matters. Exit 0 is always the triangle itself.

Apexes are given in multiples of the root width ``w``::

    index  apex     x-axis direction
    0      (0, 0)   0     north pole
    1      (1, 0)   4     west pentagon
    2      (0, 1)   8     north-east pentagon
    3      (1, 1)   6     south-west pentagon
    4      (0, 1)   10    north-east pentagon
    5      (1, 0)   2     west pentagon
    6      (0, 1)   0     north-east pentagon
    7      (1, 1)   4     south-west pentagon
    8      (0, 2)   8     east pentagon
    9      (1, 2)   6     south pole
    10     (0, 2)   10    east pentagon
    11     (1, 1)   2     south-west pentagon
"""

from dataclasses import dataclass

import numpy as np

from geogrid.grid.cell_shape import NEIGHBOR_OFFSETS
from geogrid.grid.grid_point import GridCoord


@dataclass(frozen=True, slots=True)
class Exit:
    """A triangle sharing an apex, and the root it lives in relative to ours."""

    triangle_index: int
    root_offset: int


@dataclass(frozen=True, slots=True)
class Triangle:
    apex: tuple[int, int]
    x_dir: int
    exits: tuple[Exit, Exit, Exit, Exit, Exit]

    @property
    def y_dir(self) -> int:
        return (self.x_dir + 2) % 12

    def apex_at(self, resolution) -> np.ndarray:
        """The apex in grid coordinates for a root of the given resolution."""
        # Both parts of the apex are expressed in terms of the x-dimension.
        return np.array(self.apex, dtype=np.int64) * resolution[0]

    def to_world_matrix(self) -> np.ndarray:
        """Columns are this triangle's x- and y-axes in root coordinates."""
        x_edge = NEIGHBOR_OFFSETS[self.x_dir // 2]
        y_edge = NEIGHBOR_OFFSETS[self.y_dir // 2]
        return np.array(
            [[x_edge[0], y_edge[0]], [x_edge[1], y_edge[1]]], dtype=np.int64
        )

    def to_local_matrix(self) -> np.ndarray:
        """Inverse of ``to_world_matrix``.

        Every pair of adjacent axes has determinant 1, so the inverse is just
        the adjugate and stays in integers.
        """
        x_edge = NEIGHBOR_OFFSETS[self.x_dir // 2]
        y_edge = NEIGHBOR_OFFSETS[self.y_dir // 2]
        return np.array(
            [[y_edge[1], -y_edge[0]], [-x_edge[1], x_edge[0]]], dtype=np.int64
        )

    def is_apex_at(self, x: GridCoord, y: GridCoord, resolution) -> bool:
        ax, ay = self.apex_at(resolution)
        return ax == x and ay == y


def _exits(*pairs: tuple[int, int]) -> tuple[Exit, ...]:
    return tuple(Exit(index, root_offset) for index, root_offset in pairs)


TRIANGLES: tuple[Triangle, ...] = (
    # 0: north pole
    Triangle((0, 0), 0, _exits((0, 0), (0, 1), (0, 2), (0, 3), (0, 4))),
    # 1: west pentagon, pointing toward the north-east pentagon
    Triangle((1, 0), 4, _exits((1, 0), (2, 4), (4, 4), (6, 4), (5, 0))),
    # 2: north-east pentagon, pointing toward the north pole
    Triangle((0, 1), 8, _exits((2, 0), (4, 0), (6, 0), (5, 1), (1, 1))),
    # 3: south-west pentagon, pointing toward the north-east pentagon
    Triangle((1, 1), 6, _exits((3, 0), (8, 4), (10, 4), (11, 0), (7, 0))),
    # 4: north-east pentagon, pointing toward the west pentagon
    Triangle((0, 1), 10, _exits((4, 0), (6, 0), (5, 1), (1, 1), (2, 0))),
    # 5: west pentagon, pointing toward the south-west pentagon
    Triangle((1, 0), 2, _exits((5, 0), (1, 0), (2, 4), (4, 4), (6, 4))),
    # 6: north-east pentagon, pointing toward the south-west pentagon
    Triangle((0, 1), 0, _exits((6, 0), (5, 1), (1, 1), (2, 0), (4, 0))),
    # 7: south-west pentagon, pointing toward the east pentagon
    Triangle((1, 1), 4, _exits((7, 0), (3, 0), (8, 4), (10, 4), (11, 0))),
    # 8: east pentagon, pointing toward the north-east pentagon
    Triangle((0, 2), 8, _exits((8, 0), (10, 0), (11, 1), (7, 1), (3, 1))),
    # 9: south pole
    Triangle((1, 2), 6, _exits((9, 0), (9, 4), (9, 3), (9, 2), (9, 1))),
    # 10: east pentagon, pointing toward the south-west pentagon
    Triangle((0, 2), 10, _exits((10, 0), (11, 1), (7, 1), (3, 1), (8, 0))),
    # 11: south-west pentagon, pointing toward the south pole
    Triangle((1, 1), 2, _exits((11, 0), (7, 0), (3, 0), (8, 4), (10, 4))),
)
