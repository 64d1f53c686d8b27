"""Surface and volume coordinates within a root quad.

``GridPoint2`` names a column on the surface of the globe and ``GridPoint3``
adds a depth/height coordinate on top of it. Both are immutable value types;
the ``with_*`` methods return new points rather than changing the receiver.

Equality and hashing are structural, so two names for the same physical cell
on a root boundary compare unequal until they are canonicalized (see
:mod:`geogrid.grid.equivalent_points`).
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from geogrid.grid.root import Root

GridCoord = int


def _as_root(root: Root | int) -> Root:
    return root if isinstance(root, Root) else Root(root)


@dataclass(frozen=True, slots=True)
class GridPoint2:
    """A column on the globe's surface, in the frame of one root quad."""

    root: Root = Root(0)
    x: GridCoord = 0
    y: GridCoord = 0

    def __post_init__(self):
        object.__setattr__(self, "root", _as_root(self.root))

    def with_root(self, root: Root | int) -> GridPoint2:
        return replace(self, root=_as_root(root))

    def with_x(self, x: GridCoord) -> GridPoint2:
        return replace(self, x=x)

    def with_y(self, y: GridCoord) -> GridPoint2:
        return replace(self, y=y)

    def with_xy(self, x: GridCoord, y: GridCoord) -> GridPoint2:
        return replace(self, x=x, y=y)

    def with_z(self, z: GridCoord) -> GridPoint3:
        """Promote this column to a cell at depth ``z``."""
        return GridPoint3(self.root, self.x, self.y, z)

    def __repr__(self) -> str:
        return f"GridPoint2(root={self.root.index}, x={self.x}, y={self.y})"


@dataclass(frozen=True, slots=True)
class GridPoint3:
    """A cell in the volume of the globe, in the frame of one root quad."""

    root: Root = Root(0)
    x: GridCoord = 0
    y: GridCoord = 0
    z: GridCoord = 0

    def __post_init__(self):
        object.__setattr__(self, "root", _as_root(self.root))

    @property
    def rxy(self) -> GridPoint2:
        """The column this cell sits in."""
        return GridPoint2(self.root, self.x, self.y)

    def with_root(self, root: Root | int) -> GridPoint3:
        return replace(self, root=_as_root(root))

    def with_x(self, x: GridCoord) -> GridPoint3:
        return replace(self, x=x)

    def with_y(self, y: GridCoord) -> GridPoint3:
        return replace(self, y=y)

    def with_xy(self, x: GridCoord, y: GridCoord) -> GridPoint3:
        return replace(self, x=x, y=y)

    def with_z(self, z: GridCoord) -> GridPoint3:
        return replace(self, z=z)

    def sort_key(self) -> tuple[int, GridCoord, GridCoord, GridCoord]:
        """Order by root, then z, then y, then x.

        This matches the order cells are laid out in chunk storage.
        """
        return (self.root.index, self.z, self.y, self.x)

    def __repr__(self) -> str:
        return (
            f"GridPoint3(root={self.root.index}, x={self.x}, y={self.y}, z={self.z})"
        )


GridPoint = GridPoint2 | GridPoint3
