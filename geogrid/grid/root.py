"""The five root quads of the icosahedron and how they are wired together.

Each root is a rhombus made of two pairs of icosahedron faces, unrolled into a
quadrilateral grid running from the north pole to the south pole. The roots
form a closed ring; stepping east from root 4 brings you back to root 0.
"""

from dataclasses import dataclass

from geogrid.errors import RootIndexError

ROOT_COUNT = 5


@dataclass(frozen=True, slots=True, order=True)
class Root:
    """One of the five root quads.

    Attributes:
        index: position of the root in the ring, ``0 <= index < 5``.

    Raw indexes outside that range are rejected with ``RootIndexError``
    rather than wrapped.
    """

    index: int = 0

    def __post_init__(self):
        if not 0 <= self.index < ROOT_COUNT:
            raise RootIndexError(self.index)

    def next_east(self) -> "Root":
        """The root adjacent to this one on its eastern side."""
        return Root((self.index + 1) % ROOT_COUNT)

    def next_west(self) -> "Root":
        """The root adjacent to this one on its western side."""
        return Root((self.index + ROOT_COUNT - 1) % ROOT_COUNT)

    def offset(self, root_offset: int) -> "Root":
        """The root ``root_offset`` steps east of this one (negative for west)."""
        return Root((self.index + root_offset) % ROOT_COUNT)

    def __repr__(self) -> str:
        return f"Root({self.index})"


ROOTS: tuple[Root, ...] = tuple(Root(index) for index in range(ROOT_COUNT))
