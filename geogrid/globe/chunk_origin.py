"""Validated chunk origins, and which chunk a cell belongs to.

Chunks tile each root quad. Neighboring chunks overlap by one row of cells
along their shared edges so each can be meshed on its own; every shared cell
is still *owned* by exactly one chunk.
"""

from __future__ import annotations

from geogrid.errors import ChunkOriginError
from geogrid.grid.grid_point import GridPoint3


class ChunkOrigin:
    """A ``GridPoint3`` known to be the origin of a chunk.

    Constructing one checks that ``pos`` lies within ``[0, w) x [0, 2w)`` of
    its root, that ``z`` is non-negative, and that every coordinate is a
    multiple of the chunk resolution along that axis.

    The resolution is not remembered, so nothing stops a ``ChunkOrigin``
    from one globe being used with another of a different resolution.

    Raises:
        ChunkOriginError: if ``pos`` is not a valid chunk origin
    """

    __slots__ = ("_pos",)

    def __init__(self, pos: GridPoint3, root_resolution, chunk_resolution) -> None:
        if pos.x < 0 or pos.y < 0 or pos.z < 0:
            raise ChunkOriginError(pos, "coordinates must be non-negative")
        if pos.x >= root_resolution[0] or pos.y >= root_resolution[1]:
            raise ChunkOriginError(
                pos, f"must lie within root resolution {tuple(root_resolution)}"
            )
        for axis, coord, step in zip("xyz", (pos.x, pos.y, pos.z), chunk_resolution):
            if coord % step != 0:
                raise ChunkOriginError(
                    pos, f"{axis} is not a multiple of chunk resolution {step}"
                )
        self._pos = pos

    @property
    def pos(self) -> GridPoint3:
        return self._pos

    def __eq__(self, other):
        if isinstance(other, ChunkOrigin):
            return self._pos == other._pos
        return NotImplemented

    def __hash__(self):
        return hash(self._pos)

    def __repr__(self):
        return f"ChunkOrigin({self._pos!r})"


def origin_of_chunk_owning(
    pos: GridPoint3, root_resolution, chunk_resolution
) -> ChunkOrigin:
    """The chunk that owns the cell at ``pos``.

    ``pos`` must already be canonical. Chunks own the cells on their
    ``local_x == 0`` edge and their ``local_y == chunk_height`` edge; cells on
    the other two edges belong to adjacent chunks. The first chunk in a root
    owns the north pole and the last owns the south pole.
    """
    end_x, end_y = root_resolution[0], root_resolution[1]
    last_chunk_x = (end_x // chunk_resolution[0] - 1) * chunk_resolution[0]
    last_chunk_y = (end_y // chunk_resolution[1] - 1) * chunk_resolution[1]
    # Cells aren't shared by chunks in the z-direction.
    origin_z = pos.z // chunk_resolution[2] * chunk_resolution[2]

    if pos.x == 0 and pos.y == 0:
        origin = GridPoint3(pos.root, 0, 0, origin_z)
    elif pos.x == end_x and pos.y == end_y:
        origin = GridPoint3(pos.root, last_chunk_x, last_chunk_y, origin_z)
    else:
        origin_x = pos.x // chunk_resolution[0] * chunk_resolution[0]
        # Shift down by one in y so the far edge belongs to this chunk.
        origin_y = (pos.y - 1) // chunk_resolution[1] * chunk_resolution[1]
        origin = GridPoint3(pos.root, origin_x, origin_y, origin_z)
    return ChunkOrigin(origin, root_resolution, chunk_resolution)


def origin_of_chunk_in_same_root_containing(
    pos: GridPoint3, root_resolution, chunk_resolution
) -> ChunkOrigin:
    """Some chunk in ``pos``'s own root that contains it.

    The chunk returned won't necessarily own ``pos``.
    """
    end_x, end_y = root_resolution[0], root_resolution[1]
    # Cells on the far edge of the root are in the last chunk.
    if pos.x == end_x:
        origin_x = (end_x // chunk_resolution[0] - 1) * chunk_resolution[0]
    else:
        origin_x = pos.x // chunk_resolution[0] * chunk_resolution[0]
    if pos.y == end_y:
        origin_y = (end_y // chunk_resolution[1] - 1) * chunk_resolution[1]
    else:
        origin_y = pos.y // chunk_resolution[1] * chunk_resolution[1]
    origin_z = pos.z // chunk_resolution[2] * chunk_resolution[2]
    return ChunkOrigin(
        GridPoint3(pos.root, origin_x, origin_y, origin_z),
        root_resolution,
        chunk_resolution,
    )


def is_point_shared(point: GridPoint3, chunk_resolution) -> bool:
    """Whether ``point`` lies on an edge shared by neighboring chunks."""
    return point.x % chunk_resolution[0] == 0 or point.y % chunk_resolution[1] == 0


def chunk_contains(origin: ChunkOrigin, pos: GridPoint3, chunk_resolution) -> bool:
    """Whether ``pos``, in the same root, falls within the chunk at ``origin``.

    Includes the far ``x`` and ``y`` edges, which the chunk shares with its
    neighbors, but not the far ``z`` face.
    """
    o = origin.pos
    return (
        pos.root == o.root
        and o.x <= pos.x <= o.x + chunk_resolution[0]
        and o.y <= pos.y <= o.y + chunk_resolution[1]
        and o.z <= pos.z < o.z + chunk_resolution[2]
    )

