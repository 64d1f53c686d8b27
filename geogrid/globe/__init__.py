"""Globe-level configuration and geometry built on the grid.

- GlobeSpec: the validated parameters of a globe, and cell positions in space
- ChunkOrigin: validated chunk storage keys and chunk ownership rules
- GlobeSurface: a whole-globe column index for small globes
- project: root-quad coordinates onto the unit sphere via the icosahedron
"""

from geogrid.globe.chunk_origin import (
    ChunkOrigin,
    chunk_contains,
    is_point_shared,
    origin_of_chunk_in_same_root_containing,
    origin_of_chunk_owning,
)
from geogrid.globe.icosahedron import FACES, VERTICES, project
from geogrid.globe.spec import GlobeSpec
from geogrid.globe.surface import GlobeSurface

__all__ = [
    "FACES",
    "VERTICES",
    "ChunkOrigin",
    "GlobeSpec",
    "GlobeSurface",
    "chunk_contains",
    "is_point_shared",
    "origin_of_chunk_in_same_root_containing",
    "origin_of_chunk_owning",
    "project",
]
