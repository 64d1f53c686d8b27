"""geogrid: discrete coordinates on a geodesic (icosahedral hexagon) grid.

Core Objects: Root, Dir, GridPoint2, GridPoint3, GlobeSpec, ChunkOrigin
"""

import datetime

import geogrid.globe as globe
import geogrid.grid as grid
import geogrid.movement as movement
from geogrid.globe import ChunkOrigin, GlobeSpec, GlobeSurface
from geogrid.grid import (
    ROOTS,
    Dir,
    GridPoint2,
    GridPoint3,
    Root,
    TurnDir,
    canonicalize,
    equivalent_points,
    neighbors,
)

__all__ = [
    "ROOTS",
    "ChunkOrigin",
    "Dir",
    "GlobeSpec",
    "GlobeSurface",
    "GridPoint2",
    "GridPoint3",
    "Root",
    "TurnDir",
    "canonicalize",
    "equivalent_points",
    "globe",
    "grid",
    "movement",
    "neighbors",
]

__title__ = "geogrid"
__version__ = "0.1.0"
__license__ = "Apache 2.0"
_this_year = datetime.datetime.now(tz=datetime.UTC).date().year
__copyright__ = f"Copyright {_this_year} geogrid contributors"
