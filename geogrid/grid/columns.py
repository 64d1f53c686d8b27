"""Enumerating and sampling the columns of a whole globe."""

from collections.abc import Iterator
from random import Random

from geogrid.grid.equivalent_points import is_canonical
from geogrid.grid.grid_point import GridPoint2
from geogrid.grid.root import ROOTS


def column_count(resolution) -> int:
    """Number of distinct columns on a globe: ``10 * w**2 + 2``."""
    w = resolution[0]
    return 10 * w * w + 2


def iter_columns(resolution) -> Iterator[GridPoint2]:
    """Yield the canonical name of every column on the globe exactly once.

    Columns come out root by root, each root in row order, with the north
    pole first and the south pole last.
    """
    w, h = resolution[0], resolution[1]
    yield GridPoint2(ROOTS[0], 0, 0)
    for root in ROOTS:
        for y in range(1, h + 1):
            for x in range(w):
                yield GridPoint2(root, x, y)
    yield GridPoint2(ROOTS[-1], w, h)


def random_column(resolution, random: Random) -> GridPoint2:
    """Pick a column uniformly at random.

    Samples every position of every root and throws away the names that are
    not canonical, so boundary cells are not over-represented.
    """
    w, h = resolution[0], resolution[1]
    while True:
        candidate = GridPoint2(
            random.choice(ROOTS), random.randint(0, w), random.randint(0, h)
        )
        if is_canonical(candidate, resolution):
            return candidate
