"""A unit icosahedron, and projection of root quads onto the unit sphere.

Faces are listed four at a time per root quad, from the north pole to the
south pole, so face ``4 * root + i`` belongs to root ``root``. Within each
root quad the first face has the north pole as its first vertex, and the
last face has the south pole as its first vertex.
"""

import numpy as np

from geogrid.grid.root import Root

# Golden ratio
PHI = (1.0 + np.sqrt(5.0)) / 2.0

# Scale factor to get a unit icosahedron.
FACTOR = 0.5257311121191336

A = FACTOR
B = PHI * FACTOR

VERTICES = np.array(
    [
        [0.0, A, B],
        [0.0, -A, B],
        [0.0, -A, -B],
        [0.0, A, -B],
        [A, B, 0.0],
        [-A, B, 0.0],
        [-A, -B, 0.0],
        [A, -B, 0.0],
        [B, 0.0, A],
        [-B, 0.0, A],
        [-B, 0.0, -A],
        [B, 0.0, -A],
    ]
)

FACES = np.array(
    [
        # root 0
        [0, 1, 8],
        [7, 8, 1],
        [8, 7, 11],
        [2, 11, 7],
        # root 1
        [0, 8, 4],
        [11, 4, 8],
        [4, 11, 3],
        [2, 3, 11],
        # root 2
        [0, 4, 5],
        [3, 5, 4],
        [5, 3, 10],
        [2, 10, 3],
        # root 3
        [0, 5, 9],
        [10, 9, 5],
        [9, 10, 6],
        [2, 6, 10],
        # root 4
        [0, 9, 1],
        [6, 1, 9],
        [1, 6, 7],
        [2, 7, 6],
    ]
)

NORTH_POLE = VERTICES[0]
SOUTH_POLE = VERTICES[2]


def root_quad_corners(root: Root) -> np.ndarray:
    """The six icosahedron vertices touched by a root quad.

    In order: north pole, west, north-east, south-west, east, south pole;
    i.e. the root-quad points ``(0, 0)``, ``(1, 0)``, ``(0, 1)``, ``(1, 1)``,
    ``(0, 2)`` and ``(1, 2)`` in units of the root width.
    """
    faces = FACES[root.index * 4 : root.index * 4 + 4]
    return VERTICES[
        [faces[0][0], faces[0][1], faces[1][1], faces[1][0], faces[3][1], faces[3][0]]
    ]


def project(root: Root, pt_in_root_quad) -> np.ndarray:
    """Project a point in a root quad onto the unit sphere.

    Args:
        root: the root quad the point is expressed in
        pt_in_root_quad: ``(x, y)`` as fractions of the root resolution, so
            both lie in ``[0, 1]``

    Returns:
        a unit vector
    """
    a, b, c, d, e, f = root_quad_corners(root)
    x, y = float(pt_in_root_quad[0]), float(pt_in_root_quad[1])

    # The quad is two units tall, so stretch y to match.
    y *= 2.0

    # Figure out which triangle we're in, and interpolate across it from
    # whichever corner makes the barycentric weights simplest.
    if x + y < 1.0:
        pt_on_icosahedron = a + (b - a) * x + (c - a) * y
    elif y < 1.0:
        pt_on_icosahedron = d + (c - d) * (1.0 - x) + (b - d) * (1.0 - y)
    elif x + y < 2.0:
        y -= 1.0
        pt_on_icosahedron = c + (d - c) * x + (e - c) * y
    else:
        y -= 1.0
        pt_on_icosahedron = f + (e - f) * (1.0 - x) + (d - f) * (1.0 - y)

    return pt_on_icosahedron / np.linalg.norm(pt_on_icosahedron)
