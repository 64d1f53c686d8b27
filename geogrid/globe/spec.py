"""Parameters that fully determine a globe, and geometry derived from them.

``GlobeSpec`` is the configuration object handed to terrain generation and
chunk storage. It is validated when constructed, so any ``GlobeSpec`` that
exists describes a globe the grid can actually address.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from random import Random
from typing import Any

import numpy as np

from geogrid.errors import ConfigurationError
from geogrid.geogrid_logging import create_module_logger
from geogrid.globe.icosahedron import project
from geogrid.grid.grid_point import GridCoord, GridPoint2, GridPoint3

_logger = create_module_logger()


@dataclass(frozen=True, slots=True)
class GlobeSpec:
    """Dimensions and seed needed to deterministically generate a globe.

    Attributes:
        seed: seed for all pseudo-random generation on this globe
        floor_radius: radius of the bottom of the lowest layer of cells
        ocean_radius: radius of the sea surface; avoid making this a neat
            multiple of ``block_height`` above ``floor_radius``, or water and
            air will fight over the same cell boundary
        block_height: height of one layer of cells
        root_resolution: ``(w, 2w)``, the full width and height of each root
            quad in cells
        chunk_resolution: ``(x, y, z)`` size of a chunk in cells; must divide
            the root resolution exactly in ``x`` and ``y``
    """

    seed: int
    floor_radius: float
    ocean_radius: float
    block_height: float
    root_resolution: tuple[GridCoord, GridCoord]
    chunk_resolution: tuple[GridCoord, GridCoord, GridCoord]

    def __post_init__(self):
        object.__setattr__(self, "root_resolution", tuple(self.root_resolution))
        object.__setattr__(self, "chunk_resolution", tuple(self.chunk_resolution))
        self._validate_parameters()
        _logger.debug(f"created {self!r}")

    def _validate_parameters(self) -> None:
        if len(self.root_resolution) != 2:
            raise ConfigurationError("root_resolution", "must have two components")
        if len(self.chunk_resolution) != 3:
            raise ConfigurationError("chunk_resolution", "must have three components")
        if any(r <= 0 for r in self.root_resolution):
            raise ConfigurationError("root_resolution", "must be positive")
        if any(r <= 0 for r in self.chunk_resolution):
            raise ConfigurationError("chunk_resolution", "must be positive")

        # Anything other than a 1:2 ratio leaves it unclear how most
        # movement and canonicalization cases should work.
        if self.root_resolution[1] != 2 * self.root_resolution[0]:
            raise ConfigurationError(
                "root_resolution",
                f"height must be exactly twice the width, got {self.root_resolution}",
            )
        for axis in range(2):
            if self.root_resolution[axis] % self.chunk_resolution[axis] != 0:
                raise ConfigurationError(
                    "chunk_resolution",
                    f"{self.chunk_resolution} does not divide root resolution "
                    f"{self.root_resolution}",
                )

        if self.block_height <= 0:
            raise ConfigurationError("block_height", "must be positive")
        if self.floor_radius <= 0:
            raise ConfigurationError("floor_radius", "must be positive")
        if self.ocean_radius <= self.floor_radius:
            raise ConfigurationError("ocean_radius", "must be above the floor radius")

    @classmethod
    def earth_scale_example(cls) -> GlobeSpec:
        """An Earth-sized globe with cells roughly 0.65m across."""
        ocean_radius = 6_371_000.0
        crust_depth = 60.0
        return cls(
            seed=14,
            floor_radius=ocean_radius - crust_depth,
            ocean_radius=ocean_radius,
            block_height=0.65,
            root_resolution=(8_388_608, 16_777_216),
            # Short chunks expose more chunk-boundary bugs.
            chunk_resolution=(16, 16, 4),
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form, suitable for serialization."""
        data = asdict(self)
        data["root_resolution"] = list(self.root_resolution)
        data["chunk_resolution"] = list(self.chunk_resolution)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GlobeSpec:
        """Build a spec from the output of ``to_dict``.

        Raises:
            ConfigurationError: if a field is missing or a value is invalid
        """
        try:
            return cls(
                seed=data["seed"],
                floor_radius=data["floor_radius"],
                ocean_radius=data["ocean_radius"],
                block_height=data["block_height"],
                root_resolution=data["root_resolution"],
                chunk_resolution=data["chunk_resolution"],
            )
        except KeyError as e:
            raise ConfigurationError(e.args[0], "is missing") from e

    def random(self) -> Random:
        """A fresh random number generator seeded from this globe's seed."""
        return Random(self.seed)

    def chunks_per_root_side(self) -> tuple[int, int]:
        return (
            self.root_resolution[0] // self.chunk_resolution[0],
            self.root_resolution[1] // self.chunk_resolution[1],
        )

    def cell_center_on_unit_sphere(self, column: GridPoint2) -> np.ndarray:
        """Project the center of ``column`` onto the unit sphere, ignoring z.

        Useful for sampling noise by latitude and longitude.
        """
        res_x, res_y = self.root_resolution
        pt_in_root_quad = (column.x / res_x, column.y / res_y)
        return project(column.root, pt_in_root_quad)

    def cell_center_center(self, grid_point: GridPoint3) -> np.ndarray:
        radius = self.floor_radius + self.block_height * (grid_point.z + 0.5)
        return radius * self.cell_center_on_unit_sphere(grid_point.rxy)

    def cell_bottom_center(self, grid_point: GridPoint3) -> np.ndarray:
        radius = self.floor_radius + self.block_height * grid_point.z
        return radius * self.cell_center_on_unit_sphere(grid_point.rxy)

    def cell_vertex_on_unit_sphere(
        self, grid_point: GridPoint3, offset: tuple[int, int]
    ) -> np.ndarray:
        """Project a point near a cell's center onto the unit sphere.

        ``offset`` is measured in sixths of the distance between neighboring
        cell centers; see ``geogrid.grid.cell_shape.DIR_OFFSETS`` for the
        offsets of each vertex and edge midpoint.
        """
        res_x = self.root_resolution[0] * 6
        res_y = self.root_resolution[1] * 6
        pt_in_root_quad = (
            (grid_point.x * 6 + offset[0]) / res_x,
            (grid_point.y * 6 + offset[1]) / res_y,
        )
        return project(grid_point.root, pt_in_root_quad)

    def cell_bottom_vertex(
        self, grid_point: GridPoint3, offset: tuple[int, int]
    ) -> np.ndarray:
        radius = self.floor_radius + self.block_height * grid_point.z
        return radius * self.cell_vertex_on_unit_sphere(grid_point, offset)

    def cell_top_vertex(
        self, grid_point: GridPoint3, offset: tuple[int, int]
    ) -> np.ndarray:
        # The top of one cell is the bottom of the next.
        return self.cell_bottom_vertex(grid_point.with_z(grid_point.z + 1), offset)

    def approx_cell_z_from_radius(self, radius: float) -> GridCoord:
        """The layer a point at ``radius`` from the center falls in, roughly."""
        return int((radius - self.floor_radius) / self.block_height)
