"""Interior partitioning into shelves, dividers and cells."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..entities import CellGrid, Primitive
from ..value_objects import Configuration, PrimitiveRole, Vector3, material_for
from .geometry_factory import GeometryFactory

__all__ = ["InteriorBuilder", "InteriorResult"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InteriorResult:
    """Shelves and dividers of a unit plus the cell grid they delimit."""

    cell_grid: CellGrid
    shelves: tuple[Primitive, ...] = field(default_factory=tuple)
    dividers: tuple[Primitive, ...] = field(default_factory=tuple)

    @property
    def primitives(self) -> list[Primitive]:
        return [*self.shelves, *self.dividers]


class InteriorBuilder:
    """Partitions the space inside the carcass into equal cells.

    Shelves and dividers are spaced using ``(inner + t) / count`` so that
    the boards' own thickness is accounted for and every cell has the same
    size. Boards stop at the back panel, so their depth is ``depth - t``.
    """

    def cell_grid(self, configuration: Configuration) -> CellGrid:
        """Compute the cell grid of a normalized configuration."""
        t = configuration.board_thickness
        levels = configuration.horizontal_levels
        divisions = configuration.vertical_divisions
        inner_width = configuration.inner_width
        inner_height = configuration.inner_height
        return CellGrid(
            levels=levels,
            divisions=divisions,
            cell_width=(inner_width - (divisions - 1) * t) / divisions,
            cell_height=(inner_height - (levels - 1) * t) / levels,
            board_thickness=t,
            inner_width=inner_width,
            inner_height=inner_height,
            depth=configuration.depth,
        )

    def shelf_positions(self, configuration: Configuration) -> list[float]:
        """Y positions of the horizontal shelves, bottom to top."""
        levels = configuration.horizontal_levels
        spacing = (configuration.inner_height + configuration.board_thickness) / levels
        return [i * spacing for i in range(1, levels)]

    def divider_positions(self, configuration: Configuration) -> list[float]:
        """X positions of the vertical dividers, left to right."""
        t = configuration.board_thickness
        divisions = configuration.vertical_divisions
        inner_width = configuration.inner_width
        spacing = (inner_width + t) / divisions
        return [-inner_width / 2 - t / 2 + i * spacing for i in range(1, divisions)]

    def build(
        self, configuration: Configuration, factory: GeometryFactory
    ) -> InteriorResult:
        t = configuration.board_thickness
        material = material_for(configuration.material)
        board_depth = configuration.depth - t

        shelves: list[Primitive] = []
        if configuration.horizontal_levels > 1:
            geometry = factory.board(configuration.inner_width, t, board_depth)
            for index, y in enumerate(self.shelf_positions(configuration), start=1):
                shelves.append(
                    Primitive(
                        role=PrimitiveRole.SHELF,
                        geometry=geometry,
                        position=Vector3(0.0, y, t / 2),
                        material=material,
                        row=index,
                    )
                )

        dividers: list[Primitive] = []
        if configuration.vertical_divisions > 1:
            geometry = factory.board(t, configuration.inner_height, board_depth)
            for index, x in enumerate(self.divider_positions(configuration), start=1):
                dividers.append(
                    Primitive(
                        role=PrimitiveRole.DIVIDER,
                        geometry=geometry,
                        position=Vector3(x, configuration.height / 2, t / 2),
                        material=material,
                        column=index,
                    )
                )

        grid = self.cell_grid(configuration)
        logger.debug(
            f"Interior: {len(shelves)} shelves, {len(dividers)} dividers, "
            f"{grid.levels}x{grid.divisions} cells of "
            f"{grid.cell_width:.3f} x {grid.cell_height:.3f}"
        )
        return InteriorResult(
            cell_grid=grid, shelves=tuple(shelves), dividers=tuple(dividers)
        )
