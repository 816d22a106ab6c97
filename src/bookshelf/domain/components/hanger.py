"""Hanger rail addon for the top row of cells."""

from __future__ import annotations

import math

from ..entities import CellGrid, Primitive
from ..value_objects import HANDLE_METAL, Configuration, PrimitiveRole, Vector3
from .constants import (
    HANGER_DROP,
    HANGER_MARGIN,
    HANGER_RADIUS,
    HANGER_SEGMENTS,
    HANGER_SETBACK_RATIO,
    clamp_dimension,
)
from .context import AddonContext
from .registry import addon_registry
from .results import AddonResult, ValidationResult

# Lays the cylinder's Y axis along X
_HORIZONTAL = Vector3(0.0, 0.0, math.pi / 2)


@addon_registry.register("addon.hanger")
class HangerAddon:
    """A horizontal clothes rail across every cell of the top row."""

    toggle = "hangers"

    def validate(
        self, configuration: Configuration, cell_grid: CellGrid
    ) -> ValidationResult:
        warnings: list[str] = []
        length = cell_grid.cell_width - HANGER_MARGIN
        if length <= 0:
            warnings.append(
                f"Cell width {cell_grid.cell_width:.3f} leaves no room for a hanger "
                f"rail ({HANGER_MARGIN} margin); rails will be clamped"
            )
        return ValidationResult.ok(warnings)

    def generate(self, context: AddonContext) -> AddonResult:
        configuration = context.configuration
        grid = context.cell_grid
        t = configuration.board_thickness
        radius = min(HANGER_RADIUS, grid.cell_height / 4, (configuration.depth - t) / 4)
        geometry = context.arena.cylinder(
            radius,
            clamp_dimension(grid.cell_width - HANGER_MARGIN),
            HANGER_SEGMENTS,
        )
        z = max(
            grid.center_z - configuration.depth * HANGER_SETBACK_RATIO,
            -configuration.depth / 2 + t + radius,
        )
        drop = min(HANGER_DROP, grid.cell_height / 2)

        primitives: list[Primitive] = []
        row = grid.top_row
        for column in range(grid.divisions):
            cell = grid.cell(row, column)
            primitives.append(
                Primitive(
                    role=PrimitiveRole.HANGER_RAIL,
                    geometry=geometry,
                    position=Vector3(cell.center.x, cell.top - drop, z),
                    rotation=_HORIZONTAL,
                    material=HANDLE_METAL,
                    cast_shadow=True,
                    row=row,
                    column=column,
                )
            )
        return AddonResult.from_primitives(primitives)
