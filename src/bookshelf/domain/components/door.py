"""Full-height door addon.

Each column of the unit gets one door spanning the whole inner height, so
a unit with a single column gets one full-width door. Door leaves are
boards and follow the configured edge profile; their handles are plain
cylinders.
"""

from __future__ import annotations

from ..entities import CellGrid, Primitive
from ..value_objects import (
    HANDLE_METAL,
    Configuration,
    PrimitiveRole,
    Vector3,
    material_for,
)
from .constants import (
    DOOR_GAP,
    DOOR_INSET,
    DOOR_THICKNESS,
    HANDLE_EDGE_OFFSET,
    HANDLE_LENGTH_RATIO,
    HANDLE_RADIUS,
    HANDLE_SEGMENTS,
    HANDLE_STANDOFF,
    clamp_dimension,
)
from .context import AddonContext
from .registry import addon_registry
from .results import AddonResult, ValidationResult


def door_size(cell_grid: CellGrid) -> tuple[float, float]:
    """Unclamped (width, height) of each door leaf."""
    return cell_grid.cell_width - DOOR_GAP, cell_grid.inner_height - DOOR_GAP


@addon_registry.register("addon.door")
class DoorAddon:
    """One door per column, hung in front of the carcass."""

    toggle = "doors"

    def validate(
        self, configuration: Configuration, cell_grid: CellGrid
    ) -> ValidationResult:
        warnings: list[str] = []
        width, height = door_size(cell_grid)
        if width <= 0:
            warnings.append(
                f"Door width {width:.3f} is not positive (column width "
                f"{cell_grid.cell_width:.3f}); doors will be clamped"
            )
        if height <= 0:
            warnings.append(
                f"Door height {height:.3f} is not positive; doors will be clamped"
            )
        if width > 0 and width / 2 < HANDLE_EDGE_OFFSET:
            warnings.append(
                f"Door width {width:.3f} is too narrow for an edge handle; "
                "handles will be centered"
            )
        return ValidationResult.ok(warnings)

    def generate(self, context: AddonContext) -> AddonResult:
        configuration = context.configuration
        grid = context.cell_grid
        raw_width, raw_height = door_size(grid)
        width = clamp_dimension(raw_width)
        height = clamp_dimension(raw_height)

        door_geometry = context.factory.board(width, height, DOOR_THICKNESS)
        handle_geometry = context.arena.cylinder(
            HANDLE_RADIUS, height * HANDLE_LENGTH_RATIO, HANDLE_SEGMENTS
        )
        material = material_for(configuration.material)
        y = configuration.height / 2
        z = configuration.depth / 2 - DOOR_INSET
        handle_offset = max(width / 2 - HANDLE_EDGE_OFFSET, 0.0)

        primitives: list[Primitive] = []
        for column in range(grid.divisions):
            x = grid.column_center_x(column)
            primitives.append(
                Primitive(
                    role=PrimitiveRole.DOOR,
                    geometry=door_geometry,
                    position=Vector3(x, y, z),
                    material=material,
                    cast_shadow=True,
                    column=column,
                )
            )
            primitives.append(
                Primitive(
                    role=PrimitiveRole.HANDLE,
                    geometry=handle_geometry,
                    position=Vector3(x + handle_offset, y, z + HANDLE_STANDOFF),
                    material=HANDLE_METAL,
                    cast_shadow=True,
                    column=column,
                )
            )
        return AddonResult.from_primitives(primitives)
