"""Per-cell lamp addon: a warm point light under a disc fixture."""

from __future__ import annotations

from ..entities import CellGrid, PointLight, Primitive
from ..value_objects import (
    LAMP_FIXTURE_MATERIAL,
    Configuration,
    PrimitiveRole,
    Vector3,
)
from .constants import (
    FIXTURE_HEIGHT,
    FIXTURE_RADIUS,
    FIXTURE_SEGMENTS,
    LAMP_COLOR,
    LAMP_DROP,
    LAMP_INTENSITY,
    LAMP_RANGE_FACTOR,
    LAMP_SETBACK,
    clamp_dimension,
)
from .context import AddonContext
from .registry import addon_registry
from .results import AddonResult, ValidationResult


def lamp_depth(configuration: Configuration, cell_grid: CellGrid) -> float:
    """Z of lights and fixtures, kept between the back panel and the front."""
    setback = min(LAMP_SETBACK, (configuration.depth - configuration.board_thickness) / 2)
    return cell_grid.center_z - setback


def fixture_radius(configuration: Configuration, cell_grid: CellGrid) -> float:
    """Fixture radius, shrunk so the disc fits inside its cell."""
    z = lamp_depth(configuration, cell_grid)
    back_face = -configuration.depth / 2 + configuration.board_thickness
    front_face = configuration.depth / 2
    return min(
        FIXTURE_RADIUS,
        cell_grid.cell_width / 2,
        z - back_face,
        front_face - z,
    )


@addon_registry.register("addon.lamp")
class LampAddon:
    """One lamp per cell, hanging from the board above the cell.

    The fixture is a flat disc whose top face is flush with the top of the
    cell; the light sits just below it towards the front.
    """

    toggle = "lamps"

    def validate(
        self, configuration: Configuration, cell_grid: CellGrid
    ) -> ValidationResult:
        warnings: list[str] = []
        if fixture_radius(configuration, cell_grid) < FIXTURE_RADIUS:
            warnings.append(
                f"Cells of {cell_grid.cell_width:.3f} x {configuration.depth:.3f} "
                f"are too small for a {FIXTURE_RADIUS}-radius lamp fixture; "
                "fixtures will be shrunk"
            )
        return ValidationResult.ok(warnings)

    def generate(self, context: AddonContext) -> AddonResult:
        configuration = context.configuration
        grid = context.cell_grid
        z = lamp_depth(configuration, grid)
        fixture_height = min(FIXTURE_HEIGHT, grid.cell_height / 2)
        geometry = context.arena.cylinder(
            clamp_dimension(fixture_radius(configuration, grid)),
            fixture_height,
            FIXTURE_SEGMENTS,
        )
        light_drop = min(LAMP_DROP, grid.cell_height / 2)

        primitives: list[Primitive] = []
        lights: list[PointLight] = []
        for cell in grid:
            lights.append(
                PointLight(
                    color=LAMP_COLOR,
                    intensity=LAMP_INTENSITY,
                    range=cell.width * LAMP_RANGE_FACTOR,
                    position=Vector3(cell.center.x, cell.top - light_drop, z),
                    row=cell.row,
                    column=cell.column,
                )
            )
            primitives.append(
                Primitive(
                    role=PrimitiveRole.LAMP_FIXTURE,
                    geometry=geometry,
                    position=Vector3(cell.center.x, cell.top - fixture_height / 2, z),
                    material=LAMP_FIXTURE_MATERIAL,
                    row=cell.row,
                    column=cell.column,
                )
            )
        return AddonResult(primitives=tuple(primitives), lights=tuple(lights))
