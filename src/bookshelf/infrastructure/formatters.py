"""Text formatters for scene graphs and material presets."""

from __future__ import annotations

from collections import Counter
from typing import Mapping

from bookshelf.domain.entities import SceneGraph
from bookshelf.domain.value_objects import (
    HANDLE_METAL,
    LAMP_FIXTURE_MATERIAL,
    MATERIAL_PRESETS,
    MaterialPreset,
    MaterialSpec,
    PrimitiveRole,
)


class SceneSummaryFormatter:
    """Formats a scene graph as a summary table.

    Lists the primitive count per role in placement order, followed by the
    cell grid, the bounding box and the number of shared geometry buffers.
    """

    def format(self, scene: SceneGraph, warnings: list[str] | None = None) -> str:
        config = scene.configuration
        grid = scene.cell_grid
        box = scene.bounding_box

        lines = [
            "SHELVING UNIT",
            "=" * 60,
            f"Size:      {config.width:g} x {config.height:g} x {config.depth:g} "
            f"(boards {config.board_thickness:g})",
            f"Material:  {config.material.value}",
            f"Edges:     {config.edge_profile.value}",
            f"Cells:     {grid.levels} x {grid.divisions} "
            f"({grid.cell_width:.3f} x {grid.cell_height:.3f})",
            "",
            f"{'Part':<20} {'Count':>6}",
            "-" * 60,
        ]

        counts = Counter(p.role for p in scene.primitives)
        for role in PrimitiveRole:
            if counts[role]:
                lines.append(f"{role.value:<20} {counts[role]:>6}")
        lines.append("-" * 60)
        lines.append(f"{'TOTAL':<20} {len(scene):>6}")
        lines.append(f"{'Lights':<20} {len(scene.lights):>6}")
        lines.append(f"{'Geometry buffers':<20} {len(scene.arena):>6}")
        lines.append("")

        lines.append(
            f"Bounding box: min ({box.min_corner.x:.3f}, {box.min_corner.y:.3f}, "
            f"{box.min_corner.z:.3f})"
        )
        lines.append(
            f"              max ({box.max_corner.x:.3f}, {box.max_corner.y:.3f}, "
            f"{box.max_corner.z:.3f})"
        )
        lines.append(
            f"              size {box.width:.3f} x {box.height:.3f} x {box.depth:.3f}"
        )

        if warnings:
            lines.append("")
            lines.append("WARNINGS")
            lines.extend(f"  - {warning}" for warning in warnings)

        return "\n".join(lines)


class MaterialTableFormatter:
    """Formats the material presets and fixed addon materials."""

    def format(
        self,
        presets: Mapping[MaterialPreset, MaterialSpec] = MATERIAL_PRESETS,
    ) -> str:
        lines = [
            "MATERIALS",
            "=" * 60,
            f"{'Name':<16} {'Color':<9} {'Rough':>6} {'Metal':>6}  {'Notes'}",
            "-" * 60,
        ]
        for spec in presets.values():
            lines.append(self._row(spec, "board preset"))
        for spec in (HANDLE_METAL, LAMP_FIXTURE_MATERIAL):
            lines.append(self._row(spec, "addon"))
        return "\n".join(lines)

    def _row(self, spec: MaterialSpec, note: str) -> str:
        if spec.unlit:
            note = f"{note}, unlit"
        return (
            f"{spec.name:<16} {spec.hex_color:<9} {spec.roughness:>6.2f} "
            f"{spec.metalness:>6.2f}  {note}"
        )
