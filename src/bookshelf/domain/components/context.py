"""Addon context for addon generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..entities import CellGrid
from ..value_objects import Configuration

if TYPE_CHECKING:
    from ..services.geometry_factory import GeometryArena, GeometryFactory


@dataclass(frozen=True)
class AddonContext:
    """Immutable context for addon generation.

    Attributes:
        configuration: Normalized configuration of the unit.
        cell_grid: Cell grid computed by the interior builder.
        factory: Board factory honoring the edge profile.
    """

    configuration: Configuration
    cell_grid: CellGrid
    factory: GeometryFactory

    @property
    def arena(self) -> GeometryArena:
        """Arena for geometry that bypasses the edge profile (cylinders)."""
        return self.factory.arena
