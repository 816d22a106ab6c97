"""Shelving unit configuration value object."""

from __future__ import annotations

from dataclasses import dataclass

from ._core_geometry import EdgeProfile
from ._materials import MaterialPreset


@dataclass(frozen=True)
class Configuration:
    """Declarative description of a shelving unit.

    Construction performs no validation so that the boundary layer can hand
    over whatever the user entered; ``normalize_configuration`` decides
    whether a value can be built.

    Attributes:
        width: Overall width of the unit.
        height: Overall height of the unit.
        depth: Overall depth of the unit.
        horizontal_levels: Number of stacked rows of cells.
        vertical_divisions: Number of side-by-side columns of cells.
        board_thickness: Thickness of every structural board.
        material: Board material preset.
        edge_profile: Edge finishing applied to boards.
        doors: Whether each column gets a full-height door.
        lamps: Whether each cell gets a lamp.
        hangers: Whether the top row gets hanger rails.
    """

    width: float = 150.0
    height: float = 200.0
    depth: float = 30.0
    horizontal_levels: int = 4
    vertical_divisions: int = 3
    board_thickness: float = 2.0
    material: MaterialPreset = MaterialPreset.GLOSS_WHITE
    edge_profile: EdgeProfile = EdgeProfile.SHARP
    doors: bool = False
    lamps: bool = False
    hangers: bool = False

    @property
    def inner_width(self) -> float:
        """Width between the left and right side panels."""
        return self.width - 2 * self.board_thickness

    @property
    def inner_height(self) -> float:
        """Height between the bottom and top panels."""
        return self.height - 2 * self.board_thickness

    @property
    def has_addons(self) -> bool:
        return self.doors or self.lamps or self.hangers
