"""Material presets for boards and addon fixtures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class MaterialPreset(str, Enum):
    """Board finishes a unit can be built in."""

    GLOSS_WHITE = "Gloss White"
    MATTE_BLACK = "Matte Black"


@dataclass(frozen=True)
class MaterialSpec:
    """Surface description handed to the renderer.

    Attributes:
        name: Identifier of the material.
        color: 24-bit RGB color (e.g. 0xffffff).
        roughness: Physically based roughness in [0, 1].
        metalness: Physically based metalness in [0, 1].
        unlit: True when the surface ignores scene lighting.
    """

    name: str
    color: int
    roughness: float = 1.0
    metalness: float = 0.0
    unlit: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.color <= 0xFFFFFF:
            raise ValueError("Material color must be a 24-bit RGB value")
        if not 0.0 <= self.roughness <= 1.0:
            raise ValueError("Roughness must be between 0 and 1")
        if not 0.0 <= self.metalness <= 1.0:
            raise ValueError("Metalness must be between 0 and 1")

    @property
    def hex_color(self) -> str:
        return f"#{self.color:06x}"


MATERIAL_PRESETS: Mapping[MaterialPreset, MaterialSpec] = MappingProxyType(
    {
        MaterialPreset.GLOSS_WHITE: MaterialSpec(
            name=MaterialPreset.GLOSS_WHITE.value,
            color=0xFFFFFF,
            roughness=0.1,
            metalness=0.2,
        ),
        MaterialPreset.MATTE_BLACK: MaterialSpec(
            name=MaterialPreset.MATTE_BLACK.value,
            color=0x111111,
            roughness=0.9,
            metalness=0.1,
        ),
    }
)

# Brushed metal shared by door handles and hanger rails
HANDLE_METAL = MaterialSpec(
    name="Handle Metal", color=0xBBBBBB, roughness=0.2, metalness=1.0
)

LAMP_FIXTURE_MATERIAL = MaterialSpec(name="Lamp Fixture", color=0x222222, unlit=True)


def material_for(preset: MaterialPreset) -> MaterialSpec:
    """Look up the board material for a preset."""
    return MATERIAL_PRESETS[preset]
