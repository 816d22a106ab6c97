"""Domain services for scene generation."""

from .addons import DEFAULT_ADDONS, AddonBuilder, AddonBuildResult
from .assembler import SceneGraphAssembler
from .carcass import CarcassBuilder
from .geometry_factory import (
    EDGE_RADIUS_FACTOR,
    MAX_EDGE_RADIUS,
    ROUNDED_EDGE_SEGMENTS,
    GeometryArena,
    GeometryFactory,
    edge_radius_for,
)
from .interior import InteriorBuilder, InteriorResult
from .normalizer import normalize_configuration
from .scene_generator import SceneGenerator

__all__ = [
    "DEFAULT_ADDONS",
    "EDGE_RADIUS_FACTOR",
    "MAX_EDGE_RADIUS",
    "ROUNDED_EDGE_SEGMENTS",
    "AddonBuildResult",
    "AddonBuilder",
    "CarcassBuilder",
    "GeometryArena",
    "GeometryFactory",
    "InteriorBuilder",
    "InteriorResult",
    "SceneGenerator",
    "SceneGraphAssembler",
    "edge_radius_for",
    "normalize_configuration",
]
