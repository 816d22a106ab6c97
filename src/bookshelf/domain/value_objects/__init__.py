"""Value objects for the bookshelf domain.

This module provides immutable data types used throughout the generation
pipeline. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Core geometry
from ._core_geometry import (
    CARCASS_ROLES,
    INTERIOR_ROLES,
    EdgeProfile,
    PrimitiveRole,
    ShapeKind,
    Vector3,
)

# Bounding volumes
from ._3d_geometry import BoundingBox3D

# Materials
from ._materials import (
    HANDLE_METAL,
    LAMP_FIXTURE_MATERIAL,
    MATERIAL_PRESETS,
    MaterialPreset,
    MaterialSpec,
    material_for,
)

# Configuration
from ._configuration import Configuration

__all__ = [
    "BoundingBox3D",
    "CARCASS_ROLES",
    "Configuration",
    "EdgeProfile",
    "HANDLE_METAL",
    "INTERIOR_ROLES",
    "LAMP_FIXTURE_MATERIAL",
    "MATERIAL_PRESETS",
    "MaterialPreset",
    "MaterialSpec",
    "PrimitiveRole",
    "ShapeKind",
    "Vector3",
    "material_for",
]
