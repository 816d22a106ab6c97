"""Domain layer - procedural generation of shelving unit scenes."""

from .entities import (
    Cell,
    CellGrid,
    Geometry,
    PointLight,
    Primitive,
    SceneGraph,
)
from .errors import DegenerateConfigError, InvalidCountError, ShelfGenerationError
from .services import (
    AddonBuilder,
    CarcassBuilder,
    GeometryArena,
    GeometryFactory,
    InteriorBuilder,
    SceneGenerator,
    SceneGraphAssembler,
    normalize_configuration,
)
from .value_objects import (
    BoundingBox3D,
    Configuration,
    EdgeProfile,
    MaterialPreset,
    MaterialSpec,
    PrimitiveRole,
    ShapeKind,
    Vector3,
)

__all__ = [
    "AddonBuilder",
    "BoundingBox3D",
    "CarcassBuilder",
    "Cell",
    "CellGrid",
    "Configuration",
    "DegenerateConfigError",
    "EdgeProfile",
    "Geometry",
    "GeometryArena",
    "GeometryFactory",
    "InteriorBuilder",
    "InvalidCountError",
    "MaterialPreset",
    "MaterialSpec",
    "PointLight",
    "Primitive",
    "PrimitiveRole",
    "SceneGenerator",
    "SceneGraph",
    "SceneGraphAssembler",
    "ShapeKind",
    "ShelfGenerationError",
    "Vector3",
    "normalize_configuration",
]
