"""Infrastructure layer: mesh buffers and text formatters."""

from .formatters import MaterialTableFormatter, SceneSummaryFormatter
from .mesh_builder import StlMeshBuilder

__all__ = [
    "MaterialTableFormatter",
    "SceneSummaryFormatter",
    "StlMeshBuilder",
]
