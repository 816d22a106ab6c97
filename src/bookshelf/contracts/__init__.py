"""Contracts shared between the layers of the generator."""

from .protocols import MeshBuilderProtocol, SceneListener

__all__ = [
    "MeshBuilderProtocol",
    "SceneListener",
]
