"""Application layer: build commands, scene controller and configuration."""

from .commands import BuildSceneCommand
from .controller import SceneController
from .dtos import BuildOutcome
from .factory import ServiceFactory, get_factory, reset_factory, set_factory

__all__ = [
    "BuildOutcome",
    "BuildSceneCommand",
    "SceneController",
    "ServiceFactory",
    "get_factory",
    "reset_factory",
    "set_factory",
]
