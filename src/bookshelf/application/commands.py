"""Application commands (use cases) for scene generation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bookshelf.domain.errors import ShelfGenerationError
from bookshelf.domain.services import SceneGenerator
from bookshelf.domain.value_objects import Configuration

from .dtos import BuildOutcome

if TYPE_CHECKING:
    from bookshelf.contracts.protocols import MeshBuilderProtocol

logger = logging.getLogger(__name__)


class BuildSceneCommand:
    """Command to build the scene graph of one configuration.

    Configuration problems are reported in the returned outcome instead of
    being raised, so callers never need to catch domain errors.
    """

    def __init__(
        self,
        scene_generator: SceneGenerator | None = None,
        mesh_builder: MeshBuilderProtocol | None = None,
    ) -> None:
        if scene_generator is None:
            if mesh_builder is None:
                from bookshelf.infrastructure.mesh_builder import StlMeshBuilder

                mesh_builder = StlMeshBuilder()
            scene_generator = SceneGenerator(mesh_builder)
        self.scene_generator = scene_generator

    def execute(self, configuration: Configuration) -> BuildOutcome:
        """Execute the build.

        Returns:
            BuildOutcome holding the new scene graph, or the errors that
            prevented it.
        """
        try:
            scene = self.scene_generator.generate(configuration)
        except ShelfGenerationError as e:
            logger.warning(f"Rejected configuration: {e.message}")
            return BuildOutcome(success=False, errors=[e.message], error_type=e.error_type)

        return BuildOutcome(
            success=True,
            scene=scene,
            bounding_box=scene.bounding_box,
            warnings=list(scene.warnings),
        )
