"""Top-level pipeline turning a configuration into a scene graph."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..entities import SceneGraph
from ..value_objects import Configuration
from .addons import AddonBuilder
from .assembler import SceneGraphAssembler
from .carcass import CarcassBuilder
from .geometry_factory import GeometryArena, GeometryFactory
from .interior import InteriorBuilder
from .normalizer import normalize_configuration

if TYPE_CHECKING:
    from bookshelf.contracts.protocols import MeshBuilderProtocol

__all__ = ["SceneGenerator"]

logger = logging.getLogger(__name__)


class SceneGenerator:
    """Builds a complete scene graph from a configuration.

    Stages run in order: normalize, carcass, interior, addons, assemble.
    All geometry is allocated from a fresh arena owned by the returned
    graph. If any stage fails the arena is released before the error
    propagates, so a failed build leaks no buffers.

    Generation is deterministic: the same configuration always yields the
    same primitives in the same order.
    """

    def __init__(
        self,
        mesh_builder: MeshBuilderProtocol,
        carcass_builder: CarcassBuilder | None = None,
        interior_builder: InteriorBuilder | None = None,
        addon_builder: AddonBuilder | None = None,
        assembler: SceneGraphAssembler | None = None,
    ) -> None:
        self.mesh_builder = mesh_builder
        self.carcass_builder = carcass_builder or CarcassBuilder()
        self.interior_builder = interior_builder or InteriorBuilder()
        self.addon_builder = addon_builder or AddonBuilder()
        self.assembler = assembler or SceneGraphAssembler()

    def generate(self, configuration: Configuration) -> SceneGraph:
        """Generate the scene graph for a configuration.

        Raises:
            InvalidCountError: If a count is below 1 or not a whole number.
            DegenerateConfigError: If the dimensions leave no room for cells.
            ShelfGenerationError: For any other configuration problem.
        """
        config = normalize_configuration(configuration)
        logger.debug(
            f"Generating {config.width} x {config.height} x {config.depth} unit, "
            f"{config.horizontal_levels} levels x {config.vertical_divisions} divisions"
        )

        arena = GeometryArena(self.mesh_builder)
        try:
            factory = GeometryFactory(arena, config.edge_profile, config.board_thickness)
            carcass = self.carcass_builder.build(config, factory)
            interior = self.interior_builder.build(config, factory)
            addons = self.addon_builder.build(config, interior.cell_grid, factory)
            scene = self.assembler.assemble(config, carcass, interior, addons, arena)
        except Exception:
            arena.release()
            raise

        logger.debug(
            f"Scene graph ready: {len(scene)} primitives, {len(scene.lights)} lights, "
            f"{len(arena)} geometry buffers"
        )
        return scene
