"""Collects the parts of a build into one scene graph."""

from __future__ import annotations

from functools import reduce

from ..entities import Primitive, SceneGraph
from ..value_objects import BoundingBox3D, Configuration
from .addons import AddonBuildResult
from .geometry_factory import GeometryArena
from .interior import InteriorResult

__all__ = ["SceneGraphAssembler"]


class SceneGraphAssembler:
    """Orders primitives and computes the overall bounding box.

    Primitives are ordered carcass, shelves, dividers, then addons in the
    order they were generated. Carcass and interior boards both cast and
    receive shadows. Warnings raised while placing addons travel with
    the graph.
    """

    def assemble(
        self,
        configuration: Configuration,
        carcass: list[Primitive],
        interior: InteriorResult,
        addons: AddonBuildResult,
        arena: GeometryArena,
    ) -> SceneGraph:
        boards = [*carcass, *interior.primitives]
        for board in boards:
            board.cast_shadow = True
            board.receive_shadow = True
        primitives = [*boards, *addons.primitives]

        return SceneGraph(
            configuration=configuration,
            cell_grid=interior.cell_grid,
            primitives=primitives,
            lights=list(addons.lights),
            bounding_box=self.bounding_box(primitives),
            arena=arena,
            warnings=addons.warnings,
        )

    @staticmethod
    def bounding_box(primitives: list[Primitive]) -> BoundingBox3D:
        """Union of the world-space boxes of all primitives.

        Raises:
            ValueError: If there are no primitives.
        """
        if not primitives:
            raise ValueError("Cannot compute the bounding box of an empty scene")
        return reduce(
            lambda acc, box: acc.union(box),
            (p.bounding_box() for p in primitives),
        )
