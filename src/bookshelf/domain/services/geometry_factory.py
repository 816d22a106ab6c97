"""Board geometry creation and per-build buffer ownership."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from ..entities import Geometry
from ..value_objects import EdgeProfile, ShapeKind

if TYPE_CHECKING:
    from bookshelf.contracts.protocols import MeshBuilderProtocol

__all__ = [
    "EDGE_RADIUS_FACTOR",
    "MAX_EDGE_RADIUS",
    "ROUNDED_EDGE_SEGMENTS",
    "GeometryArena",
    "GeometryFactory",
    "edge_radius_for",
]

logger = logging.getLogger(__name__)

EDGE_RADIUS_FACTOR = 0.2
MAX_EDGE_RADIUS = 0.5
ROUNDED_EDGE_SEGMENTS = 4


def edge_radius_for(board_thickness: float) -> float:
    """Edge radius used for rounded boards of the given thickness."""
    return min(board_thickness * EDGE_RADIUS_FACTOR, MAX_EDGE_RADIUS)


class GeometryArena:
    """Owns every geometry buffer allocated for one scene graph.

    Identical requests return the same Geometry, so a buffer shared by
    several primitives is allocated once and released once. Releasing the
    arena frees all buffers in a single step.
    """

    def __init__(self, mesh_builder: MeshBuilderProtocol) -> None:
        self._mesh_builder = mesh_builder
        self._geometries: dict[tuple[Any, ...], Geometry] = {}
        self.released = False

    def __len__(self) -> int:
        return len(self._geometries)

    @property
    def geometries(self) -> list[Geometry]:
        return list(self._geometries.values())

    def _intern(self, geometry: Geometry, allocate: Callable[[], Any]) -> Geometry:
        if self.released:
            raise RuntimeError("Cannot allocate geometry from a released arena")
        existing = self._geometries.get(geometry.key)
        if existing is not None:
            return existing
        geometry.buffer = allocate()
        self._geometries[geometry.key] = geometry
        return geometry

    def box(self, width: float, height: float, depth: float) -> Geometry:
        geometry = Geometry(ShapeKind.BOX, width, height, depth)
        return self._intern(
            geometry, lambda: self._mesh_builder.build_box(width, height, depth)
        )

    def rounded_box(
        self,
        width: float,
        height: float,
        depth: float,
        radius: float,
        segments: int,
    ) -> Geometry:
        geometry = Geometry(
            ShapeKind.ROUNDED_BOX,
            width,
            height,
            depth,
            edge_radius=radius,
            segments=segments,
        )
        return self._intern(
            geometry,
            lambda: self._mesh_builder.build_rounded_box(
                width, height, depth, radius, segments
            ),
        )

    def cylinder(self, radius: float, length: float, radial_segments: int) -> Geometry:
        geometry = Geometry(
            ShapeKind.CYLINDER,
            2 * radius,
            length,
            2 * radius,
            segments=radial_segments,
        )
        return self._intern(
            geometry,
            lambda: self._mesh_builder.build_cylinder(radius, length, radial_segments),
        )

    def release(self) -> int:
        """Free every buffer owned by the arena.

        Returns:
            Number of buffers freed by this call.
        """
        freed = sum(1 for geometry in self._geometries.values() if geometry.dispose())
        self.released = True
        logger.debug(f"Released {freed} geometry buffers")
        return freed


class GeometryFactory:
    """Creates board geometry with the configured edge profile.

    Only box-like boards go through the factory. Cylindrical addon parts
    (handles, lamp fixtures, hanger rails) are allocated on the arena
    directly and are never edge-profiled.
    """

    def __init__(
        self,
        arena: GeometryArena,
        edge_profile: EdgeProfile,
        board_thickness: float,
    ) -> None:
        self.arena = arena
        self.edge_profile = edge_profile
        self.board_thickness = board_thickness

    @property
    def edge_radius(self) -> float:
        if self.edge_profile is EdgeProfile.SHARP:
            return 0.0
        return edge_radius_for(self.board_thickness)

    def board(self, width: float, height: float, depth: float) -> Geometry:
        """Create a board of the given size.

        Rounded boards cap the radius at half their smallest extent.
        """
        if self.edge_profile is EdgeProfile.SHARP:
            return self.arena.box(width, height, depth)
        radius = min(self.edge_radius, min(width, height, depth) / 2)
        return self.arena.rounded_box(
            width, height, depth, radius, ROUNDED_EDGE_SEGMENTS
        )
