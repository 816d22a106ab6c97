"""Outer five-panel box of the shelving unit."""

from __future__ import annotations

from ..entities import Primitive
from ..value_objects import Configuration, PrimitiveRole, Vector3, material_for
from .geometry_factory import GeometryFactory

__all__ = ["CarcassBuilder"]


class CarcassBuilder:
    """Builds the bottom, top, side and back panels.

    Coordinate system:
    - Origin: floor level, centered on the unit's width and depth
    - X: Width (left to right)
    - Y: Height (bottom to top)
    - Z: Depth (back to front)

    Top and bottom span the full width and depth; the sides sit between
    them and the back panel sits inside the frame against its rear face.
    """

    def build(
        self, configuration: Configuration, factory: GeometryFactory
    ) -> list[Primitive]:
        """Create the five carcass panels in bottom, top, left, right, back order."""
        t = configuration.board_thickness
        width = configuration.width
        height = configuration.height
        depth = configuration.depth
        material = material_for(configuration.material)

        full_panel = factory.board(width, t, depth)
        side_panel = factory.board(t, height - 2 * t, depth)
        back_panel = factory.board(width - 2 * t, height - 2 * t, t)

        return [
            Primitive(
                role=PrimitiveRole.BOTTOM,
                geometry=full_panel,
                position=Vector3(0.0, t / 2, 0.0),
                material=material,
            ),
            Primitive(
                role=PrimitiveRole.TOP,
                geometry=full_panel,
                position=Vector3(0.0, height - t / 2, 0.0),
                material=material,
            ),
            Primitive(
                role=PrimitiveRole.LEFT_SIDE,
                geometry=side_panel,
                position=Vector3(-(width / 2 - t / 2), height / 2, 0.0),
                material=material,
            ),
            Primitive(
                role=PrimitiveRole.RIGHT_SIDE,
                geometry=side_panel,
                position=Vector3(width / 2 - t / 2, height / 2, 0.0),
                material=material,
            ),
            Primitive(
                role=PrimitiveRole.BACK,
                geometry=back_panel,
                position=Vector3(0.0, height / 2, -depth / 2 + t / 2),
                material=material,
            ),
        ]
