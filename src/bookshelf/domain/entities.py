"""Domain entities for the generated scene."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator

import numpy as np

from .errors import DegenerateConfigError
from .value_objects import (
    BoundingBox3D,
    Configuration,
    MaterialSpec,
    PrimitiveRole,
    ShapeKind,
    Vector3,
)

if TYPE_CHECKING:
    from .services.geometry_factory import GeometryArena

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Geometry:
    """A solid shape and the triangle buffer allocated for it.

    Sizes are full extents along the local axes. For cylinders the axis is
    the local Y axis, ``height`` is the length and ``width == depth`` is the
    diameter.

    Attributes:
        kind: Shape of the geometry.
        width: Extent along local X.
        height: Extent along local Y.
        depth: Extent along local Z.
        edge_radius: Edge rounding radius (rounded boxes only).
        segments: Segments per rounded edge, or radial segments for cylinders.
        buffer: Triangle mesh owned by the arena that allocated it.
    """

    kind: ShapeKind
    width: float
    height: float
    depth: float
    edge_radius: float = 0.0
    segments: int = 1
    buffer: Any = field(default=None, repr=False)
    released: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        for name in ("width", "height", "depth"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise DegenerateConfigError(
                    f"Geometry {name} must be positive and finite, got {value!r}",
                    field=name,
                    value=value,
                )
        if self.edge_radius < 0:
            raise ValueError("Edge radius cannot be negative")

    @property
    def size(self) -> Vector3:
        return Vector3(self.width, self.height, self.depth)

    @property
    def radius(self) -> float:
        """Radius of a cylinder (half its diameter)."""
        return self.width / 2

    @property
    def key(self) -> tuple[Any, ...]:
        """Identity used to share identical buffers inside one arena."""
        return (
            self.kind,
            round(self.width, 9),
            round(self.height, 9),
            round(self.depth, 9),
            round(self.edge_radius, 9),
            self.segments,
        )

    @property
    def triangle_count(self) -> int:
        return 0 if self.buffer is None else len(self.buffer)

    def dispose(self) -> bool:
        """Drop the triangle buffer.

        Returns:
            True if the buffer was freed by this call, False if it had
            already been released.
        """
        if self.released:
            return False
        self.buffer = None
        self.released = True
        return True


def _rotation_matrix(rotation: Vector3) -> np.ndarray:
    """Rotation matrix for Euler angles applied in X, Y, Z order."""
    cx, sx = math.cos(rotation.x), math.sin(rotation.x)
    cy, sy = math.cos(rotation.y), math.sin(rotation.y)
    cz, sz = math.cos(rotation.z), math.sin(rotation.z)
    rx = np.array([[1, 0, 0], [0, cx, -sx], [0, sx, cx]])
    ry = np.array([[cy, 0, sy], [0, 1, 0], [-sy, 0, cy]])
    rz = np.array([[cz, -sz, 0], [sz, cz, 0], [0, 0, 1]])
    return rx @ ry @ rz


@dataclass(eq=False)
class Primitive:
    """A positioned piece of geometry in the scene.

    Attributes:
        role: What this primitive represents in the unit.
        geometry: Shape and buffer, possibly shared with other primitives.
        position: Center of the geometry in unit coordinates.
        material: Surface material.
        rotation: Euler rotation in radians (X, Y, Z order).
        cast_shadow: Whether the primitive casts shadows.
        receive_shadow: Whether the primitive receives shadows.
        row: Row index for cell-bound primitives and shelves.
        column: Column index for cell-bound primitives, doors and dividers.
    """

    role: PrimitiveRole
    geometry: Geometry
    position: Vector3
    material: MaterialSpec
    rotation: Vector3 = field(default_factory=Vector3)
    cast_shadow: bool = False
    receive_shadow: bool = False
    row: int | None = None
    column: int | None = None

    def __post_init__(self) -> None:
        if not self.position.is_finite:
            raise DegenerateConfigError(
                f"{self.role.value} position must be finite, got {self.position}",
                field="position",
                value=self.position,
            )

    @property
    def size(self) -> Vector3:
        return self.geometry.size

    def world_corners(self) -> list[tuple[float, float, float]]:
        """Corners of the local bounding box after rotation and translation."""
        hx, hy, hz = self.geometry.width / 2, self.geometry.height / 2, self.geometry.depth / 2
        local = np.array(
            [
                (sx * hx, sy * hy, sz * hz)
                for sx in (-1, 1)
                for sy in (-1, 1)
                for sz in (-1, 1)
            ]
        )
        world = local @ _rotation_matrix(self.rotation).T + np.array(self.position.as_tuple())
        return [tuple(float(v) for v in corner) for corner in world]

    def bounding_box(self) -> BoundingBox3D:
        return BoundingBox3D.from_points(self.world_corners())


@dataclass(frozen=True)
class PointLight:
    """Point light descriptor for lamp addons."""

    color: int
    intensity: float
    range: float
    position: Vector3
    row: int | None = None
    column: int | None = None

    def __post_init__(self) -> None:
        if self.intensity <= 0:
            raise ValueError("Light intensity must be positive")
        if not math.isfinite(self.range) or self.range <= 0:
            raise DegenerateConfigError(
                f"Light range must be positive and finite, got {self.range!r}",
                field="range",
                value=self.range,
            )


@dataclass(frozen=True)
class Cell:
    """One compartment bounded by shelves, dividers or the carcass."""

    row: int
    column: int
    center: Vector3
    width: float
    height: float

    @property
    def top(self) -> float:
        return self.center.y + self.height / 2

    @property
    def bottom(self) -> float:
        return self.center.y - self.height / 2

    @property
    def left(self) -> float:
        return self.center.x - self.width / 2

    @property
    def right(self) -> float:
        return self.center.x + self.width / 2


@dataclass(frozen=True)
class CellGrid:
    """Grid of equally sized cells shared by every addon.

    Rows are counted from the bottom, columns from the left.
    """

    levels: int
    divisions: int
    cell_width: float
    cell_height: float
    board_thickness: float
    inner_width: float
    inner_height: float
    depth: float

    def column_center_x(self, column: int) -> float:
        return (
            -self.inner_width / 2
            + column * (self.cell_width + self.board_thickness)
            + self.cell_width / 2
        )

    def row_center_y(self, row: int) -> float:
        return (
            self.board_thickness
            + row * (self.cell_height + self.board_thickness)
            + self.cell_height / 2
        )

    @property
    def center_z(self) -> float:
        return self.depth / 2 - self.board_thickness / 2

    @property
    def top_row(self) -> int:
        return self.levels - 1

    def cell(self, row: int, column: int) -> Cell:
        if not (0 <= row < self.levels and 0 <= column < self.divisions):
            raise IndexError(f"Cell ({row}, {column}) outside {self.levels}x{self.divisions} grid")
        return Cell(
            row=row,
            column=column,
            center=Vector3(self.column_center_x(column), self.row_center_y(row), self.center_z),
            width=self.cell_width,
            height=self.cell_height,
        )

    @property
    def cells(self) -> tuple[Cell, ...]:
        """All cells, row by row from the bottom."""
        return tuple(
            self.cell(row, column)
            for row in range(self.levels)
            for column in range(self.divisions)
        )

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return self.levels * self.divisions


@dataclass(eq=False)
class SceneGraph:
    """Disposable collection of every primitive and light of one unit.

    The graph owns the arena its geometry buffers were allocated from;
    ``release`` frees all of them in one step. ``warnings`` lists the
    addon sizes that were clamped to fit the cells.
    """

    configuration: Configuration
    cell_grid: CellGrid
    primitives: list[Primitive]
    lights: list[PointLight]
    bounding_box: BoundingBox3D
    arena: GeometryArena = field(repr=False)
    warnings: tuple[str, ...] = ()
    released: bool = field(default=False, init=False)

    def __len__(self) -> int:
        return len(self.primitives)

    def __iter__(self) -> Iterator[Primitive]:
        return iter(self.primitives)

    @property
    def center(self) -> Vector3:
        return self.bounding_box.center

    def by_role(self, role: PrimitiveRole) -> list[Primitive]:
        return [p for p in self.primitives if p.role == role]

    def count(self, role: PrimitiveRole) -> int:
        return len(self.by_role(role))

    def release(self) -> int:
        """Free every geometry buffer and remove the lights.

        Safe to call more than once; only the first call frees anything.

        Returns:
            Number of buffers freed by this call.
        """
        if self.released:
            logger.debug("Scene graph already released")
            return 0
        freed = self.arena.release()
        self.lights.clear()
        self.released = True
        return freed
