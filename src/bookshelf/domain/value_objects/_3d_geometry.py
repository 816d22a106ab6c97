"""3D bounding volumes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ._core_geometry import Vector3


@dataclass(frozen=True)
class BoundingBox3D:
    """Axis-aligned bounding box given by its minimum and maximum corners.

    Used by the external renderer to re-target the camera on the
    generated unit.
    """

    min_corner: Vector3
    max_corner: Vector3

    def __post_init__(self) -> None:
        if (
            self.max_corner.x < self.min_corner.x
            or self.max_corner.y < self.min_corner.y
            or self.max_corner.z < self.min_corner.z
        ):
            raise ValueError("Bounding box max corner must not be below min corner")

    @classmethod
    def from_points(
        cls, points: Iterable[tuple[float, float, float]]
    ) -> BoundingBox3D:
        """Build the smallest box enclosing the given points.

        Raises:
            ValueError: If no points are given.
        """
        pts = list(points)
        if not pts:
            raise ValueError("Cannot build a bounding box from zero points")
        xs, ys, zs = zip(*pts)
        return cls(
            min_corner=Vector3(min(xs), min(ys), min(zs)),
            max_corner=Vector3(max(xs), max(ys), max(zs)),
        )

    def union(self, other: BoundingBox3D) -> BoundingBox3D:
        return BoundingBox3D.from_points(
            [
                self.min_corner.as_tuple(),
                self.max_corner.as_tuple(),
                other.min_corner.as_tuple(),
                other.max_corner.as_tuple(),
            ]
        )

    @property
    def size(self) -> Vector3:
        return self.max_corner - self.min_corner

    @property
    def width(self) -> float:
        return self.max_corner.x - self.min_corner.x

    @property
    def height(self) -> float:
        return self.max_corner.y - self.min_corner.y

    @property
    def depth(self) -> float:
        return self.max_corner.z - self.min_corner.z

    @property
    def center(self) -> Vector3:
        return Vector3(
            (self.min_corner.x + self.max_corner.x) / 2,
            (self.min_corner.y + self.max_corner.y) / 2,
            (self.min_corner.z + self.max_corner.z) / 2,
        )

    def contains(self, other: BoundingBox3D, tolerance: float = 1e-9) -> bool:
        """Check whether another box lies inside this one."""
        return (
            other.min_corner.x >= self.min_corner.x - tolerance
            and other.min_corner.y >= self.min_corner.y - tolerance
            and other.min_corner.z >= self.min_corner.z - tolerance
            and other.max_corner.x <= self.max_corner.x + tolerance
            and other.max_corner.y <= self.max_corner.y + tolerance
            and other.max_corner.z <= self.max_corner.z + tolerance
        )
