"""Core geometry value objects."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class ShapeKind(str, Enum):
    """Kinds of solid geometry a primitive can reference."""

    BOX = "box"
    ROUNDED_BOX = "rounded_box"
    CYLINDER = "cylinder"


class EdgeProfile(str, Enum):
    """Finishing style applied to the edges of every board."""

    SHARP = "Sharp 90°"
    ROUNDED = "Rounded/Beveled"


class PrimitiveRole(str, Enum):
    """Role of a primitive within the generated unit."""

    BOTTOM = "bottom"
    TOP = "top"
    LEFT_SIDE = "left_side"
    RIGHT_SIDE = "right_side"
    BACK = "back"
    SHELF = "shelf"
    DIVIDER = "divider"
    DOOR = "door"
    HANDLE = "handle"
    LAMP_FIXTURE = "lamp_fixture"
    HANGER_RAIL = "hanger_rail"

    @property
    def is_board(self) -> bool:
        """Whether this role is a flat board that takes the edge profile."""
        return self not in (
            PrimitiveRole.HANDLE,
            PrimitiveRole.LAMP_FIXTURE,
            PrimitiveRole.HANGER_RAIL,
        )


CARCASS_ROLES: frozenset[PrimitiveRole] = frozenset(
    {
        PrimitiveRole.BOTTOM,
        PrimitiveRole.TOP,
        PrimitiveRole.LEFT_SIDE,
        PrimitiveRole.RIGHT_SIDE,
        PrimitiveRole.BACK,
    }
)

INTERIOR_ROLES: frozenset[PrimitiveRole] = frozenset(
    {PrimitiveRole.SHELF, PrimitiveRole.DIVIDER}
)


@dataclass(frozen=True)
class Vector3:
    """Immutable 3D vector (Y-up, X to the right, Z towards the viewer)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @property
    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in self.as_tuple())

    def is_close(self, other: Vector3, abs_tol: float = 1e-9) -> bool:
        """Compare component-wise within an absolute tolerance."""
        return all(
            math.isclose(a, b, abs_tol=abs_tol)
            for a, b in zip(self.as_tuple(), other.as_tuple())
        )
