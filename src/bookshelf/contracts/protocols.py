"""Service protocols for dependency injection.

This module defines protocol classes that establish contracts between layers.
Infrastructure implementations depend on these protocols, enabling loose coupling
and testability through dependency injection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from bookshelf.application.dtos import BuildOutcome


@runtime_checkable
class MeshBuilderProtocol(Protocol):
    """Protocol for allocating triangle buffers.

    All shapes are centered on the local origin. Cylinders run along the
    local Y axis.

    Example:
        ```python
        class StlMeshBuilder:
            def build_box(self, width, height, depth):
                ...
        ```
    """

    def build_box(self, width: float, height: float, depth: float) -> Any:
        """Allocate a sharp-edged rectangular prism."""
        ...

    def build_rounded_box(
        self,
        width: float,
        height: float,
        depth: float,
        radius: float,
        segments: int,
    ) -> Any:
        """Allocate a prism whose edges are rounded with the given radius."""
        ...

    def build_cylinder(
        self, radius: float, height: float, radial_segments: int
    ) -> Any:
        """Allocate a capped cylinder."""
        ...


class SceneListener(Protocol):
    """Callback notified after every rebuild attempt."""

    def __call__(self, outcome: BuildOutcome) -> None: ...
