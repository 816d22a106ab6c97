"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from bookshelf.domain.entities import SceneGraph
from bookshelf.domain.value_objects import BoundingBox3D


@dataclass
class BuildOutcome:
    """Result of one build attempt.

    On success ``scene`` and ``bounding_box`` are set. On failure both are
    None and ``errors`` explains why; a failed build never replaces the
    installed scene graph.
    """

    success: bool
    scene: SceneGraph | None = None
    bounding_box: BoundingBox3D | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    error_type: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.success and not self.errors
