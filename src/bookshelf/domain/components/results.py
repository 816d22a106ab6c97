"""Result types for addon validation and generation."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..entities import PointLight, Primitive


@dataclass(frozen=True)
class ValidationResult:
    """Result of addon validation.

    Contains any errors or warnings found during validation. An addon
    is considered valid if there are no errors, even if there are warnings.

    Attributes:
        errors: Tuple of error messages (validation failures).
        warnings: Tuple of warning messages (non-fatal issues).
    """

    errors: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        """Check if validation passed (no errors)."""
        return len(self.errors) == 0

    @classmethod
    def ok(cls, warnings: list[str] | None = None) -> ValidationResult:
        """Create a successful validation result."""
        return cls(warnings=tuple(warnings or []))

    @classmethod
    def fail(
        cls, errors: list[str], warnings: list[str] | None = None
    ) -> ValidationResult:
        """Create a failed validation result."""
        return cls(errors=tuple(errors), warnings=tuple(warnings or []))

    def merge(self, other: ValidationResult) -> ValidationResult:
        return ValidationResult(
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings,
        )


@dataclass(frozen=True)
class AddonResult:
    """Primitives and lights produced by one addon.

    Attributes:
        primitives: Meshes to add to the scene, in placement order.
        lights: Point lights to add to the scene.
    """

    primitives: tuple[Primitive, ...] = field(default_factory=tuple)
    lights: tuple[PointLight, ...] = field(default_factory=tuple)

    @classmethod
    def from_primitives(cls, primitives: list[Primitive]) -> AddonResult:
        return cls(primitives=tuple(primitives))
