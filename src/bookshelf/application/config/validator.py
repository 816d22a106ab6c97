"""Validation structures and buildability checks.

Pydantic already enforces field ranges and the board thickness rule. This
module adds the checks that need the domain: whether the levels and
divisions leave positive cells, and which addon sizes will be clamped.
"""

from dataclasses import dataclass, field
from typing import Any

from bookshelf.application.config.adapter import config_to_configuration
from bookshelf.application.config.schema import BookshelfConfiguration
from bookshelf.domain.errors import ShelfGenerationError
from bookshelf.domain.services import AddonBuilder, InteriorBuilder, normalize_configuration


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "shelf.vertical_divisions")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


# Maps addon toggles to the JSON path reported with their warnings
_ADDON_PATHS = {
    "doors": "addons.doors",
    "lamps": "addons.lamps",
    "hangers": "addons.hangers",
}


def validate_config(
    config: BookshelfConfiguration,
    addon_builder: AddonBuilder | None = None,
) -> ValidationResult:
    """Perform full validation of a shelving unit configuration.

    Args:
        config: A BookshelfConfiguration instance (already validated by Pydantic)
        addon_builder: Addon builder whose addons are checked

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()
    addon_builder = addon_builder or AddonBuilder()

    try:
        configuration = normalize_configuration(config_to_configuration(config))
    except ShelfGenerationError as e:
        path = f"shelf.{e.field}" if e.field else "shelf"
        return result.add_error(path, e.message, e.value)

    grid = InteriorBuilder().cell_grid(configuration)
    for addon in addon_builder.enabled_addons(configuration):
        addon_result = addon.validate(configuration, grid)
        path = _ADDON_PATHS.get(addon.toggle, f"addons.{addon.toggle}")
        for message in addon_result.errors:
            result.add_error(path, message)
        for message in addon_result.warnings:
            result.add_warning(
                path,
                message,
                suggestion="Increase the unit size or reduce levels/divisions",
            )
    return result
