"""Exceptions raised by the scene generation pipeline."""

from __future__ import annotations


class ShelfGenerationError(Exception):
    """Base class for configuration problems that prevent a build.

    Generation is deterministic, so these errors always describe the input
    and are never worth retrying.

    Attributes:
        field: Name of the configuration field at fault, if known.
        value: The offending value, if known.
    """

    error_type = "generation"

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        self.message = message
        self.field = field
        self.value = value
        super().__init__(message)


class DegenerateConfigError(ShelfGenerationError):
    """Dimensions leave no positive room for boards or cells."""

    error_type = "degenerate_config"


class InvalidCountError(ShelfGenerationError):
    """A level or division count is below 1 or not an integer."""

    error_type = "invalid_count"
