"""Protocol definition for shelving unit addons."""

from __future__ import annotations

from typing import ClassVar, Protocol

from ..entities import CellGrid
from ..value_objects import Configuration
from .context import AddonContext
from .results import AddonResult, ValidationResult


class AddonComponent(Protocol):
    """Protocol for addons placed on the cell grid.

    Addons are registered with the AddonRegistry using an ID of the form
    'addon.type'. Each addon is switched on by one boolean field of the
    configuration, named by ``toggle``.

    Example:
        @addon_registry.register("addon.shelf_light")
        class ShelfLight:
            toggle = "lamps"

            def validate(self, configuration, cell_grid) -> ValidationResult:
                ...

            def generate(self, context) -> AddonResult:
                ...
    """

    toggle: ClassVar[str]

    def validate(
        self, configuration: Configuration, cell_grid: CellGrid
    ) -> ValidationResult:
        """Report problems with placing this addon on the given grid.

        Warnings describe derived sizes that will be clamped; errors mean the
        addon cannot be placed at all.
        """
        ...

    def generate(self, context: AddonContext) -> AddonResult:
        """Create the addon's primitives and lights.

        Should only be called after validate() returns a successful result.
        """
        ...
