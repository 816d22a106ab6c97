"""Runs the enabled addons against the cell grid."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..components import AddonComponent, AddonContext, AddonRegistry, addon_registry
from ..components.results import ValidationResult
from ..entities import CellGrid, PointLight, Primitive
from ..errors import ShelfGenerationError
from ..value_objects import Configuration
from .geometry_factory import GeometryFactory

__all__ = ["DEFAULT_ADDONS", "AddonBuildResult", "AddonBuilder"]

logger = logging.getLogger(__name__)

# Placement order of addon primitives in the scene graph
DEFAULT_ADDONS = ("addon.door", "addon.lamp", "addon.hanger")


@dataclass(frozen=True)
class AddonBuildResult:
    """Everything the enabled addons contributed to one build."""

    primitives: tuple[Primitive, ...] = field(default_factory=tuple)
    lights: tuple[PointLight, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)


class AddonBuilder:
    """Looks up addons in the registry and generates the enabled ones.

    An addon is enabled when the configuration field named by its
    ``toggle`` is true.
    """

    def __init__(
        self,
        addon_ids: tuple[str, ...] = DEFAULT_ADDONS,
        registry: AddonRegistry | None = None,
    ) -> None:
        self.addon_ids = addon_ids
        self.registry = registry or addon_registry

    def enabled_addons(self, configuration: Configuration) -> list[AddonComponent]:
        addons = []
        for addon_id in self.addon_ids:
            addon = self.registry.get(addon_id)()
            if getattr(configuration, addon.toggle):
                addons.append(addon)
        return addons

    def validate(
        self, configuration: Configuration, cell_grid: CellGrid
    ) -> ValidationResult:
        """Validate every enabled addon and merge the results."""
        result = ValidationResult()
        for addon in self.enabled_addons(configuration):
            result = result.merge(addon.validate(configuration, cell_grid))
        return result

    def build(
        self,
        configuration: Configuration,
        cell_grid: CellGrid,
        factory: GeometryFactory,
    ) -> AddonBuildResult:
        """Generate the primitives and lights of every enabled addon.

        Raises:
            ShelfGenerationError: If an enabled addon reports errors.
        """
        context = AddonContext(
            configuration=configuration, cell_grid=cell_grid, factory=factory
        )
        primitives: list[Primitive] = []
        lights: list[PointLight] = []
        warnings: list[str] = []
        for addon in self.enabled_addons(configuration):
            validation = addon.validate(configuration, cell_grid)
            if not validation.is_valid:
                raise ShelfGenerationError("; ".join(validation.errors))
            for warning in validation.warnings:
                logger.debug(f"{type(addon).__name__}: {warning}")
            warnings.extend(validation.warnings)

            result = addon.generate(context)
            logger.debug(
                f"{type(addon).__name__} placed {len(result.primitives)} primitives "
                f"and {len(result.lights)} lights"
            )
            primitives.extend(result.primitives)
            lights.extend(result.lights)

        return AddonBuildResult(
            primitives=tuple(primitives),
            lights=tuple(lights),
            warnings=tuple(warnings),
        )
