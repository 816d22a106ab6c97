"""Addon registry architecture for shelving unit fixtures.

This package provides the infrastructure for registering and generating
addons (doors, lamps, hanger rails) placed on the cell grid.

- AddonContext: Immutable context for addon generation
- ValidationResult / AddonResult: Results of validation and generation
- AddonComponent: Protocol defining the addon interface
- AddonRegistry / addon_registry: Singleton registry for addon types

Importing this package registers the built-in addons.
"""

from .context import AddonContext
from .door import DoorAddon
from .hanger import HangerAddon
from .lamp import LampAddon
from .protocol import AddonComponent
from .registry import AddonRegistry, addon_registry
from .results import AddonResult, ValidationResult

__all__ = [
    "AddonComponent",
    "AddonContext",
    "AddonRegistry",
    "AddonResult",
    "DoorAddon",
    "HangerAddon",
    "LampAddon",
    "ValidationResult",
    "addon_registry",
]
