"""Addon registry for managing addon types."""

from __future__ import annotations

from typing import Callable, TypeVar

from .protocol import AddonComponent

C = TypeVar("C", bound=AddonComponent)


class AddonRegistry:
    """Singleton registry for addon types.

    Provides a decorator-based registration mechanism and lookup by addon ID.
    Addon IDs must follow the format 'category.type', e.g. 'addon.door'.

    Example:
        @addon_registry.register("addon.door")
        class DoorAddon:
            ...

        door_cls = addon_registry.get("addon.door")
        door = door_cls()
    """

    _instance: AddonRegistry | None = None
    _addons: dict[str, type[AddonComponent]]

    def __new__(cls) -> AddonRegistry:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._addons = {}
        return cls._instance

    def register(self, addon_id: str) -> Callable[[type[C]], type[C]]:
        """Decorator to register an addon class.

        Raises:
            ValueError: If addon_id is already registered or has invalid format.
        """

        def decorator(cls: type[C]) -> type[C]:
            if addon_id in self._addons:
                raise ValueError(f"Addon '{addon_id}' already registered")
            self._validate_id(addon_id)
            self._addons[addon_id] = cls
            return cls

        return decorator

    def get(self, addon_id: str) -> type[AddonComponent]:
        """Get an addon class by ID.

        Raises:
            KeyError: If no addon is registered with the given ID.
        """
        if addon_id not in self._addons:
            raise KeyError(f"Unknown addon: {addon_id}")
        return self._addons[addon_id]

    def list(self) -> list[str]:
        """List all registered addon IDs, sorted."""
        return sorted(self._addons.keys())

    def unregister(self, addon_id: str) -> None:
        """Remove a registered addon.

        This method is intended for testing only; built-in addons are
        registered once at import time and are not re-registered.

        Raises:
            KeyError: If no addon is registered with the given ID.
        """
        if addon_id not in self._addons:
            raise KeyError(f"Unknown addon: {addon_id}")
        del self._addons[addon_id]

    def __contains__(self, addon_id: object) -> bool:
        return addon_id in self._addons

    def _validate_id(self, addon_id: str) -> None:
        parts = addon_id.split(".")
        if len(parts) != 2 or not all(parts):
            raise ValueError(
                f"Invalid addon ID '{addon_id}': must be 'category.type'"
            )


# Singleton instance for convenient access
addon_registry = AddonRegistry()
