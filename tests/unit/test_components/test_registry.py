"""Tests for AddonRegistry and addon registration."""

from __future__ import annotations

import pytest

from bookshelf.domain.components import (
    AddonContext,
    AddonRegistry,
    AddonResult,
    DoorAddon,
    HangerAddon,
    LampAddon,
    ValidationResult,
    addon_registry,
)


class TestAddonRegistrySingleton:
    """Tests for AddonRegistry singleton behavior."""

    def test_registry_is_singleton(self) -> None:
        assert AddonRegistry() is AddonRegistry()

    def test_module_level_registry_is_same_instance(self) -> None:
        assert addon_registry is AddonRegistry()


class TestBuiltInAddons:
    def test_built_in_addons_are_registered(self) -> None:
        assert addon_registry.get("addon.door") is DoorAddon
        assert addon_registry.get("addon.lamp") is LampAddon
        assert addon_registry.get("addon.hanger") is HangerAddon

    def test_list_is_sorted(self) -> None:
        ids = addon_registry.list()
        assert ids == sorted(ids)
        assert {"addon.door", "addon.lamp", "addon.hanger"} <= set(ids)

    def test_toggles(self) -> None:
        assert DoorAddon.toggle == "doors"
        assert LampAddon.toggle == "lamps"
        assert HangerAddon.toggle == "hangers"


class TestAddonRegistration:
    """Tests for addon registration via decorator."""

    @pytest.fixture(autouse=True)
    def cleanup(self):
        yield
        for addon_id in ("test.shelf_light", "test.duplicate"):
            if addon_id in addon_registry:
                addon_registry.unregister(addon_id)

    def test_register_addon_with_decorator(self) -> None:
        @addon_registry.register("test.shelf_light")
        class ShelfLight:
            toggle = "lamps"

            def validate(self, configuration, cell_grid) -> ValidationResult:
                return ValidationResult.ok()

            def generate(self, context: AddonContext) -> AddonResult:
                return AddonResult()

        assert "test.shelf_light" in addon_registry
        assert addon_registry.get("test.shelf_light") is ShelfLight

    def test_duplicate_registration_raises(self) -> None:
        @addon_registry.register("test.duplicate")
        class First:
            toggle = "lamps"

        with pytest.raises(ValueError, match="already registered"):

            @addon_registry.register("test.duplicate")
            class Second:
                toggle = "lamps"

    @pytest.mark.parametrize("addon_id", ["door", "addon.", ".door", "addon.door.left"])
    def test_invalid_id_raises(self, addon_id: str) -> None:
        with pytest.raises(ValueError, match="Invalid addon ID"):

            @addon_registry.register(addon_id)
            class Invalid:
                toggle = "doors"

        assert addon_id not in addon_registry

    def test_get_unknown_raises(self) -> None:
        with pytest.raises(KeyError):
            addon_registry.get("addon.unknown")

    def test_unregister_unknown_raises(self) -> None:
        with pytest.raises(KeyError):
            addon_registry.unregister("addon.unknown")
