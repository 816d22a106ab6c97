"""Tests for AddonBuilder and SceneGraphAssembler."""

import pytest

from bookshelf.domain.components import AddonContext, AddonResult, ValidationResult, addon_registry
from bookshelf.domain.errors import ShelfGenerationError
from bookshelf.domain.services import (
    DEFAULT_ADDONS,
    AddonBuilder,
    CarcassBuilder,
    GeometryArena,
    GeometryFactory,
    InteriorBuilder,
    SceneGraphAssembler,
)
from bookshelf.domain.value_objects import Configuration, PrimitiveRole


def _build(mesh_builder, config: Configuration, builder: AddonBuilder | None = None):
    factory = GeometryFactory(
        GeometryArena(mesh_builder), config.edge_profile, config.board_thickness
    )
    grid = InteriorBuilder().cell_grid(config)
    return (builder or AddonBuilder()).build(config, grid, factory)


class TestAddonBuilder:
    """Tests for toggling and ordering addons."""

    def test_default_order(self) -> None:
        assert DEFAULT_ADDONS == ("addon.door", "addon.lamp", "addon.hanger")

    def test_nothing_enabled_by_default(self, mesh_builder) -> None:
        result = _build(mesh_builder, Configuration())
        assert result.primitives == ()
        assert result.lights == ()
        assert result.warnings == ()

    @pytest.mark.parametrize(
        "toggles, expected_primitives, expected_lights",
        [
            ({"doors": True}, 6, 0),
            ({"lamps": True}, 12, 12),
            ({"hangers": True}, 3, 0),
            ({"doors": True, "lamps": True, "hangers": True}, 21, 12),
        ],
    )
    def test_addons_are_independent(
        self, mesh_builder, toggles: dict, expected_primitives: int, expected_lights: int
    ) -> None:
        result = _build(mesh_builder, Configuration(**toggles))
        assert len(result.primitives) == expected_primitives
        assert len(result.lights) == expected_lights

    def test_primitives_follow_addon_order(self, mesh_builder) -> None:
        result = _build(mesh_builder, Configuration(doors=True, lamps=True, hangers=True))
        roles = [p.role for p in result.primitives]
        assert roles[0] is PrimitiveRole.DOOR
        assert roles[6] is PrimitiveRole.LAMP_FIXTURE
        assert roles[-1] is PrimitiveRole.HANGER_RAIL

    def test_enabled_addons(self) -> None:
        addons = AddonBuilder().enabled_addons(Configuration(lamps=True))
        assert [a.toggle for a in addons] == ["lamps"]

    def test_warnings_are_collected(self, mesh_builder) -> None:
        result = _build(mesh_builder, Configuration(width=10.0, doors=True, hangers=True))
        assert len(result.warnings) == 2

    def test_validate_merges_addon_results(self) -> None:
        config = Configuration(width=10.0, doors=True, lamps=True, hangers=True)
        result = AddonBuilder().validate(config, InteriorBuilder().cell_grid(config))
        assert result.is_valid
        assert len(result.warnings) == 3


class TestFailingAddon:
    @pytest.fixture(autouse=True)
    def failing_addon(self):
        @addon_registry.register("test.failing")
        class FailingAddon:
            toggle = "lamps"

            def validate(self, configuration, cell_grid) -> ValidationResult:
                return ValidationResult.fail(["cannot place"])

            def generate(self, context: AddonContext) -> AddonResult:
                raise AssertionError("generate must not run")

        yield
        addon_registry.unregister("test.failing")

    def test_addon_errors_raise(self, mesh_builder) -> None:
        builder = AddonBuilder(addon_ids=("test.failing",))
        with pytest.raises(ShelfGenerationError, match="cannot place"):
            _build(mesh_builder, Configuration(lamps=True), builder)


class TestSceneGraphAssembler:
    def test_assemble(self, mesh_builder) -> None:
        config = Configuration(lamps=True)
        arena = GeometryArena(mesh_builder)
        factory = GeometryFactory(arena, config.edge_profile, config.board_thickness)
        carcass = CarcassBuilder().build(config, factory)
        interior = InteriorBuilder().build(config, factory)
        addons = AddonBuilder().build(config, interior.cell_grid, factory)

        scene = SceneGraphAssembler().assemble(config, carcass, interior, addons, arena)

        assert len(scene) == 5 + 3 + 2 + 12
        assert len(scene.lights) == 12
        assert scene.arena is arena
        assert scene.cell_grid is interior.cell_grid
        boards = scene.primitives[:10]
        assert all(p.cast_shadow and p.receive_shadow for p in boards)
        assert not any(p.receive_shadow for p in scene.primitives[10:])
        assert (scene.bounding_box.width, scene.bounding_box.height) == pytest.approx((150.0, 200.0))

    def test_empty_scene_has_no_bounding_box(self) -> None:
        with pytest.raises(ValueError):
            SceneGraphAssembler.bounding_box([])
