"""Tests for ServiceFactory wiring."""

from bookshelf.application import (
    BuildSceneCommand,
    SceneController,
    ServiceFactory,
    get_factory,
    reset_factory,
    set_factory,
)
from bookshelf.domain.value_objects import Configuration
from bookshelf.infrastructure import StlMeshBuilder


class TestServiceFactory:
    def test_builders_are_created_once(self) -> None:
        factory = ServiceFactory()

        assert isinstance(factory.get_mesh_builder(), StlMeshBuilder)
        assert factory.get_mesh_builder() is factory.get_mesh_builder()
        assert factory.get_addon_builder() is factory.get_addon_builder()

    def test_scene_generator_shares_builders(self) -> None:
        factory = ServiceFactory()
        generator = factory.create_scene_generator()

        assert generator.mesh_builder is factory.get_mesh_builder()
        assert generator.carcass_builder is factory.get_carcass_builder()
        assert generator.interior_builder is factory.get_interior_builder()
        assert generator.addon_builder is factory.get_addon_builder()

    def test_build_command(self) -> None:
        command = ServiceFactory().create_build_command()
        outcome = command.execute(Configuration())

        assert isinstance(command, BuildSceneCommand)
        assert outcome.success
        assert len(outcome.scene) == 10
        outcome.scene.release()

    def test_controller(self) -> None:
        controller = ServiceFactory().create_controller()

        assert isinstance(controller, SceneController)
        assert controller.current is None


class TestDefaultFactory:
    def test_get_factory_is_a_singleton(self) -> None:
        assert get_factory() is get_factory()

    def test_set_and_reset(self) -> None:
        custom = ServiceFactory()
        set_factory(custom)
        assert get_factory() is custom

        reset_factory()
        assert get_factory() is not custom
