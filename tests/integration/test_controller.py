"""Integration tests for SceneController rebuild and swap behavior."""

import threading
import time

import pytest

from bookshelf.application import BuildOutcome, BuildSceneCommand, SceneController
from bookshelf.domain.services import AddonBuilder, SceneGenerator
from bookshelf.domain.value_objects import Configuration


@pytest.fixture
def controller(build_command) -> SceneController:
    return SceneController(command=build_command)


class TestDeferredBuild:
    def test_no_build_before_surface_ready(self, controller, mesh_builder) -> None:
        assert controller.update(Configuration(lamps=True)) is None
        assert controller.current is None
        assert not controller.is_ready
        assert mesh_builder.calls == []

    def test_surface_ready_builds_pending_configuration(self, controller) -> None:
        controller.update(Configuration(lamps=True))
        outcome = controller.surface_ready()

        assert outcome.success
        assert controller.is_ready
        assert controller.current is outcome.scene
        assert len(controller.current.lights) == 12


class TestSwap:
    def test_update_installs_new_graph_and_releases_old(self, controller) -> None:
        first = controller.surface_ready().scene
        second = controller.update(Configuration(doors=True)).scene

        assert controller.current is second
        assert first.released
        assert all(g.released for g in first.arena.geometries)
        assert not second.released

    def test_failed_build_keeps_installed_graph(self, controller) -> None:
        installed = controller.surface_ready().scene
        outcome = controller.update(Configuration(vertical_divisions=100))

        assert not outcome.success
        assert outcome.error_type == "degenerate_config"
        assert controller.current is installed
        assert not installed.released

    @pytest.mark.parametrize(
        "config",
        [
            Configuration(horizontal_levels=10**400),
            Configuration(width=10**400),
            Configuration(board_thickness=float("inf")),
        ],
    )
    def test_unrepresentable_values_are_reported(self, controller, config) -> None:
        installed = controller.surface_ready().scene
        outcome = controller.update(config)

        assert not outcome.success
        assert outcome.errors
        assert controller.current is installed
        assert not installed.released

    def test_listeners_see_every_outcome(self, controller) -> None:
        outcomes: list[BuildOutcome] = []
        controller.subscribe(outcomes.append)

        controller.surface_ready()
        controller.update(Configuration(horizontal_levels=0))
        controller.unsubscribe(outcomes.append)
        controller.update(Configuration(hangers=True))

        assert [o.success for o in outcomes] == [True, False]

    def test_outcome_carries_addon_warnings(self, controller) -> None:
        controller.surface_ready()
        outcome = controller.update(Configuration(width=10.0, doors=True, hangers=True))

        assert outcome.success
        assert len(outcome.warnings) == 2

    def test_close_releases_installed_graph(self, controller) -> None:
        scene = controller.surface_ready().scene

        assert controller.close() == len(scene.arena)
        assert scene.released
        assert controller.current is None
        assert controller.close() == 0


class TestFrameLocking:
    """A graph being drawn is never released underneath the drawer."""

    def test_swap_waits_for_frame(self, controller) -> None:
        controller.surface_ready()
        worker_done = threading.Event()

        def rebuild() -> None:
            controller.update(Configuration(lamps=True))
            worker_done.set()

        with controller.frame() as scene:
            worker = threading.Thread(target=rebuild)
            worker.start()
            time.sleep(0.2)
            assert not worker_done.is_set()
            assert not scene.released
            assert controller.current is scene

        worker.join(timeout=10)
        assert worker_done.is_set()
        assert scene.released
        assert controller.current is not scene
        assert len(controller.current.lights) == 12

    def test_frame_before_first_build(self, controller) -> None:
        with controller.frame() as scene:
            assert scene is None


class SingleValidationAddonBuilder(AddonBuilder):
    """Addon builder that refuses to be validated outside a build."""

    def validate(self, configuration, cell_grid):
        raise AssertionError("addons were validated twice")


class TestBuildSceneCommand:
    def test_warnings_come_from_the_build(self, mesh_builder) -> None:
        generator = SceneGenerator(mesh_builder, addon_builder=SingleValidationAddonBuilder())
        command = BuildSceneCommand(scene_generator=generator)

        outcome = command.execute(Configuration(width=10.0, lamps=True, hangers=True))

        assert outcome.success
        assert outcome.warnings == list(outcome.scene.warnings)
        assert len(outcome.warnings) == 2
