"""Pytest configuration and shared fixtures for bookshelf tests."""

from __future__ import annotations

from typing import Any

import pytest

from bookshelf.application.commands import BuildSceneCommand
from bookshelf.application.factory import reset_factory
from bookshelf.domain.services import SceneGenerator
from bookshelf.domain.value_objects import Configuration
from bookshelf.infrastructure.mesh_builder import StlMeshBuilder


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


class CountingMeshBuilder:
    """Mesh builder that records every allocation it is asked for."""

    def __init__(self) -> None:
        self._builder = StlMeshBuilder()
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def build_box(self, width: float, height: float, depth: float) -> Any:
        self.calls.append(("box", (width, height, depth)))
        return self._builder.build_box(width, height, depth)

    def build_rounded_box(
        self, width: float, height: float, depth: float, radius: float, segments: int
    ) -> Any:
        self.calls.append(("rounded_box", (width, height, depth, radius, segments)))
        return self._builder.build_rounded_box(width, height, depth, radius, segments)

    def build_cylinder(self, radius: float, height: float, radial_segments: int) -> Any:
        self.calls.append(("cylinder", (radius, height, radial_segments)))
        return self._builder.build_cylinder(radius, height, radial_segments)


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _reset_service_factory() -> Any:
    """Make sure no test leaks a custom default factory."""
    yield
    reset_factory()


@pytest.fixture
def default_configuration() -> Configuration:
    """The 150 x 200 x 30 unit with 4 levels and 3 divisions."""
    return Configuration()


@pytest.fixture
def full_configuration() -> Configuration:
    """Default unit with every addon switched on."""
    return Configuration(doors=True, lamps=True, hangers=True)


@pytest.fixture
def mesh_builder() -> CountingMeshBuilder:
    return CountingMeshBuilder()


@pytest.fixture
def scene_generator(mesh_builder: CountingMeshBuilder) -> SceneGenerator:
    return SceneGenerator(mesh_builder)


@pytest.fixture
def build_command(scene_generator: SceneGenerator) -> BuildSceneCommand:
    return BuildSceneCommand(scene_generator=scene_generator)
