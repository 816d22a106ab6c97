"""Tests for AddonContext."""

import pytest

from bookshelf.domain.components import AddonContext
from bookshelf.domain.services import GeometryArena, GeometryFactory, InteriorBuilder
from bookshelf.domain.value_objects import Configuration, EdgeProfile


class TestAddonContext:
    def test_arena_comes_from_factory(self, mesh_builder) -> None:
        config = Configuration()
        arena = GeometryArena(mesh_builder)
        context = AddonContext(
            configuration=config,
            cell_grid=InteriorBuilder().cell_grid(config),
            factory=GeometryFactory(arena, EdgeProfile.SHARP, 2.0),
        )
        assert context.arena is arena

    def test_is_frozen(self, mesh_builder) -> None:
        config = Configuration()
        context = AddonContext(
            configuration=config,
            cell_grid=InteriorBuilder().cell_grid(config),
            factory=GeometryFactory(GeometryArena(mesh_builder), EdgeProfile.SHARP, 2.0),
        )
        with pytest.raises(AttributeError):
            context.configuration = Configuration(width=10.0)  # type: ignore[misc]
