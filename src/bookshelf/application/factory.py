"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bookshelf.application.commands import BuildSceneCommand
    from bookshelf.application.controller import SceneController
    from bookshelf.contracts.protocols import MeshBuilderProtocol
    from bookshelf.domain.services import (
        AddonBuilder,
        CarcassBuilder,
        InteriorBuilder,
        SceneGenerator,
    )
    from bookshelf.infrastructure.formatters import (
        MaterialTableFormatter,
        SceneSummaryFormatter,
    )


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Centralizes service instantiation to support:
    - Dependency injection for testing
    - Lazy initialization of the builders

    Example:
        ```python
        factory = ServiceFactory()
        outcome = factory.create_build_command().execute(Configuration())
        ```
    """

    _mesh_builder: "MeshBuilderProtocol | None" = field(
        default=None, init=False, repr=False
    )
    _carcass_builder: "CarcassBuilder | None" = field(
        default=None, init=False, repr=False
    )
    _interior_builder: "InteriorBuilder | None" = field(
        default=None, init=False, repr=False
    )
    _addon_builder: "AddonBuilder | None" = field(
        default=None, init=False, repr=False
    )

    def get_mesh_builder(self) -> "MeshBuilderProtocol":
        """Get or create the mesh builder instance."""
        if self._mesh_builder is None:
            from bookshelf.infrastructure.mesh_builder import StlMeshBuilder

            self._mesh_builder = StlMeshBuilder()
        return self._mesh_builder

    def get_carcass_builder(self) -> "CarcassBuilder":
        if self._carcass_builder is None:
            from bookshelf.domain.services import CarcassBuilder

            self._carcass_builder = CarcassBuilder()
        return self._carcass_builder

    def get_interior_builder(self) -> "InteriorBuilder":
        if self._interior_builder is None:
            from bookshelf.domain.services import InteriorBuilder

            self._interior_builder = InteriorBuilder()
        return self._interior_builder

    def get_addon_builder(self) -> "AddonBuilder":
        if self._addon_builder is None:
            from bookshelf.domain.services import AddonBuilder

            self._addon_builder = AddonBuilder()
        return self._addon_builder

    def get_scene_summary_formatter(self) -> "SceneSummaryFormatter":
        from bookshelf.infrastructure.formatters import SceneSummaryFormatter

        return SceneSummaryFormatter()

    def get_material_table_formatter(self) -> "MaterialTableFormatter":
        from bookshelf.infrastructure.formatters import MaterialTableFormatter

        return MaterialTableFormatter()

    def create_scene_generator(self) -> "SceneGenerator":
        from bookshelf.domain.services import SceneGenerator

        return SceneGenerator(
            mesh_builder=self.get_mesh_builder(),
            carcass_builder=self.get_carcass_builder(),
            interior_builder=self.get_interior_builder(),
            addon_builder=self.get_addon_builder(),
        )

    def create_build_command(self) -> "BuildSceneCommand":
        """Create a BuildSceneCommand wired to this factory's services."""
        from bookshelf.application.commands import BuildSceneCommand

        return BuildSceneCommand(scene_generator=self.create_scene_generator())

    def create_controller(self) -> "SceneController":
        from bookshelf.application.controller import SceneController

        return SceneController(command=self.create_build_command())


# Default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
