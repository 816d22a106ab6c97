"""Installs freshly built scene graphs in response to configuration changes."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

from bookshelf.domain.entities import SceneGraph
from bookshelf.domain.value_objects import Configuration

from .commands import BuildSceneCommand
from .dtos import BuildOutcome

if TYPE_CHECKING:
    from bookshelf.contracts.protocols import SceneListener

logger = logging.getLogger(__name__)


class SceneController:
    """Owns the installed scene graph and rebuilds it on change.

    Each configuration change produces a brand new graph. The new graph is
    built completely, then swapped in under the lock, and only then is the
    previous graph released. A redraw loop reads the installed graph inside
    ``frame()``, which holds the same lock, so it never sees a partially
    built graph nor one that has been released.

    Builds wait for the drawing surface: ``update()`` before
    ``surface_ready()`` only records the configuration.

    Example:
        ```python
        controller = SceneController()
        controller.subscribe(lambda outcome: print(outcome.success))
        controller.surface_ready()
        controller.update(Configuration(lamps=True))
        with controller.frame() as scene:
            draw(scene)
        ```
    """

    def __init__(
        self,
        command: BuildSceneCommand | None = None,
        configuration: Configuration | None = None,
    ) -> None:
        self.command = command or BuildSceneCommand()
        self.configuration = configuration or Configuration()
        self._lock = threading.Lock()
        self._scene: SceneGraph | None = None
        self._listeners: list[SceneListener] = []
        self._ready = False

    @property
    def current(self) -> SceneGraph | None:
        """The installed scene graph, or None before the first build."""
        return self._scene

    @property
    def is_ready(self) -> bool:
        return self._ready

    def subscribe(self, listener: SceneListener) -> None:
        """Register a callback run after every rebuild attempt."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: SceneListener) -> None:
        self._listeners.remove(listener)

    def surface_ready(self) -> BuildOutcome:
        """Mark the drawing surface ready and build the pending configuration."""
        self._ready = True
        return self.rebuild()

    def update(self, configuration: Configuration) -> BuildOutcome | None:
        """Record a new configuration and rebuild if the surface is ready.

        Returns:
            The outcome of the rebuild, or None if the surface is not ready.
        """
        self.configuration = configuration
        if not self._ready:
            logger.debug("Surface not ready; deferring build")
            return None
        return self.rebuild()

    def rebuild(self) -> BuildOutcome:
        """Build the current configuration and install the result.

        A failed build leaves the installed graph untouched.
        """
        outcome = self.command.execute(self.configuration)
        if outcome.success:
            assert outcome.scene is not None
            with self._lock:
                previous, self._scene = self._scene, outcome.scene
            if previous is not None:
                previous.release()
            logger.info(
                f"Installed scene graph with {len(outcome.scene)} primitives "
                f"and {len(outcome.scene.lights)} lights"
            )
        else:
            logger.warning(
                f"Keeping previous scene graph: {'; '.join(outcome.errors)}"
            )

        for listener in list(self._listeners):
            listener(outcome)
        return outcome

    @contextmanager
    def frame(self) -> Iterator[SceneGraph | None]:
        """Hold the installed graph for the duration of one redraw."""
        with self._lock:
            yield self._scene

    def close(self) -> int:
        """Release the installed graph.

        Returns:
            Number of geometry buffers freed.
        """
        with self._lock:
            scene, self._scene = self._scene, None
        self._ready = False
        if scene is None:
            return 0
        return scene.release()
