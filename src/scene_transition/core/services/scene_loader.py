"""
scene_loader.py
---------------
Scene load provider contract and a tick-driven in-process implementation.

Responsibilities
----------------
- Define the provider surface the transition scheduler consumes
  (load with deferred activation, activation, unload).
- Keep a registry of scene classes and instantiate them on load.
- Report monotonic load progress that stalls at the activation threshold
  until activation is explicitly allowed.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from scene_transition.core.debug.debug_logger import DebugLogger
from scene_transition.core.runtime.transition_settings import Loading
from scene_transition.scenes.base_scene import BaseScene
from scene_transition.scenes.scene_state import SceneState


# ===========================================================
# Provider Handles
# ===========================================================

class LoadHandle:
    """Progress of one scene load with deferred activation."""

    def __init__(self, scene_id: str, activation_threshold: float):
        self.scene_id = scene_id
        self.activation_threshold = activation_threshold
        self.progress = 0.0
        self.is_done = False
        self.activation_allowed = False

    def activate(self):
        """Allow the load to pass the activation threshold."""
        self.activation_allowed = True

    def advance(self, amount: float):
        """Move progress forward, holding at the threshold until activated."""
        if self.is_done:
            return
        ceiling = 1.0 if self.activation_allowed else self.activation_threshold
        self.progress = min(max(self.progress, self.progress + amount), ceiling)
        if self.progress >= 1.0:
            self.is_done = True


class UnloadHandle:
    """Progress of one scene unload."""

    def __init__(self, scene_id: str):
        self.scene_id = scene_id
        self.progress = 0.0
        self.is_done = False

    def advance(self, amount: float):
        if self.is_done:
            return
        self.progress = min(self.progress + amount, 1.0)
        if self.progress >= 1.0:
            self.is_done = True


# ===========================================================
# Provider Contract
# ===========================================================

class SceneLoadProvider(ABC):
    """Loads, activates and unloads scenes on behalf of the scheduler."""

    activation_threshold: float = Loading.ACTIVATION_THRESHOLD

    def can_load(self, scene_id: str) -> bool:
        """Whether load_async(scene_id) would be accepted."""
        return True

    @abstractmethod
    def load_async(self, scene_id: str) -> LoadHandle:
        """Start loading a scene additively with activation deferred."""
        pass

    @abstractmethod
    def unload_async(self, scene_id: str) -> UnloadHandle:
        """Start unloading a scene."""
        pass


# ===========================================================
# Scene Loader
# ===========================================================

class SceneLoader(SceneLoadProvider):
    """Simulated provider that advances loads on each update(dt)."""

    def __init__(self, services=None,
                 load_duration: float = Loading.LOAD_DURATION,
                 unload_duration: float = Loading.UNLOAD_DURATION,
                 activation_threshold: float = Loading.ACTIVATION_THRESHOLD):
        """
        Initialize loader.

        Args:
            services: Passed to every scene constructor
            load_duration: Seconds for a load to go from 0 to 1
            unload_duration: Seconds for an unload to finish
            activation_threshold: Progress held until activation
        """
        self.services = services
        self.load_duration = load_duration
        self.unload_duration = unload_duration
        self.activation_threshold = activation_threshold

        self.scene_classes: Dict[str, Type[BaseScene]] = {}
        self._scenes: Dict[str, BaseScene] = {}
        self._loads: Dict[str, LoadHandle] = {}
        self._unloads: Dict[str, UnloadHandle] = {}
        # Previous instance of a scene that is being reloaded
        self._replaced: Dict[str, BaseScene] = {}

    # ===========================================================
    # Registration
    # ===========================================================

    def register_scene(self, name: str, scene_class: Type[BaseScene]) -> None:
        """Map a scene identifier to the class instantiated on load."""
        self.scene_classes[name] = scene_class
        DebugLogger.system(f"Registered scene '{name}'", category="loading")

    def get_scene(self, name: Optional[str]) -> Optional[BaseScene]:
        """Return a loaded scene instance, if any."""
        return self._scenes.get(name)

    @property
    def loaded_scenes(self) -> Dict[str, BaseScene]:
        return dict(self._scenes)

    # ===========================================================
    # Provider API
    # ===========================================================

    def activate_immediately(self, scene_id: str) -> BaseScene:
        """Create and enter a scene synchronously (first scene at startup)."""
        scene = self._create_scene(scene_id)
        self._enter_scene(scene)
        return scene

    def can_load(self, scene_id: str) -> bool:
        return scene_id in self.scene_classes

    def load_async(self, scene_id: str) -> LoadHandle:
        self._create_scene(scene_id)
        handle = LoadHandle(scene_id, self.activation_threshold)
        self._loads[scene_id] = handle
        DebugLogger.state(f"Loading {scene_id}", category="loading")
        if self.load_duration <= 0.0:
            handle.advance(self.activation_threshold)
        return handle

    def unload_async(self, scene_id: str) -> UnloadHandle:
        handle = UnloadHandle(scene_id)
        scene = self._replaced.get(scene_id) or self._scenes.get(scene_id)
        if scene is None:
            handle.advance(1.0)
            return handle

        DebugLogger.state(f"Unloading {scene_id}", category="loading")
        scene.state = SceneState.EXITING
        scene.on_exit()
        self._unloads[scene_id] = handle
        if self.unload_duration <= 0.0:
            self._finish_unload(scene_id, handle)
        return handle

    # ===========================================================
    # Update
    # ===========================================================

    def update(self, dt: float):
        """Advance every pending load and unload by dt seconds (unscaled)."""
        if dt < 0.0:
            raise ValueError("dt must be >= 0")

        for scene_id, handle in list(self._loads.items()):
            handle.advance(self._step(dt, self.load_duration))
            if handle.is_done:
                del self._loads[scene_id]
                self._enter_scene(self._scenes[scene_id])

        for scene_id, handle in list(self._unloads.items()):
            handle.advance(self._step(dt, self.unload_duration))
            if handle.is_done:
                self._finish_unload(scene_id, handle)

    # ===========================================================
    # Internal
    # ===========================================================

    def _create_scene(self, scene_id: str) -> BaseScene:
        if scene_id not in self.scene_classes:
            raise ValueError(f"Unknown scene: '{scene_id}'")
        scene = self.scene_classes[scene_id](scene_id, self.services)
        scene.state = SceneState.LOADING
        scene.on_load()
        if scene_id in self._scenes:
            self._replaced[scene_id] = self._scenes[scene_id]
        self._scenes[scene_id] = scene
        return scene

    def _enter_scene(self, scene: BaseScene):
        scene.state = SceneState.ACTIVE
        DebugLogger.state(f"Entering {scene.name}", category="scene")
        scene.on_enter()

    def _finish_unload(self, scene_id: str, handle: UnloadHandle):
        handle.advance(1.0)
        self._unloads.pop(scene_id, None)
        scene = self._replaced.pop(scene_id, None) or self._scenes.pop(scene_id, None)
        if scene is not None:
            scene.state = SceneState.INACTIVE
        DebugLogger.state(f"Unloaded {scene_id}", category="loading")

    @staticmethod
    def _step(dt: float, duration: float) -> float:
        if duration <= 0.0:
            return 1.0
        return dt / duration
