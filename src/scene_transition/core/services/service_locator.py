"""
service_locator.py
------------------
Owns the transition pipeline and hands it to collaborators.

Builds the barrier, hook registry, time scale, load provider and scheduler
once, so scenes and overlays receive them explicitly instead of looking
them up through globals.
"""

from typing import Any, Optional

from scene_transition.core.debug.debug_logger import DebugLogger
from scene_transition.core.runtime.time_scale import TimeScale
from scene_transition.core.services.config_manager import TransitionConfig
from scene_transition.core.services.hook_registry import HookRegistry
from scene_transition.core.services.operation_barrier import OperationBarrier
from scene_transition.core.services.scene_loader import SceneLoader, SceneLoadProvider
from scene_transition.core.services.transition_scheduler import TransitionScheduler


# ===========================================================
# Transition Services
# ===========================================================

class TransitionServices:
    """Container for the transition pipeline and shared global systems."""

    __slots__ = (
        "config",
        "barrier",
        "hooks",
        "time_scale",
        "provider",
        "scheduler",
        "_global_systems",
    )

    def __init__(self, config: Optional[TransitionConfig] = None,
                 provider: Optional[SceneLoadProvider] = None):
        """
        Build the pipeline.

        Args:
            config: Transition settings (defaults when None)
            provider: Load provider; a SceneLoader is created when None
        """
        self.config = config or TransitionConfig()
        self.barrier = OperationBarrier()
        self.hooks = HookRegistry()
        self.time_scale = TimeScale()
        self._global_systems = {}

        if provider is None:
            provider = SceneLoader(
                services=self,
                load_duration=self.config.load_duration,
                unload_duration=self.config.unload_duration,
                activation_threshold=self.config.activation_threshold,
            )
        self.provider = provider

        self.scheduler = TransitionScheduler(
            self.barrier,
            self.hooks,
            self.provider,
            time_scale=self.time_scale,
            control_time_scale=self.config.control_time_scale,
        )
        DebugLogger.init_sub("Transition services initialized")

    # ===========================================================
    # Global System Access
    # ===========================================================

    def register_global(self, name: str, system: Any) -> None:
        """
        Register a system that persists across scenes.

        Args:
            name: System identifier
            system: System instance
        """
        self._global_systems[name] = system

    def get_global(self, name: str, default: Any = None) -> Any:
        """Get a global system by name, or default."""
        return self._global_systems.get(name, default)

    def has_global(self, name: str) -> bool:
        return name in self._global_systems

    def unregister_global(self, name: str) -> None:
        self._global_systems.pop(name, None)

    # ===========================================================
    # Scene Transition
    # ===========================================================

    def transition_to(self, scene_id: str):
        """Convenience wrapper around the scheduler entry point."""
        return self.scheduler.begin_transition(scene_id)
