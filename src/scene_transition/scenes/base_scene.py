"""
base_scene.py
-------------
Abstract base class for all scenes.
Defines the interface and common lifecycle management.
"""

from abc import ABC, abstractmethod

from scene_transition.scenes.scene_state import SceneState


class BaseScene(ABC):
    """
    Base class for all scenes.

    Attributes:
        name: Identifier the scene was registered under
        state: Current lifecycle state
        services: TransitionServices handed in by the loader (may be None)
    """

    def __init__(self, name: str, services=None):
        self.name = name
        self.services = services
        self.state = SceneState.INACTIVE

    # ===========================================================
    # Lifecycle Hooks (Override in subclasses)
    # ===========================================================

    def on_load(self):
        """Called once when the loader creates the scene."""
        pass

    def on_enter(self):
        """Called when the scene is activated."""
        pass

    def on_exit(self):
        """Called when the scene starts unloading."""
        pass

    # ===========================================================
    # Standard Methods (Must implement in subclasses)
    # ===========================================================

    @abstractmethod
    def update(self, dt: float):
        """Update scene logic."""
        pass

    @abstractmethod
    def draw(self, surface):
        """Render the scene."""
        pass

    def handle_event(self, event) -> bool:
        """Handle input events. Returns True if consumed."""
        return False
