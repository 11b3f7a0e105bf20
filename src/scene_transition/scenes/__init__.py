"""
Scene module exports.

Provides base scene class, states, and transition collaborators.
"""

from scene_transition.scenes.base_scene import BaseScene
from scene_transition.scenes.scene_state import SceneState
from scene_transition.scenes.transitions import (
    FadeOverlay,
    LoadingScreen,
    TransitionCompleteListener,
)

__all__ = [
    # Core
    'BaseScene',
    'SceneState',
    # Transitions
    'FadeOverlay',
    'LoadingScreen',
    'TransitionCompleteListener',
]
