"""
Scene transition collaborators.

Provides the loading screen overlay and completion listener that plug into
the transition hooks.
"""

from scene_transition.scenes.transitions.fade_overlay import FadeOverlay
from scene_transition.scenes.transitions.loading_screen import LoadingScreen
from scene_transition.scenes.transitions.transition_listener import TransitionCompleteListener

__all__ = [
    'FadeOverlay',
    'LoadingScreen',
    'TransitionCompleteListener',
]
