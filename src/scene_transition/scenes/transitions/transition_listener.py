"""
transition_listener.py
----------------------
Runs a callback every time a scene transition completes.
"""

from typing import Callable, Optional

from scene_transition.core.services.hook_registry import HookRegistry, TransitionCompleteEvent


class TransitionCompleteListener:
    """Subscribes a callback to the completion hook until disposed."""

    def __init__(self, hooks: HookRegistry, on_complete: Callable[[str], None],
                 on_attach: Optional[Callable[[], None]] = None):
        """
        Args:
            hooks: Registry to listen on
            on_complete: Called with the scene id after each transition
            on_attach: Called once, immediately
        """
        self.hooks = hooks
        self.on_complete = on_complete
        if on_attach is not None:
            on_attach()
        self.hooks.subscribe(TransitionCompleteEvent, self._on_event)

    def _on_event(self, event: TransitionCompleteEvent):
        self.on_complete(event.scene)

    def dispose(self):
        self.hooks.unsubscribe(TransitionCompleteEvent, self._on_event)
