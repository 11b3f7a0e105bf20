"""
loading_screen.py
-----------------
Loading screen that holds the transition while it fades in and out.

Responsibilities
----------------
- Block the first phase until the overlay fully covers the screen
- Show the reported load progress while the next scene loads
- After completion, stay up for a minimum time and until the time-scale
  hold is released, then fade out

The wrap-up operation is started from the completion hook, so the scheduler
does not wait for it. It is released once the fade-out ends; if a new
transition starts first, it is cleared as stale.
"""

import pygame

from scene_transition.core.debug.debug_logger import DebugLogger
from scene_transition.core.services.hook_registry import (
    BeforeTransitionEvent,
    LoadProgressEvent,
    TransitionCompleteEvent,
)
from scene_transition.scenes.transitions.fade_overlay import FadeOverlay


class LoadingScreen:
    """Fade overlay collaborator driven by transition hooks."""

    BAR_HEIGHT = 6
    BAR_COLOR = (220, 220, 220)

    def __init__(self, services, overlay=None, min_loading_time=None):
        """
        Subscribe to transition hooks.

        Args:
            services: TransitionServices providing hooks, barrier and time scale
            overlay: FadeOverlay to drive (built from config when None)
            min_loading_time: Seconds to stay visible (config value when None)
        """
        config = services.config
        self.hooks = services.hooks
        self.barrier = services.barrier
        self.time_scale = services.time_scale
        self.overlay = overlay or FadeOverlay(color=config.fade_color, speed=config.fade_speed)
        self.min_loading_time = (
            config.min_loading_time if min_loading_time is None else min_loading_time
        )

        self.progress = 0.0
        self._clock = 0.0
        self._load_start_time = 0.0
        self._showing = False
        self._fading_out = False
        self._fade_in_op = None
        self._wrap_up_op = None

        self.hooks.subscribe(BeforeTransitionEvent, self._on_before_transition)
        self.hooks.subscribe(LoadProgressEvent, self._on_load_progress)
        self.hooks.subscribe(TransitionCompleteEvent, self._on_transition_complete)

    # ===========================================================
    # Hooks
    # ===========================================================

    def _on_before_transition(self, event: BeforeTransitionEvent):
        self._fade_in_op = self.barrier.start_operation("loading_screen_fade_in")
        self._wrap_up_op = None
        self._showing = True
        self._fading_out = False
        self.progress = 0.0
        self.overlay.fade_in()

    def _on_load_progress(self, event: LoadProgressEvent):
        self.progress = event.progress
        DebugLogger.trace(f"Load progress {event.progress:.2f}", category="ui")

    def _on_transition_complete(self, event: TransitionCompleteEvent):
        if not self._showing:
            return
        self._wrap_up_op = self.barrier.start_operation("loading_screen_wrap_up")

    # ===========================================================
    # Update & Draw
    # ===========================================================

    def update(self, dt: float):
        """Advance with unscaled dt; gameplay time may be frozen."""
        self._clock += dt
        self.overlay.update(dt)

        if self._fade_in_op is not None and self.overlay.is_opaque:
            self._load_start_time = self._clock
            self._fade_in_op.complete()
            self._fade_in_op = None

        if self._wrap_up_op is not None:
            self._update_wrap_up()

    def _update_wrap_up(self):
        if not self._fading_out:
            waited = self._clock - self._load_start_time
            if waited < self.min_loading_time or self.time_scale.is_held:
                return
            self._fading_out = True
            self.overlay.fade_out()
            return

        if not self.overlay.is_visible:
            self._wrap_up_op.complete()
            self.barrier.release(self._wrap_up_op)
            self._wrap_up_op = None
            self._showing = False
            self._fading_out = False

    def draw(self, surface):
        self.overlay.draw(surface)
        if not self._showing or not self.overlay.is_opaque:
            return
        width, height = surface.get_size()
        bar_width = int(width * max(0.0, min(self.progress, 1.0)))
        pygame.draw.rect(
            surface,
            self.BAR_COLOR,
            pygame.Rect(0, height - self.BAR_HEIGHT, bar_width, self.BAR_HEIGHT),
        )

    @property
    def is_showing(self) -> bool:
        return self._showing

    def dispose(self):
        """Unsubscribe from every hook."""
        self.hooks.unsubscribe(BeforeTransitionEvent, self._on_before_transition)
        self.hooks.unsubscribe(LoadProgressEvent, self._on_load_progress)
        self.hooks.unsubscribe(TransitionCompleteEvent, self._on_transition_complete)
