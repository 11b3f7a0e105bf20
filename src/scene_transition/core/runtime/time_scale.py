"""
time_scale.py
-------------
Injectable replacement for a global time-scale flag.

The scheduler freezes it while a scene is being swapped; anything that
advances gameplay time multiplies its delta by `scale`.

freeze()/resume() form a hold: resume() puts back whatever scale was set
when the hold began, including 0 if gameplay was already paused.
"""


class TimeScale:
    """Shared gameplay time multiplier."""

    def __init__(self, scale: float = 1.0):
        self.scale = scale
        self._resume_scale = scale
        self._held = False

    @property
    def is_frozen(self) -> bool:
        return self.scale == 0.0

    @property
    def is_held(self) -> bool:
        """True between freeze() and the matching resume()."""
        return self._held

    def freeze(self):
        """Stop gameplay time, remembering the scale to restore."""
        if not self._held:
            self._resume_scale = self.scale
            self._held = True
        self.scale = 0.0

    def resume(self):
        """Restore the scale saved by freeze(). No-op without a hold."""
        if not self._held:
            return
        self.scale = self._resume_scale
        self._held = False

    def apply(self, dt: float) -> float:
        """Return dt scaled to gameplay time."""
        return dt * self.scale
