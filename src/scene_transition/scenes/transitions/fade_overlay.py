"""
fade_overlay.py
---------------
Full-screen color overlay that fades towards a target alpha.
"""

import pygame

from scene_transition.core.runtime.transition_settings import Fade


class FadeOverlay:
    """Overlay used to hide the screen while scenes are swapped."""

    def __init__(self, color=Fade.COLOR, max_alpha=Fade.MAX_ALPHA, speed=Fade.SPEED):
        self.color = tuple(color)
        self.max_alpha = max_alpha
        self.alpha = 0.0
        self._target = 0.0
        self._speed = speed
        self._surface = None

    def fade_in(self, speed=None):
        """Fade towards fully covering the screen."""
        self._target = self.max_alpha
        if speed is not None:
            self._speed = speed

    def fade_out(self, speed=None):
        """Fade towards fully transparent."""
        self._target = 0.0
        if speed is not None:
            self._speed = speed

    def update(self, dt: float):
        if self.alpha < self._target:
            self.alpha = min(self.alpha + self._speed * dt, self._target)
        elif self.alpha > self._target:
            self.alpha = max(self.alpha - self._speed * dt, self._target)

    def draw(self, surface):
        if self.alpha <= 0:
            return
        size = surface.get_size()
        if self._surface is None or self._surface.get_size() != size:
            self._surface = pygame.Surface(size, pygame.SRCALPHA)
        self._surface.fill((*self.color[:3], int(self.alpha)))
        surface.blit(self._surface, (0, 0))

    @property
    def is_visible(self) -> bool:
        return self.alpha > 0

    @property
    def is_opaque(self) -> bool:
        return self.alpha >= self.max_alpha
