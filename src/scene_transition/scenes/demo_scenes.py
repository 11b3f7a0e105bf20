"""
demo_scenes.py
--------------
Minimal scenes used by the demo loop.

Each scene fills the screen with its own color and moves a marker using
time-scaled dt, so the freeze during a transition is visible.
"""

import pygame

from scene_transition.scenes.base_scene import BaseScene


class ColorScene(BaseScene):
    """Solid background with a marker sliding across it."""

    BACKGROUND = (30, 30, 30)
    MARKER_COLOR = (240, 240, 240)
    MARKER_SIZE = 24
    MARKER_SPEED = 240.0  # pixels per second

    def __init__(self, name: str, services=None):
        super().__init__(name, services)
        self.marker_x = 0.0

    def on_enter(self):
        self.marker_x = 0.0

    def update(self, dt: float):
        self.marker_x += self.MARKER_SPEED * dt

    def draw(self, surface):
        surface.fill(self.BACKGROUND)
        width, height = surface.get_size()
        x = int(self.marker_x) % max(width - self.MARKER_SIZE, 1)
        y = height // 2 - self.MARKER_SIZE // 2
        pygame.draw.rect(
            surface, self.MARKER_COLOR,
            pygame.Rect(x, y, self.MARKER_SIZE, self.MARKER_SIZE)
        )


class MenuScene(ColorScene):
    BACKGROUND = (20, 40, 90)


class GameScene(ColorScene):
    BACKGROUND = (30, 90, 40)


class CreditsScene(ColorScene):
    BACKGROUND = (90, 30, 60)


DEMO_SCENES = {
    "MainMenu": MenuScene,
    "Game": GameScene,
    "Credits": CreditsScene,
}
