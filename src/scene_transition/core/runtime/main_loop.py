"""
main_loop.py
------------
Demo loop that drives the transition pipeline from pygame frames.

Responsibilities:
- Initialize pygame and the transition services
- Register the demo scenes and ready the first one
- Tick the loader, scheduler and loading screen with unscaled dt
- Tick the active scene with time-scaled dt
- Map number keys to scene transitions
"""

import argparse

import pygame

from scene_transition.core.debug.debug_logger import DebugLogger
from scene_transition.core.runtime.transition_settings import Display, Physics
from scene_transition.core.runtime.transition_state import BeginResult
from scene_transition.core.services.config_manager import TransitionConfig
from scene_transition.core.services.service_locator import TransitionServices
from scene_transition.scenes.demo_scenes import DEMO_SCENES
from scene_transition.scenes.transitions.loading_screen import LoadingScreen


class MainLoop:
    """
    Runtime controller for the demo window.

    Implements a fixed timestep for updates with variable rendering.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, config=None, first_scene="MainMenu"):
        """Initialize pygame, the transition services and demo scenes."""
        DebugLogger.section("Initializing MainLoop")

        self._init_pygame()
        self._init_services(config or TransitionConfig.from_config())
        self._init_scenes(first_scene)

    def _init_pygame(self):
        pygame.init()
        pygame.display.set_caption(Display.CAPTION)
        self.screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))
        self.clock = pygame.time.Clock()
        self.running = True

        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub("Window and clock created")

    def _init_services(self, config):
        self.services = TransitionServices(config)
        self.loader = self.services.provider
        self.scheduler = self.services.scheduler
        self.loading_screen = LoadingScreen(self.services)

        DebugLogger.init_entry("TransitionServices")
        DebugLogger.init_sub("LoadingScreen subscribed", level=1)

    def _init_scenes(self, first_scene):
        for name, scene_class in DEMO_SCENES.items():
            self.loader.register_scene(name, scene_class)

        self.scene_keys = {
            pygame.K_1 + index: name for index, name in enumerate(DEMO_SCENES)
        }

        self.loader.activate_immediately(first_scene)
        self.scheduler.start(first_scene)
        DebugLogger.init_sub(f"Registered scenes: {list(DEMO_SCENES)}")

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """Execute the demo loop until quit."""
        DebugLogger.section("Demo Loop")

        fixed_dt = Physics.FIXED_DT
        accumulator = 0.0

        while self.running:
            frame_time = self.clock.tick(Display.FPS) / 1000.0
            frame_time = min(frame_time, Physics.MAX_FRAME_TIME)
            accumulator += frame_time

            self._handle_events()

            while accumulator >= fixed_dt:
                self.update(fixed_dt)
                accumulator -= fixed_dt

            self._draw()

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    def update(self, dt: float):
        """One fixed tick of the transition pipeline and the active scene."""
        self.loader.update(dt)
        self.scheduler.update(dt)
        self.loading_screen.update(dt)

        scene = self.loader.get_scene(self.scheduler.active_scene)
        if scene is not None:
            scene.update(self.services.time_scale.apply(dt))

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break

            if event.type == pygame.KEYDOWN and event.key in self.scene_keys:
                self._request_scene(self.scene_keys[event.key])
                continue

            scene = self.loader.get_scene(self.scheduler.active_scene)
            if scene is not None:
                scene.handle_event(event)

    def _request_scene(self, name):
        if name == self.scheduler.active_scene:
            return
        if self.scheduler.begin_transition(name) is BeginResult.BUSY:
            DebugLogger.action(f"Ignored request for {name} while loading")

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        scene = self.loader.get_scene(self.scheduler.active_scene)
        if scene is not None:
            scene.draw(self.screen)
        else:
            self.screen.fill((0, 0, 0))

        self.loading_screen.draw(self.screen)
        pygame.display.flip()


def main(argv=None):
    """Console entry point."""
    parser = argparse.ArgumentParser(description="Scene transition demo")
    parser.add_argument("--scene", default="MainMenu", choices=list(DEMO_SCENES),
                        help="Scene shown at startup")
    parser.add_argument("--config", default=None,
                        help="Transition config file (defaults to transition.yaml)")
    parser.add_argument("--verbose", action="store_true",
                        help="Print barrier traces and hook subscriptions")
    args = parser.parse_args(argv)

    if args.verbose:
        DebugLogger.configure(level="VERBOSE", hooks=True, config=True, ui=True)

    config = (TransitionConfig.from_config(args.config, strict=True)
              if args.config else None)
    MainLoop(config=config, first_scene=args.scene).run()
    return 0
