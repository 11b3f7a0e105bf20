"""
test_loading_screen.py
----------------------
Unit tests for the LoadingScreen hook collaborator.

Responsibilities
----------------
- Verify the fade-in holds the first phase until the overlay is opaque.
- Verify the wrap-up waits for the minimum time and for time to resume.
- Verify the wrap-up operation is released after the fade-out.
"""

import pygame
import pytest

from scene_transition.core.runtime.transition_state import TransitionPhase
from scene_transition.core.services.config_manager import TransitionConfig
from scene_transition.core.services.hook_registry import LoadProgressEvent
from scene_transition.core.services.service_locator import TransitionServices
from scene_transition.scenes.transitions.loading_screen import LoadingScreen


@pytest.fixture
def services(instant_provider):
    config = TransitionConfig(min_loading_time=1.0, fade_speed=510.0)
    services = TransitionServices(config, provider=instant_provider)
    return services


@pytest.fixture
def screen(services):
    screen = LoadingScreen(services)
    services.scheduler.start("A")
    return screen


def fade_in(screen, scheduler):
    """Run the two ticks the overlay needs to cover the screen."""
    for _ in range(2):
        screen.update(0.25)
        scheduler.update(0.25)


class TestFadeIn:
    """Holding the transition until the screen is covered."""

    def test_first_scene_does_not_show(self, screen, services):
        assert not screen.is_showing
        assert services.barrier.count == 0

    def test_holds_before_transition_until_opaque(self, screen, services):
        scheduler = services.scheduler

        scheduler.begin_transition("B")
        assert screen.is_showing
        assert scheduler.current_phase is TransitionPhase.BEFORE_TRANSITION

        screen.update(0.25)
        scheduler.update(0.25)
        assert scheduler.current_phase is TransitionPhase.BEFORE_TRANSITION

        screen.update(0.25)
        scheduler.update(0.25)
        assert screen.overlay.is_opaque
        assert scheduler.active_scene == "B"
        assert not scheduler.is_loading

    def test_progress_follows_hook(self, screen, services):
        services.hooks.dispatch(LoadProgressEvent(progress=0.4))

        assert screen.progress == pytest.approx(0.4)


class TestWrapUp:
    """Fade-out after the transition completes."""

    def test_wrap_up_operation_left_after_complete(self, screen, services):
        services.scheduler.begin_transition("B")
        fade_in(screen, services.scheduler)

        assert services.barrier.count == 1
        assert screen.is_showing

    def test_stays_for_minimum_time(self, screen, services):
        services.scheduler.begin_transition("B")
        fade_in(screen, services.scheduler)

        screen.update(0.5)
        screen.update(0.25)

        assert screen.overlay.is_opaque
        assert screen.is_showing

    def test_fades_out_then_releases_operation(self, screen, services):
        services.scheduler.begin_transition("B")
        fade_in(screen, services.scheduler)

        screen.update(1.0)
        screen.update(0.25)
        assert screen.overlay.is_visible

        screen.update(0.25)

        assert not screen.overlay.is_visible
        assert not screen.is_showing
        assert services.barrier.count == 0

    def test_waits_while_time_is_frozen(self, screen, services):
        services.scheduler.begin_transition("B")
        fade_in(screen, services.scheduler)
        services.time_scale.freeze()

        screen.update(5.0)
        assert screen.overlay.is_opaque

        services.time_scale.resume()
        screen.update(0.0)
        screen.update(0.5)

        assert not screen.is_showing

    def test_fades_out_when_game_was_already_paused(self, screen, services):
        services.time_scale.scale = 0.0
        services.scheduler.begin_transition("B")
        fade_in(screen, services.scheduler)

        screen.update(1.0)
        screen.update(0.25)
        screen.update(0.25)

        assert not screen.is_showing
        assert services.barrier.count == 0
        assert services.time_scale.is_frozen

    def test_new_transition_clears_pending_wrap_up(self, screen, services):
        scheduler = services.scheduler
        scheduler.begin_transition("B")
        fade_in(screen, scheduler)

        scheduler.begin_transition("C")

        assert services.barrier.count == 1
        assert services.barrier.operations[0].label == "loading_screen_fade_in"


def test_draw_renders_overlay_and_bar(screen, services):
    surface = pygame.Surface((100, 50))
    services.scheduler.begin_transition("B")
    screen.update(1.0)
    services.hooks.dispatch(LoadProgressEvent(progress=0.5))

    screen.draw(surface)

    assert surface.get_at((10, 49)) == (220, 220, 220, 255)
    assert surface.get_at((90, 49)) == (0, 0, 0, 255)
    assert surface.get_at((10, 10)) == (0, 0, 0, 255)


def test_dispose_unsubscribes(screen, services):
    screen.dispose()

    services.scheduler.begin_transition("B")

    assert not screen.is_showing
    assert services.barrier.count == 0
