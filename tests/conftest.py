"""
conftest.py
-----------
Shared pytest configuration and fixtures for scene transition tests.

Contains:
- Pipeline fixtures (barrier, hooks, time scale, scheduler)
- An instant load provider for tests that only care about phase order
- A hook recorder that captures every phase with scheduler state
"""

import pytest

from scene_transition.core.runtime.time_scale import TimeScale
from scene_transition.core.services.hook_registry import (
    HookRegistry,
    LoadProgressEvent,
    PHASE_EVENTS,
)
from scene_transition.core.services.operation_barrier import OperationBarrier
from scene_transition.core.services.scene_loader import (
    LoadHandle,
    SceneLoader,
    SceneLoadProvider,
    UnloadHandle,
)
from scene_transition.core.services.transition_scheduler import TransitionScheduler
from scene_transition.scenes.base_scene import BaseScene


# ===========================================================
# Test Providers
# ===========================================================

class InstantLoadHandle(LoadHandle):
    """Load that sits at the threshold immediately and finishes on activate()."""

    def __init__(self, scene_id, activation_threshold, calls):
        super().__init__(scene_id, activation_threshold)
        self.calls = calls
        self.advance(activation_threshold)

    def activate(self):
        super().activate()
        self.calls.append(("activate", self.scene_id))
        self.advance(1.0)


class InstantProvider(SceneLoadProvider):
    """Provider that never makes the scheduler wait."""

    def __init__(self):
        self.calls = []

    def load_async(self, scene_id):
        self.calls.append(("load", scene_id))
        return InstantLoadHandle(scene_id, self.activation_threshold, self.calls)

    def unload_async(self, scene_id):
        self.calls.append(("unload", scene_id))
        handle = UnloadHandle(scene_id)
        handle.advance(1.0)
        return handle


class RecordingScene(BaseScene):
    """Scene that records its lifecycle callbacks."""

    def __init__(self, name, services=None):
        super().__init__(name, services)
        self.lifecycle = []

    def on_load(self):
        self.lifecycle.append("load")

    def on_enter(self):
        self.lifecycle.append("enter")

    def on_exit(self):
        self.lifecycle.append("exit")

    def update(self, dt):
        self.lifecycle.append(("update", dt))

    def draw(self, surface):
        pass


# ===========================================================
# Hook Recorder
# ===========================================================

class HookRecorder:
    """Records every hook dispatch along with scheduler state at that moment."""

    def __init__(self, hooks, scheduler=None):
        self.scheduler = scheduler
        self.phases = []
        self.events = []
        self.snapshots = {}
        self.progress = []
        for phase, event_type in PHASE_EVENTS.items():
            hooks.subscribe(event_type, self._make_callback(phase))
        hooks.subscribe(LoadProgressEvent, self._on_progress)

    def _make_callback(self, phase):
        def record(event):
            self.phases.append(phase)
            self.events.append(event)
            if self.scheduler is not None:
                self.snapshots[phase] = {
                    "is_loading": self.scheduler.is_loading,
                    "is_scene_ready": self.scheduler.is_scene_ready,
                    "active_scene": self.scheduler.active_scene,
                    "time_frozen": self.scheduler.time_scale.is_frozen,
                    "live_operations": self.scheduler.barrier.count,
                }
        record.__name__ = f"record_{phase.name.lower()}"
        return record

    def _on_progress(self, event):
        self.progress.append(event.progress)

    def reset(self):
        self.phases.clear()
        self.events.clear()
        self.snapshots.clear()
        self.progress.clear()


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def barrier():
    return OperationBarrier()


@pytest.fixture
def hooks():
    return HookRegistry()


@pytest.fixture
def time_scale():
    return TimeScale()


@pytest.fixture
def instant_provider():
    return InstantProvider()


@pytest.fixture
def scheduler(barrier, hooks, instant_provider, time_scale):
    """Scheduler wired to an instant provider."""
    return TransitionScheduler(barrier, hooks, instant_provider, time_scale=time_scale)


@pytest.fixture
def recorder(hooks, scheduler):
    return HookRecorder(hooks, scheduler)


@pytest.fixture
def make_recorder():
    """Factory for recorders attached to a custom scheduler."""
    return HookRecorder


@pytest.fixture
def scene_class():
    return RecordingScene


@pytest.fixture
def scene_loader():
    """Loader with scenes A, B and C; loads take 4s, unloads 1s."""
    loader = SceneLoader(load_duration=4.0, unload_duration=1.0)
    for name in ("A", "B", "C"):
        loader.register_scene(name, RecordingScene)
    return loader


# Pytest configuration
def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Tag every test as unit unless it is explicitly an integration test."""
    for item in items:
        if item.get_closest_marker("integration") is None:
            item.add_marker(pytest.mark.unit)
