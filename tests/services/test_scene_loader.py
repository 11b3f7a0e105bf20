"""
test_scene_loader.py
--------------------
Unit tests for the tick-driven SceneLoader and its handles.
"""

import pytest

from scene_transition.core.services.scene_loader import LoadHandle, SceneLoader, UnloadHandle
from scene_transition.scenes.scene_state import SceneState


class TestLoadHandle:
    """Deferred activation behaviour."""

    def test_progress_holds_at_threshold(self):
        handle = LoadHandle("A", 0.9)

        handle.advance(0.5)
        handle.advance(0.5)

        assert handle.progress == pytest.approx(0.9)
        assert not handle.is_done

    def test_activation_lets_progress_finish(self):
        handle = LoadHandle("A", 0.9)
        handle.advance(2.0)

        handle.activate()
        handle.advance(0.1)

        assert handle.progress == pytest.approx(1.0)
        assert handle.is_done

    def test_progress_never_decreases(self):
        handle = LoadHandle("A", 0.9)
        handle.advance(0.4)

        handle.advance(-0.3)

        assert handle.progress == pytest.approx(0.4)

    def test_unload_handle_finishes_at_one(self):
        handle = UnloadHandle("A")

        handle.advance(0.6)
        assert not handle.is_done
        handle.advance(0.6)

        assert handle.is_done
        assert handle.progress == 1.0


class TestSceneLoader:
    """Loading, activation and unloading of registered scenes."""

    def test_unknown_scene_is_rejected(self, scene_loader):
        with pytest.raises(ValueError, match="Missing"):
            scene_loader.load_async("Missing")

    def test_can_load_only_registered_scenes(self, scene_loader):
        assert scene_loader.can_load("B")
        assert not scene_loader.can_load("Missing")

    def test_activate_immediately_enters_scene(self, scene_loader):
        scene = scene_loader.activate_immediately("A")

        assert scene.state is SceneState.ACTIVE
        assert scene.lifecycle == ["load", "enter"]
        assert scene_loader.get_scene("A") is scene

    def test_load_advances_with_dt(self, scene_loader):
        handle = scene_loader.load_async("B")

        scene_loader.update(1.0)
        scene_loader.update(1.0)

        assert handle.progress == pytest.approx(0.5)
        assert scene_loader.get_scene("B").state is SceneState.LOADING

    def test_scene_entered_when_load_done(self, scene_loader):
        handle = scene_loader.load_async("B")
        for _ in range(4):
            scene_loader.update(1.0)
        assert handle.progress == pytest.approx(0.9)

        handle.activate()
        scene_loader.update(1.0)

        scene = scene_loader.get_scene("B")
        assert handle.is_done
        assert scene.state is SceneState.ACTIVE
        assert scene.lifecycle == ["load", "enter"]

    def test_zero_duration_load_reaches_threshold_at_once(self, scene_class):
        loader = SceneLoader(load_duration=0.0)
        loader.register_scene("A", scene_class)

        handle = loader.load_async("A")

        assert handle.progress == pytest.approx(loader.activation_threshold)

    def test_unload_exits_then_removes_scene(self, scene_loader):
        scene = scene_loader.activate_immediately("A")

        handle = scene_loader.unload_async("A")
        assert scene.state is SceneState.EXITING
        assert not handle.is_done

        scene_loader.update(1.0)

        assert handle.is_done
        assert scene.state is SceneState.INACTIVE
        assert scene.lifecycle == ["load", "enter", "exit"]
        assert scene_loader.get_scene("A") is None

    def test_unloading_missing_scene_is_already_done(self, scene_loader):
        assert scene_loader.unload_async("C").is_done

    def test_reloading_same_scene_unloads_previous_instance(self, scene_loader):
        previous = scene_loader.activate_immediately("A")
        handle = scene_loader.load_async("A")
        handle.activate()
        scene_loader.update(4.0)

        scene_loader.unload_async("A")
        scene_loader.update(1.0)

        current = scene_loader.get_scene("A")
        assert current is not previous
        assert previous.state is SceneState.INACTIVE
        assert current.state is SceneState.ACTIVE

    def test_services_passed_to_scenes(self, scene_class):
        services = object()
        loader = SceneLoader(services=services)
        loader.register_scene("A", scene_class)

        assert loader.activate_immediately("A").services is services

    def test_negative_dt_rejected(self, scene_loader):
        with pytest.raises(ValueError):
            scene_loader.update(-0.1)
