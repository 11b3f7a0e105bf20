"""
test_time_scale.py
------------------
Unit tests for the injectable TimeScale.
"""

from scene_transition.core.runtime.time_scale import TimeScale


def test_defaults_to_real_time():
    time_scale = TimeScale()

    assert time_scale.scale == 1.0
    assert not time_scale.is_frozen
    assert time_scale.apply(0.5) == 0.5


def test_freeze_zeroes_scaled_dt():
    time_scale = TimeScale()

    time_scale.freeze()

    assert time_scale.is_frozen
    assert time_scale.apply(0.5) == 0.0


def test_resume_restores_previous_scale():
    time_scale = TimeScale(scale=0.5)

    time_scale.freeze()
    time_scale.freeze()
    time_scale.resume()

    assert time_scale.scale == 0.5


def test_resume_without_freeze_keeps_scale():
    time_scale = TimeScale(scale=2.0)

    time_scale.resume()

    assert time_scale.scale == 2.0


def test_resume_keeps_pause_set_before_freeze():
    time_scale = TimeScale(scale=0.0)

    time_scale.freeze()
    time_scale.resume()

    assert time_scale.is_frozen
    assert not time_scale.is_held


def test_held_only_between_freeze_and_resume():
    time_scale = TimeScale()
    assert not time_scale.is_held

    time_scale.freeze()
    assert time_scale.is_held

    time_scale.resume()
    assert not time_scale.is_held
