"""
Runtime configuration exports.

Provides pipeline constants, state enums and the shared time scale. All
exports are lightweight with no initialization overhead.
"""

from scene_transition.core.runtime.transition_settings import (
    Display,
    Physics,
    Transition,
    Loading,
    Fade,
)
from scene_transition.core.runtime.transition_state import (
    BeginResult,
    PHASE_ORDER,
    SchedulerState,
    TransitionPhase,
    TransitionState,
)
from scene_transition.core.runtime.time_scale import TimeScale

__all__ = [
    # Settings
    'Display',
    'Physics',
    'Transition',
    'Loading',
    'Fade',
    # State
    'BeginResult',
    'PHASE_ORDER',
    'SchedulerState',
    'TransitionPhase',
    'TransitionState',
    'TimeScale',
]
