"""
transition_state.py
-------------------
Phase sequence, scheduler lifecycle states and the transition snapshot.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TransitionPhase(Enum):
    """Fixed, ordered steps of a scene transition."""
    BEFORE_TRANSITION = "OnBeforeTransition"
    BEFORE_LOAD = "OnBeforeLoad"
    BEFORE_ACTIVATE = "OnBeforeActivate"
    BEFORE_UNLOAD = "OnBeforeUnload"
    AFTER_UNLOAD = "OnAfterUnload"
    BEFORE_SCENE_READY = "OnBeforeSceneReady"
    SCENE_READY = "OnSceneReady"
    COMPLETE = "OnSceneTransitionComplete"

    @property
    def label(self) -> str:
        return self.value


PHASE_ORDER = tuple(TransitionPhase)

# Phases whose drain doubles as the loading progress signal
PROGRESS_REPORTING_PHASES = frozenset({
    TransitionPhase.BEFORE_LOAD,
    TransitionPhase.BEFORE_ACTIVATE,
})


class SchedulerState(Enum):
    """Lifecycle states of the transition scheduler."""
    IDLE = "idle"           # No transition has run yet
    RUNNING = "running"     # Walking the phase sequence
    COMPLETE = "complete"   # Last transition finished


class BeginResult(Enum):
    """Outcome of a transition request."""
    STARTED = "started"
    BUSY = "busy"


@dataclass(frozen=True)
class TransitionState:
    """Read-only snapshot of the scheduler's transition bookkeeping."""
    current_id: Optional[str] = None
    next_id: Optional[str] = None
    is_loading: bool = False
    is_scene_ready: bool = False
