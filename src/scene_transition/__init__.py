"""
Scene transition pipeline.

Coordinates phased transitions between exclusive scenes while letting any
collaborator hold a phase open through blocking operations.
"""

from scene_transition.core.runtime.time_scale import TimeScale
from scene_transition.core.runtime.transition_state import (
    BeginResult,
    SchedulerState,
    TransitionPhase,
    TransitionState,
)
from scene_transition.core.services.hook_registry import (
    AfterUnloadEvent,
    BeforeActivateEvent,
    BeforeLoadEvent,
    BeforeSceneReadyEvent,
    BeforeTransitionEvent,
    BeforeUnloadEvent,
    HookRegistry,
    LoadProgressEvent,
    SceneReadyEvent,
    TransitionCompleteEvent,
)
from scene_transition.core.services.operation_barrier import Operation, OperationBarrier
from scene_transition.core.services.scene_loader import SceneLoader, SceneLoadProvider
from scene_transition.core.services.service_locator import TransitionServices
from scene_transition.core.services.transition_scheduler import TransitionScheduler

__version__ = "0.1.0"

__all__ = [
    # Core
    'TransitionScheduler',
    'OperationBarrier',
    'Operation',
    'HookRegistry',
    'TransitionServices',
    # State
    'BeginResult',
    'SchedulerState',
    'TransitionPhase',
    'TransitionState',
    'TimeScale',
    # Provider
    'SceneLoadProvider',
    'SceneLoader',
    # Hooks
    'BeforeTransitionEvent',
    'BeforeLoadEvent',
    'LoadProgressEvent',
    'BeforeActivateEvent',
    'BeforeUnloadEvent',
    'AfterUnloadEvent',
    'BeforeSceneReadyEvent',
    'SceneReadyEvent',
    'TransitionCompleteEvent',
]
