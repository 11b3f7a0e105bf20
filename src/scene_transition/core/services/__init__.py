"""
Core services exports.

Provides the transition scheduler, barrier, hook registry, load provider
and configuration loading.
"""

from scene_transition.core.services.config_manager import load_config, TransitionConfig
from scene_transition.core.services.hook_registry import HookRegistry, HookEvent
from scene_transition.core.services.operation_barrier import (
    DrainTick,
    Operation,
    OperationBarrier,
)
from scene_transition.core.services.scene_loader import (
    LoadHandle,
    SceneLoader,
    SceneLoadProvider,
    UnloadHandle,
)
from scene_transition.core.services.service_locator import TransitionServices
from scene_transition.core.services.transition_scheduler import TransitionScheduler

__all__ = [
    # Config
    'load_config',
    'TransitionConfig',
    # Hooks
    'HookRegistry',
    'HookEvent',
    # Barrier
    'DrainTick',
    'Operation',
    'OperationBarrier',
    # Provider
    'LoadHandle',
    'UnloadHandle',
    'SceneLoadProvider',
    'SceneLoader',
    # Services
    'TransitionServices',
    'TransitionScheduler',
]
