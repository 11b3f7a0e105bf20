"""
phase_steps.py
--------------
Discrete steps the transition scheduler walks through.

Each step is started once and then updated once per tick until it reports
completion, the same way a cutscene advances through its actions.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from scene_transition.core.debug.debug_logger import DebugLogger
from scene_transition.core.runtime.transition_state import TransitionPhase
from scene_transition.core.services.hook_registry import (
    HookEvent,
    HookRegistry,
    LoadProgressEvent,
)
from scene_transition.core.services.operation_barrier import OperationBarrier


class PhaseStep(ABC):
    """Single scheduler step."""

    def on_start(self):
        """Called once, right before the first update."""
        pass

    @abstractmethod
    def update(self) -> bool:
        """Advance the step. Returns True when the scheduler may move on."""
        pass


class HookStep(PhaseStep):
    """Fire a phase hook, then hold until the blocking operations drain."""

    def __init__(self, phase: TransitionPhase, make_event: Callable[[], HookEvent],
                 barrier: OperationBarrier, hooks: HookRegistry,
                 report_progress: bool = False, drain: bool = True,
                 on_fire: Optional[Callable[[], None]] = None):
        """
        Args:
            phase: Phase this step represents
            make_event: Builds the hook event when the step starts
            barrier: Barrier drained after the hook
            hooks: Registry the event is dispatched on
            report_progress: Publish the barrier aggregate as load progress
            drain: False to skip waiting on the barrier entirely
            on_fire: Runs right after the hook returns
        """
        self.phase = phase
        self.make_event = make_event
        self.barrier = barrier
        self.hooks = hooks
        self.report_progress = report_progress
        self.drain = drain
        self.on_fire = on_fire

    def on_start(self):
        self.barrier.begin_wait_cycle()
        self.hooks.dispatch(self.make_event())
        if self.on_fire is not None:
            self.on_fire()

    def update(self) -> bool:
        if not self.drain:
            return True

        tick = self.barrier.poll()
        if tick.progress is not None:
            DebugLogger.trace(
                f"{self.phase.label}: {self.barrier.count} blocking, progress {tick.progress:.2f}"
            )
            if self.report_progress:
                self.hooks.dispatch(LoadProgressEvent(progress=tick.progress))
        return tick.drained


class WaitStep(PhaseStep):
    """Hold until a condition is met, optionally reporting on every held tick."""

    def __init__(self, condition: Callable[[], bool],
                 on_start: Optional[Callable[[], None]] = None,
                 on_wait: Optional[Callable[[], None]] = None):
        self.condition = condition
        self._on_start = on_start
        self.on_wait = on_wait

    def on_start(self):
        if self._on_start is not None:
            self._on_start()

    def update(self) -> bool:
        if self.condition():
            return True
        if self.on_wait is not None:
            self.on_wait()
        return False


class CallbackStep(PhaseStep):
    """Run a function and move on immediately."""

    def __init__(self, callback: Callable, *args, **kwargs):
        self.callback = callback
        self.args = args
        self.kwargs = kwargs

    def update(self) -> bool:
        self.callback(*self.args, **self.kwargs)
        return True
