"""
transition_scheduler.py
-----------------------
Drives a scene transition through its fixed phase sequence.

Responsibilities
----------------
- Own the transition bookkeeping (current/next scene, loading and ready flags)
- Fire each phase hook exactly once and wait for blocking operations
  registered on the barrier before moving on
- Ask the load provider to load, activate and unload scenes between phases
- Freeze the shared time scale while scenes are swapped (optional)

The scheduler never blocks. update() runs steps until one has to wait and
resumes from that step on the next tick.

A blocking operation that never reaches full progress stalls the transition
indefinitely; there is no cancellation. An exception from the provider aborts
the transition (time resumed, state back to COMPLETE) and propagates.
"""

from typing import List, Optional

from scene_transition.core.debug.debug_logger import DebugLogger
from scene_transition.core.runtime.time_scale import TimeScale
from scene_transition.core.runtime.transition_settings import Transition
from scene_transition.core.runtime.transition_state import (
    BeginResult,
    PROGRESS_REPORTING_PHASES,
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
from scene_transition.core.services.operation_barrier import OperationBarrier
from scene_transition.core.services.phase_steps import (
    CallbackStep,
    HookStep,
    PhaseStep,
    WaitStep,
)
from scene_transition.core.services.scene_loader import LoadHandle, SceneLoadProvider


# (state, trigger) -> next state
_STATE_TABLE = {
    (SchedulerState.IDLE, "begin"): SchedulerState.RUNNING,
    (SchedulerState.COMPLETE, "begin"): SchedulerState.RUNNING,
    (SchedulerState.RUNNING, "finish"): SchedulerState.COMPLETE,
    (SchedulerState.RUNNING, "abort"): SchedulerState.COMPLETE,
}


class TransitionScheduler:
    """Phase-by-phase scene transition state machine."""

    def __init__(self, barrier: OperationBarrier, hooks: HookRegistry,
                 provider: SceneLoadProvider, time_scale: Optional[TimeScale] = None,
                 control_time_scale: bool = Transition.CONTROL_TIME_SCALE):
        """
        Initialize scheduler with its collaborators.

        Args:
            barrier: Blocking operations waited on between phases
            hooks: Registry phase hooks are dispatched on
            provider: Loads, activates and unloads scenes
            time_scale: Shared time scale frozen during the swap
            control_time_scale: Set False to leave time running
        """
        self.barrier = barrier
        self.hooks = hooks
        self.provider = provider
        self.time_scale = time_scale if time_scale is not None else TimeScale()
        self.control_time_scale = control_time_scale

        self._state = SchedulerState.IDLE
        self._current_id: Optional[str] = None
        self._next_id: Optional[str] = None
        self._active_id: Optional[str] = None
        self._is_scene_ready = False

        self._steps: List[PhaseStep] = []
        self._step_index = 0
        self._step_started = False
        self._current_phase: Optional[TransitionPhase] = None
        self._load_handle: Optional[LoadHandle] = None
        self._unload_handle = None

        DebugLogger.init_entry("TransitionScheduler")

    # ===========================================================
    # Properties
    # ===========================================================

    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def is_loading(self) -> bool:
        """True from the start of a transition until its completion hook has run."""
        return self._state is SchedulerState.RUNNING

    @property
    def is_scene_ready(self) -> bool:
        return self._is_scene_ready

    @property
    def active_scene(self) -> Optional[str]:
        return self._active_id

    @property
    def current_phase(self) -> Optional[TransitionPhase]:
        """Phase whose hook fired most recently."""
        return self._current_phase

    @property
    def transition_state(self) -> TransitionState:
        return TransitionState(
            current_id=self._current_id,
            next_id=self._next_id,
            is_loading=self.is_loading,
            is_scene_ready=self._is_scene_ready,
        )

    # ===========================================================
    # Transition Control
    # ===========================================================

    def start(self, scene_id: str) -> BeginResult:
        """
        Ready the first scene, which was activated without a transition.

        Only the ready and completion phases run.

        Args:
            scene_id: Scene that is already active

        Returns:
            BeginResult.BUSY if a transition is in progress
        """
        if not self._can_begin():
            self._log("Can't start the first scene while a transition is running!",
                      level="fail")
            return BeginResult.BUSY

        self._current_id = self._next_id = self._active_id = scene_id
        self._clear_stale_operations()
        self._is_scene_ready = False
        self._run(self._ready_steps(freeze=True))
        return BeginResult.STARTED

    def begin_transition(self, scene_id: str) -> BeginResult:
        """
        Begin transition from the active scene to scene_id.

        Args:
            scene_id: Destination scene

        Returns:
            BeginResult.STARTED, or BeginResult.BUSY (nothing changed) if a
            transition is already in progress

        Raises:
            ValueError: If the provider cannot load scene_id (nothing changed)
        """
        if not self._can_begin():
            self._log("Can't change scenes right now because we're already changing scenes!",
                      level="fail")
            return BeginResult.BUSY
        if not self.provider.can_load(scene_id):
            self._log(f"Can't load unknown scene '{scene_id}'", level="fail")
            raise ValueError(f"Unknown scene: '{scene_id}'")

        self._current_id = self._active_id
        self._next_id = scene_id
        self._clear_stale_operations()

        self._is_scene_ready = False
        self._run(self._transition_steps() + self._ready_steps(freeze=False))
        return BeginResult.STARTED

    def update(self, dt: float = 0.0):
        """Resume the running transition. Call once per tick."""
        if dt < 0.0:
            raise ValueError("dt must be >= 0")
        if self._state is SchedulerState.RUNNING:
            self._advance()

    # ===========================================================
    # Step Construction
    # ===========================================================

    def _transition_steps(self) -> List[PhaseStep]:
        current, nxt = self._current_id, self._next_id
        return [
            self._hook_step(TransitionPhase.BEFORE_TRANSITION,
                            lambda: BeforeTransitionEvent(from_scene=current, to_scene=nxt)),
            self._hook_step(TransitionPhase.BEFORE_LOAD,
                            lambda: BeforeLoadEvent(scene=nxt),
                            on_fire=self._freeze_time),

            WaitStep(self._load_reached_threshold,
                     on_start=self._start_load,
                     on_wait=self._report_load_progress),

            self._hook_step(TransitionPhase.BEFORE_ACTIVATE,
                            lambda: BeforeActivateEvent(scene=nxt)),

            WaitStep(lambda: self._load_handle.is_done,
                     on_start=self._start_activation),
            CallbackStep(self._set_active, nxt),

            self._hook_step(TransitionPhase.BEFORE_UNLOAD,
                            lambda: BeforeUnloadEvent(scene=current)),

            WaitStep(lambda: self._unload_handle.is_done,
                     on_start=self._start_unload),

            self._hook_step(TransitionPhase.AFTER_UNLOAD,
                            lambda: AfterUnloadEvent(scene=current)),
        ]

    def _ready_steps(self, freeze: bool) -> List[PhaseStep]:
        nxt = self._next_id
        steps: List[PhaseStep] = []
        if freeze:
            steps.append(CallbackStep(self._freeze_time))
        steps += [
            self._hook_step(TransitionPhase.BEFORE_SCENE_READY,
                            lambda: BeforeSceneReadyEvent(scene=nxt)),
            CallbackStep(self._mark_scene_ready),
            self._hook_step(TransitionPhase.SCENE_READY,
                            lambda: SceneReadyEvent(scene=nxt)),
            CallbackStep(self._resume_time),
            self._hook_step(TransitionPhase.COMPLETE,
                            lambda: TransitionCompleteEvent(scene=nxt),
                            drain=False),
        ]
        return steps

    def _hook_step(self, phase: TransitionPhase, make_event, drain: bool = True,
                   on_fire=None) -> HookStep:
        def fire():
            self._current_phase = phase
            self._log(phase.label)
            return make_event()

        return HookStep(
            phase,
            fire,
            self.barrier,
            self.hooks,
            report_progress=phase in PROGRESS_REPORTING_PHASES,
            drain=drain,
            on_fire=on_fire,
        )

    # ===========================================================
    # Step Driver
    # ===========================================================

    def _run(self, steps: List[PhaseStep]):
        self._trigger("begin")
        self._steps = steps
        self._step_index = 0
        self._step_started = False
        self._load_handle = None
        self._unload_handle = None
        self._advance()

    def _advance(self):
        """Run steps until one has to wait for a later tick."""
        try:
            while self._step_index < len(self._steps):
                step = self._steps[self._step_index]
                if not self._step_started:
                    self._step_started = True
                    step.on_start()
                if not step.update():
                    return
                self._step_index += 1
                self._step_started = False
        except Exception:
            self._abort()
            raise

        self._steps = []
        self._trigger("finish")
        DebugLogger.action(f"Transition to {self._active_id} complete", category="transition")

    def _abort(self):
        """Drop the remaining steps after one raised, so the next begin is accepted."""
        self._steps = []
        self._load_handle = None
        self._unload_handle = None
        self._resume_time()
        self._trigger("abort")
        self._log(f"Transition to {self._next_id} aborted", level="fail")

    def _clear_stale_operations(self):
        stale = self.barrier.count
        if stale > 0:
            self._log(f"Cleared {stale} invalid blocking operations", level="warn")
            self.barrier.clear()

    def _can_begin(self) -> bool:
        return (self._state, "begin") in _STATE_TABLE

    def _trigger(self, trigger: str):
        self._state = _STATE_TABLE[(self._state, trigger)]

    # ===========================================================
    # Provider Steps
    # ===========================================================

    def _start_load(self):
        self._log("Loading next scene...")
        self._load_handle = self.provider.load_async(self._next_id)

    def _load_reached_threshold(self) -> bool:
        return self._load_handle.progress >= self.provider.activation_threshold

    def _report_load_progress(self):
        self.hooks.dispatch(LoadProgressEvent(progress=self._load_handle.progress))

    def _start_activation(self):
        self._log("Activating new scene...")
        self._load_handle.activate()

    def _set_active(self, scene_id: str):
        self._active_id = scene_id

    def _start_unload(self):
        self._log("Unloading previous...")
        self._unload_handle = self.provider.unload_async(self._current_id)

    # ===========================================================
    # Flags
    # ===========================================================

    def _mark_scene_ready(self):
        self._is_scene_ready = True

    def _freeze_time(self):
        if self.control_time_scale:
            self.time_scale.freeze()

    def _resume_time(self):
        if self.control_time_scale:
            self.time_scale.resume()

    def _log(self, message: str, level: str = "state"):
        line = f"[STM] {message} (Active: {self._active_id})"
        getattr(DebugLogger, level)(line, category="transition")
