"""
hook_registry.py
----------------
Named extension points fired by the transition scheduler.

One subscriber slot exists per phase plus one for load progress. Each slot
is keyed by its event dataclass, invoked synchronously in registration
order. A registry is created by the owner of the scheduler and passed to
every collaborator that needs it.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type

from scene_transition.core.debug.debug_logger import DebugLogger
from scene_transition.core.runtime.transition_state import TransitionPhase


# ===========================================================
# Hook Events
# ===========================================================

@dataclass(frozen=True)
class HookEvent:
    """Base class for all transition hook events."""
    pass


@dataclass(frozen=True)
class BeforeTransitionEvent(HookEvent):
    """Fired right before a transition starts."""
    from_scene: str
    to_scene: str


@dataclass(frozen=True)
class BeforeLoadEvent(HookEvent):
    """Fired before the next scene starts to load."""
    scene: str


@dataclass(frozen=True)
class LoadProgressEvent(HookEvent):
    """Loader or barrier progress while the next scene loads."""
    progress: float


@dataclass(frozen=True)
class BeforeActivateEvent(HookEvent):
    """Fired once the next scene is loaded but not yet activated."""
    scene: str


@dataclass(frozen=True)
class BeforeUnloadEvent(HookEvent):
    """Fired before the previous scene is unloaded."""
    scene: str


@dataclass(frozen=True)
class AfterUnloadEvent(HookEvent):
    """Fired after the previous scene is unloaded."""
    scene: str


@dataclass(frozen=True)
class BeforeSceneReadyEvent(HookEvent):
    """Fired before the scene is announced ready, including the first scene."""
    scene: str


@dataclass(frozen=True)
class SceneReadyEvent(HookEvent):
    """Fired once the scene is ready."""
    scene: str


@dataclass(frozen=True)
class TransitionCompleteEvent(HookEvent):
    """
    Fired once the whole transition is complete.

    Blocking operations started from this hook are not waited on.
    """
    scene: str


PHASE_EVENTS: Dict[TransitionPhase, Type[HookEvent]] = {
    TransitionPhase.BEFORE_TRANSITION: BeforeTransitionEvent,
    TransitionPhase.BEFORE_LOAD: BeforeLoadEvent,
    TransitionPhase.BEFORE_ACTIVATE: BeforeActivateEvent,
    TransitionPhase.BEFORE_UNLOAD: BeforeUnloadEvent,
    TransitionPhase.AFTER_UNLOAD: AfterUnloadEvent,
    TransitionPhase.BEFORE_SCENE_READY: BeforeSceneReadyEvent,
    TransitionPhase.SCENE_READY: SceneReadyEvent,
    TransitionPhase.COMPLETE: TransitionCompleteEvent,
}

HOOK_EVENTS = tuple(PHASE_EVENTS.values()) + (LoadProgressEvent,)


# ===========================================================
# Hook Registry
# ===========================================================

class HookRegistry:
    """Fixed set of hook slots with ordered subscribers."""

    def __init__(self):
        self._subscribers: Dict[Type[HookEvent], List[Callable]] = {
            event_type: [] for event_type in HOOK_EVENTS
        }

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[HookEvent], callback: Callable) -> None:
        """
        Register a callback for a hook. Subscribing twice is a no-op.

        Args:
            event_type: Hook event class to listen for
            callback: Function called with the event instance

        Raises:
            ValueError: If event_type is not one of the hook slots
        """
        subscribers = self._slot(event_type)
        if callback in subscribers:
            return

        subscribers.append(callback)
        callback_name = getattr(callback, '__name__', repr(callback))
        DebugLogger.system(
            f"Subscribed '{callback_name}' to '{event_type.__name__}'",
            category="hooks"
        )

    def unsubscribe(self, event_type: Type[HookEvent], callback: Callable) -> None:
        """Remove a callback from a hook if present."""
        subscribers = self._slot(event_type)
        try:
            subscribers.remove(callback)
        except ValueError:
            pass

    def unsubscribe_all(self, callback: Callable) -> None:
        """Remove a callback from every hook."""
        for subscribers in self._subscribers.values():
            try:
                subscribers.remove(callback)
            except ValueError:
                pass

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: HookEvent) -> int:
        """
        Invoke every subscriber of the event's hook, in registration order.

        A failing subscriber is reported and skipped so the remaining
        subscribers and the transition keep running.

        Args:
            event: Hook event instance

        Returns:
            Number of subscribers invoked
        """
        subscribers = self._slot(type(event))

        invoked = 0
        for callback in list(subscribers):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.warn(
                    f"Error in hook callback {callback_name} for "
                    f"{type(event).__name__}: {e}",
                    category="hooks"
                )
            invoked += 1
        return invoked

    # ===========================================================
    # Inspection
    # ===========================================================

    def get_subscriber_count(self, event_type: Type[HookEvent] = None) -> int:
        """
        Get count of subscribers.

        Args:
            event_type: Specific hook, or None for total

        Returns:
            Number of subscribers
        """
        if event_type:
            return len(self._slot(event_type))
        return sum(len(subs) for subs in self._subscribers.values())

    def clear_all(self) -> None:
        """Remove all subscribers from every hook."""
        for subscribers in self._subscribers.values():
            subscribers.clear()

    def _slot(self, event_type) -> List[Callable]:
        try:
            return self._subscribers[event_type]
        except KeyError:
            name = getattr(event_type, "__name__", repr(event_type))
            raise ValueError(f"Unknown transition hook: {name}") from None
