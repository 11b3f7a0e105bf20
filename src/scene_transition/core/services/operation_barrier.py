"""
operation_barrier.py
--------------------
Tracks blocking operations that hold a scene transition between phases.

Collaborators start an operation from inside a hook and push its progress
towards 1.0. The scheduler polls the barrier once per tick; an operation is
dropped the first time a poll sees it complete, and the phase may advance
once nothing is left.

The aggregate reported by a poll is a running average over every operation
seen in the current wait cycle, including those already completed and
removed, so the value never steps backwards as operations drop out.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from scene_transition.core.debug.debug_logger import DebugLogger


# ===========================================================
# Operation Handle
# ===========================================================

@dataclass(eq=False)
class Operation:
    """Caller-owned progress handle. Complete once progress reaches 1."""
    progress: float = 0.0
    label: str = ""

    @property
    def is_complete(self) -> bool:
        return self.progress >= 1.0

    def complete(self):
        """Mark the operation as finished."""
        self.progress = 1.0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.complete()
        return False


@dataclass(frozen=True)
class DrainTick:
    """Result of one barrier poll."""
    drained: bool
    progress: Optional[float] = None
    removed: int = 0


# ===========================================================
# Operation Barrier
# ===========================================================

class OperationBarrier:
    """Open set of in-flight blocking operations."""

    def __init__(self):
        self._operations: List[Operation] = []
        self._completed_count = 0

    # ===========================================================
    # Collaborator API
    # ===========================================================

    def start_operation(self, label: str = "") -> Operation:
        """
        Begin tracking a new blocking operation.

        Args:
            label: Optional name shown in diagnostics

        Returns:
            Operation handle starting at progress 0
        """
        operation = Operation(label=label)
        self._operations.append(operation)
        DebugLogger.trace(
            f"Started operation '{label or hex(id(operation))}' ({len(self._operations)} live)"
        )
        return operation

    def set_progress(self, operation: Operation, value: float) -> None:
        """Overwrite an operation's progress. Removal happens on the next poll."""
        operation.progress = value

    def release(self, operation: Operation) -> None:
        """Stop tracking an operation without waiting for it."""
        try:
            self._operations.remove(operation)
        except ValueError:
            pass

    def clear(self) -> None:
        """Discard every live operation without completing it."""
        self._operations.clear()

    # ===========================================================
    # Scheduler API
    # ===========================================================

    def begin_wait_cycle(self) -> None:
        """Reset the completed counter for a new phase-to-phase wait."""
        self._completed_count = 0

    def poll(self) -> DrainTick:
        """
        Run one drain tick.

        Complete operations are removed and counted; the rest contribute
        their progress to the aggregate.

        Returns:
            DrainTick with the aggregate (None when nothing was registered
            this cycle) and whether the live set is now empty
        """
        if not self._operations and self._completed_count == 0:
            return DrainTick(drained=True)

        progress_sum = 0.0
        removed = 0
        for operation in tuple(self._operations):
            if operation.is_complete:
                self._operations.remove(operation)
                removed += 1
            else:
                progress_sum += operation.progress
        self._completed_count += removed

        total = len(self._operations) + self._completed_count
        aggregate = (progress_sum + self._completed_count) / total if total else None

        return DrainTick(
            drained=not self._operations,
            progress=aggregate,
            removed=removed,
        )

    # ===========================================================
    # Inspection
    # ===========================================================

    @property
    def operations(self) -> Tuple[Operation, ...]:
        return tuple(self._operations)

    @property
    def count(self) -> int:
        return len(self._operations)

    @property
    def completed_count(self) -> int:
        """Operations completed during the current wait cycle."""
        return self._completed_count

    def __len__(self) -> int:
        return len(self._operations)
