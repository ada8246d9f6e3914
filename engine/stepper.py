"""
stepper.py — Manual Step Navigation
====================================
The Stepper walks a run by hand: it owns the producer, buffers every Step
it has pulled (enabling rewind), and exposes next / prev / goto.

Timed playback lives in PlaybackController; the Stepper never sleeps.

State machine:
    IDLE    →  start()  →  READY
    READY   →  (producer exhausted / terminal step reached)  →  FINISHED
    any     →  reset()  →  IDLE

Steps are pulled lazily, so a producer that raises on bad input raises
from `start()`, before the first Step is shown.
"""

from enum import Enum
from typing import Callable, Iterable, Iterator, List, Optional

from algorithms.step import Step


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    READY    = "ready"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        steps       : List of all Steps pulled so far (buffer for rewind).
        current_idx : Index into `steps` that is currently displayed.
        on_step     : Optional callback(Step) fired every time the current step changes.
    """

    def __init__(self, on_step: Optional[Callable[[Step], None]] = None):
        self._producer:   Optional[Iterator[Step]] = None
        self.steps:       List[Step]    = []
        self.current_idx: int          = -1
        self.state:       StepperState = StepperState.IDLE
        self.on_step:     Optional[Callable[[Step], None]] = on_step

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, producer: Iterable[Step]) -> None:
        """Attach a fresh producer and load the first step."""
        self._producer   = iter(producer)
        self.steps       = []
        self.current_idx = -1
        self.state       = StepperState.READY
        if self._fetch_next():
            self._goto(0)
        else:
            self.state = StepperState.FINISHED

    def reset(self) -> None:
        """Back to IDLE; caller must call start() again."""
        self._producer   = None
        self.steps       = []
        self.current_idx = -1
        self.state       = StepperState.IDLE

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False if already at end."""
        target = self.current_idx + 1
        if target >= len(self.steps) and not self._fetch_next():
            return False
        self._goto(target)
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at start."""
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary step index, pulling forward if needed."""
        while idx >= len(self.steps):
            if not self._fetch_next():
                break
        if 0 <= idx < len(self.steps):
            self._goto(idx)
            return True
        return False

    def rewind(self) -> None:
        """Jump back to step 0."""
        if self.steps:
            self._goto(0)

    def jump_to_end(self) -> None:
        """Exhaust the producer and jump to the final step."""
        while self._fetch_next():
            pass
        if self.steps:
            self._goto(len(self.steps) - 1)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def total_steps_fetched(self) -> int:
        return len(self.steps)

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def at_end(self) -> bool:
        return self.is_finished and self.current_idx == len(self.steps) - 1

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _fetch_next(self) -> bool:
        """Pull one Step from the producer into the buffer."""
        if self._producer is None or self.state == StepperState.FINISHED:
            return False
        try:
            step = next(self._producer)
        except StopIteration:
            self.state = StepperState.FINISHED
            return False
        self.steps.append(step)
        if step.is_terminal:
            self.state = StepperState.FINISHED
        return True

    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        if self.on_step is not None:
            self.on_step(self.steps[idx])
