"""
playback.py — Paced Step Delivery
=================================
The PlaybackController drives ONE Step Producer at a time: it hands each
Step to the presentation callback, waits for the selected speed preset,
and then checks the cooperative cancellation flag.

State machine:
    IDLE  →  run()  →  RUNNING
    RUNNING  →  (terminal step / sequence end)  →  COMPLETED  →  IDLE
    RUNNING  →  cancel() observed at a step boundary  →  CANCELLED  →  IDLE

Guarantees:
  - Steps reach `on_step` strictly in production order, one at a time.
  - The loop only pauses BETWEEN steps; a delivered step is never cut off
    and nothing is rolled back on cancel.
  - `run()` while RUNNING (e.g. a double click) does nothing.
  - Errors from the producer or the callback are not caught: the
    controller returns to IDLE and re-raises them to the caller.

While RUNNING, a GraphModel bound via `bind_playback()` refuses edits.
"""

import logging
import threading
from enum import Enum
from typing import Callable, Iterable, Optional, Union

from algorithms.step import Step
from graph.errors import InvalidInputError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class PlaybackState(Enum):
    IDLE      = "idle"
    RUNNING   = "running"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# ---------------------------------------------------------------------------
# Speed presets (milliseconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "1x":    1000,    # teaching mode
    "1.5x":  666,
    "1.75x": 571,
    "2x":    500,
    "2.5x":  400,
    "3x":    333,     # demo mode
}

DEFAULT_SPEED = "1.5x"

StepSource = Union[Iterable[Step], Callable[[], Iterable[Step]]]


# ---------------------------------------------------------------------------
# PlaybackController
# ---------------------------------------------------------------------------
class PlaybackController:
    """
    Attributes:
        state           : Current PlaybackState.
        speed           : Name of the active speed preset.
        last_outcome    : COMPLETED / CANCELLED for the previous run (None if it raised).
        steps_delivered : How many Steps the current / last run handed to `on_step`.
    """

    def __init__(
        self,
        speed: str = DEFAULT_SPEED,
        sleep: Optional[Callable[[float], object]] = None,
    ):
        self.state:           PlaybackState           = PlaybackState.IDLE
        self.speed:           str                     = _check_speed(speed)
        self.last_outcome:    Optional[PlaybackState] = None
        self.steps_delivered: int                     = 0

        self._cancel = threading.Event()
        # waiting on the event lets cancel() cut a long pause short
        self._sleep  = sleep or self._cancel.wait

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def is_running(self) -> bool:
        return self.state == PlaybackState.RUNNING

    @property
    def delay_ms(self) -> int:
        return SPEED_PRESETS[self.speed]

    @property
    def cancel_requested(self) -> bool:
        return self._cancel.is_set()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        """Change the preset; a running loop picks it up at the next pause."""
        self.speed = _check_speed(preset)

    # ------------------------------------------------------------------
    # Run / cancel
    # ------------------------------------------------------------------
    def run(
        self,
        source: StepSource,
        speed: Optional[str] = None,
        on_step: Optional[Callable[[Step], None]] = None,
    ) -> Optional[PlaybackState]:
        """
        Deliver every Step of `source` to `on_step`, pausing between steps.

        `source` is an iterable of Steps or a zero-argument callable that
        returns one (e.g. `lambda: bubble_sort(values)`).

        Returns the run's outcome, or None when the call was ignored
        because another run is in progress.
        """
        if self.is_running:
            logger.debug("run() ignored: playback already running")
            return None
        if speed is not None:
            self.set_speed(speed)

        steps = iter(source() if callable(source) else source)
        self._cancel.clear()
        self.steps_delivered = 0
        self.last_outcome    = None
        self.state           = PlaybackState.RUNNING
        logger.info("playback started at %s (%d ms/step)", self.speed, self.delay_ms)

        outcome = PlaybackState.COMPLETED
        try:
            for step in steps:
                if on_step is not None:
                    on_step(step)
                self.steps_delivered += 1
                if step.is_terminal:
                    break
                if self._cancel.is_set():
                    outcome = PlaybackState.CANCELLED
                    break
                self._sleep(self.delay_ms / 1000.0)
                if self._cancel.is_set():
                    outcome = PlaybackState.CANCELLED
                    break
        except Exception:
            self.state = PlaybackState.IDLE
            logger.info("playback aborted after %d step(s)", self.steps_delivered)
            raise
        finally:
            close = getattr(steps, "close", None)
            if close is not None:
                close()

        self.state        = outcome
        self.last_outcome = outcome
        logger.info("playback %s after %d step(s)", outcome.value, self.steps_delivered)
        self.state        = PlaybackState.IDLE
        return outcome

    def cancel(self) -> None:
        """Ask a running loop to stop at the next step boundary."""
        if self.is_running:
            self._cancel.set()


def _check_speed(preset: str) -> str:
    if preset not in SPEED_PRESETS:
        raise InvalidInputError(
            f"Unknown speed preset {preset!r}; choose one of {', '.join(SPEED_PRESETS)}"
        )
    return preset
