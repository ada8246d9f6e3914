"""
engine/
-------
Playback layer.

    from engine import PlaybackController, Stepper

PlaybackController paces a run with timed pauses.  Stepper buffers a run
for manual navigation; the HTTP app also uses it to collect a whole run
before sending it to the browser.
"""

from engine.playback import (
    PlaybackController,
    PlaybackState,
    SPEED_PRESETS,
    DEFAULT_SPEED,
)
from engine.stepper  import Stepper, StepperState

__all__ = [
    "PlaybackController",
    "PlaybackState",
    "SPEED_PRESETS",
    "DEFAULT_SPEED",
    "Stepper",
    "StepperState",
]
