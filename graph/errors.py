"""
errors.py — Error Taxonomy
==========================
Every package in the visualizer raises from this small hierarchy so the
HTTP layer (and tests) can tell a bad input from a bad moment.

    InvalidInputError  – the data handed to a producer / model is malformed
                         (edge to a missing node, non-numeric array, …)
    IllegalStateError  – the call is fine, the timing is not
                         (editing while a run is playing, DSU index out of range)

Silently ignored situations (re-clicking the pending LINK source, `run`
while already running, duplicate edges) are NOT errors and never raise.
"""


class VisualizerError(Exception):
    """Base class for every error raised by the visualizer core."""


class InvalidInputError(VisualizerError, ValueError):
    pass


class IllegalStateError(VisualizerError, RuntimeError):
    pass
