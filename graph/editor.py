"""
editor.py — Canvas Click Interpretation
=======================================
Turns raw canvas / node clicks into GraphModel operations according to
the current InteractionMode.

State machine:
    ADD     canvas click  →  add_node(x, y)
    LINK    node click #1 →  remember as pending source
            node click #2 →  add_edge(source, node), clear pending source
                             (same node again: nothing happens)
    DELETE  node click    →  delete_node(node)
    START   node click    →  set_start_node(node)

Switching modes drops a pending LINK source.  While playback is RUNNING
every action is ignored; the controls are disabled, so it is not an error.
"""

import logging
from enum import Enum
from typing import Optional

from graph.model import GraphModel, GraphView
from graph.errors import InvalidInputError

logger = logging.getLogger(__name__)


class InteractionMode(Enum):
    ADD    = "ADD"
    LINK   = "LINK"
    DELETE = "DELETE"
    START  = "START"


class GraphEditor:
    """
    Attributes:
        graph       : The GraphModel being edited.
        mode        : Current InteractionMode.
        link_source : Node id waiting for its LINK partner, or None.
    """

    def __init__(self, graph: GraphModel, mode: InteractionMode = InteractionMode.ADD):
        self.graph:       GraphModel       = graph
        self.mode:        InteractionMode  = mode
        self.link_source: Optional[str]    = None

    @property
    def is_locked(self) -> bool:
        return self.graph.is_locked

    # ------------------------------------------------------------------
    # Mode
    # ------------------------------------------------------------------
    def set_mode(self, mode) -> InteractionMode:
        """Switch modes; returns the mode in effect afterwards."""
        mode = _coerce_mode(mode)
        if self.is_locked:
            logger.debug("mode change to %s ignored: run in progress", mode.value)
            return self.mode
        if mode != self.mode:
            self.link_source = None
        self.mode = mode
        return self.mode

    # ------------------------------------------------------------------
    # Clicks
    # ------------------------------------------------------------------
    def canvas_click(self, x: float, y: float) -> GraphView:
        if self.is_locked or self.mode != InteractionMode.ADD:
            return self.graph.view()
        return self.graph.add_node(x, y)

    def node_click(self, node_id: str) -> GraphView:
        if self.is_locked:
            logger.debug("click on %s ignored: run in progress", node_id)
            return self.graph.view()
        if node_id not in self.graph.nodes:
            raise InvalidInputError(f"Unknown node '{node_id}'")

        if self.mode == InteractionMode.DELETE:
            if self.link_source == node_id:
                self.link_source = None
            return self.graph.delete_node(node_id)

        if self.mode == InteractionMode.START:
            return self.graph.set_start_node(node_id)

        if self.mode == InteractionMode.LINK:
            if self.link_source is None:
                self.link_source = node_id
                return self.graph.view()
            if self.link_source == node_id:
                return self.graph.view()
            source, self.link_source = self.link_source, None
            return self.graph.add_edge(source, node_id)

        # ADD mode: clicking an existing node does nothing
        return self.graph.view()

    # ------------------------------------------------------------------
    # Serialisation (session storage)
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"mode": self.mode.value, "link_source": self.link_source}

    def restore(self, data: dict) -> None:
        self.mode = _coerce_mode(data.get("mode", InteractionMode.ADD.value))
        source = data.get("link_source")
        self.link_source = source if source in self.graph.nodes else None


def _coerce_mode(mode) -> InteractionMode:
    if isinstance(mode, InteractionMode):
        return mode
    try:
        return InteractionMode(str(mode).upper())
    except ValueError:
        raise InvalidInputError(f"Unknown interaction mode: {mode!r}") from None
