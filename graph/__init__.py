"""
graph/
-----
Core data layer.  Public API:

    from graph import GraphModel, GraphSnapshot, Node, Edge
    from graph import GraphEditor, InteractionMode
    from graph import InvalidInputError, IllegalStateError
"""

from graph.errors  import VisualizerError, InvalidInputError, IllegalStateError
from graph.node    import Node
from graph.edge    import Edge
from graph.model   import GraphModel, GraphSnapshot, DEFAULT_WEIGHT_RANGE
from graph.editor  import GraphEditor, InteractionMode
from graph.samples import SAMPLES

__all__ = [
    "VisualizerError", "InvalidInputError", "IllegalStateError",
    "Node",            "Edge",
    "GraphModel",      "GraphSnapshot",     "DEFAULT_WEIGHT_RANGE",
    "GraphEditor",     "InteractionMode",
    "SAMPLES",
]
