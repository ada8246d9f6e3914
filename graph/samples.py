"""
Built-in sample graphs the "Sample" button loads.
"""

from typing import List

from graph.node import Node
from graph.edge import Edge

MST_SAMPLE_NODES: List[Node] = [
    Node(x=150, y=150, label="0", node_id="0"),
    Node(x=450, y=120, label="1", node_id="1"),
    Node(x=250, y=350, label="2", node_id="2"),
    Node(x=550, y=300, label="3", node_id="3"),
    Node(x=100, y=400, label="4", node_id="4"),
]

MST_SAMPLE_EDGES: List[Edge] = [
    Edge("0", "1", 4),
    Edge("0", "2", 2),
    Edge("1", "2", 3),
    Edge("1", "3", 10),
    Edge("2", "3", 2),
    Edge("2", "4", 5),
    Edge("3", "4", 6),
]

# two components: a square 0-1-2-3 and a pair 4-5
TRAVERSAL_SAMPLE_NODES: List[Node] = [
    Node(x=150, y=150, label="0", node_id="0"),
    Node(x=350, y=150, label="1", node_id="1"),
    Node(x=350, y=350, label="2", node_id="2"),
    Node(x=150, y=350, label="3", node_id="3"),
    Node(x=550, y=200, label="4", node_id="4"),
    Node(x=550, y=380, label="5", node_id="5"),
]

TRAVERSAL_SAMPLE_EDGES: List[Edge] = [
    Edge("0", "1"),
    Edge("1", "2"),
    Edge("2", "3"),
    Edge("3", "0"),
    Edge("4", "5"),
]

SAMPLES = {
    "mst":       (MST_SAMPLE_NODES, MST_SAMPLE_EDGES),
    "traversal": (TRAVERSAL_SAMPLE_NODES, TRAVERSAL_SAMPLE_EDGES),
}
