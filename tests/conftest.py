import sys
from pathlib import Path

# Ensure package import for tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from engine import PlaybackController
from graph import GraphModel, GraphSnapshot, SAMPLES

MST_EDGES = [
    ("0", "1", 4),
    ("0", "2", 2),
    ("1", "2", 3),
    ("1", "3", 10),
    ("2", "3", 2),
    ("2", "4", 5),
    ("3", "4", 6),
]


@pytest.fixture
def mst_snapshot() -> GraphSnapshot:
    """Five-node weighted sample used by the MST tests."""

    return GraphSnapshot.from_edges(["0", "1", "2", "3", "4"], MST_EDGES)


@pytest.fixture
def cycle4() -> GraphSnapshot:
    return GraphSnapshot.from_edges(
        [0, 1, 2, 3], [(0, 1), (1, 2), (2, 3), (3, 0)], start_node=0
    )


@pytest.fixture
def sample_model() -> GraphModel:
    graph = GraphModel(seed=7)
    nodes, edges = SAMPLES["mst"]
    graph.load(nodes, edges)
    return graph


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def playback(sleeps) -> PlaybackController:
    """Controller whose pauses are recorded instead of slept."""

    return PlaybackController(sleep=sleeps.append)
