from algorithms import StepType
from algorithms.bfs import bfs
from graph import GraphSnapshot


def test_bfs_visits_in_layers():
    # 0 - 1 - 3
    #  \
    #   2 - 4
    snap = GraphSnapshot.from_edges(range(5), [(0, 1), (0, 2), (1, 3), (2, 4)], start_node=0)
    steps = list(bfs(snap))

    order = [s.snapshot["active"] for s in steps if s.type == StepType.VISIT]
    assert order == [0, 1, 2, 3, 4]
    assert steps[-1].is_terminal
    assert steps[-1].tag == "complete"


def test_enqueue_steps_expose_queue():
    snap = GraphSnapshot.from_edges(["a", "b", "c"], [("a", "b"), ("a", "c")])
    enqueues = [s for s in bfs(snap) if s.tag == "enqueue"]
    assert [s.snapshot["queue"] for s in enqueues] == [("b",), ("b", "c")]
    assert enqueues[1].highlights["edge"] == ("a", "c")


def test_bfs_covers_every_component():
    snap = GraphSnapshot.from_edges(list("abcde"), [("a", "b"), ("c", "d")])
    steps = list(bfs(snap))
    assert sum(1 for s in steps if s.tag == "component_started") == 3
    assert sorted(steps[-1].snapshot["order"]) == list("abcde")
    assert steps[-1].metrics["components"] == 3


def test_start_node_goes_first(cycle4):
    first_visit = next(s for s in bfs(cycle4, start=3) if s.type == StepType.VISIT)
    assert first_visit.snapshot["active"] == 3
