import random

import pytest

from algorithms import StepType
from algorithms.bellman_ford import bellman_ford
from algorithms.dijkstra import dijkstra, shortest_path
from algorithms.floyd_warshall import floyd_warshall, matrix_path
from graph import GraphSnapshot, InvalidInputError

# hand-checked distances on the five-node sample, from node "0"
SAMPLE_FROM_ZERO = {"0": 0, "1": 4, "2": 2, "3": 4, "4": 7}


def random_graph(seed):
    rng = random.Random(seed)
    ids = [str(i) for i in range(rng.randint(1, 7))]
    pairs = [(a, b) for i, a in enumerate(ids) for b in ids[i + 1:]]
    chosen = rng.sample(pairs, rng.randint(0, len(pairs)))
    return GraphSnapshot.from_edges(ids, [(a, b, rng.randint(1, 9)) for a, b in chosen])


# ---------------------------------------------------------------------------
# Dijkstra
# ---------------------------------------------------------------------------
def test_dijkstra_on_sample(mst_snapshot):
    steps = list(dijkstra(mst_snapshot, start="0"))

    assert steps[0].tag == "init"
    settled = [s.snapshot["active"] for s in steps if s.tag == "settled"]
    assert settled == ["0", "2", "1", "3", "4"]

    final = steps[-1]
    assert final.is_terminal and final.tag == "complete"
    assert dict(final.snapshot["distances"]) == SAMPLE_FROM_ZERO
    assert shortest_path(final.snapshot["distances"], final.snapshot["previous"], "4") == ["0", "2", "4"]
    assert final.metrics["settled"] == 5


def test_dijkstra_skips_stale_heap_entries():
    snap = GraphSnapshot.from_edges(list("abc"), [("a", "b", 5), ("a", "c", 1), ("c", "b", 1)])
    steps = list(dijkstra(snap, start="a"))

    stale = [s for s in steps if s.tag == "stale"]
    assert len(stale) == 1
    assert stale[0].type == StepType.DELETE
    assert stale[0].snapshot["active"] == "b"
    assert steps[-1].snapshot["distances"]["b"] == 2


def test_dijkstra_queue_is_cheapest_first(mst_snapshot):
    for step in dijkstra(mst_snapshot, start="1"):
        dists = [d for _, d in step.snapshot["queue"]]
        assert dists == sorted(dists)


def test_dijkstra_uses_graph_start_node_and_leaves_unreachable_as_none():
    snap = GraphSnapshot.from_edges(list("abcd"), [("a", "b", 2), ("c", "d", 5)], start_node="c")
    final = list(dijkstra(snap))[-1]
    assert dict(final.snapshot["distances"]) == {"c": 0, "d": 5, "a": None, "b": None}
    assert shortest_path(final.snapshot["distances"], final.snapshot["previous"], "a") == []
    assert final.to_dict()["snapshot"]["distances"]["a"] is None


# ---------------------------------------------------------------------------
# Bellman-Ford
# ---------------------------------------------------------------------------
def test_bellman_ford_on_sample_converges_early(mst_snapshot):
    steps = list(bellman_ford(mst_snapshot, start="0"))

    tags = [s.tag for s in steps]
    assert tags[0] == "init"
    assert tags.count("round") == 2
    assert "converged" in tags
    assert tags[-2:] == ["cycle_check", "complete"]

    final = steps[-1]
    assert dict(final.snapshot["distances"]) == SAMPLE_FROM_ZERO
    assert final.snapshot["negative_cycle"] is False
    assert final.metrics["rounds"] == 2


def test_bellman_ford_relaxes_edges_in_both_directions():
    snap = GraphSnapshot.from_edges(list("abc"), [("b", "a", 3), ("c", "b", 4)])
    final = list(bellman_ford(snap, start="a"))[-1]
    assert dict(final.snapshot["distances"]) == {"a": 0, "b": 3, "c": 7}


def test_bellman_ford_single_node_has_no_rounds():
    steps = list(bellman_ford(GraphSnapshot.from_edges(["x"], [])))
    assert [s.tag for s in steps] == ["init", "cycle_check", "complete"]


# ---------------------------------------------------------------------------
# Floyd-Warshall
# ---------------------------------------------------------------------------
def test_floyd_warshall_on_sample(mst_snapshot):
    steps = list(floyd_warshall(mst_snapshot))

    assert steps[0].tag == "init"
    assert sum(1 for s in steps if s.tag == "intermediate") == 5

    final = steps[-1].snapshot
    zero = final["nodes"].index("0")
    assert dict(zip(final["nodes"], final["dist"][zero])) == SAMPLE_FROM_ZERO
    assert matrix_path(final, "0", "4") == ["0", "2", "4"]
    assert matrix_path(final, "4", "1") == ["4", "2", "1"]


def test_floyd_warshall_matrix_stays_symmetric(mst_snapshot):
    for step in floyd_warshall(mst_snapshot):
        dist = step.snapshot["dist"]
        assert all(dist[i][j] == dist[j][i] for i in range(5) for j in range(5))


def test_floyd_warshall_disconnected_pairs_stay_infinite():
    snap = GraphSnapshot.from_edges(list("abc"), [("a", "b", 2)])
    final = list(floyd_warshall(snap))[-1].snapshot
    assert final["dist"][0][2] is None
    assert matrix_path(final, "a", "c") == []


# ---------------------------------------------------------------------------
# Shared behaviour
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("seed", range(15))
def test_all_three_agree(seed):
    snap = random_graph(seed)
    ids = snap.node_ids()
    matrix = list(floyd_warshall(snap))[-1].snapshot

    for row, source in enumerate(ids):
        by_dijkstra = list(dijkstra(snap, start=source))[-1].snapshot["distances"]
        by_bellman = list(bellman_ford(snap, start=source))[-1].snapshot["distances"]
        by_matrix = dict(zip(ids, matrix["dist"][row]))
        assert dict(by_dijkstra) == dict(by_bellman) == by_matrix


@pytest.mark.parametrize("producer", [dijkstra, bellman_ford, floyd_warshall], ids=lambda fn: fn.__name__)
def test_unweighted_graph_rejected_before_first_step(producer):
    snap = GraphSnapshot.from_edges(list("ab"), [("a", "b")])
    with pytest.raises(InvalidInputError):
        next(producer(snap))


@pytest.mark.parametrize("producer", [dijkstra, bellman_ford], ids=lambda fn: fn.__name__)
def test_unknown_start_rejected(producer, mst_snapshot):
    with pytest.raises(InvalidInputError):
        next(producer(mst_snapshot, start="zz"))


@pytest.mark.parametrize("producer", [dijkstra, bellman_ford, floyd_warshall], ids=lambda fn: fn.__name__)
def test_single_terminal_step_and_sequential_numbers(producer, mst_snapshot):
    steps = list(producer(mst_snapshot))
    assert [s.is_terminal for s in steps].count(True) == 1
    assert steps[-1].is_terminal
    assert [s.step_number for s in steps] == list(range(len(steps)))


def test_empty_graph():
    empty = GraphSnapshot()
    assert [s.tag for s in dijkstra(empty)] == ["complete"]
    assert [s.tag for s in floyd_warshall(empty)] == ["init", "complete"]
