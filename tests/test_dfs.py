import random

import pytest

from algorithms import StepType
from algorithms.dfs import dfs
from graph import GraphModel, GraphSnapshot, InvalidInputError


def random_graph(seed, max_nodes=10):
    rng = random.Random(seed)
    n = rng.randint(1, max_nodes)
    ids = [f"n{i}" for i in range(n)]
    edges = [
        (ids[i], ids[j])
        for i in range(n)
        for j in range(i + 1, n)
        if rng.random() < 0.25
    ]
    return GraphSnapshot.from_edges(ids, edges)


def count_components(snap):
    adj = snap.adjacency()
    seen = set()
    components = 0
    for root in snap.node_ids():
        if root in seen:
            continue
        components += 1
        todo = [root]
        seen.add(root)
        while todo:
            node = todo.pop()
            for nbr, _ in adj[node]:
                if nbr not in seen:
                    seen.add(nbr)
                    todo.append(nbr)
    return components


def test_cycle_scenario(cycle4):
    steps = list(dfs(cycle4))
    visits = [s for s in steps if s.type == StepType.VISIT]

    assert [s.snapshot["active"] for s in visits] == [0, 1, 2, 3]
    assert steps[-1].is_terminal
    assert steps[-1].snapshot["order"] == (0, 1, 2, 3)
    assert steps[-1].snapshot["stack"] == ()
    assert steps[-1].snapshot["components"] == 1


def test_visit_step_carries_stack_and_discovery_order(cycle4):
    visits = [s for s in dfs(cycle4) if s.type == StepType.VISIT]
    third = visits[2]
    assert third.snapshot["stack"] == (0, 1, 2)
    assert third.snapshot["order"] == (0, 1, 2)
    assert third.snapshot["from"] == 1
    assert third.snapshot["visited"] == frozenset({0, 1, 2})


def test_backtrack_steps_follow_stack_pops(cycle4):
    backtracks = [s for s in dfs(cycle4) if s.tag == "backtrack"]
    assert [s.snapshot["active"] for s in backtracks] == [2, 1, 0]
    assert [s.snapshot["stack"] for s in backtracks] == [(0, 1, 2), (0, 1), (0,)]


def test_start_node_argument_overrides_designated_root(cycle4):
    visits = [s for s in dfs(cycle4, start=2) if s.type == StepType.VISIT]
    assert visits[0].snapshot["active"] == 2


def test_component_counter_bumped_before_roots_first_visit():
    snap = GraphSnapshot.from_edges(["a", "b", "c"], [("a", "b")])
    steps = list(dfs(snap))
    started = [i for i, s in enumerate(steps) if s.tag == "component_started"]

    assert len(started) == 2
    for i in started:
        assert steps[i].snapshot["components"] == steps[i].metrics["components"]
        assert steps[i + 1].type == StepType.VISIT
        assert steps[i + 1].snapshot["active"] == steps[i].highlights["root"][0]
    assert steps[started[1]].snapshot["components"] == 2


@pytest.mark.parametrize("seed", range(40))
def test_random_graph_properties(seed):
    snap = random_graph(seed)
    adj = {nid: {nbr for nbr, _ in nbrs} for nid, nbrs in snap.adjacency().items()}
    steps = list(dfs(snap))

    visits = [s for s in steps if s.type == StepType.VISIT]
    order = [s.snapshot["active"] for s in visits]
    assert sorted(order) == sorted(snap.node_ids())
    assert len(set(order)) == len(order)

    previous = frozenset()
    for step in steps:
        visited = step.snapshot["visited"]
        assert previous <= visited
        previous = visited

    for step in visits:
        if step.snapshot["from"] is not None:
            assert step.snapshot["active"] in adj[step.snapshot["from"]]

    started = sum(1 for s in steps if s.tag == "component_started")
    assert started == count_components(snap)


def test_snapshot_is_taken_at_run_start():
    graph = GraphModel(weighted=False)
    graph.add_node(0, 0, node_id="a")
    graph.add_node(1, 0, node_id="b")
    gen = dfs(graph)
    next(gen)
    graph.add_node(2, 0, node_id="c")
    order = list(gen)[-1].snapshot["order"]
    assert order == ("a", "b")


def test_empty_graph_yields_single_terminal_step():
    steps = list(dfs(GraphSnapshot()))
    assert len(steps) == 1
    assert steps[0].is_terminal


def test_edge_to_unknown_node_rejected():
    snap = GraphSnapshot.from_edges(["a"], [("a", "ghost")])
    with pytest.raises(InvalidInputError):
        next(dfs(snap))


def test_unknown_start_rejected(cycle4):
    with pytest.raises(InvalidInputError):
        next(dfs(cycle4, start=42))
