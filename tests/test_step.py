import dataclasses

import pytest

from algorithms.step import StepBuilder, StepType, freeze


def test_build_freezes_containers_and_numbers_steps():
    working = [3, 1, 2]
    seen = {"a"}
    sb = StepBuilder(comparisons=0)

    sb.count("comparisons")
    first = sb.build(StepType.COMPARE, working, "first", compared=[0, 1], seen=seen)
    working[0] = 100
    seen.add("b")
    second = sb.build(StepType.SWAP, working, "second", line=4)

    assert first.step_number == 0 and second.step_number == 1
    assert first.snapshot == (3, 1, 2)
    assert first.highlights["compared"] == (0, 1)
    assert first.highlights["seen"] == frozenset({"a"})
    assert first.metrics["comparisons"] == 1
    assert second.pseudocode_line == 4

    with pytest.raises(TypeError):
        first.highlights["compared"] = (9,)
    with pytest.raises(dataclasses.FrozenInstanceError):
        first.description = "changed"


def test_counters_are_per_builder():
    one, two = StepBuilder(swaps=0), StepBuilder(swaps=0)
    one.count("swaps", 3)
    assert one.metrics["swaps"] == 3
    assert two.metrics["swaps"] == 0


def test_freeze_nested():
    frozen = freeze({"edges": [("a", "b", 1)], "range": range(2), "set": {1}})
    assert frozen["edges"] == (("a", "b", 1),)
    assert frozen["range"] == (0, 1)
    assert frozen["set"] == frozenset({1})


def test_to_dict_is_json_ready():
    step = StepBuilder().build(
        StepType.VISIT,
        {"visited": frozenset({"b", "a"}), "order": ["a", "b"]},
        "visit",
        tag="discover",
        is_terminal=True,
        active=["a"],
    )
    data = step.to_dict()
    assert data == {
        "step_number": 0,
        "type": "visit",
        "snapshot": {"visited": ["a", "b"], "order": ["a", "b"]},
        "highlights": {"active": ["a"]},
        "description": "visit",
        "is_terminal": True,
        "tag": "discover",
        "pseudocode_line": 0,
        "metrics": {},
    }
