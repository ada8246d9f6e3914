import pytest

from algorithms import StepType
from algorithms.binary_search import binary_search
from algorithms.linear_search import linear_search
from graph import InvalidInputError


def test_linear_search_found():
    steps = list(linear_search([4, 7, 1, 7], 7))
    assert [s.tag for s in steps] == ["probe", "probe", "found"]
    assert steps[-1].is_terminal
    assert steps[-1].highlights["found"] == (1,)
    assert all(s.type == StepType.SEARCH for s in steps)


def test_linear_search_not_found_probes_everything():
    steps = list(linear_search([4, 7, 1], 5))
    assert [s.tag for s in steps] == ["probe", "probe", "probe", "not_found"]
    assert steps[-1].metrics["comparisons"] == 3


def test_linear_search_empty_array():
    steps = list(linear_search([], 1))
    assert len(steps) == 1
    assert steps[0].tag == "not_found"


def test_binary_search_found_on_first_probe():
    steps = list(binary_search([1, 3, 5, 7, 9], 5))
    assert [s.tag for s in steps] == ["probe", "found"]
    assert steps[0].highlights["mid"] == (2,)
    assert steps[-1].highlights["found"] == (2,)


def test_binary_search_narrows_window():
    steps = list(binary_search([1, 3, 5, 7, 9], 9))
    assert [s.tag for s in steps] == ["probe", "narrow", "probe", "narrow", "probe", "found"]
    assert steps[1].highlights["window"] == (3, 4)


def test_binary_search_not_found():
    steps = list(binary_search([1, 3, 5], 4))
    assert steps[-1].tag == "not_found"
    assert steps[-1].is_terminal
    assert steps[-2].highlights["window"] == ()


def test_binary_search_rejects_unsorted_input():
    with pytest.raises(InvalidInputError):
        next(binary_search([3, 1, 2], 1))


@pytest.mark.parametrize("search", [linear_search, binary_search])
@pytest.mark.parametrize("target", ["3", None, True, float("nan")])
def test_bad_target_rejected(search, target):
    with pytest.raises(InvalidInputError):
        next(search([1, 2, 3], target))
