import pytest

from algorithms.bubble_sort import bubble_sort
from algorithms.step import Step
from engine import DEFAULT_SPEED, SPEED_PRESETS, PlaybackController, PlaybackState
from graph import InvalidInputError


def make_steps(count, terminal=True):
    steps = [Step(step_number=i) for i in range(count)]
    if terminal and steps:
        steps[-1] = Step(step_number=count - 1, is_terminal=True)
    return steps


def test_speed_presets():
    assert SPEED_PRESETS == {
        "1x": 1000, "1.5x": 666, "1.75x": 571, "2x": 500, "2.5x": 400, "3x": 333,
    }
    assert DEFAULT_SPEED == "1.5x"
    assert PlaybackController().speed == "1.5x"


def test_delivers_every_step_in_order_and_pauses_between(playback, sleeps):
    delivered = []
    outcome = playback.run(make_steps(4), speed="2x", on_step=delivered.append)

    assert outcome == PlaybackState.COMPLETED
    assert [s.step_number for s in delivered] == [0, 1, 2, 3]
    # no pause after the terminal step
    assert sleeps == [0.5, 0.5, 0.5]
    assert playback.state == PlaybackState.IDLE
    assert playback.last_outcome == PlaybackState.COMPLETED
    assert playback.steps_delivered == 4


def test_stops_at_terminal_step():
    steps = make_steps(2) + [Step(step_number=99)]
    delivered = []
    PlaybackController(sleep=lambda s: None).run(steps, on_step=delivered.append)
    assert [s.step_number for s in delivered] == [0, 1]


def test_sequence_end_without_terminal_completes(playback):
    assert playback.run(make_steps(3, terminal=False)) == PlaybackState.COMPLETED


def test_accepts_producer_factory(playback):
    delivered = []
    playback.run(lambda: bubble_sort([2, 1]), on_step=delivered.append)
    assert delivered[-1].snapshot == (1, 2)


def test_cancel_inside_callback_stops_after_that_step(playback, sleeps):
    delivered = []

    def on_step(step):
        delivered.append(step)
        if step.step_number == 1:
            playback.cancel()

    outcome = playback.run(make_steps(6), on_step=on_step)

    assert outcome == PlaybackState.CANCELLED
    assert [s.step_number for s in delivered] == [0, 1]
    assert len(sleeps) == 1
    assert playback.state == PlaybackState.IDLE
    assert playback.last_outcome == PlaybackState.CANCELLED


def test_cancel_during_pause_is_seen_after_waking():
    controller = PlaybackController(sleep=lambda s: controller.cancel())
    delivered = []
    outcome = controller.run(make_steps(5), on_step=delivered.append)
    assert outcome == PlaybackState.CANCELLED
    assert len(delivered) == 1


def test_run_while_running_is_ignored(playback):
    nested = []

    def on_step(step):
        nested.append(playback.run(make_steps(3)))

    playback.run(make_steps(2), on_step=on_step)
    assert nested == [None, None]
    assert playback.steps_delivered == 2


def test_cancel_while_idle_does_not_poison_next_run(playback):
    playback.cancel()
    assert playback.run(make_steps(3)) == PlaybackState.COMPLETED


def test_errors_propagate_and_controller_returns_to_idle(playback):
    def on_step(step):
        raise RuntimeError("render failed")

    with pytest.raises(RuntimeError, match="render failed"):
        playback.run(make_steps(3), on_step=on_step)
    assert playback.state == PlaybackState.IDLE
    assert playback.last_outcome is None

    def broken():
        yield Step(step_number=0)
        raise InvalidInputError("bad input")

    with pytest.raises(InvalidInputError):
        playback.run(broken())
    assert playback.state == PlaybackState.IDLE
    assert playback.run(make_steps(1)) == PlaybackState.COMPLETED


def test_producer_validation_error_raised_before_any_step(playback):
    delivered = []
    with pytest.raises(InvalidInputError):
        playback.run(bubble_sort([1, "x"]), on_step=delivered.append)
    assert delivered == []


def test_unknown_speed_rejected(playback):
    with pytest.raises(InvalidInputError):
        playback.run(make_steps(1), speed="10x")
    assert playback.state == PlaybackState.IDLE
    with pytest.raises(InvalidInputError):
        PlaybackController(speed="warp")


def test_speed_change_mid_run_applies_to_next_pause(playback, sleeps):
    def on_step(step):
        if step.step_number == 1:
            playback.set_speed("1x")

    playback.run(make_steps(4), speed="3x", on_step=on_step)
    assert sleeps == [0.333, 1.0, 1.0]


def test_default_sleep_waits_on_cancel_event():
    controller = PlaybackController(speed="3x")
    assert controller._sleep == controller._cancel.wait
