"""Unit tests for the virtual-clock scheduler."""

import pytest

from folio.contexts.animation.scheduler import Scheduler


@pytest.mark.unit
def test_call_later_runs_at_due_time():
    scheduler = Scheduler()
    calls = []
    scheduler.call_later(100, lambda: calls.append(scheduler.now))

    scheduler.advance(99)
    assert calls == []
    scheduler.advance(1)
    assert calls == [100]
    assert scheduler.pending == 0


@pytest.mark.unit
def test_equal_times_run_in_fifo_order():
    scheduler = Scheduler()
    order = []
    for label in "abc":
        scheduler.call_later(50, lambda label=label: order.append(label))

    scheduler.advance(50)
    assert order == ["a", "b", "c"]


@pytest.mark.unit
def test_call_every_repeats_until_cancelled():
    scheduler = Scheduler()
    ticks = []
    handle = scheduler.call_every(50, lambda: ticks.append(scheduler.now))

    scheduler.advance(175)
    assert ticks == [50, 100, 150]

    handle.cancel()
    scheduler.advance(500)
    assert ticks == [50, 100, 150]
    assert scheduler.pending == 0


@pytest.mark.unit
def test_interval_can_cancel_itself():
    scheduler = Scheduler()
    ticks = []

    def tick():
        ticks.append(scheduler.now)
        if len(ticks) == 2:
            handle.cancel()

    handle = scheduler.call_every(10, tick)
    scheduler.advance(100)
    assert ticks == [10, 20]


@pytest.mark.unit
def test_request_frame_aligns_to_frame_boundary():
    scheduler = Scheduler(frame_interval=16)
    stamps = []
    scheduler.advance(5)
    scheduler.request_frame(stamps.append)

    scheduler.advance(20)
    assert stamps == [16]


@pytest.mark.unit
def test_frames_requested_inside_a_frame_run_on_the_next_one():
    scheduler = Scheduler(frame_interval=16)
    stamps = []

    def frame(ts):
        stamps.append(ts)
        if len(stamps) < 3:
            scheduler.request_frame(frame)

    scheduler.request_frame(frame)
    scheduler.run_until_idle()
    assert stamps == [16, 32, 48]


@pytest.mark.unit
def test_cancelled_timer_never_runs():
    scheduler = Scheduler()
    calls = []
    handle = scheduler.call_later(10, lambda: calls.append(1))
    handle.cancel()
    handle.cancel()

    scheduler.advance(100)
    assert calls == []
    assert scheduler.pending == 0


@pytest.mark.unit
def test_run_until_idle_respects_limit():
    scheduler = Scheduler()
    scheduler.call_every(100, lambda: None)

    scheduler.run_until_idle(limit=1000)
    assert scheduler.now == pytest.approx(1000)
    assert scheduler.pending == 1
