"""Unit tests for the numeric counter."""

import pytest

from folio.contexts.animation.counter import Counter, CounterConfig, counter_value
from folio.contexts.animation.scheduler import Scheduler
from folio.contexts.animation.viewport import Box, Viewport


@pytest.mark.unit
def test_counter_endpoints():
    config = CounterConfig(end=10, duration=1500)
    assert counter_value(0, config) == 0
    assert counter_value(1500, config) == 10
    assert counter_value(99_999, config) == 10


@pytest.mark.unit
@pytest.mark.parametrize("easing", ["linear", "ease-out-cubic", "ease-out-quart"])
@pytest.mark.parametrize("end", [1, 3, 10, 250])
def test_counter_is_non_decreasing(easing, end):
    config = CounterConfig(end=end, duration=1500, easing=easing)
    values = [counter_value(t, config) for t in range(0, 1600, 7)]
    assert values[0] == 0
    assert all(b >= a for a, b in zip(values, values[1:]))
    assert values[-1] == end
    assert max(values) == end


@pytest.mark.unit
def test_zero_duration_shows_target():
    assert counter_value(0, CounterConfig(end=42, duration=0)) == 42


@pytest.mark.unit
def test_counter_does_not_run_before_visible():
    scheduler = Scheduler()
    viewport = Viewport(height=900)
    counter = Counter(CounterConfig(end=10, duration=1500), scheduler, box=Box(top=3000, height=50))
    counter.start(viewport)

    scheduler.advance(5000)
    assert counter.value == 0
    assert counter.started_at is None
    assert scheduler.pending == 0

    # Stray frame ticks are ignored until visibility is confirmed
    counter.tick(5000)
    assert counter.value == 0


@pytest.mark.unit
def test_counter_runs_to_target_and_stops_requesting_frames():
    scheduler = Scheduler()
    counter = Counter(CounterConfig(end=10, duration=1500, suffix="+"), scheduler)
    counter.activate()
    assert scheduler.pending == 1

    seen = []
    for _ in range(120):
        scheduler.advance(16)
        seen.append(counter.value)

    assert all(b >= a for a, b in zip(seen, seen[1:]))
    assert counter.value == 10
    assert counter.display == "10+"
    assert counter.state.done
    assert scheduler.pending == 0


@pytest.mark.unit
def test_ticks_after_completion_are_no_ops():
    scheduler = Scheduler()
    counter = Counter(CounterConfig(end=5, duration=100), scheduler)
    counter.activate()
    scheduler.run_until_idle()
    assert counter.value == 5

    counter.tick(10_000)
    counter.activate()
    assert counter.value == 5
    assert scheduler.pending == 0


@pytest.mark.unit
def test_dispose_cancels_pending_frame():
    scheduler = Scheduler()
    counter = Counter(CounterConfig(end=100, duration=2000), scheduler)
    counter.activate()
    scheduler.advance(500)
    value = counter.value

    counter.dispose()
    assert scheduler.pending == 0
    scheduler.advance(5000)
    assert counter.value == value


@pytest.mark.unit
def test_elapsed_is_measured_from_first_frame():
    scheduler = Scheduler(frame_interval=16)
    counter = Counter(CounterConfig(end=10, duration=1500), scheduler)
    scheduler.advance(5)
    counter.activate()
    assert counter.started_at is None

    scheduler.advance_to(16)
    assert counter.started_at == 16
    assert counter.value == 0

    # 1488 ms after the first frame: still short of the target
    scheduler.advance_to(1504)
    assert counter.value == 9

    scheduler.advance_to(1520)
    assert counter.value == 10
    assert counter.state.done
