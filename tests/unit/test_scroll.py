"""Unit tests for scroll/pointer sampling and skill bar fills."""

import math

import pytest

from folio.contexts.animation.scheduler import Scheduler
from folio.contexts.animation.scroll import ScrollSubscription
from folio.contexts.animation.skill_bar import SkillBar, SkillBarConfig, bar_width
from folio.contexts.animation.viewport import Box, Viewport


@pytest.mark.unit
def test_offsets_are_linear_in_input():
    subscription = ScrollSubscription(parallax_factor=0.5, pointer_factor=0.02)

    subscription.on_scroll(400)
    assert subscription.parallax_offset == 200
    subscription.on_scroll(100)
    assert subscription.parallax_offset == 50

    subscription.on_pointer(500, 250)
    assert subscription.pointer_offset == pytest.approx((10.0, 5.0))


@pytest.mark.unit
def test_scrolled_flag_follows_threshold():
    subscription = ScrollSubscription(scrolled_threshold=50)
    subscription.on_scroll(50)
    assert not subscription.scrolled
    subscription.on_scroll(51)
    assert subscription.scrolled
    subscription.on_scroll(0)
    assert not subscription.scrolled


@pytest.mark.unit
def test_every_event_notifies_listeners():
    subscription = ScrollSubscription()
    samples = []
    unsubscribe = subscription.subscribe(samples.append)

    subscription.on_scroll(10)
    subscription.on_scroll(10)
    subscription.on_pointer(1, 2)
    assert [s.scroll_y for s in samples] == [10, 10, 10]
    assert samples[-1].pointer == (1, 2)

    unsubscribe()
    subscription.on_scroll(99)
    assert len(samples) == 3


@pytest.mark.unit
def test_dispose_drops_listeners_and_ignores_events():
    subscription = ScrollSubscription()
    samples = []
    subscription.subscribe(samples.append)

    subscription.dispose()
    subscription.on_scroll(300)
    subscription.on_pointer(5, 5)
    assert samples == []
    assert subscription.scroll_y == 0


@pytest.mark.unit
def test_bar_width_pure():
    config = SkillBarConfig(level=80, delay=100, duration=1000, easing="linear")
    assert bar_width(None, config) == 0.0
    assert bar_width(50, config) == 0.0
    assert bar_width(600, config) == pytest.approx(40.0)
    assert bar_width(1100, config) == 80.0
    assert bar_width(math.inf, config) == 80.0


@pytest.mark.unit
def test_skill_bar_fills_after_scrolling_into_view():
    scheduler = Scheduler()
    viewport = Viewport(height=900)
    bar = SkillBar(SkillBarConfig(level=95, delay=50), scheduler, box=Box(top=1500, height=44))
    bar.start(viewport)

    scheduler.advance(2000)
    assert bar.width == 0.0

    viewport.scroll_to(1000)
    scheduler.advance(1050)
    assert bar.width == pytest.approx(95.0)


@pytest.mark.unit
@pytest.mark.parametrize("easing", ["linear", "ease", "ease-out-cubic"])
def test_bar_width_at_infinity_is_level(easing):
    config = SkillBarConfig(level=95, delay=350, duration=1000, easing=easing)
    assert bar_width(math.inf, config) == 95.0
