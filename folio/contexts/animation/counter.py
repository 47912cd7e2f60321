"""
Numeric counter that counts up from 0 to a target once it scrolls into view.
"""

import math
from dataclasses import dataclass
from typing import Optional

from folio.contexts.animation.defaults import (
    COUNTER_DURATION_MS,
    COUNTER_EASING,
    COUNTER_THRESHOLD,
)
from folio.contexts.animation.easing import get_easing
from folio.contexts.animation.logger import log_completed, log_disposed
from folio.contexts.animation.scheduler import Scheduler, TimerHandle
from folio.contexts.animation.viewport import Box, Viewport, VisibilityWatch


@dataclass(frozen=True)
class CounterConfig:
    end: int
    duration: float = COUNTER_DURATION_MS
    suffix: str = ""
    easing: str = COUNTER_EASING
    threshold: float = COUNTER_THRESHOLD


@dataclass
class CounterState:
    current_value: int
    target_value: int
    elapsed_fraction: float = 0.0

    @property
    def done(self) -> bool:
        return self.elapsed_fraction >= 1.0


def counter_progress(elapsed: float, config: CounterConfig) -> float:
    if config.duration <= 0:
        return 1.0
    return max(0.0, min(1.0, elapsed / config.duration))


def counter_value(elapsed: float, config: CounterConfig) -> int:
    """
    Displayed value `elapsed` ms after counting started.

    floor(eased_progress * end), pinned to exactly `end` once progress reaches 1.
    """
    progress = counter_progress(elapsed, config)
    if progress >= 1.0:
        return config.end
    eased = get_easing(config.easing)(progress)
    return min(config.end, math.floor(eased * config.end))


class Counter:
    """
    Counter bound to an element.

    Frames are only requested after the visibility latch trips, and stop being
    requested once the terminal value is reached. Elapsed time is measured from
    the first frame timestamp, as requestAnimationFrame callbacks do.
    """

    def __init__(
        self,
        config: CounterConfig,
        scheduler: Scheduler,
        box: Optional[Box] = None,
        name: str = "",
    ):
        self.config = config
        self.scheduler = scheduler
        self.name = name or f"counter({config.end})"
        self.state = CounterState(current_value=0, target_value=config.end)
        self.latched = False
        self.started_at: Optional[float] = None
        self._frame: Optional[TimerHandle] = None
        self.watch = VisibilityWatch(box, config.threshold, name=self.name)
        self.watch.on_visible(self._begin)

    def start(self, viewport: Optional[Viewport]) -> None:
        self.watch.start(viewport)

    def activate(self) -> None:
        """Trip visibility directly; no effect once counting has begun."""
        self.watch.force_visible()

    def _begin(self) -> None:
        if self.latched:
            return
        self.latched = True
        self._frame = self.scheduler.request_frame(self.tick)

    def tick(self, timestamp: float) -> None:
        """Frame callback. A no-op before visibility and after completion."""
        if not self.latched or self.state.done:
            return
        if self.started_at is None:
            self.started_at = timestamp
        elapsed = timestamp - self.started_at
        self.state.elapsed_fraction = counter_progress(elapsed, self.config)
        self.state.current_value = max(
            self.state.current_value, counter_value(elapsed, self.config)
        )
        if self.state.done:
            self._frame = None
            log_completed("counter", self.name, timestamp)
        else:
            self._frame = self.scheduler.request_frame(self.tick)

    @property
    def value(self) -> int:
        return self.state.current_value

    @property
    def display(self) -> str:
        return f"{self.state.current_value}{self.config.suffix}"

    def dispose(self) -> None:
        pending = 0
        if self._frame is not None and self._frame.active:
            self._frame.cancel()
            pending = 1
        self._frame = None
        self.watch.dispose()
        log_disposed("counter", self.name, pending)
