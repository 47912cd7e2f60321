"""
Cooperative single-threaded scheduler on a virtual clock.

Stands in for the browser's timer and frame-callback queue: timers and frame callbacks
interleave on one loop, run strictly in time order (FIFO for equal times), and never
run concurrently. Time only moves when advance() or run_until_idle() is called, so
animation state can be sampled deterministically.
"""

import heapq
import itertools
import math
from typing import Callable, List, Optional, Tuple

from folio.contexts.animation.defaults import FRAME_INTERVAL_MS


class TimerHandle:
    """Cancellable reference to a scheduled callback."""

    def __init__(
        self,
        scheduler: "Scheduler",
        callback: Callable,
        interval: Optional[float] = None,
        is_frame: bool = False,
    ):
        self._scheduler = scheduler
        self.callback = callback
        self.interval = interval
        self.is_frame = is_frame
        self.cancelled = False

    def cancel(self) -> None:
        if not self.cancelled:
            self.cancelled = True
            self._scheduler._cancelled(self)

    @property
    def active(self) -> bool:
        return not self.cancelled


class Scheduler:
    """
    Virtual-clock event loop for animation timers and frame callbacks.

    Attributes:
        now: Current virtual time in milliseconds
        frame_interval: Spacing of frame boundaries for request_frame()
    """

    def __init__(self, start: float = 0.0, frame_interval: float = FRAME_INTERVAL_MS):
        self.now = float(start)
        self.frame_interval = frame_interval
        self._queue: List[Tuple[float, int, TimerHandle]] = []
        self._sequence = itertools.count()
        self._live = 0

    def _push(self, when: float, handle: TimerHandle) -> TimerHandle:
        heapq.heappush(self._queue, (when, next(self._sequence), handle))
        return handle

    def _cancelled(self, handle: TimerHandle) -> None:
        self._live -= 1

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Run callback once after delay ms (negative delays run at the current time)."""
        self._live += 1
        return self._push(self.now + max(0.0, delay), TimerHandle(self, callback, None))

    def call_every(self, interval: float, callback: Callable[[], None]) -> TimerHandle:
        """Run callback every interval ms until the handle is cancelled."""
        interval = max(float(interval), 1.0)
        self._live += 1
        return self._push(self.now + interval, TimerHandle(self, callback, interval))

    def request_frame(self, callback: Callable[[float], None]) -> TimerHandle:
        """Run callback(timestamp) once at the next frame boundary."""
        next_frame = (math.floor(self.now / self.frame_interval) + 1) * self.frame_interval
        self._live += 1
        return self._push(next_frame, TimerHandle(self, callback, is_frame=True))

    @property
    def pending(self) -> int:
        """Number of scheduled, uncancelled callbacks."""
        return self._live

    def advance(self, ms: float) -> None:
        """Move the clock forward by ms, running every callback due on the way."""
        self.advance_to(self.now + ms)

    def advance_to(self, target: float) -> None:
        while self._queue and self._queue[0][0] <= target:
            when, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self.now = when
            if handle.interval is None:
                self._live -= 1
                handle.cancelled = True
                self._invoke(handle)
            else:
                self._invoke(handle)
                if not handle.cancelled:
                    self._push(when + handle.interval, handle)
        self.now = max(self.now, target)

    def run_until_idle(self, limit: float = 60_000) -> None:
        """Run until nothing is pending, or until limit ms of virtual time have passed."""
        deadline = self.now + limit
        while self._queue and self.pending:
            when = self._queue[0][0]
            if when > deadline:
                break
            self.advance_to(when)
        # Drop cancelled entries left at the head
        while self._queue and self._queue[0][2].cancelled:
            heapq.heappop(self._queue)

    def _invoke(self, handle: TimerHandle) -> None:
        if handle.is_frame:
            handle.callback(self.now)
        else:
            handle.callback()
