"""
Typewriter effect: reveal a fixed string one character per interval, with a
blinking caret that runs forever independently of the typing.
"""

from dataclasses import dataclass
from typing import Optional

from folio.contexts.animation.defaults import CARET_PERIOD_MS, TYPEWRITER_SPEED_MS
from folio.contexts.animation.logger import log_completed, log_disposed
from folio.contexts.animation.scheduler import Scheduler, TimerHandle


@dataclass(frozen=True)
class TypewriterConfig:
    """
    Attributes:
        text: Full string to type
        speed: Interval between characters (ms)
        delay: Wait before the first interval starts (ms)
        caret_period: Blink cycle length of the caret (ms)
    """

    text: str
    speed: float = TYPEWRITER_SPEED_MS
    delay: float = 0.0
    caret_period: float = CARET_PERIOD_MS


@dataclass
class TypewriterState:
    full_text: str
    revealed_length: int = 0

    @property
    def text(self) -> str:
        return self.full_text[: self.revealed_length]

    @property
    def done(self) -> bool:
        return self.revealed_length >= len(self.full_text)


def revealed_length(elapsed: float, config: TypewriterConfig) -> int:
    """
    Characters shown `elapsed` ms after activation.

    The first character appears one interval after the start delay.
    """
    total = len(config.text)
    if elapsed < config.delay:
        return 0
    if config.speed <= 0 or elapsed - config.delay >= total * config.speed:
        return total
    return max(0, int((elapsed - config.delay) // config.speed))


def caret_visible(elapsed: float, period: float = CARET_PERIOD_MS) -> bool:
    """Blink: shown for the first half of every period, hidden for the second."""
    if period <= 0:
        return True
    phase = (elapsed % period) / period
    return phase <= 0.5


class Typewriter:
    """Timer-driven typewriter; dispose() cancels both the delay and the interval."""

    def __init__(self, config: TypewriterConfig, scheduler: Scheduler, name: str = ""):
        self.config = config
        self.scheduler = scheduler
        self.name = name or "typewriter"
        self.state = TypewriterState(full_text=config.text)
        self.activated_at: Optional[float] = None
        self._delay_timer: Optional[TimerHandle] = None
        self._interval: Optional[TimerHandle] = None

    def activate(self) -> None:
        if self.activated_at is not None:
            return
        self.activated_at = self.scheduler.now
        self._delay_timer = self.scheduler.call_later(self.config.delay, self._begin_typing)

    def _begin_typing(self) -> None:
        self._delay_timer = None
        if self.state.done:
            return
        if self.config.speed <= 0:
            self.state.revealed_length = len(self.config.text)
            log_completed("typewriter", self.name, self.scheduler.now)
            return
        self._interval = self.scheduler.call_every(self.config.speed, self._type_next)

    def _type_next(self) -> None:
        if not self.state.done:
            self.state.revealed_length += 1
        if self.state.done and self._interval is not None:
            self._interval.cancel()
            self._interval = None
            log_completed("typewriter", self.name, self.scheduler.now)

    @property
    def text(self) -> str:
        return self.state.text

    def caret_visible(self) -> bool:
        return caret_visible(self.scheduler.now, self.config.caret_period)

    def dispose(self) -> None:
        pending = 0
        for handle in (self._delay_timer, self._interval):
            if handle is not None and handle.active:
                handle.cancel()
                pending += 1
        self._delay_timer = None
        self._interval = None
        log_disposed("typewriter", self.name, pending)
