"""
Reveal transition: a one-shot fade and slide-in once an element is visible.

The interpolation is a pure function of time since the element became visible.
The Reveal component only records the moment the latch tripped; sampling its frame
reads the scheduler clock instead of polling.
"""

from dataclasses import dataclass
from typing import Optional

from folio.contexts.animation.defaults import (
    REVEAL_DURATION_MS,
    REVEAL_EASING,
    REVEAL_OFFSET_PX,
    REVEAL_THRESHOLD,
)
from folio.contexts.animation.easing import get_easing
from folio.contexts.animation.scheduler import Scheduler
from folio.contexts.animation.viewport import Box, Viewport, VisibilityWatch


@dataclass(frozen=True)
class RevealConfig:
    """
    Per-instance reveal parameters.

    Attributes:
        delay: Wait after becoming visible before the transition starts (ms)
        threshold: Visible fraction required to trigger (0..1)
        duration: Transition length (ms)
        offset: Initial downward offset (px)
        easing: Named easing curve (see easing.EASINGS)
    """

    delay: float = 0.0
    threshold: float = REVEAL_THRESHOLD
    duration: float = REVEAL_DURATION_MS
    offset: float = REVEAL_OFFSET_PX
    easing: str = REVEAL_EASING


@dataclass(frozen=True)
class RevealFrame:
    opacity: float
    translate_y: float

    @property
    def settled(self) -> bool:
        return self.opacity == 1.0 and self.translate_y == 0.0



def reveal_progress(elapsed: float, config: RevealConfig) -> float:
    """Linear progress of the transition, elapsed measured from the visibility latch."""
    if elapsed < config.delay:
        return 0.0
    if config.duration <= 0:
        return 1.0
    return min(1.0, (elapsed - config.delay) / config.duration)


def reveal_frame(elapsed: Optional[float], config: RevealConfig) -> RevealFrame:
    """
    Opacity and vertical offset at `elapsed` ms after the element became visible.

    None means the element has not become visible yet.
    """
    if elapsed is None:
        return RevealFrame(opacity=0.0, translate_y=config.offset)
    eased = get_easing(config.easing)(reveal_progress(elapsed, config))
    return RevealFrame(opacity=eased, translate_y=config.offset * (1.0 - eased))


def _seconds(ms: float) -> str:
    return f"{ms / 1000:g}s"


def reveal_style(visible: bool, config: RevealConfig) -> str:
    """
    Declarative inline style: set the target state and let the renderer interpolate.

    Example:
        reveal_style(False, RevealConfig(delay=300))
        # "opacity: 0; transform: translateY(30px); transition: all 0.6s ease 0.3s"
    """
    if visible:
        state = "opacity: 1; transform: translateY(0)"
    else:
        state = f"opacity: 0; transform: translateY({config.offset:g}px)"
    return f"{state}; transition: all {_seconds(config.duration)} {config.easing} {_seconds(config.delay)}"


class Reveal:
    """Reveal bound to one element, its visibility watch and a scheduler clock."""

    def __init__(
        self,
        config: RevealConfig,
        scheduler: Scheduler,
        box: Optional[Box] = None,
        name: str = "",
    ):
        self.config = config
        self.scheduler = scheduler
        self.name = name
        self.visible_at: Optional[float] = None
        self.watch = VisibilityWatch(box, config.threshold, name=name)
        self.watch.on_visible(self._mark_visible)

    def start(self, viewport: Optional[Viewport]) -> None:
        self.watch.start(viewport)

    def activate(self) -> None:
        """Trip visibility directly; repeated calls keep the first timestamp."""
        self.watch.force_visible()

    def _mark_visible(self) -> None:
        if self.visible_at is None:
            self.visible_at = self.scheduler.now

    @property
    def is_visible(self) -> bool:
        return self.watch.is_visible

    def frame(self) -> RevealFrame:
        if self.visible_at is None:
            return reveal_frame(None, self.config)
        return reveal_frame(self.scheduler.now - self.visible_at, self.config)

    def style(self) -> str:
        return reveal_style(self.is_visible, self.config)

    def dispose(self) -> None:
        self.watch.dispose()
