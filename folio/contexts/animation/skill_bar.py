"""
Skill bar fill: width grows from 0% to the skill level once the row is visible.
"""

from dataclasses import dataclass
from typing import Optional

from folio.contexts.animation.defaults import (
    SKILL_BAR_DURATION_MS,
    SKILL_BAR_EASING,
    SKILL_BAR_THRESHOLD,
)
from folio.contexts.animation.easing import get_easing
from folio.contexts.animation.scheduler import Scheduler
from folio.contexts.animation.viewport import Box, Viewport, VisibilityWatch


@dataclass(frozen=True)
class SkillBarConfig:
    level: float
    delay: float = 0.0
    duration: float = SKILL_BAR_DURATION_MS
    easing: str = SKILL_BAR_EASING
    threshold: float = SKILL_BAR_THRESHOLD


def bar_width(elapsed: Optional[float], config: SkillBarConfig) -> float:
    """Bar width in percent, `elapsed` ms after the row became visible (None: not yet)."""
    level = max(0.0, min(100.0, config.level))
    if elapsed is None or elapsed < config.delay:
        return 0.0
    if config.duration <= 0:
        return level
    progress = min(1.0, (elapsed - config.delay) / config.duration)
    return level * get_easing(config.easing)(progress)


class SkillBar:
    def __init__(
        self,
        config: SkillBarConfig,
        scheduler: Scheduler,
        box: Optional[Box] = None,
        name: str = "",
    ):
        self.config = config
        self.scheduler = scheduler
        self.visible_at: Optional[float] = None
        self.watch = VisibilityWatch(box, config.threshold, name=name)
        self.watch.on_visible(self._mark_visible)

    def _mark_visible(self) -> None:
        if self.visible_at is None:
            self.visible_at = self.scheduler.now

    def start(self, viewport: Optional[Viewport]) -> None:
        self.watch.start(viewport)

    def activate(self) -> None:
        self.watch.force_visible()

    @property
    def width(self) -> float:
        if self.visible_at is None:
            return 0.0
        return bar_width(self.scheduler.now - self.visible_at, self.config)

    def dispose(self) -> None:
        self.watch.dispose()
