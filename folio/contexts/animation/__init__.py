"""
Animation Context

Responsibilities:
- Tracks when page elements enter the viewport (one-way visibility latch)
- Computes reveal, counter, typewriter and skill-bar states as pure functions of time
- Drives those functions on a cooperative virtual-clock scheduler
- Samples scroll and pointer input for scroll-linked offsets

Owns: Visibility state, animation timing, timer and subscription lifetimes
Never: Renders markup or touches the filesystem
"""

from folio.contexts.animation.counter import Counter, CounterConfig, CounterState, counter_value
from folio.contexts.animation.reveal import (
    Reveal,
    RevealConfig,
    RevealFrame,
    reveal_frame,
    reveal_style,
)
from folio.contexts.animation.scheduler import Scheduler, TimerHandle
from folio.contexts.animation.scroll import ScrollSample, ScrollSubscription
from folio.contexts.animation.skill_bar import SkillBar, SkillBarConfig, bar_width
from folio.contexts.animation.timeline import PageTimeline
from folio.contexts.animation.typewriter import (
    Typewriter,
    TypewriterConfig,
    TypewriterState,
    caret_visible,
    revealed_length,
)
from folio.contexts.animation.viewport import (
    Box,
    Viewport,
    VisibilityLatch,
    VisibilityState,
    VisibilityWatch,
    visible_fraction,
)

__all__ = [
    # Visibility
    "Box",
    "Viewport",
    "VisibilityLatch",
    "VisibilityState",
    "VisibilityWatch",
    "visible_fraction",
    # Scheduling
    "Scheduler",
    "TimerHandle",
    # Primitives
    "Reveal",
    "RevealConfig",
    "RevealFrame",
    "reveal_frame",
    "reveal_style",
    "Counter",
    "CounterConfig",
    "CounterState",
    "counter_value",
    "Typewriter",
    "TypewriterConfig",
    "TypewriterState",
    "caret_visible",
    "revealed_length",
    "SkillBar",
    "SkillBarConfig",
    "bar_width",
    # Scroll input and page grouping
    "ScrollSample",
    "ScrollSubscription",
    "PageTimeline",
]
