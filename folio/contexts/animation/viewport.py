"""
Viewport visibility tracking.

A Viewport knows its height and scroll position and notifies subscribed observers
whenever either changes. A VisibilityWatch binds one element box to a viewport and
latches once the element's visible fraction reaches its threshold, then releases its
subscription since the latch can never revert.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from folio.contexts.animation.defaults import REVEAL_THRESHOLD
from folio.contexts.animation.logger import log_latched


@dataclass(frozen=True)
class Box:
    """Vertical extent of an element in page coordinates (px)."""

    top: float
    height: float

    @property
    def bottom(self) -> float:
        return self.top + self.height


def visible_fraction(box: Box, scroll_y: float, viewport_height: float) -> float:
    """
    Fraction of the element's height inside [scroll_y, scroll_y + viewport_height].

    Zero-height elements count as fully visible while their top edge is on screen.
    """
    view_top = scroll_y
    view_bottom = scroll_y + viewport_height
    if box.height <= 0:
        return 1.0 if view_top <= box.top <= view_bottom else 0.0
    overlap = min(box.bottom, view_bottom) - max(box.top, view_top)
    return max(0.0, min(1.0, overlap / box.height))


class VisibilityState(Enum):
    NOT_VISIBLE = "not_visible"
    VISIBLE = "visible"


class VisibilityLatch:
    """
    Two-state machine with a single legal transition: NOT_VISIBLE -> VISIBLE.

    observe() returns True only on the call that performs the transition.
    """

    def __init__(self, threshold: float = REVEAL_THRESHOLD):
        self.threshold = max(0.0, min(1.0, threshold))
        self.state = VisibilityState.NOT_VISIBLE

    @property
    def is_visible(self) -> bool:
        return self.state is VisibilityState.VISIBLE

    def crosses(self, fraction: float) -> bool:
        return fraction > 0 and fraction >= self.threshold

    def observe(self, fraction: float) -> bool:
        if self.is_visible or not self.crosses(fraction):
            return False
        self.state = VisibilityState.VISIBLE
        return True


class Subscription:
    """Handle for one observer registered on a Viewport."""

    def __init__(self, viewport: "Viewport", box: Box, callback: Callable[[float], None]):
        self.viewport = viewport
        self.box = box
        self.callback = callback
        self.active = True

    def unsubscribe(self) -> None:
        if self.active:
            self.active = False
            self.viewport._remove(self)


class Viewport:
    """
    Scrollable window onto the page.

    Observers receive the element's visible fraction on subscribe and after every
    scroll or resize, in subscription order.
    """

    def __init__(self, height: float, scroll_y: float = 0.0):
        self.height = height
        self.scroll_y = scroll_y
        self._subscriptions: List[Subscription] = []

    def observe(self, box: Box, callback: Callable[[float], None]) -> Subscription:
        subscription = Subscription(self, box, callback)
        self._subscriptions.append(subscription)
        callback(visible_fraction(box, self.scroll_y, self.height))
        return subscription

    def _remove(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    @property
    def observer_count(self) -> int:
        return len(self._subscriptions)

    def scroll_to(self, scroll_y: float) -> None:
        self.scroll_y = max(0.0, scroll_y)
        self._notify()

    def resize(self, height: float) -> None:
        self.height = height
        self._notify()

    def _notify(self) -> None:
        # Copy: callbacks may unsubscribe while we iterate
        for subscription in list(self._subscriptions):
            if subscription.active:
                subscription.callback(
                    visible_fraction(subscription.box, self.scroll_y, self.height)
                )


class VisibilityWatch:
    """
    Watch one element until it becomes visible.

    Each watch owns its own subscription and releases it as soon as the latch trips,
    or on dispose(). Without a viewport or box the watch stays idle.
    """

    def __init__(
        self,
        box: Optional[Box] = None,
        threshold: float = REVEAL_THRESHOLD,
        name: str = "",
    ):
        self.box = box
        self.name = name
        self.latch = VisibilityLatch(threshold)
        self._listeners: List[Callable[[], None]] = []
        self._subscription: Optional[Subscription] = None

    @property
    def is_visible(self) -> bool:
        return self.latch.is_visible

    @property
    def state(self) -> VisibilityState:
        return self.latch.state

    def on_visible(self, listener: Callable[[], None]) -> None:
        """Register a listener; runs immediately if the latch already tripped."""
        if self.is_visible:
            listener()
        else:
            self._listeners.append(listener)

    def start(self, viewport: Optional[Viewport]) -> None:
        if viewport is None or self.box is None or self.is_visible:
            return
        if self._subscription is not None:
            return
        self._subscription = viewport.observe(self.box, self._on_fraction)
        # observe() may have latched synchronously
        if self.is_visible:
            self._release()

    def force_visible(self) -> None:
        """Trip the latch regardless of geometry (e.g. elements on screen at load)."""
        self._on_fraction(1.0)

    def _on_fraction(self, fraction: float) -> None:
        tripped = self.latch.observe(fraction)
        if not tripped:
            return
        log_latched(self.name or "element", fraction)
        self._release()
        listeners, self._listeners = self._listeners, []
        for listener in listeners:
            listener()

    def _release(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def dispose(self) -> None:
        self._release()
        self._listeners.clear()
