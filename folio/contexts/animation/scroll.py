"""
Scroll and pointer sampling for scroll-linked effects.

A ScrollSubscription is created by whoever mounts the page and handed by reference
to the consumers that need scroll or pointer input (navigation bar, parallax layers,
the viewport). Every event recomputes the derived offsets directly from the raw
input; there is no throttling or smoothing.
"""

from dataclasses import dataclass
from typing import Callable, List, Tuple

from folio.contexts.animation.defaults import (
    PARALLAX_FACTOR,
    POINTER_FACTOR,
    SCROLLED_THRESHOLD_PX,
)


@dataclass(frozen=True)
class ScrollSample:
    scroll_y: float
    pointer: Tuple[float, float]
    parallax_offset: float
    pointer_offset: Tuple[float, float]
    scrolled: bool


class ScrollSubscription:
    """
    Owned scroll/pointer listener.

    Attributes:
        parallax_factor: Scale applied to scroll position for parallax layers
        pointer_factor: Scale applied to pointer position for hover drift
        scrolled_threshold: Scroll distance after which the page counts as scrolled
    """

    def __init__(
        self,
        parallax_factor: float = PARALLAX_FACTOR,
        pointer_factor: float = POINTER_FACTOR,
        scrolled_threshold: float = SCROLLED_THRESHOLD_PX,
    ):
        self.parallax_factor = parallax_factor
        self.pointer_factor = pointer_factor
        self.scrolled_threshold = scrolled_threshold
        self.scroll_y = 0.0
        self.pointer: Tuple[float, float] = (0.0, 0.0)
        self.disposed = False
        self._listeners: List[Callable[[ScrollSample], None]] = []

    @property
    def parallax_offset(self) -> float:
        return self.scroll_y * self.parallax_factor

    @property
    def pointer_offset(self) -> Tuple[float, float]:
        x, y = self.pointer
        return (x * self.pointer_factor, y * self.pointer_factor)

    @property
    def scrolled(self) -> bool:
        return self.scroll_y > self.scrolled_threshold

    def sample(self) -> ScrollSample:
        return ScrollSample(
            scroll_y=self.scroll_y,
            pointer=self.pointer,
            parallax_offset=self.parallax_offset,
            pointer_offset=self.pointer_offset,
            scrolled=self.scrolled,
        )

    def subscribe(self, listener: Callable[[ScrollSample], None]) -> Callable[[], None]:
        """Add a listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def on_scroll(self, scroll_y: float) -> None:
        if self.disposed:
            return
        self.scroll_y = scroll_y
        self._emit()

    def on_pointer(self, x: float, y: float) -> None:
        if self.disposed:
            return
        self.pointer = (x, y)
        self._emit()

    def _emit(self) -> None:
        sample = self.sample()
        for listener in list(self._listeners):
            listener(sample)

    def dispose(self) -> None:
        self.disposed = True
        self._listeners.clear()
