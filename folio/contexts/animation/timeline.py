"""
PageTimeline: the animated primitives of one mounted page.

Groups a page's reveals, counters, typewriters and skill bars so they can be driven
together by one scroll subscription and one scheduler, sampled, and torn down. Each
primitive still owns its own visibility watch and timers.
"""

from typing import Dict, List, Optional

from folio.contexts.animation.counter import Counter, CounterConfig
from folio.contexts.animation.reveal import Reveal, RevealConfig
from folio.contexts.animation.scheduler import Scheduler
from folio.contexts.animation.scroll import ScrollSample, ScrollSubscription
from folio.contexts.animation.skill_bar import SkillBar, SkillBarConfig
from folio.contexts.animation.typewriter import Typewriter, TypewriterConfig
from folio.contexts.animation.viewport import Box, Viewport


class PageTimeline:
    def __init__(self, viewport_height: float, scheduler: Optional[Scheduler] = None):
        self.scheduler = scheduler or Scheduler()
        self.viewport = Viewport(viewport_height)
        self.scroll = ScrollSubscription()
        self._unsubscribe = self.scroll.subscribe(self._on_scroll)
        self.reveals: Dict[str, Reveal] = {}
        self.counters: Dict[str, Counter] = {}
        self.typewriters: Dict[str, Typewriter] = {}
        self.skill_bars: Dict[str, SkillBar] = {}

    def _on_scroll(self, sample: ScrollSample) -> None:
        self.viewport.scroll_to(sample.scroll_y)

    def add_reveal(self, name: str, box: Box, config: RevealConfig) -> Reveal:
        reveal = Reveal(config, self.scheduler, box=box, name=name)
        self.reveals[name] = reveal
        reveal.start(self.viewport)
        return reveal

    def add_counter(self, name: str, box: Box, config: CounterConfig) -> Counter:
        counter = Counter(config, self.scheduler, box=box, name=name)
        self.counters[name] = counter
        counter.start(self.viewport)
        return counter

    def add_skill_bar(self, name: str, box: Box, config: SkillBarConfig) -> SkillBar:
        bar = SkillBar(config, self.scheduler, box=box, name=name)
        self.skill_bars[name] = bar
        bar.start(self.viewport)
        return bar

    def add_typewriter(self, name: str, config: TypewriterConfig) -> Typewriter:
        """Add a typewriter. It starts on mount, independent of scrolling."""
        typewriter = Typewriter(config, self.scheduler, name=name)
        self.typewriters[name] = typewriter
        typewriter.activate()
        return typewriter

    def scroll_to(self, scroll_y: float) -> None:
        self.scroll.on_scroll(scroll_y)

    def advance(self, ms: float) -> None:
        self.scheduler.advance(ms)

    def snapshot(self) -> Dict[str, Dict[str, object]]:
        """Current renderable state of every primitive, keyed by kind then name."""
        return {
            "reveal": {
                name: {"visible": r.is_visible, "opacity": round(r.frame().opacity, 3)}
                for name, r in self.reveals.items()
            },
            "counter": {name: c.display for name, c in self.counters.items()},
            "typewriter": {name: t.text for name, t in self.typewriters.items()},
            "skill_bar": {name: round(b.width, 1) for name, b in self.skill_bars.items()},
        }

    def revealed(self) -> List[str]:
        return [name for name, r in self.reveals.items() if r.is_visible]

    def dispose(self) -> None:
        for group in (self.reveals, self.counters, self.typewriters, self.skill_bars):
            for primitive in group.values():
                primitive.dispose()
        self._unsubscribe()
        self.scroll.dispose()
