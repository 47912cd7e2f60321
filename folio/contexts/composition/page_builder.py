"""
Page composition: profile + section templates -> single HTML document.

Every animated element is wrapped by one of four helpers exposed to the templates
(reveal, counter, typewriter, skill_bar). The helpers ask the animation engine for
the element's state:

- interactive mode emits the initial state plus data-* attributes that
  animations.js replays in the browser with the same timing rules;
- print mode emits the terminal state, so a static snapshot (and its PDF) shows
  every section fully revealed without running any script.
"""

import math
import shutil
from pathlib import Path
from typing import Dict, List, Optional

from jinja2 import TemplateError
from markupsafe import Markup, escape

from folio.contexts.animation import (
    Box,
    CounterConfig,
    PageTimeline,
    RevealConfig,
    SkillBarConfig,
    TypewriterConfig,
    bar_width,
    counter_value,
    reveal_style,
    revealed_length,
)
from folio.contexts.animation.defaults import (
    PARALLAX_FACTOR,
    POINTER_FACTOR,
    SCROLLED_THRESHOLD_PX,
)
from folio.contexts.composition.defaults import (
    ANIMATIONS_SCRIPT,
    HEADING_HEIGHT,
    HEADLINE_TYPEWRITER_DELAY_MS,
    MODES,
    ROW_HEIGHT,
    SECTION_HEIGHTS,
    SECTION_ORDER,
    SKILL_ROW_HEIGHT,
    STAGGER,
    STATIC_PATH,
)
from folio.contexts.composition.exceptions import TemplateRenderError
from folio.contexts.composition.logger import (
    _log_info,
    log_page_written,
    log_section_rendered,
)
from folio.contexts.composition.profile import Profile, load_profile
from folio.contexts.composition.registries import TemplateRegistry


def _attrs(**attrs) -> Markup:
    """Render HTML attributes. 'data_end' -> data-end, 'class_' -> class, None is skipped."""
    parts = []
    for key, value in attrs.items():
        if value is None:
            continue
        name = key.rstrip("_").replace("_", "-")
        if value is True:
            parts.append(name)
        else:
            parts.append(f'{name}="{escape(value)}"')
    return Markup(" ".join(parts))


def _ms(value: float) -> str:
    return f"{value:g}"


class PageComposer:
    """
    Compose the page for one profile in one mode.

    Attributes:
        profile: Page content
        mode: 'interactive' (browser animations) or 'print' (terminal state)
        registry: Template registry (shared cache across composers if passed in)
    """

    def __init__(
        self,
        profile: Profile,
        mode: str = "interactive",
        registry: Optional[TemplateRegistry] = None,
    ):
        if mode not in MODES:
            raise ValueError(f"Unknown mode '{mode}'. Expected one of: {', '.join(MODES)}")
        self.profile = profile
        self.mode = mode
        self.registry = registry or TemplateRegistry()

    @property
    def is_print(self) -> bool:
        return self.mode == "print"

    # Template helpers

    def reveal(self, delay: float = 0, threshold: Optional[float] = None) -> Markup:
        """Attributes for an element that fades and slides in."""
        if threshold is None:
            config = RevealConfig(delay=delay)
        else:
            config = RevealConfig(delay=delay, threshold=threshold)
        if self.is_print:
            return _attrs(style=reveal_style(True, config))
        return _attrs(
            style=reveal_style(False, config),
            data_reveal=True,
            data_threshold=f"{config.threshold:g}",
        )

    def counter(self, end: int, suffix: str = "") -> Markup:
        config = CounterConfig(end=end, suffix=suffix)
        if self.is_print:
            value = counter_value(config.duration, config)
            return Markup(f"<span>{value}{escape(suffix)}</span>")
        attrs = _attrs(
            data_counter=True,
            data_end=end,
            data_duration=_ms(config.duration),
            data_easing=config.easing,
            data_suffix=suffix or None,
            data_threshold=f"{config.threshold:g}",
        )
        return Markup(f"<span {attrs}>{counter_value(0, config)}{escape(suffix)}</span>")

    def typewriter(self, text: str, delay: float = 0) -> Markup:
        config = TypewriterConfig(text=text, delay=delay)
        if self.is_print:
            return Markup(f"<span>{escape(text[: revealed_length(math.inf, config)])}</span>")
        attrs = _attrs(
            data_typewriter=True,
            data_text=text,
            data_speed=_ms(config.speed),
            data_delay=_ms(config.delay),
        )
        blink = f"animation: blink {_ms(config.caret_period)}ms infinite"
        caret = _attrs(class_="caret", style=blink)
        return Markup(f"<span {attrs}></span><span {caret}></span>")

    def skill_bar(self, level: int, delay: float = 0) -> Markup:
        config = SkillBarConfig(level=level, delay=delay)
        if self.is_print:
            width = bar_width(math.inf, config)
            return Markup(f'<div {_attrs(class_="skill-fill", style=f"width: {width:g}%")}></div>')
        attrs = _attrs(
            class_="skill-fill",
            style=f"width: {bar_width(None, config):g}%; "
            f"transition: width {config.duration / 1000:g}s {config.easing}",
            data_skill_bar=True,
            data_level=level,
            data_delay=_ms(config.delay),
            data_threshold=f"{config.threshold:g}",
        )
        return Markup(f"<div {attrs}></div>")

    def scroll_linked(self) -> Markup:
        """Page-wide scroll/pointer tunables, read once by animations.js on mount."""
        if self.is_print:
            return Markup("")
        return _attrs(
            data_scrolled_threshold=f"{SCROLLED_THRESHOLD_PX:g}",
            data_parallax_factor=f"{PARALLAX_FACTOR:g}",
            data_pointer_factor=f"{POINTER_FACTOR:g}",
        )

    def helpers(self) -> Dict[str, object]:
        return {
            "scroll_linked": self.scroll_linked,
            "reveal": self.reveal,
            "counter": self.counter,
            "typewriter": self.typewriter,
            "skill_bar": self.skill_bar,
            "stagger": STAGGER,
            "headline_delay": HEADLINE_TYPEWRITER_DELAY_MS,
            "mode": self.mode,
        }

    # Rendering

    def _render(self, name: str, **context) -> str:
        template = self.registry.get_template(name)
        try:
            return template.render(profile=self.profile, **self.helpers(), **context)
        except TemplateError as e:
            raise TemplateRenderError(
                f"Failed to render template '{name}'",
                template_name=name,
                template_path=self.registry.get_template_path(name),
                original_error=e,
            ) from e

    def render_section(self, section: str) -> Markup:
        html = self._render(f"sections/{section}")
        log_section_rendered(section, self.mode, len(html))
        return Markup(html)

    def compose(self) -> str:
        """Render the complete HTML document."""
        sections: List[Markup] = [self.render_section(name) for name in SECTION_ORDER]
        return self._render("base", sections=sections, script=ANIMATIONS_SCRIPT)

    def write(self, path: Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.compose(), encoding="utf-8")
        log_page_written(path, self.mode)
        return path


def build_site(
    output_dir: Path,
    profile: Optional[Profile] = None,
    registry: Optional[TemplateRegistry] = None,
) -> Dict[str, Path]:
    """
    Write the interactive page, the print snapshot and the browser script.

    Args:
        output_dir: Destination directory (created if missing)
        profile: Page content (default: packaged profile)

    Returns:
        Mapping of 'interactive', 'print' and 'script' to the written files
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    profile = profile or load_profile()
    registry = registry or TemplateRegistry()

    _log_info(f"Building site for {profile.name} in {output_dir}")
    interactive = PageComposer(profile, "interactive", registry)
    snapshot = PageComposer(profile, "print", registry)
    script = shutil.copy2(STATIC_PATH / ANIMATIONS_SCRIPT, output_dir / ANIMATIONS_SCRIPT)
    return {
        "interactive": interactive.write(output_dir / "index.html"),
        "print": snapshot.write(output_dir / "cv.html"),
        "script": Path(script),
    }


def build_timeline(
    profile: Profile,
    viewport_height: float = 900,
    timeline: Optional[PageTimeline] = None,
) -> PageTimeline:
    """
    Mount the page's animated elements on a PageTimeline using estimated geometry.

    Sections are stacked in page order with SECTION_HEIGHTS; within a section,
    elements are placed in rows below the heading. Names are '<section>.<element>'.
    """
    timeline = timeline or PageTimeline(viewport_height)
    top = 0.0

    def row(offset: float, height: float = ROW_HEIGHT) -> Box:
        return Box(top=top + offset, height=height)

    # Hero: everything is on screen at load
    hero_parts = ["badge", "title", "subtitle", "description", "stats", "buttons"]
    for i, part in enumerate(hero_parts):
        config = RevealConfig(delay=i * STAGGER["hero"])
        timeline.add_reveal(f"hero.{part}", row(150 + i * ROW_HEIGHT), config)
    timeline.add_typewriter(
        "hero.headline",
        TypewriterConfig(text=profile.headline, delay=HEADLINE_TYPEWRITER_DELAY_MS),
    )
    stats_box = row(150 + hero_parts.index("stats") * ROW_HEIGHT)
    for i, stat in enumerate(profile.stats):
        config = CounterConfig(end=stat.value, suffix=stat.suffix)
        timeline.add_counter(f"hero.stat[{i}]", stats_box, config)
    top += SECTION_HEIGHTS["hero"]

    # About
    timeline.add_reveal("about.heading", row(0, HEADING_HEIGHT), RevealConfig())
    intro = row(HEADING_HEIGHT, 2 * ROW_HEIGHT)
    timeline.add_reveal("about.intro", intro, RevealConfig(delay=STAGGER["about_base"]))
    for i, _ in enumerate(profile.about.items):
        card = row(HEADING_HEIGHT + 2 * ROW_HEIGHT + (i // 2) * ROW_HEIGHT * 1.5, ROW_HEIGHT * 1.5)
        delay = STAGGER["about_base"] + i * STAGGER["about_card"]
        timeline.add_reveal(f"about.card[{i}]", card, RevealConfig(delay=delay))
    top += SECTION_HEIGHTS["about"]

    # Skills
    timeline.add_reveal("skills.heading", row(0, HEADING_HEIGHT), RevealConfig())
    offset = HEADING_HEIGHT
    for i, category in enumerate(profile.skills.categories):
        height = HEADING_HEIGHT + len(category.skills) * SKILL_ROW_HEIGHT
        config = RevealConfig(delay=i * STAGGER["skill_category"])
        timeline.add_reveal(f"skills.category[{i}]", row(offset, height), config)
        for j, skill in enumerate(category.skills):
            delay = i * STAGGER["skill_category"] + j * STAGGER["skill_item"]
            timeline.add_skill_bar(
                f"skills.{skill.name}",
                row(offset + HEADING_HEIGHT + j * SKILL_ROW_HEIGHT, SKILL_ROW_HEIGHT),
                SkillBarConfig(level=skill.level, delay=delay),
            )
        offset += height
    top += SECTION_HEIGHTS["skills"]

    # Timelines
    for section in ("experience", "education"):
        timeline.add_reveal(f"{section}.heading", row(0, HEADING_HEIGHT), RevealConfig())
        for i, _ in enumerate(getattr(profile, section).entries):
            entry = row(HEADING_HEIGHT + i * 2 * ROW_HEIGHT, 2 * ROW_HEIGHT)
            config = RevealConfig(delay=i * STAGGER["timeline"])
            timeline.add_reveal(f"{section}.entry[{i}]", entry, config)
        top += SECTION_HEIGHTS[section]

    # Contact
    timeline.add_reveal("contact.heading", row(0, HEADING_HEIGHT + ROW_HEIGHT), RevealConfig())
    info = row(HEADING_HEIGHT + ROW_HEIGHT, 2 * ROW_HEIGHT)
    timeline.add_reveal("contact.info", info, RevealConfig(delay=STAGGER["contact"]))

    return timeline
