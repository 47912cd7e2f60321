"""
Profile data structures.

The profile is the literal display data of the page: identity, hero stats, about
cards, skill ratings, experience and education timelines, and contact details.
Profiles are stored as YAML and loaded with OmegaConf.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from omegaconf import OmegaConf

from folio.contexts.composition.defaults import DEFAULT_PROFILE_PATH
from folio.contexts.composition.exceptions import InvalidProfileError
from folio.contexts.composition.logger import log_profile_loaded


@dataclass
class Link:
    target: str
    label: str
    style: str = "primary"


@dataclass
class Stat:
    value: int
    label: str
    suffix: str = ""


@dataclass
class InfoItem:
    """Icon card (about section) or contact entry."""

    icon: str
    title: str
    value: str


@dataclass
class Skill:
    name: str
    level: int


@dataclass
class SkillCategory:
    title: str
    skills: List[Skill] = field(default_factory=list)


@dataclass
class TimelineEntry:
    """One experience or education entry."""

    date: str
    title: str
    organization: str
    description: str


@dataclass
class Section:
    title: str
    intro: str = ""
    paragraphs: List[str] = field(default_factory=list)
    items: List[InfoItem] = field(default_factory=list)
    categories: List[SkillCategory] = field(default_factory=list)
    entries: List[TimelineEntry] = field(default_factory=list)


@dataclass
class Profile:
    """
    Complete page content.

    Attributes:
        name: Full display name (hero title, footer)
        initials: Navigation logo text
        headline: Typed-out subtitle in the hero
        badge: Availability badge above the name
        description: Hero paragraph
        stats: Hero counters
        about/skills/experience/education/contact: Section content
        footer: Footer line
    """

    name: str
    initials: str
    headline: str
    badge: str
    description: str
    about: Section
    skills: Section
    experience: Section
    education: Section
    contact: Section
    footer: str
    lang: str = "en"
    nav: List[Link] = field(default_factory=list)
    buttons: List[Link] = field(default_factory=list)
    stats: List[Stat] = field(default_factory=list)
    source: Optional[Path] = None


def _require(data: Dict[str, Any], key: str, where: str, source: Optional[Path]) -> Any:
    if not isinstance(data, dict):
        raise InvalidProfileError("Expected a mapping", field=where or "<root>", source=source)
    if data.get(key) in (None, ""):
        path = f"{where}.{key}" if where else key
        raise InvalidProfileError("Missing required field", field=path, source=source)
    return data[key]


def _list(data: Dict[str, Any], key: str, where: str, source: Optional[Path]) -> List[Any]:
    if not isinstance(data, dict):
        raise InvalidProfileError("Expected a mapping", field=where or "<root>", source=source)
    value = data.get(key) or []
    if not isinstance(value, list):
        path = f"{where}.{key}" if where else key
        raise InvalidProfileError("Expected a list", field=path, source=source)
    return value


def _link(data: Dict[str, Any], where: str, source: Optional[Path]) -> Link:
    return Link(
        target=_require(data, "target", where, source),
        label=_require(data, "label", where, source),
        style=data.get("style", "primary"),
    )


def _section(data: Dict[str, Any], key: str, source: Optional[Path]) -> Section:
    raw = _require(data, key, "", source)
    title = _require(raw, "title", key, source)

    items = []
    for i, item in enumerate(_list(raw, "items", key, source)):
        where = f"{key}.items[{i}]"
        value = _require(item, "value", where, source)
        items.append(
            InfoItem(
                icon=item.get("icon", ""),
                # Contact items use 'label', about cards use 'title'
                title=item.get("title") or _require(item, "label", where, source),
                value=str(value),
            )
        )

    categories = []
    for i, cat in enumerate(_list(raw, "categories", key, source)):
        where = f"{key}.categories[{i}]"
        skills = []
        for j, skill in enumerate(_list(cat, "skills", where, source)):
            skill_where = f"{where}.skills[{j}]"
            level = _require(skill, "level", skill_where, source)
            if isinstance(level, bool) or not isinstance(level, int) or not 0 <= level <= 100:
                raise InvalidProfileError(
                    f"Skill level must be an integer in 0..100, got {level!r}",
                    field=f"{skill_where}.level",
                    source=source,
                )
            skills.append(Skill(name=_require(skill, "name", skill_where, source), level=level))
        categories.append(SkillCategory(title=_require(cat, "title", where, source), skills=skills))

    entries = []
    for i, entry in enumerate(_list(raw, "entries", key, source)):
        where = f"{key}.entries[{i}]"
        entries.append(
            TimelineEntry(
                date=str(_require(entry, "date", where, source)),
                title=_require(entry, "title", where, source),
                organization=_require(entry, "organization", where, source),
                description=entry.get("description", ""),
            )
        )

    return Section(
        title=title,
        intro=raw.get("intro", ""),
        paragraphs=[str(p) for p in _list(raw, "paragraphs", key, source)],
        items=items,
        categories=categories,
        entries=entries,
    )


def profile_from_dict(data: Dict[str, Any], source: Optional[Path] = None) -> Profile:
    """
    Build a Profile from plain data, validating required fields.

    Raises:
        InvalidProfileError: If a required field is missing or malformed
    """
    stats = []
    for i, stat in enumerate(_list(data, "stats", "", source)):
        where = f"stats[{i}]"
        value = _require(stat, "value", where, source)
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidProfileError(
                f"Stat value must be an integer, got {value!r}", field=f"{where}.value", source=source
            )
        stats.append(
            Stat(value=value, label=_require(stat, "label", where, source), suffix=stat.get("suffix", ""))
        )

    return Profile(
        name=_require(data, "name", "", source),
        initials=data.get("initials") or "".join(part[0] for part in data.get("name", "").split()),
        headline=_require(data, "headline", "", source),
        badge=data.get("badge", ""),
        description=data.get("description", ""),
        about=_section(data, "about", source),
        skills=_section(data, "skills", source),
        experience=_section(data, "experience", source),
        education=_section(data, "education", source),
        contact=_section(data, "contact", source),
        footer=_require(data, "footer", "", source),
        lang=data.get("lang", "en"),
        nav=[_link(link, f"nav[{i}]", source) for i, link in enumerate(_list(data, "nav", "", source))],
        buttons=[
            _link(link, f"buttons[{i}]", source)
            for i, link in enumerate(_list(data, "buttons", "", source))
        ],
        stats=stats,
        source=source,
    )


def load_profile(path: Optional[Path] = None) -> Profile:
    """
    Load a profile YAML file.

    Args:
        path: Profile file (default: the packaged data/profile.yaml)

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidProfileError: If the content is not a valid profile
    """
    path = Path(path) if path is not None else DEFAULT_PROFILE_PATH
    if not path.exists():
        raise FileNotFoundError(f"Profile not found: {path}")

    data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
    if not isinstance(data, dict):
        raise InvalidProfileError("Profile must be a mapping at the top level", source=path)

    profile = profile_from_dict(data, source=path)
    log_profile_loaded(path, profile.name)
    return profile
