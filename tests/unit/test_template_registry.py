"""Unit tests for TemplateRegistry class."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound

from folio.contexts.composition.registries import TemplateRegistry


@pytest.mark.unit
def test_template_registry_init():
    registry = TemplateRegistry()
    assert registry.templates_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
@pytest.mark.parametrize(
    "name",
    ["base", "sections/hero", "sections/about", "sections/skills", "sections/experience",
     "sections/education", "sections/contact", "sections/footer"],
)
def test_every_page_template_loads(name):
    registry = TemplateRegistry()
    assert registry.get_template(name) is not None
    assert registry.is_cached(name)


@pytest.mark.unit
def test_template_caching():
    registry = TemplateRegistry()
    template1 = registry.get_template("sections/footer")
    template2 = registry.get_template("sections/footer")
    assert template1 is template2


@pytest.mark.unit
def test_get_template_not_found():
    registry = TemplateRegistry()
    with pytest.raises(TemplateNotFound, match="nonexistent"):
        registry.get_template("sections/nonexistent")


@pytest.mark.unit
def test_get_template_path():
    registry = TemplateRegistry()
    path = registry.get_template_path("sections/hero")

    assert isinstance(path, Path)
    assert path.name == "hero.html.jinja"
    assert path.exists()


@pytest.mark.unit
def test_clear_cache():
    registry = TemplateRegistry()
    registry.get_template("sections/footer")
    assert len(registry._cache) == 1

    registry.clear_cache()
    assert len(registry._cache) == 0


@pytest.mark.unit
def test_autoescape(tmp_path):
    """Profile text is data, never markup."""
    (tmp_path / "probe.html.jinja").write_text("<p>{{ text }}</p>")
    registry = TemplateRegistry(tmp_path)

    result = registry.get_template("probe").render(text="<script>alert(1)</script> & co")
    assert "<script>" not in result
    assert "&lt;script&gt;" in result
    assert "&amp; co" in result
