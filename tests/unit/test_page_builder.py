"""Unit tests for page composition in interactive and print modes."""

import re

import pytest

from folio.contexts.composition import PageComposer, TemplateRenderError, load_profile
from folio.contexts.composition.registries import TemplateRegistry


@pytest.fixture(scope="module")
def profile():
    return load_profile()


@pytest.fixture(scope="module")
def interactive_html(profile):
    return PageComposer(profile, "interactive").compose()


@pytest.fixture(scope="module")
def print_html(profile):
    return PageComposer(profile, "print").compose()


@pytest.mark.unit
def test_unknown_mode(profile):
    with pytest.raises(ValueError, match="Unknown mode"):
        PageComposer(profile, "slideshow")


@pytest.mark.unit
@pytest.mark.parametrize("section", ["hero", "about", "skills", "experience", "education", "contact"])
def test_all_sections_present(interactive_html, print_html, section):
    assert f'id="{section}"' in interactive_html
    assert f'id="{section}"' in print_html


@pytest.mark.unit
def test_section_order(interactive_html):
    positions = [
        interactive_html.index(f'id="{section}"')
        for section in ["hero", "about", "skills", "experience", "education", "contact"]
    ]
    assert positions == sorted(positions)
    assert interactive_html.index("<footer>") > positions[-1]


@pytest.mark.unit
def test_interactive_elements_start_hidden(interactive_html):
    assert 'style="opacity: 1' not in interactive_html
    assert interactive_html.count("data-reveal") == interactive_html.count('style="opacity: 0')
    assert "transition: all 0.6s ease 0.1s" in interactive_html


@pytest.mark.unit
def test_interactive_counters_typewriter_and_bars(interactive_html):
    assert 'data-end="10"' in interactive_html
    assert 'data-suffix="+"' in interactive_html
    assert re.search(r'data-counter[^>]*data-end="10"[^>]*>0\+</span>', interactive_html)
    assert 'data-text="Consultant Cybersécurité &amp; GRC"' in interactive_html
    assert 'data-delay="800"' in interactive_html
    assert 'class="caret"' in interactive_html
    assert 'data-level="95"' in interactive_html
    assert "width: 0%" in interactive_html
    assert '<script src="animations.js" defer></script>' in interactive_html


@pytest.mark.unit
def test_print_mode_shows_terminal_state(print_html, profile):
    assert "data-reveal" not in print_html
    assert 'style="opacity: 0' not in print_html
    assert "<script" not in print_html
    assert "<span>Consultant Cybersécurité &amp; GRC</span>" in print_html
    for stat in profile.stats:
        assert f"<span>{stat.value}{stat.suffix}</span>" in print_html
    for category in profile.skills.categories:
        for skill in category.skills:
            assert f"width: {skill.level}%" in print_html


@pytest.mark.unit
def test_skill_bar_delays_cascade(interactive_html):
    delays = re.findall(r'data-skill-bar data-level="\d+" data-delay="(\d+)"', interactive_html)
    assert delays[:4] == ["0", "50", "100", "150"]
    assert delays[4:8] == ["100", "150", "200", "250"]


@pytest.mark.unit
def test_timeline_entries_stagger_by_200ms(interactive_html):
    education = interactive_html[interactive_html.index('id="education"'):]
    education = education[: education.index("</section>")]
    assert "ease 0.2s" in education
    assert "ease 0.4s" in education


@pytest.mark.unit
def test_profile_text_is_escaped():
    profile = load_profile()
    profile.footer = "<b>bold</b>"
    html = PageComposer(profile, "print").render_section("footer")
    assert "&lt;b&gt;bold&lt;/b&gt;" in html


@pytest.mark.unit
def test_render_errors_are_wrapped(tmp_path, profile):
    (tmp_path / "sections").mkdir()
    (tmp_path / "sections" / "footer.html.jinja").write_text("{{ profile.missing_field }}")
    composer = PageComposer(profile, "print", registry=TemplateRegistry(tmp_path))

    with pytest.raises(TemplateRenderError) as exc_info:
        composer.render_section("footer")
    assert exc_info.value.template_name == "sections/footer"


@pytest.mark.unit
def test_write(tmp_path, profile):
    path = PageComposer(profile, "print").write(tmp_path / "out" / "cv.html")
    assert path.exists()
    assert path.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")


@pytest.mark.unit
def test_scroll_tunables_emitted_for_browser(interactive_html, print_html):
    from folio.contexts.animation.defaults import (
        PARALLAX_FACTOR,
        POINTER_FACTOR,
        SCROLLED_THRESHOLD_PX,
    )

    body = re.search(r"<body[^>]*>", interactive_html).group(0)
    assert f'data-scrolled-threshold="{SCROLLED_THRESHOLD_PX:g}"' in body
    assert f'data-parallax-factor="{PARALLAX_FACTOR:g}"' in body
    assert f'data-pointer-factor="{POINTER_FACTOR:g}"' in body
    assert re.search(r"<body[^>]*>", print_html).group(0) == "<body>"


@pytest.mark.unit
def test_print_snapshot_types_full_headline_after_delay(profile):
    composer = PageComposer(profile, "print")
    assert str(composer.typewriter("abcdef", delay=800)) == "<span>abcdef</span>"
    assert 'width: 95%' in str(composer.skill_bar(95, delay=350))
