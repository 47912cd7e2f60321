"""
Default layout values for page composition.

Stagger steps (ms) decide how elements within a section cascade in. Section heights
(px) are rough desktop estimates, used only to place elements when simulating the
page timeline outside a browser.
"""

from pathlib import Path
from typing import Dict

PACKAGE_DIR = Path(__file__).parent
DEFAULT_PROFILE_PATH = PACKAGE_DIR / "data" / "profile.yaml"
TEMPLATES_PATH = PACKAGE_DIR / "templates"
STATIC_PATH = PACKAGE_DIR / "static"
ANIMATIONS_SCRIPT = "animations.js"

MODES = ("interactive", "print")

# Reveal cascade, ms per element
STAGGER: Dict[str, int] = {
    "hero": 100,
    "about_base": 100,
    "about_card": 100,
    "skill_category": 100,
    "skill_item": 50,
    "timeline": 200,
    "contact": 200,
}

# Typewriter start delay for the hero headline
HEADLINE_TYPEWRITER_DELAY_MS = 800

# Estimated section heights for timeline simulation
SECTION_HEIGHTS: Dict[str, int] = {
    "hero": 900,
    "about": 700,
    "skills": 1000,
    "experience": 650,
    "education": 800,
    "contact": 500,
    "footer": 120,
}
SECTION_ORDER = ("hero", "about", "skills", "experience", "education", "contact", "footer")
HEADING_HEIGHT = 80
ROW_HEIGHT = 90
SKILL_ROW_HEIGHT = 44
