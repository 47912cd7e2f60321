"""
Composition Context

Responsibilities:
- Loads the profile (literal page content) from YAML
- Manages the HTML template system (composition/templates/)
- Wraps section elements in animation primitives for interactive or print output
- Writes the site files (index.html, cv.html, animations.js)

Owns: Profile data model, section templates, page assembly
Never: Decides animation timing (delegates to the animation context)
"""

from folio.contexts.composition.exceptions import InvalidProfileError, TemplateRenderError
from folio.contexts.composition.page_builder import PageComposer, build_site, build_timeline
from folio.contexts.composition.profile import Profile, load_profile, profile_from_dict
from folio.contexts.composition.registries import TemplateRegistry

__all__ = [
    "Profile",
    "load_profile",
    "profile_from_dict",
    "PageComposer",
    "build_site",
    "build_timeline",
    "TemplateRegistry",
    "InvalidProfileError",
    "TemplateRenderError",
]
