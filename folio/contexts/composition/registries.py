"""
Template registry for page composition.

Loads and caches the Jinja2 HTML templates: the document shell (base) and one
template per page section (sections/{name}).
"""

from pathlib import Path
from typing import Dict

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
    select_autoescape,
)

from folio.contexts.composition.defaults import TEMPLATES_PATH

TEMPLATE_SUFFIX = ".html.jinja"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for HTML generation.

    Templates are stored in folio/contexts/composition/templates/ as
    {name}.html.jinja, with sections under sections/{section}.html.jinja.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Base path for templates. Defaults to the packaged templates/
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=select_autoescape(enabled_extensions=("html", "jinja"), default=True),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a template by name (e.g., 'base', 'sections/hero'), loading and caching it.

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        template_path = f"{name}{TEMPLATE_SUFFIX}"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for '{name}' at {self.templates_path / template_path}"
            ) from e

        self._cache[name] = template
        return template

    def get_template_path(self, name: str) -> Path:
        return self.templates_path / f"{name}{TEMPLATE_SUFFIX}"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        return name in self._cache
