"""Custom exceptions for the composition context."""

from pathlib import Path
from typing import Optional


class InvalidProfileError(ValueError):
    """
    Exception raised when profile data is missing required fields or has the wrong shape.

    Attributes:
        field: Dotted path of the offending field (e.g., 'skills.categories[1].title')
        source: File the profile was loaded from, if any
    """

    def __init__(self, message: str, field: Optional[str] = None, source: Optional[Path] = None):
        self.field = field
        self.source = source
        parts = [message]
        if field:
            parts.append(f"Field: {field}")
        if source:
            parts.append(f"Profile: {source}")
        super().__init__("\n".join(parts))


class TemplateRenderError(Exception):
    """
    Exception raised when template rendering fails.

    Attributes:
        message: Error description
        template_name: Name of the template being rendered
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_name = template_name
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if template_name and template_path:
            parts.append(f"\nTemplate: {template_path}")
            parts.append(f"Name: {template_name}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
