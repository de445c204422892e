"""Custom exceptions for templating context with template references."""

from pathlib import Path
from typing import Optional


class TemplateRenderError(Exception):
    """
    Exception raised when a registered template fails to render.

    Attributes:
        message: Error description
        template_id: Id of the template being rendered
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_id: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_id = template_id
        self.template_path = template_path
        self.original_error = original_error

        # Build enhanced error message
        parts = [message]

        if template_id and template_path:
            parts.append(f"\nTemplate: {template_path}")
            parts.append(f"Id: {template_id}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))


class TemplateCatalogError(ValueError):
    """
    Exception raised when the template catalog YAML is malformed.

    Attributes:
        catalog_path: Path to the catalog file
        problems: One description per offending entry or field
    """

    def __init__(self, catalog_path: Path, problems: list):
        self.catalog_path = catalog_path
        self.problems = problems

        parts = [f"Invalid template catalog: {catalog_path}"]
        parts.extend(f"  {problem}" for problem in problems)

        super().__init__("\n".join(parts))
