"""
Templating Context

Responsibilities:
- Holds the static registry of resume templates and their constraints
- Renders validated resume records into complete LaTeX documents
- Escapes every resume string before it reaches a template
- Applies template constraints (bullets per entry)

Owns: Template catalog, Jinja2 LaTeX templates, escaping at the render boundary
Never: Extracts records from text or decides what content to emphasize
"""

from tailor.contexts.templating.latex_generator import LaTeXRenderer, render
from tailor.contexts.templating.template_registry import (
    TemplateSpec,
    get_template,
    list_templates,
)

__all__ = [
    # Registry
    "list_templates",
    "get_template",
    "TemplateSpec",
    # Rendering
    "render",
    "LaTeXRenderer",
]
