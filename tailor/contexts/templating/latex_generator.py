"""
LaTeX Generator

Renders a validated resume record into a complete LaTeX document with one of
the registered templates.

Every string taken from the record is LaTeX-escaped before it reaches a
template, so resume content can never inject markup. Templates live under
template/types/{template_id}/template.tex.jinja and share the section macros in
template/structure/. Set TEMPLATE_TYPES_PATH to render from another template
directory with the same layout.
"""

import os
import re
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple, Union

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, TemplateNotFound

from tailor.contexts.intake.records import ResumeRecord
from tailor.contexts.intake.validator import validate
from tailor.contexts.templating.exceptions import TemplateRenderError
from tailor.contexts.templating.logger import _log_debug, log_render_result
from tailor.contexts.templating.template_registry import TemplateSpec, get_template
from tailor.utils.latex_tools import to_latex, to_latex_url
from tailor.utils.text_processing import set_max_consecutive_blank_lines

load_dotenv()
DEFAULT_TEMPLATE_PATH = Path(__file__).parent / "template"
TEMPLATE_TYPES_PATH = Path(os.getenv("TEMPLATE_TYPES_PATH", str(DEFAULT_TEMPLATE_PATH)))

# Skill categories in display order, with their headings
SKILL_GROUP_LABELS = (
    ("languages", "Languages"),
    ("frameworks", "Frameworks"),
    ("gpu_graphics", "GPU/Graphics"),
    ("systems_tools", "Tools"),
)

LINK_LABELS = {"linkedin": "LinkedIn", "github": "GitHub", "portfolio": "Portfolio"}

# Entry lists whose bullets are capped by the template's max_bullets
BULLETED_SECTIONS = ("experience", "projects")


def escape_for_latex(value: Any) -> Any:
    """
    Recursively LaTeX-escape every string in a JSON-like value.

    Example:
        >>> escape_for_latex({"bullets": ["Cut costs 30% & latency"]})
        {'bullets': ['Cut costs 30\\\\% \\\\& latency']}
    """
    if isinstance(value, str):
        return to_latex(value)
    if isinstance(value, list):
        return [escape_for_latex(item) for item in value]
    if isinstance(value, dict):
        return {key: escape_for_latex(item) for key, item in value.items()}
    return value


def link_label(kind: str, url: str) -> str:
    """Display text for a link: the service name, or the URL without its scheme."""
    if kind in LINK_LABELS:
        return LINK_LABELS[kind]
    return re.sub(r"^https?://(?:www\.)?", "", url).rstrip("/")


def prepare_links(links: List[Dict[str, str]]) -> List[Dict[str, str]]:
    """Escaped display label plus a safe \\href target for each link."""
    return [
        {
            "kind": link["kind"],
            "label": to_latex(link_label(link["kind"], link["url"])),
            "target": to_latex_url(link["url"]),
        }
        for link in links
    ]


def _prepare_entry(entry: Dict[str, Any]) -> Dict[str, Any]:
    links = entry.pop("links", None)
    prepared = escape_for_latex(entry)
    if links is not None:
        prepared["links"] = prepare_links(links)
    return prepared


class LaTeXRenderer:
    """Renders resume records with the registered Jinja2 LaTeX templates."""

    def __init__(self, template_base_path: Path = None):
        """
        Initialize the renderer.

        Args:
            template_base_path: Directory holding types/ and structure/.
                              Defaults to TEMPLATE_TYPES_PATH.
        """
        self.template_base_path = Path(template_base_path or TEMPLATE_TYPES_PATH)

        # Custom delimiters to avoid LaTeX brace conflicts
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_base_path)),
            variable_start_string="<<<",
            variable_end_string=">>>",
            block_start_string="<%%",
            block_end_string="%%>",
            comment_start_string="<#",
            comment_end_string="#>",
            undefined=StrictUndefined,
            # Preserve whitespace (important for LaTeX)
            trim_blocks=False,
            lstrip_blocks=False,
            keep_trailing_newline=True,
        )

    def get_template_path(self, template_id: str) -> Path:
        return self.template_base_path / "types" / template_id / "template.tex.jinja"

    def build_context(self, record: ResumeRecord, spec: TemplateSpec) -> Tuple[Dict[str, Any], int]:
        """
        Build the escaped template context for a record.

        Args:
            record: Validated resume record
            spec: Template the context is built for

        Returns:
            Tuple of (context dict, number of bullets dropped by max_bullets)
        """
        data = record.model_dump(mode="json")
        max_bullets = spec.constraints.max_bullets

        dropped = 0
        if max_bullets:
            for section in BULLETED_SECTIONS:
                for entry in data[section]:
                    dropped += max(0, len(entry["bullets"]) - max_bullets)
                    entry["bullets"] = entry["bullets"][:max_bullets]

        identity = _prepare_entry(data["identity"])
        identity["email_target"] = to_latex_url(data["identity"]["email"] or "")

        skill_groups = [
            {"label": label, "skills": escape_for_latex(data["skills"][category])}
            for category, label in SKILL_GROUP_LABELS
            if data["skills"][category]
        ]

        context = {
            "identity": identity,
            "summary": escape_for_latex(data["summary"]),
            "skill_groups": skill_groups,
            "experience": [_prepare_entry(entry) for entry in data["experience"]],
            "education": [_prepare_entry(entry) for entry in data["education"]],
            "projects": [_prepare_entry(entry) for entry in data["projects"]],
            "publications": [_prepare_entry(entry) for entry in data["publications"]],
            "certifications": [_prepare_entry(entry) for entry in data["certifications"]],
            "template": {
                "id": spec.id,
                "name": to_latex(spec.name),
                "page_limit": spec.constraints.page_limit,
            },
        }
        return context, dropped

    def render(self, resume: Union[ResumeRecord, Mapping], template_id: str) -> str:
        """
        Render a resume with a registered template.

        Args:
            resume: Validated record, or a (partial) draft mapping to validate first
            template_id: Registered template id

        Returns:
            Complete LaTeX document

        Raises:
            TemplateNotFound: If template_id is not registered or its file is missing
            RecordValidationError: If a draft mapping fails validation
            TemplateRenderError: If the template itself fails to render
        """
        spec = get_template(template_id)
        record = resume if isinstance(resume, ResumeRecord) else validate(resume, "resume")

        context, dropped = self.build_context(record, spec)
        template_path = self.get_template_path(template_id)

        try:
            template = self.env.get_template(f"types/{template_id}/template.tex.jinja")
            latex = template.render(**context)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                template_id, message=f"Template file missing for '{template_id}' at {template_path}"
            ) from e
        except TemplateError as e:
            raise TemplateRenderError(
                f"Failed to render template '{template_id}'",
                template_id=template_id,
                template_path=template_path,
                original_error=e,
            ) from e

        # Match normalization rules: at most one blank line in a row
        latex = set_max_consecutive_blank_lines(latex, max_consecutive=1)

        log_render_result(template_id, len(latex), dropped)
        return latex


_log_debug(f"Template directory: {TEMPLATE_TYPES_PATH}")
DEFAULT_RENDERER = LaTeXRenderer()


def render(resume: Union[ResumeRecord, Mapping], template_id: str) -> str:
    """
    Render a resume with a registered template using the default renderer.

    See LaTeXRenderer.render().
    """
    return DEFAULT_RENDERER.render(resume, template_id)
