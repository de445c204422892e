"""
Template Registry

Static catalog of the resume templates a record can be rendered with. The
catalog is read from templates.yaml with OmegaConf, validated into frozen
TemplateSpec models once at import, and never mutated afterwards.

Set TEMPLATE_CATALOG_PATH to load a different catalog file.
"""

import os
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from dotenv import load_dotenv
from jinja2 import TemplateNotFound
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError

from tailor.contexts.templating.exceptions import TemplateCatalogError
from tailor.contexts.templating.logger import _log_debug

load_dotenv()
DEFAULT_CATALOG_PATH = Path(__file__).parent / "templates.yaml"
TEMPLATE_CATALOG_PATH = Path(os.getenv("TEMPLATE_CATALOG_PATH", str(DEFAULT_CATALOG_PATH)))


class TemplateSchema(BaseModel):
    model_config = ConfigDict(frozen=True)

    required_fields: List[str] = Field(default_factory=list)
    sections: List[str] = Field(default_factory=list)


class TemplateConstraints(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_bullets: Optional[PositiveInt] = None
    max_chars_per_section: Optional[PositiveInt] = None
    page_limit: int = Field(1, ge=1, le=2)


class TemplateSpec(BaseModel):
    """
    One registered template.

    The YAML key "schema" is exposed as .structure (BaseModel reserves .schema).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(min_length=1)
    name: str
    description: str = ""
    structure: TemplateSchema = Field(default_factory=TemplateSchema, alias="schema")
    slots: Dict[str, str] = Field(default_factory=dict)
    constraints: TemplateConstraints = Field(default_factory=TemplateConstraints)


def load_template_catalog(catalog_path: Path = None) -> Mapping[str, TemplateSpec]:
    """
    Load and validate a template catalog YAML.

    Args:
        catalog_path: Catalog file (defaults to TEMPLATE_CATALOG_PATH)

    Returns:
        Read-only mapping of template id -> TemplateSpec, in catalog order

    Raises:
        TemplateCatalogError: If the file is unreadable, an entry is invalid,
            or ids repeat
    """
    catalog_path = Path(catalog_path or TEMPLATE_CATALOG_PATH)

    try:
        raw = OmegaConf.to_container(OmegaConf.load(catalog_path), resolve=True)
    except (OSError, OmegaConfBaseException) as e:
        raise TemplateCatalogError(catalog_path, [str(e)]) from e

    entries = raw.get("templates") if isinstance(raw, dict) else None
    if not isinstance(entries, list):
        raise TemplateCatalogError(catalog_path, ["missing top-level 'templates' list"])

    specs: Dict[str, TemplateSpec] = {}
    problems = []
    for position, entry in enumerate(entries):
        try:
            spec = TemplateSpec.model_validate(entry)
        except ValidationError as e:
            problems.extend(
                f"templates[{position}].{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            )
            continue
        if spec.id in specs:
            problems.append(f"templates[{position}].id: duplicate id '{spec.id}'")
            continue
        specs[spec.id] = spec

    if problems:
        raise TemplateCatalogError(catalog_path, problems)

    _log_debug(f"Loaded {len(specs)} templates from {catalog_path}")
    return MappingProxyType(specs)


TEMPLATE_REGISTRY: Mapping[str, TemplateSpec] = load_template_catalog()


def list_templates() -> List[TemplateSpec]:
    """All registered templates in catalog order."""
    return list(TEMPLATE_REGISTRY.values())


def get_template(template_id: str) -> TemplateSpec:
    """
    Look up a registered template.

    Raises:
        TemplateNotFound: If the id is not registered (no fallback is substituted)
    """
    try:
        return TEMPLATE_REGISTRY[template_id]
    except KeyError:
        raise TemplateNotFound(
            template_id,
            message=f"Unknown template id '{template_id}' (available: {', '.join(TEMPLATE_REGISTRY)})",
        ) from None
