#!/usr/bin/env python3
"""
List registered resume templates.

Usage:
    python scripts/list_templates.py
    python scripts/list_templates.py --verbose
"""

import typer

from tailor.contexts.templating.template_registry import list_templates

app = typer.Typer(help="List registered resume templates.", add_completion=False)


@app.command()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show sections and slots"),
):
    """Print each template with its constraints."""
    for spec in list_templates():
        constraints = spec.constraints
        bullets = constraints.max_bullets or "-"
        typer.echo(
            f"{spec.id:<10} {spec.name:<22} pages={constraints.page_limit} max_bullets={bullets}"
        )
        if verbose:
            typer.echo(f"    {spec.description}")
            typer.echo(f"    sections: {', '.join(spec.structure.sections)}")
            typer.echo(f"    required: {', '.join(spec.structure.required_fields)}")
            for slot, group in spec.slots.items():
                typer.echo(f"    slot {slot}: {group}")


if __name__ == "__main__":
    app()
