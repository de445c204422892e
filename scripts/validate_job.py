#!/usr/bin/env python3
"""
Validate job posting parsing.

Shows the sections, metadata, skills, keywords and signals extracted from a job
posting saved as text (or markdown).

Usage:
    python scripts/validate_job.py job.txt
    python scripts/validate_job.py job.md --sections
"""

from datetime import datetime
from pathlib import Path

import typer

from tailor.contexts.intake.job_parser import extract_job
from tailor.contexts.intake.logger import setup_intake_logger
from tailor.contexts.intake.normalizer import preprocess_job_text
from tailor.contexts.intake.segmenter import segment_job
from tailor.contexts.intake.validator import validate
from tailor.utils.logger import LOGS_PATH

app = typer.Typer(help="Validate job posting parsing.")


@app.command()
def main(
    job_file: Path = typer.Argument(..., help="Job posting text file", exists=True, dir_okay=False),
    sections: bool = typer.Option(False, "--sections", help="Also print each section's content"),
):
    """Validate job parsing and display the extracted record."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    setup_intake_logger(LOGS_PATH / f"validate_job_{timestamp}", source=job_file.name)

    text = job_file.read_text(encoding="utf-8")
    job = validate(extract_job(text), "job")

    typer.echo(f"Loading {job_file.name}")

    # Metadata
    typer.echo("\n=== Metadata ===")
    typer.echo(f"  role_title: {job.role_title or '(none detected)'}")
    typer.echo(f"  company: {job.company or '(none detected)'}")
    typer.echo(f"  level: {job.level or '(none detected)'}")
    typer.echo(f"  location: {job.location or '(none detected)'}")
    typer.echo(f"  visa_constraints: {job.visa_constraints or '(none detected)'}")

    # Sections
    found = segment_job(preprocess_job_text(text))
    typer.echo(f"\n=== Sections ({len(found)}) ===")
    for name, content in found.items():
        lines = content.count("\n") + 1
        typer.echo(f"  {name}: {lines} lines, {len(content)} chars")
        if sections:
            for line in content.split("\n"):
                typer.echo(f"    | {line}")

    typer.echo(f"\n=== Responsibilities ({len(job.responsibilities)}) ===")
    for item in job.responsibilities:
        typer.echo(f"  - {item}")

    typer.echo("\n=== Skills ===")
    typer.echo(f"  required: {', '.join(job.required_skills) or '(none)'}")
    typer.echo(f"  preferred: {', '.join(job.preferred_skills) or '(none)'}")

    typer.echo(f"\n=== Keywords ({len(job.keywords)}) ===")
    typer.echo(f"  {', '.join(job.keywords)}")

    typer.echo("\n=== Signals ===")
    for name, value in job.signals.model_dump().items():
        typer.echo(f"  {name}: {'yes' if value else 'no'}")

    if not job.role_title:
        typer.echo("\nWARNING: No role title found in the first lines", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
