#!/usr/bin/env python3
"""
Resume Tailoring CLI

Reads a resume file, extracts and validates a resume record, optionally compares
it against a pasted job posting, and renders it with a registered template.

Usage:
    # Render a resume with the default template
    python scripts/process_resume.py resume.pdf

    # Pick a template and output path
    python scripts/process_resume.py resume.tex -t academic -o outs/tailored.tex

    # Compare against a job posting saved as text
    python scripts/process_resume.py resume.docx --job job.txt

    # Only show what was extracted
    python scripts/process_resume.py resume.txt --dry-run
"""

from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional

import typer
from jinja2 import TemplateNotFound

from tailor.contexts.intake.documents import extract_resume_file
from tailor.contexts.intake.exceptions import (
    DocumentDecodeError,
    RecordValidationError,
    UnsupportedSourceError,
)
from tailor.contexts.intake.job_parser import extract_job
from tailor.contexts.intake.validator import validate
from tailor.contexts.targeting.relevance import analyze_relevance
from tailor.contexts.templating.latex_generator import render
from tailor.contexts.templating.logger import setup_templating_logger
from tailor.utils.logger import LOGS_PATH

app = typer.Typer(
    help="Extract a resume, optionally target it at a job, and render it to LaTeX",
    add_completion=False,
)


@app.command()
def main(
    resume_file: Annotated[
        Path,
        typer.Argument(
            help="Resume file (.pdf, .docx, .tex, .txt)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    template_id: Annotated[
        str, typer.Option("--template", "-t", help="Registered template id")
    ] = "modern",
    output_file: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Output .tex file (defaults to <resume>_<template>.tex next to the input)",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    job_file: Annotated[
        Optional[Path],
        typer.Option(
            "--job",
            "-j",
            help="Job posting saved as plain text, for a relevance report",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", "-n", help="Extract and report without writing files")
    ] = False,
):
    """Process a resume file end to end."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = setup_templating_logger(LOGS_PATH / f"process_{timestamp}", template_id=template_id)
    typer.echo(f"Log file: {log_file}")

    try:
        draft = extract_resume_file(resume_file)
        resume = validate(draft, "resume")
    except (UnsupportedSourceError, DocumentDecodeError, RecordValidationError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"\nExtracted: {resume.identity.name or '(no name found)'}")
    typer.echo(f"  Confidence: {resume.metadata.extraction_confidence:.2f}")
    typer.echo(f"  Experience entries: {len(resume.experience)}")
    typer.echo(f"  Education entries: {len(resume.education)}")
    typer.echo(f"  Projects: {len(resume.projects)}")
    typer.echo(f"  Skills: {len(resume.skills.flattened())}")

    if job_file:
        job = validate(extract_job(job_file.read_text(encoding="utf-8")), "job")
        relevance = analyze_relevance(resume, job)
        typer.echo(f"\n=== Relevance: {job.role_title or job_file.name} ===")
        typer.echo(f"  Matching skills: {', '.join(relevance.matching_skills) or '(none)'}")
        typer.echo(f"  Missing skills: {', '.join(relevance.missing_skills) or '(none)'}")
        typer.echo(f"  Matching keywords: {', '.join(relevance.matching_keywords) or '(none)'}")
        suggestions = relevance.emphasis_suggestions
        typer.echo(f"  Emphasize experience entries: {suggestions.experiences}")
        typer.echo(f"  Emphasize projects: {suggestions.projects}")

    if dry_run:
        typer.echo("\n(dry run, nothing written)")
        return

    try:
        latex = render(resume, template_id)
    except TemplateNotFound as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    output_file = output_file or resume_file.with_name(f"{resume_file.stem}_{template_id}.tex")
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(latex, encoding="utf-8")
    typer.echo(f"\nWrote {output_file}")


if __name__ == "__main__":
    app()
