#!/usr/bin/env python3
"""
Analyze job description text and print the extracted fields.

Usage:
    python scripts/analyze_job.py data/jobs/BackendEng_Acme.md
    python scripts/analyze_job.py data/jobs/*.md --json
    pbpaste | python scripts/analyze_job.py - --keywords
    python scripts/analyze_job.py posting.txt --config configs/analyzer.yaml --log-dir outs/logs/analyze
"""

import json
import sys
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv

from jobscan.contexts.intake import (
    AnalyzerConfigError,
    JobDescription,
    analyze,
    extract_all_keywords,
    load_settings,
)
from jobscan.contexts.intake.logger import setup_console_logger, setup_intake_logger
from jobscan.contexts.intake.settings import resolve_config_path, settings_overrides
from jobscan.utils.text_processing import indent_block, preview

load_dotenv()

STDIN_MARKER = "-"

app = typer.Typer(help="Extract structured fields from job descriptions.")


def read_input(path: Path) -> tuple[str, str]:
    """Return (label, text) for a file path or '-' for stdin."""
    if str(path) == STDIN_MARKER:
        return "<stdin>", sys.stdin.read()
    return path.name, path.read_text(encoding="utf-8")


def print_report(label: str, job: JobDescription, full: bool) -> None:
    """Print a human-readable report for one analyzed job."""
    typer.echo(f"\n=== {label} ===")
    typer.echo(f"  Title: {job.job_title}")
    typer.echo(f"  Company: {job.company_name or '(none found)'}")

    required = sorted(job.required_skill_set())
    preferred = sorted(job.preferred_skill_set())
    typer.echo(f"\n  Required skills ({len(required)}):")
    typer.echo(f"    {', '.join(required)}" if required else "    None")
    typer.echo(f"\n  Preferred skills ({len(preferred)}):")
    typer.echo(f"    {', '.join(preferred)}" if preferred else "    None")

    typer.echo("\n  Responsibilities:")
    if not job.responsibilities:
        typer.echo("    (no section found)")
    elif full:
        typer.echo(indent_block(job.responsibilities))
    else:
        typer.echo(f"    {preview(job.responsibilities)}")


@app.command()
def main(
    input_files: List[Path] = typer.Argument(
        ..., help="Job description files (use '-' to read from stdin)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as a JSON array"),
    keywords: bool = typer.Option(
        False, "--keywords", help="Print every mined keyword instead of the field report"
    ),
    full: bool = typer.Option(False, "--full", help="Show the full responsibilities excerpt"),
    config: Optional[Path] = typer.Option(
        None, "--config", help="Analyzer settings YAML (default: $JD_ANALYZER_CONFIG)"
    ),
    log_dir: Optional[Path] = typer.Option(
        None, "--log-dir", help="Write a detailed intake.log to this directory"
    ),
):
    """Analyze job descriptions and report title, company, skills and responsibilities."""
    try:
        settings = load_settings(config)
    except AnalyzerConfigError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    if log_dir:
        setup_intake_logger(
            log_dir,
            config_path=resolve_config_path(config),
            overrides=settings_overrides(settings),
            extra_provenance={"Input files": len(input_files)},
        )
    else:
        setup_console_logger()

    inputs = []
    for path in input_files:
        try:
            inputs.append(read_input(path))
        except FileNotFoundError:
            typer.echo(f"ERROR: File not found: {path}", err=True)
            raise typer.Exit(1)

    if keywords:
        for label, text in inputs:
            found = sorted(extract_all_keywords(text))
            typer.echo(f"\n=== {label} ({len(found)} keywords) ===")
            typer.echo(", ".join(found) if found else "(none)")
        return

    results = [(label, analyze(text, settings=settings, source=label)) for label, text in inputs]

    if as_json:
        payload = [{"source": label, **job.to_dict()} for label, job in results]
        typer.echo(json.dumps(payload, indent=2))
        return

    for label, job in results:
        print_report(label, job, full)

    typer.secho(f"\n✓ Analyzed {len(results)} job description(s)", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
