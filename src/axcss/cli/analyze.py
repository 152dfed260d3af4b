"""CLI command: axcss analyze -- report diagnostics for an axcss file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from axcss.model.diagnostic import Severity
from axcss.validation import analyze as run_analyze


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
def analyze(source: str) -> None:
    """Run the static analyzer on SOURCE without compiling it.

    Prints diagnostics (errors, then warnings) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    src_path = Path(source)
    diagnostics = run_analyze(src_path.read_text(encoding="utf-8"))

    if not diagnostics:
        click.echo(f"OK: {src_path.name} has no issues (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]

    for diag in diagnostics:
        click.echo(str(diag))
        if diag.suggestion:
            click.echo(f"    hint: {diag.suggestion}")

    click.echo()
    click.echo(f"Summary: {len(errors)} error(s), {len(warnings)} warning(s)")

    if errors:
        sys.exit(1)
    sys.exit(0)
