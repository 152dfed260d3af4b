"""CLI command: axcss compile -- translate an axcss file into CSS."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from axcss.compiler import Compiler
from axcss.config import CompilerConfig
from axcss.errors import CompileError


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write CSS to this file instead of stdout",
)
@click.option("--no-labels", is_flag=True, help="Omit /* Instance: ... */ headers")
def compile(source: str, output: str | None, no_labels: bool) -> None:
    """Compile SOURCE, following its @import directives.

    Exits with code 1 and lists every error when the file has syntax errors;
    no CSS is written in that case.
    """
    config = CompilerConfig(label_instances=not no_labels)
    try:
        css = Compiler(config).compile_file(Path(source))
    except CompileError as exc:
        click.echo(f"Compilation failed: {exc}", err=True)
        sys.exit(1)

    if output:
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(css, encoding=config.encoding)
        click.echo(f"Wrote {out_path}", err=True)
    else:
        click.echo(css, nl=False)
