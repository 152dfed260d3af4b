"""axcss CLI entry point: Click group with subcommands."""

import logging

import click

from axcss import __version__

_LEVEL_STYLES = {
    logging.DEBUG: ("·", "bright_black"),
    logging.INFO: ("ℹ", "blue"),
    logging.WARNING: ("⚠", "yellow"),
    logging.ERROR: ("✗", "red"),
    logging.CRITICAL: ("✗", "red"),
}


class ClickHandler(logging.Handler):
    """Log handler that writes coloured records to stderr through click."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            symbol, colour = _LEVEL_STYLES.get(record.levelno, ("", None))
            click.echo(click.style(f"{symbol} {self.format(record)}", fg=colour), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(verbose: bool = False) -> None:
    logger = logging.getLogger("axcss")
    for handler in list(logger.handlers):
        if isinstance(handler, ClickHandler):
            logger.removeHandler(handler)
    logger.addHandler(ClickHandler())
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.group()
@click.version_option(version=__version__, prog_name="axcss")
@click.option("-v", "--verbose", is_flag=True, help="Show debug output")
def cli(verbose: bool) -> None:
    """axcss - compile component-based CSS into plain CSS."""
    configure_logging(verbose)


# Import and register subcommands
from axcss.cli.compile import compile  # noqa: E402
from axcss.cli.analyze import analyze  # noqa: E402

cli.add_command(compile)
cli.add_command(analyze)
