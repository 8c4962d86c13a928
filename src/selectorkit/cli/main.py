"""selectorkit CLI entry point: Click group with subcommands."""

import logging

import click

from selectorkit import __version__
from selectorkit.config import SelectorConfig

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=SelectorConfig().log_level,
    show_default=True,
    help="Logging level (overridden by --verbose)",
)
def cli(verbose: bool, log_level: str) -> None:
    """selectorkit - CSS selector builder and shape JSON helpers."""
    config = SelectorConfig(log_level="DEBUG" if verbose else log_level.upper())
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from selectorkit.cli.build import build  # noqa: E402
from selectorkit.cli.shapes import area, shape  # noqa: E402

cli.add_command(build)
cli.add_command(area)
cli.add_command(shape)
