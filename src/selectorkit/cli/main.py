"""selectorkit CLI entry point: Click group with subcommands."""

import logging
import sys

import click

from selectorkit import __version__
from selectorkit.config import SelectorkitConfig

_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def configure_logging(config: SelectorkitConfig) -> None:
    """Send selectorkit log records to stderr at the configured level."""
    log = logging.getLogger("selectorkit")
    log.setLevel(config.log_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(config.log_format))
    log.handlers = [handler]


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    type=click.Choice(_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="SELECTORKIT_LOG_LEVEL",
    show_default=True,
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """selectorkit - build CSS-like selectors from part recipes."""
    config = SelectorkitConfig(log_level=log_level.upper())
    configure_logging(config)
    ctx.obj = config


# Import and register subcommands
from selectorkit.cli.render import render  # noqa: E402
from selectorkit.cli.inspect import inspect  # noqa: E402

cli.add_command(render)
cli.add_command(inspect)
