"""dynamic-css CLI entry point: Click group with subcommands."""

import logging

import click

from dynamic_css import __version__


@click.group()
@click.version_option(version=__version__, prog_name="dynamic-css")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """dynamic-css - render CSS from customizer setting descriptors."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from dynamic_css.cli.render import render  # noqa: E402
from dynamic_css.cli.validate import validate  # noqa: E402
from dynamic_css.cli.inspect import inspect  # noqa: E402

cli.add_command(render)
cli.add_command(validate)
cli.add_command(inspect)
