"""CLI command: dynamic-css validate -- check the descriptors of a settings file."""

from __future__ import annotations

import sys

import click

from dynamic_css.diagnostic import Severity
from dynamic_css.errors import DescriptorError
from dynamic_css.loader import load_file
from dynamic_css.validation import validate_registry


@click.command()
@click.argument("settings_file", type=click.Path(exists=True))
def validate(settings_file: str) -> None:
    """Load and validate the settings in SETTINGS_FILE.

    Prints diagnostics per setting and exits with code 1 if any errors are
    found, 0 otherwise.
    """
    try:
        registry = load_file(settings_file)
    except DescriptorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    errors = warnings = 0
    for setting_id, diagnostics in validate_registry(registry).items():
        for diag in diagnostics:
            click.echo(f"{setting_id}: {diag}")
        errors += sum(1 for d in diagnostics if d.severity is Severity.ERROR)
        warnings += sum(1 for d in diagnostics if d.severity is Severity.WARNING)

    if not errors and not warnings:
        click.echo(f"OK: {len(registry)} setting(s), 0 diagnostics")
        sys.exit(0)

    click.echo()
    click.echo(f"Summary: {errors} error(s), {warnings} warning(s)")
    sys.exit(1 if errors else 0)
