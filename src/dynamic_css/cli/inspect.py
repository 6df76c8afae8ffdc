"""CLI command: dynamic-css inspect -- display the settings in a file."""

from __future__ import annotations

import sys

import click

from dynamic_css.errors import DescriptorError
from dynamic_css.loader import load_file


@click.command()
@click.argument("settings_file", type=click.Path(exists=True))
@click.option("--name", default=None, help="Only show CSS properties with this name")
def inspect(settings_file: str, name: str | None) -> None:
    """Show each setting with its CSS properties, selector groups and modifiers."""
    try:
        registry = load_file(settings_file)
    except DescriptorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    for setting in registry:
        props = setting.get_css_props() if name is None else setting.filter_by_name(name)
        click.echo(
            f"Setting: {setting.id}  default={setting.value()!r}  "
            f"transport={setting.transport.value}"
        )
        for prop in props:
            line = f"  {prop.name}"
            if prop.has_modifier:
                line += f"  modifier={prop.modifier!r}"
            click.echo(line)
            for key, selectors in prop.groups():
                click.echo(f"    {key}: {', '.join(selectors)}")
        click.echo()
