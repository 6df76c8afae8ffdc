"""CLI command: dynamic-css render -- print the CSS for a settings file."""

from __future__ import annotations

import sys

import click

from dynamic_css.errors import DescriptorError
from dynamic_css.loader import load_file
from dynamic_css.validation import ValidationError


def _parse_values(pairs: tuple[str, ...]) -> dict[str, str]:
    values: dict[str, str] = {}
    for pair in pairs:
        setting_id, sep, value = pair.partition("=")
        if not sep or not setting_id:
            raise click.BadParameter(
                f"expected ID=VALUE, got {pair!r}", param_hint="--value"
            )
        values[setting_id] = value
    return values


@click.command()
@click.argument("settings_file", type=click.Path(exists=True))
@click.option(
    "--value",
    "values",
    multiple=True,
    metavar="ID=VALUE",
    help="Current value for a setting (repeatable); defaults apply otherwise",
)
@click.option("--setting", "setting_id", default=None, help="Render only this setting")
@click.option("--strict", is_flag=True, help="Refuse to render settings that fail validation")
def render(
    settings_file: str, values: tuple[str, ...], setting_id: str | None, strict: bool
) -> None:
    """Render the CSS generated by every setting in SETTINGS_FILE."""
    store = _parse_values(values)
    try:
        registry = load_file(settings_file, values=store, strict=strict)
    except (DescriptorError, ValidationError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    unknown = sorted(set(store) - {s.id for s in registry})
    for name in unknown:
        click.echo(f"Warning: no setting named {name!r}", err=True)

    if setting_id is None:
        click.echo(registry.render_all(), nl=False)
        return

    setting = registry.get(setting_id)
    if setting is None:
        click.echo(f"Error: no setting named {setting_id!r}", err=True)
        sys.exit(1)
    click.echo(setting.render_css(), nl=False)
