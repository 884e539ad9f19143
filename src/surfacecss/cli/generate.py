"""CLI commands: surfacecss generate / presets -- render settings as CSS."""

from __future__ import annotations

import sys

import click

from surfacecss.cli.parse import MODE_CHOICE, load_settings
from surfacecss.generators import PRESETS, generate_css, get_preset
from surfacecss.model.settings import EffectMode, SettingsError


@click.command()
@click.argument("mode", type=MODE_CHOICE)
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON settings file (defaults to the mode defaults)",
)
@click.option("--preset", "preset_id", default=None, help="Start from a built-in preset")
def generate(mode: str, settings_path: str | None, preset_id: str | None) -> None:
    """Print the CSS rule for MODE built from settings or a preset."""
    effect_mode = EffectMode(mode)

    if preset_id is not None:
        try:
            preset = get_preset(preset_id)
        except KeyError:
            click.echo(f"Unknown preset: {preset_id}", err=True)
            sys.exit(1)
        if preset.mode is not effect_mode:
            click.echo(f"Preset {preset_id} is a {preset.mode} preset, not {effect_mode}", err=True)
            sys.exit(1)
        if settings_path is not None:
            click.echo("--preset and --settings are mutually exclusive", err=True)
            sys.exit(1)
        settings = preset.settings
    else:
        settings = load_settings(effect_mode, settings_path)

    try:
        generated = generate_css(effect_mode, settings)
    except SettingsError as exc:
        click.echo(f"Cannot generate CSS: {exc}", err=True)
        sys.exit(1)
    click.echo(generated.css)


@click.command()
@click.option("--mode", type=MODE_CHOICE, default=None, help="Only list presets for this mode")
def presets(mode: str | None) -> None:
    """List the built-in presets."""
    for preset in PRESETS:
        if mode is not None and preset.mode != mode:
            continue
        click.echo(f"{preset.id:<16} {preset.mode:<14} {preset.name}")
