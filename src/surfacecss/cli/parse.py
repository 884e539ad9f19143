"""CLI command: surfacecss parse -- read effect CSS back into settings."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import IO

import click

from surfacecss.engine import parse_and_validate_css
from surfacecss.model.diagnostic import Severity
from surfacecss.model.result import ParseResult
from surfacecss.model.settings import (
    DEFAULT_SETTINGS,
    EffectMode,
    Settings,
    SettingsError,
    settings_from_dict,
    settings_to_dict,
)

MODE_CHOICE = click.Choice([mode.value for mode in EffectMode])


def load_settings(mode: EffectMode, path: str | None) -> Settings:
    """Read a JSON settings file for *mode*; the mode defaults when *path* is None.

    Exits with code 1 when the file is not valid JSON or not valid settings.
    """
    if path is None:
        return DEFAULT_SETTINGS[mode]
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise SettingsError("settings file must hold a JSON object")
        return settings_from_dict(mode, data)
    except (json.JSONDecodeError, SettingsError) as exc:
        click.echo(f"Invalid settings file {path}: {exc}", err=True)
        sys.exit(1)


def _print_report(result: ParseResult) -> None:
    for diag in result.diagnostics:
        click.echo(str(diag))

    if result.ghost_properties:
        click.echo()
        click.echo("Ignored properties:")
        for ghost in result.ghost_properties:
            where = f" (line {ghost.line})" if ghost.line is not None else ""
            click.echo(f"  {ghost.property}: {ghost.value}{where}")

    if result.clamped_fields:
        click.echo()
        click.echo(f"Clamped: {', '.join(result.clamped_fields)}")

    if result.accessibility is not None:
        a11y = result.accessibility
        click.echo()
        click.echo(
            f"Contrast: {a11y.contrast_ratio:.2f}:1 with {a11y.recommended_text_color} text "
            f"(AA {'pass' if a11y.passes_aa else 'fail'}, "
            f"AAA {'pass' if a11y.passes_aaa else 'fail'})"
        )

    if result.settings is not None:
        click.echo()
        click.echo("Settings:")
        for key, value in settings_to_dict(result.settings).items():
            click.echo(f"  {key} = {value}")

    errors = [d for d in result.diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in result.diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in result.diagnostics if d.severity is Severity.INFO]
    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info, "
        f"{len(result.ghost_properties)} ignored"
    )


@click.command()
@click.argument("mode", type=MODE_CHOICE)
@click.argument("cssfile", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--baseline",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON settings to merge onto (defaults to the mode defaults)",
)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def parse(mode: str, cssfile: IO[str], baseline: str | None, as_json: bool) -> None:
    """Parse effect CSS for MODE from CSSFILE (or stdin).

    Prints diagnostics, ignored properties, clamped fields, contrast and the
    resulting settings. Exits with code 1 when no settings could be produced.
    """
    effect_mode = EffectMode(mode)
    base = load_settings(effect_mode, baseline)

    result = parse_and_validate_css(effect_mode, cssfile.read(), base)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        _print_report(result)

    if result.settings is None:
        sys.exit(1)
