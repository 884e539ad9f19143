"""surfacecss CLI entry point: Click group with subcommands."""

import logging

import click

from surfacecss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="surfacecss")
@click.option("--verbose", "-v", is_flag=True, help="Log parser and validation details")
def cli(verbose: bool) -> None:
    """surfacecss - turn effect CSS back into validated settings."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from surfacecss.cli.parse import parse  # noqa: E402
from surfacecss.cli.generate import generate, presets  # noqa: E402

cli.add_command(parse)
cli.add_command(generate)
cli.add_command(presets)
