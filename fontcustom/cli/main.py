"""
Main CLI entry point for fontcustom.
"""

import json
import logging
import sys
from pathlib import Path

import click

from fontcustom import __version__
from fontcustom.config.options import EXAMPLE_OPTIONS, OptionKey
from fontcustom.core.errors import FontcustomError
from fontcustom.utils.logging import logger


@click.group()
@click.version_option(version=__version__)
def cli():
    """Font Custom: icon fonts from SVG vectors."""
    pass


@cli.command()
@click.argument("input_dir", metavar="INPUT", required=False)
@click.option(
    "-o",
    "--output",
    default=EXAMPLE_OPTIONS[OptionKey.OUTPUT],
    show_default=True,
    help="Where generated files are saved.",
)
@click.option(
    "-c",
    "--config",
    default=EXAMPLE_OPTIONS[OptionKey.CONFIG],
    show_default=True,
    help="Path or directory of fontcustom.yml.",
)
@click.option(
    "-m",
    "--manifest",
    default=EXAMPLE_OPTIONS[OptionKey.MANIFEST],
    show_default=True,
    help="Path of the manifest from previous compiles.",
)
@click.option(
    "--project-root",
    default=EXAMPLE_OPTIONS[OptionKey.PROJECT_ROOT],
    show_default=True,
    help="Root that relative paths are resolved from.",
)
@click.option("-f", "--font-name", default=None, help="Font name, also used in file names.")
@click.option(
    "-t",
    "--templates",
    multiple=True,
    help="Templates to generate: preview, css, scss, scss-rails, bootstrap, "
    "bootstrap-scss, bootstrap-ie7, bootstrap-ie7-scss or a custom file. Repeatable.",
)
@click.option("-s", "--css-selector", default=None, help="CSS selector format.")
@click.option("-p", "--preprocessor-path", default=None, help="Font path for CSS preprocessors.")
@click.option("-A", "--autowidth", is_flag=True, help="Trim glyph widths to fit the vectors.")
@click.option("-h", "--no-hash", is_flag=True, help="Generate fonts without asset-busting hashes.")
@click.option("-F", "--force", is_flag=True, help="Regenerate even if nothing changed.")
@click.option("-d", "--debug", is_flag=True, help="Show debug messages.")
@click.option("-q", "--quiet", is_flag=True, help="Hide status messages.")
def options(input_dir, **raw):
    """Resolve the effective options for INPUT and print them as JSON."""
    from fontcustom.core.manifest import read_manifest_options
    from fontcustom.core.options import OptionsResolver

    if raw["debug"]:
        logger.setLevel(logging.DEBUG)
    elif raw["quiet"]:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.INFO)

    cli_options = dict(raw, input=input_dir)
    cli_options["templates"] = [
        name for value in raw["templates"] for name in value.split()
    ] or None

    resolver = OptionsResolver()
    try:
        manifest_options = read_manifest_options(resolver.locate_manifest(cli_options))
        resolved = resolver.resolve(cli_options, manifest_options)
    except FontcustomError as e:
        logger.error(str(e))
        sys.exit(1)

    click.echo(json.dumps(resolved.to_dict(), indent=2))


@cli.command("config")
@click.argument(
    "directory",
    required=False,
    default=".",
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option("-F", "--force", is_flag=True, help="Overwrite an existing fontcustom.yml.")
def config_command(directory, force):
    """Generate a starter fontcustom.yml in DIRECTORY."""
    from fontcustom.operations.config import generate_config

    if generate_config(directory, force=force) is None:
        sys.exit(1)


if __name__ == "__main__":
    cli()
