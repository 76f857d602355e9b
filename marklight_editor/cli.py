"""
Exports a markdown file with empty and decorative markdown stripped.
Prints the prepared text to stdout unless an output file is requested.
"""

from __future__ import annotations

from pathlib import Path

import click

from .cleanup import prepare_text
from .config import ConfigError, build_config
from .filesystem import get_max_file_size, normalize_filepath, read_markdown, write_atomic

__all__ = ["cli"]


@click.command()
@click.version_option(package_name="marklight-editor")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    help="Write the prepared text to this file",
)
@click.option("--in-place", is_flag=True, help="Overwrite FILEPATH with the prepared text")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def cli(filepath: str, output: str | None = None, in_place: bool = False):
    """
    Entry point for exporting prepared markdown.

    Args:
        filepath: Path to the Markdown file to process.
        output: Destination file for the prepared text.
        in_place: Whether to rewrite `filepath` itself.

    Raises:
        click.BadParameter: If the path is invalid, options conflict, or the
            configuration is invalid.
        click.ClickException: If the file cannot be read or written.

    Examples:
        marklight-editor notes.md --output notes.export.md
    """
    if output is not None and in_place:
        raise click.BadParameter("--output and --in-place are mutually exclusive")

    try:
        path = normalize_filepath(filepath)
    except ValueError as error:
        raise click.BadParameter(str(error)) from error

    try:
        config = build_config(path.parent)
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_file_size = get_max_file_size(default=config.max_file_size)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    try:
        text = read_markdown(path, max_file_size)
    except IOError as error:
        raise click.ClickException(str(error)) from error

    prepared = prepare_text(text)

    destination = path if in_place else (Path(output) if output is not None else None)
    if destination is None:
        click.echo(prepared, nl=False)
        return

    try:
        write_atomic(destination, prepared, warn=lambda message: click.echo(message, err=True))
    except IOError as error:
        raise click.ClickException(str(error)) from error


if __name__ == "__main__":
    cli()
