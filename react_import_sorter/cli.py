#!/usr/bin/env python3
"""Command-line interface for react-import-sorter using Click."""

from importlib import metadata
import logging
from pathlib import Path
import sys
from typing import Any
from typing import Dict

import click
from react_import_sorter import core
from react_import_sorter.config import read_sorter_config
from react_import_sorter.config import SorterConfig
from react_import_sorter.exceptions import ConfigError
from react_import_sorter.exceptions import NoMatchError
from react_import_sorter.exceptions import ParseError
from react_import_sorter.exceptions import SorterError
from react_import_sorter.rules import Origin
from react_import_sorter.rules import SortBy

try:
    VERSION = f"react-import-sorter {metadata.version('react_import_sorter')}"
except metadata.PackageNotFoundError:
    VERSION = "react-import-sorter"

SORT_CHOICES = click.Choice([s.value for s in SortBy], case_sensitive=False)
ORIGIN_CHOICES = click.Choice([o.value for o in Origin], case_sensitive=False)


def _load_config(root: Path, overrides: Dict[str, Any]) -> SorterConfig:
    """Read the project configuration under root and apply command-line overrides."""
    return read_sorter_config(str(root)).updated(**overrides)


def _handle_files(path: Path, overrides: Dict[str, Any], apply_changes: bool) -> int:
    """Process source files and report or fix unsorted imports.

    Args:
        path: File or directory to process.
        overrides: Configuration values given on the command line.
        apply_changes: If True, apply fixes in place.
    Returns:
        0 if no changes, 1 if changes required, 2 if error occurred.
    """
    root = path if path.is_dir() else path.parent
    try:
        config = _load_config(root, overrides)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 2

    exit_code = 0
    total_warnings = 0

    # Handle single file or directory
    if path.is_file():
        file_paths = [path]
    else:
        file_paths = list(core.iter_source_files(str(path)))

    for file_path in file_paths:
        try:
            modified, warnings = core.process_file(str(file_path), config, apply=apply_changes)
        except (SorterError, OSError, UnicodeDecodeError) as exc:
            logging.error("[%s] ERROR: %s", file_path, exc)
            exit_code = max(exit_code, 2)
            continue

        for lineno, msg in warnings:
            logging.warning("[%s] line %s: %s", file_path, lineno, msg)
            total_warnings += 1

        if modified:
            msg = "file updated." if apply_changes else "imports would be modified."
            logging.info("[%s] %s", file_path, msg)
            exit_code = max(exit_code, 1)

    if total_warnings:
        logging.info("Total warnings: %d", total_warnings)

    return exit_code


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Increase verbosity.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress non-error output.")
@click.option("--sorting-order", "classification_priority", multiple=True, type=ORIGIN_CHOICES,
              help="Import group to place first; repeat to order several groups.")
@click.option("--path-prefix", "path_prefixes", multiple=True,
              help="Path prefix treated as a project alias; repeatable.")
@click.option("--sort-by", type=SORT_CHOICES, default=None, help="Sort policy for import statements.")
@click.option("--sort-named-by", "sort_named_bindings_by", type=SORT_CHOICES, default=None,
              help="Sort policy for named bindings.")
@click.option("--sort-named/--no-sort-named", "sort_named_bindings", default=None,
              help="Sort the named bindings of each statement.")
@click.option("--separate-types/--no-separate-types", "separate_by_origin", default=None,
              help="Separate import groups with a blank line.")
@click.option("--separate-multiline/--no-separate-multiline", default=None,
              help="Insert a blank line before multi-line imports.")
@click.version_option(version=VERSION, prog_name="react-import-sorter CLI")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool, **options: Any) -> None:
    """Sort and group JavaScript/TypeScript imports."""
    # Configure logging only once
    if not logging.getLogger().handlers:
        if quiet:
            logging.basicConfig(level=logging.ERROR, format="%(message)s")
        else:
            logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(message)s")

    overrides = {name: value for name, value in options.items() if value not in (None, ())}
    ctx.obj = overrides


@cli.command(help="Report unsorted imports without modifying files.")
@click.argument("path", type=click.Path(exists=True, file_okay=True, dir_okay=True))
@click.pass_obj
def check(overrides: Dict[str, Any], path: str) -> None:
    exit_code = _handle_files(Path(path), overrides, apply_changes=False)
    sys.exit(exit_code)


@cli.command(help="Sort imports in place.")
@click.argument("path", type=click.Path(exists=True, file_okay=True, dir_okay=True))
@click.pass_obj
def fix(overrides: Dict[str, Any], path: str) -> None:
    exit_code = _handle_files(Path(path), overrides, apply_changes=True)
    sys.exit(exit_code)


@cli.command(help="Sort the imports read from SOURCE (stdin by default) and write the replacement to stdout.")
@click.option("--root", type=click.Path(exists=True, file_okay=False, dir_okay=True), default=".",
              help="Directory to read the project configuration from.")
@click.argument("source", type=click.File("r"), default="-")
@click.pass_obj
def sort(overrides: Dict[str, Any], root: str, source) -> None:
    selected_text = source.read()
    try:
        config = _load_config(Path(root), overrides)
        replacement = core.sort_imports(selected_text, config)
    except NoMatchError as exc:
        logging.error("%s", exc)
        click.echo(selected_text, nl=False)
        sys.exit(1)
    except (ParseError, ConfigError) as exc:
        logging.error("ERROR: %s", exc)
        sys.exit(2)
    click.echo(replacement)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
