# topmark:header:start
#
#   project      : tomlio
#   file         : main.py
#   file_relpath : src/tomlio/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 The tomlio Authors
#
# topmark:header:end

"""tomlio command-line interface.

Commands:
    - ``find NAME``: list every match of NAME on the search paths, winner first.
    - ``show NAME``: load the winning file and print its content.
    - ``version``: print the installed version.

Search paths come from repeated ``-p/--path`` options, then from the
``TOMLIO_PATH`` environment variable, then default to the current directory.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from tomlio.cli.errors import TomlioFileNotFoundError, from_load_error
from tomlio.codec import dumps, new_decoder
from tomlio.constants import TOMLIO_VERSION
from tomlio.errors import LoadError
from tomlio.logging import (
    TomlioLogger,
    get_logger,
    level_for_verbosity,
    resolve_env_log_level,
    setup_logging,
)
from tomlio.paths import find_files_on_paths, search_paths_from_env
from tomlio.resolver import load_from_search_paths

if TYPE_CHECKING:
    from collections.abc import Sequence

logger: TomlioLogger = get_logger(__name__)

path_option = click.option(
    "-p",
    "--path",
    "paths",
    multiple=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory to search, highest priority first. Repeatable.",
)


def resolve_search_paths(paths: Sequence[Path]) -> list[Path]:
    """Return the effective search paths for a command.

    Args:
        paths (Sequence[Path]): Directories given on the command line.

    Returns:
        list[Path]: ``paths`` if any, else ``TOMLIO_PATH``, else the current directory.
    """
    if paths:
        return list(paths)
    return search_paths_from_env() or [Path.cwd()]


@click.group(name="tomlio")
@click.option("-v", "--verbose", count=True, help="Increase log verbosity (repeatable).")
@click.pass_context
def cli(ctx: click.Context, verbose: int) -> None:
    """Locate and load TOML files on search paths."""
    ctx.ensure_object(dict)
    level: int | None = resolve_env_log_level()
    if level is None:
        level = level_for_verbosity(verbose)
    setup_logging(level)
    ctx.obj["log_level"] = level


@cli.command(name="find", help="List every NAME found on the search paths, winner first.")
@click.argument("name")
@path_option
def find_command(name: str, paths: tuple[Path, ...]) -> None:
    """Print each match on its own line in priority order."""
    search: list[Path] = resolve_search_paths(paths)
    try:
        found: list[Path] = find_files_on_paths(search, name)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="NAME") from exc
    if not found:
        where: str = ", ".join(str(p) for p in search)
        raise TomlioFileNotFoundError(f"{name!r} not found on search paths: {where}")
    for path in found:
        click.echo(str(path))


@cli.command(name="show", help="Load the first NAME found on the search paths and print it.")
@click.argument("name")
@path_option
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["toml", "json"]),
    default="toml",
    show_default=True,
    help="Output format.",
)
def show_command(name: str, paths: tuple[Path, ...], output_format: str) -> None:
    """Resolve NAME, decode it into a dict and print it."""
    data: dict[str, Any] = {}
    try:
        source: Path = load_from_search_paths(
            data, name, resolve_search_paths(paths), new_decoder
        )
    except LoadError as exc:
        raise from_load_error(exc) from exc
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="NAME") from exc
    logger.info("Showing %s", source)

    if output_format == "json":
        click.echo(json.dumps(data, indent=2, default=str))
    else:
        click.echo(dumps(data), nl=False)


@cli.command(name="version", help="Show the installed version of tomlio.")
def version_command() -> None:
    """Print the installed version."""
    click.echo(TOMLIO_VERSION)
