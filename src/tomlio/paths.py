# topmark:header:start
#
#   project      : tomlio
#   file         : paths.py
#   file_relpath : src/tomlio/paths.py
#   license      : MIT
#   copyright    : (c) 2025 The tomlio Authors
#
# topmark:header:end

"""Pure helpers for locating a file on an ordered list of directories.

Search order is priority order: the first directory that contains the file
wins, regardless of later directories. These helpers only probe the
filesystem (``Path.is_file``); they never open or read files.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from tomlio.constants import ENV_SEARCH_PATH
from tomlio.logging import TomlioLogger, get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

logger: TomlioLogger = get_logger(__name__)


def _check_file_name(file_name: str) -> None:
    if not file_name:
        raise ValueError("file name must not be empty")
    if Path(file_name).is_absolute():
        raise ValueError(f"file name must be relative to the search paths (got {file_name!r})")


def find_files_on_paths(
    search_paths: Iterable[str | os.PathLike[str]],
    file_name: str,
) -> list[Path]:
    """Return every ``dir / file_name`` that exists, in search order.

    Args:
        search_paths (Iterable[str | os.PathLike[str]]): Directories, highest priority first.
            A directory listed more than once is only reported once.
        file_name (str): File name (or relative path) to look for.

    Returns:
        list[Path]: Existing regular files, ordered like ``search_paths``.

    Raises:
        ValueError: If ``file_name`` is empty or absolute.
    """
    _check_file_name(file_name)
    found: list[Path] = []
    seen: set[Path] = set()
    for raw in search_paths:
        directory = Path(raw)
        if directory in seen:
            continue
        seen.add(directory)
        candidate: Path = directory / file_name
        if candidate.is_file():
            logger.trace("Found %s", candidate)
            found.append(candidate)
        else:
            logger.trace("No %s in %s", file_name, directory)
    return found


def find_first_existing(
    search_paths: Iterable[str | os.PathLike[str]],
    file_name: str,
) -> Path | None:
    """Return the first ``dir / file_name`` that exists, or ``None``.

    Later directories are not probed once a match is found.

    Raises:
        ValueError: If ``file_name`` is empty or absolute.
    """
    _check_file_name(file_name)
    for raw in search_paths:
        candidate: Path = Path(raw) / file_name
        if candidate.is_file():
            logger.debug("Resolved %s to %s", file_name, candidate)
            return candidate
    logger.debug("No %s on search paths", file_name)
    return None


def search_paths_from_env(var: str = ENV_SEARCH_PATH) -> list[Path]:
    """Split an ``os.pathsep``-separated environment variable into directories.

    Empty entries are skipped; an unset variable yields an empty list.
    """
    raw: str = os.environ.get(var, "")
    return [Path(p) for p in raw.split(os.pathsep) if p.strip()]
