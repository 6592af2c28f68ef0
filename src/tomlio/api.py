# topmark:header:start
#
#   project      : tomlio
#   file         : api.py
#   file_relpath : src/tomlio/api.py
#   license      : MIT
#   copyright    : (c) 2025 The tomlio Authors
#
# topmark:header:end

"""TOML-bound load/save functions.

Thin wrappers that bind the generic helpers in `tomlio.streams` to the TOML
codec. Like `gzip.open`, `open` here shadows the builtin on purpose; import
the module (``import tomlio``) rather than star-importing it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tomlio import streams
from tomlio.codec import new_decoder, new_encoder
from tomlio.resolver import load_from_search_paths

if TYPE_CHECKING:
    import os
    import sys
    from collections.abc import Iterable
    from pathlib import Path

    if sys.version_info < (3, 11):
        from importlib.abc import Traversable
    else:
        from importlib.resources.abc import Traversable

    from tomlio.interfaces import BinaryStream


def open(v: Any, path: str | os.PathLike[str]) -> None:  # noqa: A001
    """Read ``v`` from the TOML file at ``path``."""
    streams.open_path(v, path, new_decoder)


def open_files(v: Any, paths: Iterable[str | os.PathLike[str]]) -> None:
    """Read ``v`` from several TOML files; later files override earlier keys."""
    streams.open_files(v, paths, new_decoder)


def open_fs(v: Any, root: Traversable, name: str) -> None:
    """Read ``v`` from the TOML resource ``name`` under ``root``.

    Example:
        ```python
        from importlib.resources import files

        tomlio.open_fs(settings, files("myapp.data"), "defaults.toml")
        ```
    """
    streams.open_fs(v, root, name, new_decoder)


def open_files_fs(v: Any, root: Traversable, names: Iterable[str]) -> None:
    """Read ``v`` from several TOML resources under ``root``, in order."""
    streams.open_files_fs(v, root, names, new_decoder)


def read(v: Any, stream: BinaryStream) -> None:
    """Read ``v`` from a binary stream containing TOML."""
    streams.read(v, stream, new_decoder)


def read_bytes(v: Any, data: bytes) -> None:
    """Read ``v`` from TOML bytes."""
    streams.read_bytes(v, data, new_decoder)


def save(v: Any, path: str | os.PathLike[str]) -> None:
    """Write ``v`` to ``path`` as TOML."""
    streams.save(v, path, new_encoder)


def write(v: Any, stream: BinaryStream) -> None:
    """Write ``v`` as TOML to a binary stream."""
    streams.write(v, stream, new_encoder)


def write_bytes(v: Any) -> bytes:
    """Return ``v`` encoded as TOML bytes."""
    return streams.write_bytes(v, new_encoder)


def open_from_paths(
    v: Any,
    file_name: str,
    paths: Iterable[str | os.PathLike[str]],
) -> Path:
    """Read ``v`` from the first ``file_name`` found on ``paths``.

    Returns:
        Path: The file that was loaded.

    Raises:
        NotFoundError: If no directory contains ``file_name``.
        OpenError: If the file cannot be opened.
        DecodeError: If the file is not valid TOML for ``v``.
    """
    return load_from_search_paths(v, file_name, paths, new_decoder)
