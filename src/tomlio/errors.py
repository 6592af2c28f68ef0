# topmark:header:start
#
#   project      : tomlio
#   file         : errors.py
#   file_relpath : src/tomlio/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The tomlio Authors
#
# topmark:header:end

"""Exceptions raised by tomlio.

Load failures come in three distinguishable kinds so callers can react
differently, e.g. fall back to defaults on `NotFoundError` but abort on
`DecodeError`:

- `NotFoundError`: the file is not present on any search path.
- `OpenError`: the file exists but could not be opened or read.
- `DecodeError`: the content could not be decoded into the destination.

The underlying cause (``OSError``, ``tomlkit`` parse error, ...) is always
chained as ``__cause__``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class TomlioError(Exception):
    """Base class for all tomlio errors."""


class LoadError(TomlioError):
    """Base class for failures while loading an object.

    Attributes:
        path (Path | None): The file involved, or ``None`` for stream/bytes input.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path: Path | None = path


class NotFoundError(LoadError):
    """The requested file was not found on any of the search paths."""

    def __init__(self, file_name: str, search_paths: Sequence[Path]) -> None:
        where: str = ", ".join(str(p) for p in search_paths) or "<no search paths>"
        super().__init__(f"{file_name!r} not found on search paths: {where}")
        self.file_name: str = file_name
        self.search_paths: tuple[Path, ...] = tuple(search_paths)


class OpenError(LoadError):
    """The file exists but could not be opened or read."""


class DecodeError(LoadError):
    """The content could not be decoded into the destination object."""


class SaveError(TomlioError):
    """Base class for failures while saving an object.

    Attributes:
        path (Path | None): The target file, or ``None`` for stream/bytes output.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path: Path | None = path


class EncodeError(SaveError):
    """The value cannot be represented in the target format."""


class BindingError(ValueError):
    """A decoded table does not fit the shape of the destination object."""
