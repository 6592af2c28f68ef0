# topmark:header:start
#
#   project      : tomlio
#   file         : errors.py
#   file_relpath : src/tomlio/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The tomlio Authors
#
# topmark:header:end

"""Exceptions for the tomlio CLI.

Raise these in commands to exit with a standardized message and exit code.
`from_load_error` maps library load failures to the matching CLI error.
"""

from __future__ import annotations

import click

from tomlio.cli.exit_codes import ExitCode
from tomlio.errors import DecodeError, LoadError, NotFoundError, OpenError


class TomlioCliError(click.ClickException):
    """Base class for all tomlio CLI errors."""

    exit_code = ExitCode.FAILURE


class TomlioFileNotFoundError(TomlioCliError):
    """Error when the file is not found on any search path."""

    exit_code = ExitCode.FILE_NOT_FOUND


class TomlioIOError(TomlioCliError):
    """Error when the file was found but could not be read."""

    exit_code = ExitCode.IO_ERROR


class TomlioDecodeError(TomlioCliError):
    """Error when the file content is not valid TOML."""

    exit_code = ExitCode.DECODE_ERROR


def from_load_error(exc: LoadError) -> TomlioCliError:
    """Return the CLI error matching a library `LoadError`."""
    if isinstance(exc, NotFoundError):
        return TomlioFileNotFoundError(str(exc))
    if isinstance(exc, OpenError):
        return TomlioIOError(str(exc))
    if isinstance(exc, DecodeError):
        return TomlioDecodeError(str(exc))
    return TomlioCliError(str(exc))
