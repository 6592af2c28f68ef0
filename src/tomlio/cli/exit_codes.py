# topmark:header:start
#
#   project      : tomlio
#   file         : exit_codes.py
#   file_relpath : src/tomlio/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 The tomlio Authors
#
# topmark:header:end

"""Exit codes for the tomlio CLI.

Values follow the BSD `sysexits` convention so other tooling can interpret
failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the tomlio CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        DECODE_ERROR: The file is not valid TOML. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: The file is not on any search path. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: The file could not be opened or read. Mirrors BSD ``EX_IOERR (74)``.
    """

    SUCCESS = 0
    FAILURE = 1
    DECODE_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
