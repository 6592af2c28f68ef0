# topmark:header:start
#
#   project      : tomlio
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The tomlio Authors
#
# topmark:header:end

"""CLI test helpers.

`run_cli` invokes the Click group with Click's `CliRunner`. The CLI
reconfigures logging on every invocation, so logging is reset to TRACE after
each CLI test.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from tomlio import logging
from tomlio.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Re-apply the test-suite logging setup after each CLI invocation."""
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


def run_cli(argv: Sequence[str], *, env: dict[str, str] | None = None) -> Result:
    """Invoke the CLI and return the Click result.

    Args:
        argv (Sequence[str]): CLI argument vector, e.g. ``["find", "app.toml"]``.
        env (dict[str, str] | None): Extra environment variables for the invocation.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    return runner.invoke(cli, list(argv), env=env)
