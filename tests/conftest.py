# topmark:header:start
#
#   project      : tomlio
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The tomlio Authors
#
# topmark:header:end

"""Pytest configuration for the tomlio test suite.

Sets logging to TRACE for every run and removes tomlio environment variables
so a developer's shell cannot change test outcomes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tomlio import logging
from tomlio.constants import ENV_LOG_LEVEL, ENV_SEARCH_PATH

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def clean_tomlio_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure TOMLIO_LOG_LEVEL and TOMLIO_PATH are unset during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv(ENV_SEARCH_PATH, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def write_file(path: Path, text: str) -> Path:
    """Write ``text`` to ``path`` (creating parent directories) and return ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
