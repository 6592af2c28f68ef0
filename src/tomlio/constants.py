# topmark:header:start
#
#   project      : tomlio
#   file         : constants.py
#   file_relpath : src/tomlio/constants.py
#   license      : MIT
#   copyright    : (c) 2025 The tomlio Authors
#
# topmark:header:end

"""tomlio constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    TOMLIO_VERSION: str = get_version("tomlio")
except PackageNotFoundError:  # running from a source checkout
    TOMLIO_VERSION = "0.0.0"

# Encoding used for every TOML document read or written.
TOML_ENCODING: str = "utf-8"

# Environment variables:
ENV_LOG_LEVEL: str = "TOMLIO_LOG_LEVEL"
ENV_SEARCH_PATH: str = "TOMLIO_PATH"
