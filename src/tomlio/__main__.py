# topmark:header:start
#
#   project      : tomlio
#   file         : __main__.py
#   file_relpath : src/tomlio/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 The tomlio Authors
#
# topmark:header:end

"""Entry point for ``python -m tomlio``."""

from tomlio.cli.main import cli

if __name__ == "__main__":
    cli()
