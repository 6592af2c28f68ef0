# topmark:header:start
#
#   project      : tomlio
#   file         : __init__.py
#   file_relpath : src/tomlio/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The tomlio Authors
#
# topmark:header:end

"""Command-line interface for tomlio."""
