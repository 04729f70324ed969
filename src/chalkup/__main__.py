# topmark:header:start
#
#   project      : Chalkup
#   file         : __main__.py
#   file_relpath : src/chalkup/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Chalkup via ``python -m chalkup``.

Examples:
    Render markup using the module interface::

        python -m chalkup render '@|green Hello|@'
"""

from __future__ import annotations

from chalkup.cli.main import cli

if __name__ == "__main__":
    cli()
