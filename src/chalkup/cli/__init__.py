# topmark:header:start
#
#   project      : Chalkup
#   file         : __init__.py
#   file_relpath : src/chalkup/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chalkup CLI package.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        chalkup = "chalkup.cli.main:cli"
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
