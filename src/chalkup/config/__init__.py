# topmark:header:start
#
#   project      : Chalkup
#   file         : __init__.py
#   file_relpath : src/chalkup/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration support for Chalkup: logging setup and TOML style files."""

from __future__ import annotations
