# topmark:header:start
#
#   project      : Chalkup
#   file         : constants.py
#   file_relpath : src/chalkup/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chalkup Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

CHALKUP_VERSION: str = get_version("chalkup")

# Default markup delimiters: `@|code(,code)* text|@`
DEFAULT_BEGIN_TOKEN: str = "@|"
DEFAULT_END_TOKEN: str = "|@"

# Separates the code list from the text inside a token
CODE_TEXT_SEPARATOR: str = " "
CODE_LIST_SEPARATOR: str = ","

# Style assignment string: `Name=Code(,Code)*( Name=Code(,Code)*)*`
ASSIGNMENT_LIST_SEPARATOR: str = " "
ASSIGNMENT_SEPARATOR: str = "="

# Reserved assignment names that override the delimiters instead of defining a style
BEGIN_TOKEN_KEY: str = "BeginToken"
END_TOKEN_KEY: str = "EndToken"

# Option name conventionally found in the first configuration fragment
DEFAULT_FORMAT_OPTION: str = "ansi"

# TOML configuration
CHALKUP_TOML_NAME: str = "chalkup.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "chalkup"

LOG_LEVEL_ENV_VAR: str = "CHALKUP_LOG_LEVEL"
