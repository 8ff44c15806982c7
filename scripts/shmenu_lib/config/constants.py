"""
Constants for shmenu.

Program identity, reserved menu tokens, documentation glyphs and paths.
"""

import os
from pathlib import Path


PROGRAM_NAME = "shmenu"
DEFAULT_SHELL = "/bin/bash"
DEFAULT_NPM_ALIAS = "npm"

# Reserved choice tokens
BACK_COMMAND = "back"
QUIT_COMMAND = "quit"
ADD_COMMAND = "add-command"
HELP_COMMAND = "help"
RESERVED_TOKENS = (BACK_COMMAND, QUIT_COMMAND, ADD_COMMAND)

DEFAULT_OPTIONS_MESSAGE = "Choose an option"

# Key namespace
KEY_SEPARATOR = "."
WHITESPACE_DELIMITER = "_"
SIMPLE_SCRIPT_OPTION_SEPARATOR = ":"

# Documented mode
COMMAND_GLYPH = "→"
OPTION_GLYPH = "↓"
ROTATING_GLYPHS = ("♚", "♛", "♜", "♝", "♞", "♟")
MULTIPLE_DIRECTIVES_MARKER = ". . ."


# Script file structure
class ScriptKeys:
    DIRECTORY = "directory"
    COMMAND = "command"
    OPTIONS = "options"
    MESSAGE = "message"
    VARIABLES = "variables"

    ALL = (DIRECTORY, COMMAND, OPTIONS, MESSAGE, VARIABLES)


YAML_EXTENSIONS = (".yml", ".yaml")
JSON_EXTENSIONS = (".json",)
SIMPLE_SUFFIX = ".simple"
PACKAGE_JSON = Path("package.json")
PACKAGE_JSON_SCRIPTS_PROPERTY = "scripts"


# Paths
def app_home() -> Path:
    """Application home, overridable with SHMENU_HOME."""
    override = os.environ.get("SHMENU_HOME")
    if override:
        return Path(override)
    return Path.home() / ".config" / PROGRAM_NAME


def config_file() -> Path:
    return app_home() / "config.json"


def scripts_dir() -> Path:
    return app_home() / "scripts"
