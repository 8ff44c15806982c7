"""
Script serialization for shmenu.

Functions for turning a Script tree back into the advanced file format
and saving it as YAML.
"""

from pathlib import Path

import yaml

from shmenu_lib.config.constants import ScriptKeys
from .dataclasses import Script
from .keys import child_key


def _command_data(directives):
    if len(directives) == 1:
        return directives[0]
    return {line: directive for line, directive in enumerate(directives, start=1)}


def _node_to_data(script: Script, key: str) -> dict:
    node = {}
    directory = script.get_directory(key)
    if directory is not None and directory.path:
        node[ScriptKeys.DIRECTORY] = directory.path

    command = script.get_command(key)
    if command is not None:
        if command.message:
            node[ScriptKeys.MESSAGE] = command.message
        node[ScriptKeys.COMMAND] = _command_data(command.directives)
        if command.variables:
            node[ScriptKeys.VARIABLES] = dict(command.variables)
        return node

    option = script.get_option(key)
    if option is None:
        return node
    if option.message:
        node[ScriptKeys.MESSAGE] = option.message
    node[ScriptKeys.OPTIONS] = {
        choice: _node_to_data(script, child_key(key, choice))
        for choice in option.choices.user_choices()
    }
    return node


def script_to_data(script: Script) -> dict:
    """Rebuild the advanced-format mapping for a script (visible directives only)."""
    return {script.name: _node_to_data(script, script.root_key)}


def dump_script(script: Script) -> str:
    """Render a script as advanced-format YAML."""
    return yaml.safe_dump(
        script_to_data(script),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def save_script_file(script: Script, path: Path) -> None:
    """Save a script as YAML, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(dump_script(script))
