"""
Script loader for shmenu.

Functions for building Script trees from YAML and JSON files in the
advanced (nested options) format, the simple (colon-separated keys)
format, and from the scripts of a package.json file.
"""

import json
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from shmenu_lib.config.constants import (
    ScriptKeys,
    YAML_EXTENSIONS,
    JSON_EXTENSIONS,
    SIMPLE_SUFFIX,
    PACKAGE_JSON_SCRIPTS_PROPERTY,
    SIMPLE_SCRIPT_OPTION_SEPARATOR,
)
from shmenu_lib.errors import ScriptValidationError
from .choices import ChoiceList
from .dataclasses import Command, Directory, Option, Script
from .keys import child_key, name_from_key
from .validation import (
    command_lines,
    validate_script_data,
    validate_simple_script_data,
)


def is_script_file_name(file_name: str) -> bool:
    """True if the name looks like a loadable script file."""
    return Path(file_name).suffix.lower() in YAML_EXTENSIONS + JSON_EXTENSIONS


def is_simple_file_name(file_name: str) -> bool:
    """True for `*.simple.yml`, `*.simple.yaml` and `*.simple.json`."""
    path = Path(file_name)
    return path.suffix.lower() in YAML_EXTENSIONS + JSON_EXTENSIONS and \
        path.stem.lower().endswith(SIMPLE_SUFFIX)


def load_file_data(path: Path):
    """
    Read a YAML or JSON file into plain Python data.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ScriptValidationError: If the file can't be parsed
    """
    if not path.exists():
        raise FileNotFoundError(f"Script file not found: {path}")

    with open(path, encoding="utf-8") as f:
        if path.suffix.lower() in JSON_EXTENSIONS:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise ScriptValidationError(str(path), [f"JSON syntax error: {e}"])
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ScriptValidationError(str(path), [f"YAML syntax error: {e}"])


# =============================================================================
# Advanced scripts
# =============================================================================

def _parse_node(script: Script, node: dict, key: str) -> None:
    if ScriptKeys.DIRECTORY in node:
        script.update_directory(key, Directory(node[ScriptKeys.DIRECTORY]))

    if ScriptKeys.COMMAND in node:
        script.update_command(key, Command(
            directives=command_lines(node[ScriptKeys.COMMAND]),
            variables=dict(node.get(ScriptKeys.VARIABLES) or {}),
            message=node.get(ScriptKeys.MESSAGE, ""),
        ))
        return

    tokens = []
    for name, child in node[ScriptKeys.OPTIONS].items():
        name = str(name)
        _parse_node(script, child, child_key(key, name))
        tokens.append(name)

    script.update_option(key, Option(
        name=name_from_key(key),
        choices=ChoiceList.for_option(tokens, root=key == script.root_key),
        message=node.get(ScriptKeys.MESSAGE, ""),
    ))


def parse_script(data: dict) -> Script:
    """Parse an already validated advanced script mapping."""
    name, node = next(iter(data.items()))
    script = Script(name=str(name))
    _parse_node(script, node, script.root_key)
    return script


# =============================================================================
# Simple scripts
# =============================================================================

def _simple_key(script: Script, segments: Tuple[str, ...]) -> str:
    key = script.root_key
    for segment in segments:
        key = child_key(key, segment)
    return key


def parse_simple_script(data: dict, npm_alias: Optional[str] = None) -> Script:
    """
    Parse an already validated simple script mapping.

    Every colon-separated prefix becomes an option. A path that is both a
    command and a prefix of other paths stores its command one level deeper
    under its own name, so it shows up in its own option's choices.

    Args:
        data: Mapping of script name to directive string or flat mapping
        npm_alias: When set, each command gets a hidden `<alias> run <key>`
            directive (used for package.json scripts)
    """
    name, node = next(iter(data.items()))
    script = Script(name=str(name))

    if isinstance(node, str):
        script.update_command(script.root_key, Command(directives=[node]))
        return script

    entries = [
        (str(raw), tuple(str(raw).split(SIMPLE_SCRIPT_OPTION_SEPARATOR)), directive)
        for raw, directive in node.items()
    ]
    prefixes = {p[:i] for _, p, _ in entries for i in range(1, len(p))}
    choices: Dict[Tuple[str, ...], List[str]] = {(): []}

    for raw, segments, directive in entries:
        for i, segment in enumerate(segments):
            level = choices.setdefault(segments[:i], [])
            if segment not in level:
                level.append(segment)

        command_key = _simple_key(script, segments)
        if segments in prefixes:
            own = choices.setdefault(segments, [])
            if segments[-1] not in own:
                own.append(segments[-1])
            command_key = child_key(command_key, segments[-1])

        hidden = [f"{npm_alias} run {raw}"] if npm_alias else []
        script.update_command(command_key, Command(
            directives=[directive],
            hidden_directives=hidden,
        ))

    for segments, tokens in choices.items():
        key = _simple_key(script, segments)
        script.update_option(key, Option(
            name=name_from_key(key),
            choices=ChoiceList.for_option(tokens, root=not segments),
        ))
    return script


# =============================================================================
# Entry points
# =============================================================================

def load_script_file(path: Path) -> Script:
    """
    Load a script from a YAML or JSON file.

    Files named `*.simple.yml` / `*.simple.json` use the simple format;
    everything else uses the advanced format.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ScriptValidationError: If the file is not a valid script
    """
    path = Path(path)
    if not is_script_file_name(path.name):
        raise ScriptValidationError(str(path), ["Expected a .yml, .yaml or .json file"])

    data = load_file_data(path)
    if is_simple_file_name(path.name):
        errors = validate_simple_script_data(data)
        if errors:
            raise ScriptValidationError(str(path), errors)
        return parse_simple_script(data)

    errors = validate_script_data(data)
    if errors:
        raise ScriptValidationError(str(path), errors)
    return parse_script(data)


def load_package_json(path: Path, npm_alias: str) -> Script:
    """Load the `scripts` of a package.json as a simple script run through npm."""
    path = Path(path)
    data = load_file_data(path)
    if not isinstance(data, dict) or PACKAGE_JSON_SCRIPTS_PROPERTY not in data:
        raise ScriptValidationError(
            str(path), [f"Missing '{PACKAGE_JSON_SCRIPTS_PROPERTY}' property"]
        )

    scripts = {PACKAGE_JSON_SCRIPTS_PROPERTY: data[PACKAGE_JSON_SCRIPTS_PROPERTY]}
    errors = validate_simple_script_data(scripts)
    if errors:
        raise ScriptValidationError(str(path), errors)
    return parse_simple_script(scripts, npm_alias=npm_alias)
