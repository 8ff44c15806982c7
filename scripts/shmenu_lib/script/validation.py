"""
Script file validation for shmenu.

Validators return a list of error messages (empty if valid); the loader
raises ScriptValidationError with them.
"""

from typing import Any, Dict, List, Optional

from shmenu_lib.config.constants import (
    ScriptKeys,
    KEY_SEPARATOR,
    RESERVED_TOKENS,
    SIMPLE_SCRIPT_OPTION_SEPARATOR,
)
from .documentation import has_documentation_suffix
from .keys import normalize_token


def _check_root(data: Any) -> List[str]:
    if not isinstance(data, dict):
        return [f"Script file must be a mapping, got {type(data).__name__}"]
    if len(data) != 1:
        return [f"Script file must have exactly one root key (the script name), got {len(data)}"]
    name = next(iter(data))
    if not isinstance(name, str) or not name.strip():
        return ["Script name must be a non-empty string"]
    return []


def is_valid_variables_shape(variables: Any) -> bool:
    """Variables must be a flat mapping of placeholder strings to question strings."""
    if not isinstance(variables, dict):
        return False
    return all(isinstance(k, str) and isinstance(v, str) for k, v in variables.items())


def command_lines(command: Any) -> List[str]:
    """
    Return the directives of a `command` entry.

    A command is either a single string or a mapping of line numbers
    (1, 2, ...) to directives, read in order until a number is missing.
    """
    if isinstance(command, str):
        return [command]
    lines = []
    if isinstance(command, dict):
        line = 1
        while True:
            if line in command:
                lines.append(command[line])
            elif str(line) in command:
                lines.append(command[str(line)])
            else:
                break
            line += 1
    return lines


def choice_name_problem(name: str) -> Optional[str]:
    """
    Return why `name` can't be used as a choice, or None if it can.

    Reserved words and script keywords are checked by the callers.
    """
    if KEY_SEPARATOR in name:
        return f"'{name}' cannot contain '{KEY_SEPARATOR}'"
    if has_documentation_suffix(name):
        return f"'{name}' contains a documented mode marker"
    return None


def _check_collision(name: str, seen: Dict[str, str], where: str, errors: List[str]) -> None:
    """Report sibling names that address the same key once whitespace is normalized."""
    normalized = normalize_token(name)
    other = seen.setdefault(normalized, name)
    if other != name:
        errors.append(f"{where}: '{name}' collides with '{other}'")


def _validate_node(node: Any, path: str, errors: List[str]) -> None:
    if not isinstance(node, dict):
        errors.append(f"{path}: expected a mapping, got {type(node).__name__}")
        return

    for key in (ScriptKeys.DIRECTORY, ScriptKeys.MESSAGE):
        if key in node and not isinstance(node[key], str):
            errors.append(f"{path}.{key}: must be a string")

    if ScriptKeys.COMMAND in node:
        lines = command_lines(node[ScriptKeys.COMMAND])
        if not lines:
            errors.append(f"{path}.command: must be a string or a numbered mapping starting at 1")
        elif not all(isinstance(line, str) and line.strip() for line in lines):
            errors.append(f"{path}.command: directives must be non-empty strings")
        if ScriptKeys.VARIABLES in node and not is_valid_variables_shape(node[ScriptKeys.VARIABLES]):
            errors.append(f"{path}.variables: must be a flat mapping of strings to strings")
        return

    if ScriptKeys.OPTIONS not in node:
        errors.append(f"{path}: must have either 'command' or 'options'")
        return

    options = node[ScriptKeys.OPTIONS]
    if not isinstance(options, dict) or not options:
        errors.append(f"{path}.options: must be a non-empty mapping")
        return

    seen: Dict[str, str] = {}
    for name, child in options.items():
        if not isinstance(name, str):
            name = str(name)
        if name in ScriptKeys.ALL:
            errors.append(f"{path}.options: '{name}' is a script keyword and cannot be used as an option")
            continue
        if name in RESERVED_TOKENS:
            errors.append(f"{path}.options: '{name}' is reserved and cannot be used as an option")
            continue
        problem = choice_name_problem(name)
        if problem:
            errors.append(f"{path}.options: {problem}")
            continue
        _check_collision(name, seen, f"{path}.options", errors)
        _validate_node(child, f"{path}.{name}", errors)


def validate_script_data(data: Any) -> List[str]:
    """Validate an advanced script file structure."""
    errors = _check_root(data)
    if errors:
        return errors
    name, node = next(iter(data.items()))
    _validate_node(node, name, errors)
    return errors


def validate_simple_script_data(data: Any) -> List[str]:
    """Validate a simple (colon-separated) script file structure."""
    errors = _check_root(data)
    if errors:
        return errors
    name, node = next(iter(data.items()))

    if isinstance(node, str):
        if not node.strip():
            errors.append(f"{name}: command must be a non-empty string")
        return errors
    if not isinstance(node, dict) or not node:
        return [f"{name}: must be a command string or a non-empty mapping"]

    # normalized prefix -> normalized segment -> first raw segment seen
    levels: Dict[tuple, Dict[str, str]] = {}
    for key, directive in node.items():
        if not isinstance(key, str):
            key = str(key)
        segments = key.split(SIMPLE_SCRIPT_OPTION_SEPARATOR)
        if not all(segment.strip() for segment in segments):
            errors.append(f"{name}: '{key}' has an empty segment")
        for i, segment in enumerate(segments):
            if not segment.strip():
                continue
            if segment in RESERVED_TOKENS:
                errors.append(f"{name}: '{key}' uses the reserved word '{segment}'")
                continue
            problem = choice_name_problem(segment)
            if problem:
                errors.append(f"{name}: {problem}")
                continue
            prefix = tuple(normalize_token(s) for s in segments[:i])
            _check_collision(segment, levels.setdefault(prefix, {}), f"{name}.{key}", errors)
        if not isinstance(directive, str) or not directive.strip():
            errors.append(f"{name}.{key}: command must be a non-empty string")
    return errors
