"""
Documented mode choice decoration.

Documented mode previews what a choice leads to: the first directive of a
command, a descend glyph for a sub-menu, or (in the top-level scripts
menu, where there is no script context) a rotating glyph per position.
"""

from typing import List, Optional

from shmenu_lib.config.constants import (
    BACK_COMMAND,
    QUIT_COMMAND,
    COMMAND_GLYPH,
    OPTION_GLYPH,
    ROTATING_GLYPHS,
    MULTIPLE_DIRECTIVES_MARKER,
)
from .dataclasses import Script
from .keys import child_key

PASSTHROUGH = (BACK_COMMAND, QUIT_COMMAND)
GLYPHS = (COMMAND_GLYPH, OPTION_GLYPH) + ROTATING_GLYPHS


def document_choice(
    choice: str,
    script: Optional[Script] = None,
    option_key: str = "",
    position: int = 0,
) -> str:
    """
    Decorate a single choice for display.

    Args:
        choice: Raw choice token
        script: Script the option belongs to, or None for the scripts menu
        option_key: Key of the option presenting the choice
        position: Index of the choice, used for the rotating glyph

    Returns:
        The decorated display string
    """
    if choice in PASSTHROUGH:
        return choice

    if script is None:
        glyph = ROTATING_GLYPHS[position % len(ROTATING_GLYPHS)]
        return f"{choice} {glyph}"

    key = child_key(option_key, choice)
    command = script.get_command(key)
    if command is not None:
        documented = f"{choice} {COMMAND_GLYPH} {command.directives[0]}"
        if len(command.directives) > 1:
            documented += f" {MULTIPLE_DIRECTIVES_MARKER}"
        return documented
    if script.get_option(key) is not None:
        return f"{choice} {OPTION_GLYPH}"
    return choice


def document_choices(
    choices: List[str],
    script: Optional[Script] = None,
    option_key: str = "",
) -> List[str]:
    return [
        document_choice(choice, script, option_key, position)
        for position, choice in enumerate(choices)
    ]


def has_documentation_suffix(token: str) -> bool:
    """True if `token` contains a glyph that undocument_choice would cut at."""
    return any(f" {glyph}" in token for glyph in GLYPHS)


def undocument_choice(choice: str) -> str:
    """Strip any documentation suffix to recover the raw token."""
    cut = len(choice)
    for glyph in GLYPHS:
        index = choice.find(f" {glyph}")
        if index != -1:
            cut = min(cut, index)
    return choice[:cut]
