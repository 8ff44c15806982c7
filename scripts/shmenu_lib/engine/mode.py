"""
Run mode passed explicitly into a navigation.
"""

from dataclasses import dataclass

from shmenu_lib.config.constants import DEFAULT_SHELL


@dataclass(frozen=True)
class RunMode:
    """How a navigation presents choices and runs commands."""
    documented: bool = False  # preview directives next to choices
    dry_run: bool = False  # print the directive instead of spawning it
    shell: str = DEFAULT_SHELL
