"""
Script tree dataclasses for shmenu.

A Script owns three key-addressed maps: options (menus), commands (leaf
actions) and directories (working directory overrides inherited by every
node below the key they are attached to).
"""

import copy
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from shmenu_lib.config.constants import DEFAULT_OPTIONS_MESSAGE
from .choices import ChoiceList
from .keys import ancestor_keys


@dataclass
class Option:
    """A menu node offering an ordered list of choices."""
    name: str
    choices: ChoiceList = field(default_factory=ChoiceList)
    message: str = ""

    def __post_init__(self):
        if not isinstance(self.choices, ChoiceList):
            self.choices = ChoiceList(self.choices)

    @property
    def prompt_message(self) -> str:
        """Message to show when prompting, falling back to the generic default."""
        return self.message or DEFAULT_OPTIONS_MESSAGE

    def copy(self) -> "Option":
        return copy.deepcopy(self)


@dataclass
class Command:
    """A leaf node that runs one or more shell directives."""
    directives: List[str]
    hidden_directives: List[str] = field(default_factory=list)
    variables: Dict[str, str] = field(default_factory=dict)  # placeholder -> question
    message: str = ""

    def __post_init__(self):
        if not self.directives:
            raise ValueError("A command needs at least one directive")

    def executed_directives(self, visible: Optional[List[str]] = None) -> List[str]:
        """
        Directives actually run: hidden ones win when present.

        `visible` replaces `directives` once variables have been substituted.
        Hidden directives are never substituted.
        """
        if self.hidden_directives:
            return self.hidden_directives
        return self.directives if visible is None else visible

    def copy(self) -> "Command":
        return copy.deepcopy(self)


@dataclass
class Directory:
    """Working directory override. An empty path means no override."""
    path: str = ""

    def absolute_path(self) -> str:
        """Path with a leading home shorthand expanded."""
        if self.path.startswith("~"):
            return os.path.abspath(os.path.expanduser(self.path))
        return self.path


@dataclass
class Script:
    """Root aggregate of a script tree."""
    name: str
    options: Dict[str, Option] = field(default_factory=dict)
    commands: Dict[str, Command] = field(default_factory=dict)
    directories: Dict[str, Directory] = field(default_factory=dict)

    def copy(self) -> "Script":
        """Return an independent deep copy."""
        return copy.deepcopy(self)

    @property
    def root_key(self) -> str:
        return self.name

    # -------------------------------------------------------------------------
    # Options
    # -------------------------------------------------------------------------

    def get_option(self, key: str) -> Optional[Option]:
        return self.options.get(key)

    def add_option(self, key: str, option: Option) -> None:
        if key in self.options:
            raise ValueError(f"{self.name} script already has a {key} option")
        self.update_option(key, option)

    def update_option(self, key: str, option: Option) -> None:
        if key in self.commands:
            raise ValueError(f"{self.name} script already has a {key} command")
        self.options[key] = option

    def remove_option(self, key: str) -> None:
        self.options.pop(key, None)

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def get_command(self, key: str) -> Optional[Command]:
        return self.commands.get(key)

    def add_command(self, key: str, command: Command) -> None:
        if key in self.commands:
            raise ValueError(f"{self.name} script already has a {key} command")
        self.update_command(key, command)

    def update_command(self, key: str, command: Command) -> None:
        if key in self.options:
            raise ValueError(f"{self.name} script already has a {key} option")
        self.commands[key] = command

    def remove_command(self, key: str) -> None:
        self.commands.pop(key, None)

    # -------------------------------------------------------------------------
    # Directories
    # -------------------------------------------------------------------------

    def get_directory(self, key: str) -> Optional[Directory]:
        return self.directories.get(key)

    def add_directory(self, key: str, directory: Directory) -> None:
        if key in self.directories:
            raise ValueError(f"{self.name} script already has a {key} directory")
        self.directories[key] = directory

    def update_directory(self, key: str, directory: Directory) -> None:
        self.directories[key] = directory

    def remove_directory(self, key: str) -> None:
        self.directories.pop(key, None)

    def resolve_directory(self, key: str) -> Optional[Directory]:
        """
        Return the directory attached to `key` or its closest ancestor.

        Returns None when no key up to the root has a directory, meaning the
        command runs in the current working directory.
        """
        for candidate in ancestor_keys(key):
            directory = self.directories.get(candidate)
            if directory is not None:
                return directory
        return None
