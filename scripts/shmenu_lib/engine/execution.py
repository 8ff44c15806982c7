"""
Command execution for shmenu.

Runs the command found at a key: resolves the inherited working
directory, collects variable answers, substitutes them into the
directives, then spawns the joined directive and waits for it.
"""

import asyncio
import os
import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from shmenu_lib.common.output import error, format_directives, info, primary
from shmenu_lib.common.prompts import Prompter, Question
from shmenu_lib.config.constants import PROGRAM_NAME
from shmenu_lib.errors import NoSuchDirectoryError
from shmenu_lib.script import Command, Script

from .mode import RunMode
from .process import ProcessRunner, SubprocessRunner, forward_sigint

DIRECTIVE_JOINER = " && "


@dataclass
class ExecutionResult:
    """Outcome of running one command."""
    directive: str
    returncode: Optional[int] = None
    error: Optional[str] = None
    dry_run: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None and (self.dry_run or self.returncode == 0)


def substitute_variables(directives: List[str], answers: Dict[str, str]) -> List[str]:
    """
    Replace every occurrence of each placeholder with its answer.

    Plain text replacement: a placeholder that appears inside unrelated
    text is replaced there too.
    """
    substituted = list(directives)
    for placeholder, answer in answers.items():
        substituted = [d.replace(placeholder, answer) for d in substituted]
    return substituted


def join_directives(directives: List[str]) -> str:
    """Chain directives so each runs only if the previous one succeeded."""
    return DIRECTIVE_JOINER.join(directives)


def invokes_program(directive: str, program: str = PROGRAM_NAME) -> bool:
    """True if the directive runs `program` as one of its commands."""
    pattern = rf"(^|[\s;&|(]){re.escape(program)}($|[\s;&|)])"
    return re.search(pattern, directive) is not None


class CommandExecutor:
    """Executes commands for a navigation."""

    def __init__(
        self,
        prompter: Prompter,
        mode: RunMode = RunMode(),
        process_runner: Optional[ProcessRunner] = None,
    ):
        self.prompter = prompter
        self.mode = mode
        self.process_runner = process_runner or SubprocessRunner()

    def working_directory(self, script: Script, key: str) -> Optional[str]:
        """
        Resolve the directory inherited by `key`.

        Returns None to run in the current working directory.

        Raises:
            NoSuchDirectoryError: If the resolved path doesn't exist
        """
        directory = script.resolve_directory(key)
        if directory is None or not directory.path:
            return None
        path = directory.absolute_path()
        if not os.path.isdir(path):
            raise NoSuchDirectoryError(directory.path)
        return path

    async def collect_variables(self, command: Command) -> Dict[str, str]:
        """Ask every variable question at once and wait for all answers."""
        placeholders = list(command.variables)
        answers = await asyncio.gather(*(
            self.prompter.ask(Question.text(command.variables[p])) for p in placeholders
        ))
        return dict(zip(placeholders, answers))

    async def execute(self, script: Script, key: str) -> ExecutionResult:
        """Run the command at `key`."""
        command = script.get_command(key)
        try:
            cwd = self.working_directory(script, key)
        except NoSuchDirectoryError:
            self.prompter.close()
            raise

        answers = await self.collect_variables(command)
        directives = substitute_variables(command.directives, answers)

        if command.message:
            print(f"\n{command.message}\n")

        directive = join_directives(command.executed_directives(directives))

        location = f" in {primary(cwd)}" if cwd else ""
        info(f"Running {format_directives(directives)}{location}")

        if self.mode.dry_run:
            print(join_directives(directives))
            self.prompter.close()
            return ExecutionResult(directive=directive, dry_run=True)

        if invokes_program(directive):
            self.prompter.close()

        try:
            handle = await self.process_runner.spawn(directive, cwd, self.mode.shell)
        except OSError as e:
            error(f"Error executing {format_directives(directives)}\n{e}")
            self.prompter.close()
            return ExecutionResult(directive=directive, error=str(e))

        with forward_sigint(handle):
            returncode = await handle.wait()

        self.prompter.close()
        return ExecutionResult(directive=directive, returncode=returncode)
