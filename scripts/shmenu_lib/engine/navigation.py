"""
Navigation engine for shmenu.

Walks a script tree from its root key in response to answers: each
option is asked as a list question, "back" moves to the parent key,
"quit" ends the session, and reaching a command hands it to the
CommandExecutor.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from shmenu_lib.common.prompts import Prompter, Question
from shmenu_lib.config.constants import ADD_COMMAND, BACK_COMMAND, QUIT_COMMAND
from shmenu_lib.errors import MalformedScriptError, PromptClosedError
from shmenu_lib.script import (
    Option,
    Script,
    child_key,
    document_choices,
    parent_key,
    undocument_choice,
)

from .execution import CommandExecutor, ExecutionResult
from .mode import RunMode
from .process import ProcessRunner


class NavigationState(Enum):
    AT_OPTION = "at-option"
    AT_COMMAND = "at-command"
    TERMINATED = "terminated"


class Outcome(Enum):
    QUIT = "quit"
    EXECUTED = "executed"
    ADD_COMMAND = "add-command"


@dataclass
class NavigationResult:
    """How a navigation ended and where."""
    outcome: Outcome
    key: str
    execution: Optional[ExecutionResult] = None


class Navigator:
    """A single navigation over a script. Not reusable once terminated."""

    def __init__(
        self,
        script: Script,
        prompter: Prompter,
        mode: RunMode = RunMode(),
        process_runner: Optional[ProcessRunner] = None,
    ):
        self.script = script
        self.prompter = prompter
        self.mode = mode
        self.executor = CommandExecutor(prompter, mode, process_runner)
        self.key = script.root_key
        self.state = NavigationState.AT_OPTION

    def question_for(self, key: str, option: Option) -> Question:
        """Build the list question for an option, decorated in documented mode."""
        choices = option.choices.to_list()
        if self.mode.documented:
            choices = document_choices(choices, self.script, key)
        return Question.pick(option.prompt_message, choices)

    def _terminate(self, outcome: Outcome, execution: Optional[ExecutionResult] = None) -> NavigationResult:
        self.state = NavigationState.TERMINATED
        return NavigationResult(outcome=outcome, key=self.key, execution=execution)

    async def run(self) -> NavigationResult:
        """
        Navigate until a command runs, the user quits, or (modify mode)
        the add-command choice is picked.

        Raises:
            MalformedScriptError: If a key addresses neither an option nor a command
            NoSuchDirectoryError: If the command's directory doesn't exist
        """
        if self.state is NavigationState.TERMINATED:
            raise RuntimeError("Navigation already terminated")

        while True:
            option = self.script.get_option(self.key)

            if option is None:
                if self.script.get_command(self.key) is None:
                    self.state = NavigationState.TERMINATED
                    self.prompter.close()
                    raise MalformedScriptError(self.script.name, self.key)
                self.state = NavigationState.AT_COMMAND
                execution = await self.executor.execute(self.script, self.key)
                return self._terminate(Outcome.EXECUTED, execution)

            self.state = NavigationState.AT_OPTION
            try:
                answer = await self.prompter.ask(self.question_for(self.key, option))
            except PromptClosedError:
                return self._terminate(Outcome.QUIT)

            token = undocument_choice(answer) if self.mode.documented else answer

            if token == QUIT_COMMAND:
                self.prompter.close()
                return self._terminate(Outcome.QUIT)
            if token == BACK_COMMAND:
                self.key = parent_key(self.key)
                continue
            if token == ADD_COMMAND:
                # The caller keeps the prompt stream for the command builder
                return self._terminate(Outcome.ADD_COMMAND)

            self.key = child_key(self.key, token)
