"""
Modify mode for shmenu.

Runs a navigation over a copy of the script where commands are hidden and
every option offers an "add-command" choice. Picking it asks for the new
command and grafts it onto the original script at that option.
"""

from dataclasses import dataclass

from shmenu_lib.common.output import info, primary, secondary, warn
from shmenu_lib.common.prompts import Prompter, Question
from shmenu_lib.config.constants import ADD_COMMAND, RESERVED_TOKENS, HELP_COMMAND
from shmenu_lib.script import Command, Directory, Script, child_key, normalize_token
from shmenu_lib.script.validation import choice_name_problem

from .mode import RunMode
from .navigation import Navigator, Outcome


@dataclass
class CommandAnswers:
    """Answers collected by the command builder."""
    name: str
    directive: str
    message: str = ""
    path: str = ""


def build_modify_view(script: Script) -> Script:
    """
    Return an independent copy of `script` prepared for adding commands.

    Each option loses its command choices, gains the add-command choice
    just before back/quit, and says which option a command will be added to.
    """
    view = script.copy()
    for key, option in view.options.items():
        option.message = f"Add a {secondary('command')} to {primary(option.message or option.name)}"
        option.choices.remove_if(
            lambda choice, key=key: view.get_command(child_key(key, choice)) is not None
        )
        option.choices.insert_before_markers(ADD_COMMAND)
    return view


async def _ask_required(prompter: Prompter, message: str, check=None) -> str:
    while True:
        answer = (await prompter.ask(Question.text(message))).strip()
        if not answer:
            warn("An answer is required")
            continue
        problem = check(answer) if check else None
        if problem is None:
            return answer
        warn(problem)


def _command_name_problem(name: str):
    if name in RESERVED_TOKENS + (HELP_COMMAND,):
        return f"'{name}' is reserved and cannot be used as a command name"
    return choice_name_problem(name)


async def ask_command_answers(prompter: Prompter) -> CommandAnswers:
    """Ask for the new command's name, message, directory and directive, in order."""
    name = await _ask_required(prompter, "command name:", check=_command_name_problem)
    message = (await prompter.ask(Question.text("message (optional):"))).strip()
    path = (await prompter.ask(Question.text("directory (optional):"))).strip()
    directive = await _ask_required(prompter, "command:")
    return CommandAnswers(name=name, directive=directive, message=message, path=path)


def replace_command_prompt(answers: CommandAnswers) -> str:
    prompt = f"Replace {secondary(answers.name)} with {secondary(answers.directive)} command"
    if answers.message and answers.path:
        return prompt + f", {secondary(answers.message)} message and {secondary(answers.path)} directory?"
    if answers.message:
        return prompt + f" and {secondary(answers.message)} message?"
    if answers.path:
        return prompt + f" and {secondary(answers.path)} directory?"
    return prompt + "?"


async def graft_command(
    script: Script,
    option_key: str,
    answers: CommandAnswers,
    prompter: Prompter,
) -> bool:
    """
    Add the described command to `script` under the option at `option_key`.

    An existing command at the same key is only replaced after confirmation.

    Returns:
        True if the script was changed
    """
    key = child_key(option_key, answers.name)
    if script.get_option(key) is not None:
        warn(f"{answers.name} is already an option of {script.name}")
        return False

    if script.get_command(key) is not None:
        print()
        if not await prompter.ask(Question.confirm(replace_command_prompt(answers))):
            info(f"Did not replace {secondary(answers.name)} with {secondary(answers.directive)}")
            return False

    script.update_command(key, Command(directives=[answers.directive], message=answers.message))
    if answers.path:
        script.update_directory(key, Directory(answers.path))

    option = script.get_option(option_key)
    if normalize_token(answers.name) not in {normalize_token(c) for c in option.choices}:
        option.choices.insert_before_markers(answers.name)
    return True


async def run_modify(script: Script, prompter: Prompter, mode: RunMode = RunMode()) -> bool:
    """
    Navigate `script` in modify mode and graft a new command if requested.

    The original script is only changed once the command builder completes.

    Returns:
        True if a command was added or replaced
    """
    if script.get_option(script.root_key) is None:
        warn(f"{script.name} is a single command and has no options to add to")
        prompter.close()
        return False

    result = await Navigator(build_modify_view(script), prompter, mode).run()
    if result.outcome is not Outcome.ADD_COMMAND:
        return False

    info(f"Adding a {secondary('command')}:")
    try:
        answers = await ask_command_answers(prompter)
        return await graft_command(script, result.key, answers, prompter)
    finally:
        prompter.close()
