"""
Command line interface for shmenu.

Parses the operation and flags, then runs the matching cmd_* handler
inside a single asyncio event loop.
"""

import argparse
import asyncio
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Callable, Dict, List, Optional

from rich.console import Console
from rich.syntax import Syntax

from shmenu_lib import __version__
from shmenu_lib.common.output import error, info, log, primary, warn
from shmenu_lib.common.prompts import Prompter, Question, TerminalPrompter
from shmenu_lib.config.constants import (
    PROGRAM_NAME,
    HELP_COMMAND,
    QUIT_COMMAND,
    PACKAGE_JSON,
    app_home,
)
from shmenu_lib.config.settings import Settings, load_settings, save_settings
from shmenu_lib.config.store import ScriptStore
from shmenu_lib.engine import Navigator, Outcome, RunMode, run_modify
from shmenu_lib.engine.process import ProcessRunner
from shmenu_lib.errors import PromptClosedError, ScriptNotFoundError, ShmenuError
from shmenu_lib.script import (
    Script,
    document_choices,
    dump_script,
    load_package_json,
    load_script_file,
    undocument_choice,
)
from shmenu_lib.script.loader import is_script_file_name


@dataclass
class AppContext:
    """Everything an operation needs."""
    settings: Settings
    store: ScriptStore
    prompter: Prompter
    mode: RunMode
    parser: argparse.ArgumentParser
    process_runner: Optional[ProcessRunner] = None


# =============================================================================
# Helpers
# =============================================================================

async def choose_script(ctx: AppContext, operation: str) -> Optional[str]:
    """
    Ask which saved script to use for `operation`.

    Returns:
        The script name, or None if the user asked for help or quit
    """
    choices = ctx.store.names() + [HELP_COMMAND, QUIT_COMMAND]
    if ctx.mode.documented:
        choices = document_choices(choices)
    try:
        answer = await ctx.prompter.ask(
            Question.pick(f"Which script would you like to {operation}?", choices)
        )
    except PromptClosedError:
        return None

    answer = undocument_choice(answer) if ctx.mode.documented else answer
    if answer == HELP_COMMAND:
        ctx.parser.print_help()
        return None
    if answer == QUIT_COMMAND:
        return None
    return answer


async def resolve_script_name(ctx: AppContext, name: Optional[str], operation: str) -> Optional[str]:
    """Use the given name or, when missing, ask with the scripts menu."""
    if name:
        return name
    if not ctx.store.names():
        warn(f"You have no saved scripts. Save one with {primary(f'{PROGRAM_NAME} save <file>')}")
        return None
    return await choose_script(ctx, operation)


async def navigate(ctx: AppContext, script: Script) -> int:
    """Run a navigation over `script` and turn its outcome into an exit status."""
    result = await Navigator(script, ctx.prompter, ctx.mode, ctx.process_runner).run()
    if result.outcome is not Outcome.EXECUTED:
        return 0
    execution = result.execution
    if execution.error is not None:
        return 1
    return execution.returncode or 0


# =============================================================================
# Operations
# =============================================================================

async def cmd_run(ctx: AppContext, args: argparse.Namespace) -> int:
    """Run a saved script, or a script file directly."""
    target = args.script
    if target and is_script_file_name(target):
        return await navigate(ctx, load_script_file(Path(target)))

    name = await resolve_script_name(ctx, target, "run")
    if name is None:
        return 0
    return await navigate(ctx, ctx.store.get(name))


async def cmd_save(ctx: AppContext, args: argparse.Namespace) -> int:
    """Save a script file to the store."""
    script = load_script_file(Path(args.file))
    if ctx.store.exists(script.name):
        overwrite = await ctx.prompter.ask(Question.confirm(
            f"There is already a script named {primary(script.name)}. Would you like to replace it?"
        ))
        if not overwrite:
            info(f"Did not replace {primary(script.name)}")
            return 0

    ctx.store.save(script)
    log(f"Saved {primary(script.name)} script. "
        f"Try running {primary(f'{PROGRAM_NAME} run {script.name}')} to use it")
    return 0


async def cmd_list(ctx: AppContext, args: argparse.Namespace) -> int:
    """List saved scripts."""
    names = ctx.store.names()
    if not names:
        warn("You have no saved scripts")
        return 0
    for name in names:
        print(name)
    return 0


async def cmd_print(ctx: AppContext, args: argparse.Namespace) -> int:
    """Print a saved script as YAML."""
    name = await resolve_script_name(ctx, args.script, "print")
    if name is None:
        return 0
    script = ctx.store.get(name)
    console = Console()
    console.rule(f"[bold cyan]{script.name}[/bold cyan] script")
    console.print(Syntax(dump_script(script), "yaml", background_color="default"))
    return 0


async def cmd_delete(ctx: AppContext, args: argparse.Namespace) -> int:
    """Delete a saved script."""
    name = await resolve_script_name(ctx, args.script, "delete")
    if name is None:
        return 0
    if not ctx.store.exists(name):
        raise ScriptNotFoundError(name)
    if not await ctx.prompter.ask(Question.confirm(
        f"Delete {primary(name)} script (this action cannot be undone)?", default=False
    )):
        info(f"{primary(name)} script not deleted")
        return 0
    if ctx.mode.dry_run:
        info(f"Running in {primary('dry-run')} mode. {primary(name)} script not deleted")
        return 0
    ctx.store.delete(name)
    log(f"Deleted {primary(name)} script")
    return 0


async def cmd_delete_all(ctx: AppContext, args: argparse.Namespace) -> int:
    """Delete every saved script after confirmation."""
    if not ctx.store.names():
        warn("You have no saved scripts")
        return 0
    if not await ctx.prompter.ask(Question.confirm(
        "Delete all scripts (this action cannot be undone)?", default=False
    )):
        info("Scripts not deleted")
        return 0
    if ctx.mode.dry_run:
        info(f"Running in {primary('dry-run')} mode. Scripts not deleted")
        return 0
    count = ctx.store.delete_all()
    log(f"Deleted {count} script{'s' if count != 1 else ''}")
    return 0


async def cmd_modify(ctx: AppContext, args: argparse.Namespace) -> int:
    """Add a command to a saved script by navigating it in modify mode."""
    name = await resolve_script_name(ctx, args.script, "modify")
    if name is None:
        return 0
    script = ctx.store.get(name)
    info(f"Running {primary(name)} script in modify mode")
    if await run_modify(script, ctx.prompter, ctx.mode):
        ctx.store.save(script)
        log(f"Saved the new command to the {primary(name)} script. "
            f"Try running {primary(f'{PROGRAM_NAME} run {name}')} to use it")
    return 0


async def cmd_shell(ctx: AppContext, args: argparse.Namespace) -> int:
    """Set the shell commands run in."""
    shell = args.path or await ctx.prompter.ask(Question.text(
        f"Which shell would you like {PROGRAM_NAME} to use?", default=ctx.settings.shell
    ))
    ctx.settings.shell = shell
    save_settings(ctx.settings)
    log(f"Set shell to {primary(shell)}")
    return 0


async def cmd_npm_alias(ctx: AppContext, args: argparse.Namespace) -> int:
    """Set the npm alias used for package.json scripts."""
    alias = args.alias or await ctx.prompter.ask(Question.text(
        "Which npm alias would you like to use?", default=ctx.settings.npm_alias
    ))
    ctx.settings.npm_alias = alias
    save_settings(ctx.settings)
    log(f"Set npm alias to {primary(alias)}")
    return 0


async def cmd_config(ctx: AppContext, args: argparse.Namespace) -> int:
    """Display the configuration."""
    Console().print_json(data={
        "home": str(app_home()),
        "scripts": str(ctx.store.directory),
        "shell": ctx.settings.shell,
        "npm_alias": ctx.settings.npm_alias,
    })
    return 0


async def cmd_json(ctx: AppContext, args: argparse.Namespace) -> int:
    """Run the scripts of the package.json in the current directory."""
    if not PACKAGE_JSON.exists():
        warn(f"No {PACKAGE_JSON} in the current directory")
        return 0
    script = load_package_json(PACKAGE_JSON, ctx.settings.npm_alias)
    info(f"Running scripts from {primary(str(PACKAGE_JSON))}")
    return await navigate(ctx, script)


OPERATIONS: Dict[str, Callable[[AppContext, argparse.Namespace], Awaitable[int]]] = {
    "run": cmd_run,
    "save": cmd_save,
    "list": cmd_list,
    "print": cmd_print,
    "delete": cmd_delete,
    "delete-all": cmd_delete_all,
    "modify": cmd_modify,
    "shell": cmd_shell,
    "npm-alias": cmd_npm_alias,
    "config": cmd_config,
    "json": cmd_json,
}


# =============================================================================
# Entry point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Navigate nested menus of shell commands defined in YAML/JSON files",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-D", "--documented", action="store_true",
                        help="show each choice's command next to it")
    parser.add_argument("-R", "--dry-run", action="store_true",
                        help="print the command that would run instead of running it")

    sub = parser.add_subparsers(dest="operation", metavar="operation")
    run = sub.add_parser("run", help="run a saved script or a script file")
    run.add_argument("script", nargs="?", help="script name or path to a .yml/.json file")
    save = sub.add_parser("save", help="save a script file")
    save.add_argument("file", help="path to a .yml/.json script file")
    sub.add_parser("list", help="list saved scripts")
    for name, help_text in (("print", "print a saved script"),
                            ("delete", "delete a saved script"),
                            ("modify", "add a command to a saved script")):
        operation = sub.add_parser(name, help=help_text)
        operation.add_argument("script", nargs="?", help="script name")
    sub.add_parser("delete-all", help="delete all saved scripts")
    shell = sub.add_parser("shell", help="set the shell commands run in")
    shell.add_argument("path", nargs="?", help="path to the shell")
    npm_alias = sub.add_parser("npm-alias", help="set the npm alias for package.json scripts")
    npm_alias.add_argument("alias", nargs="?", help="npm alias, e.g. yarn")
    sub.add_parser("config", help="display the configuration")
    sub.add_parser("json", help="run the scripts in ./package.json")
    return parser


def main(
    argv: Optional[List[str]] = None,
    prompter: Optional[Prompter] = None,
    process_runner: Optional[ProcessRunner] = None,
) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.operation is None:
        args.operation = "run"
        args.script = None

    settings = load_settings()
    ctx = AppContext(
        settings=settings,
        store=ScriptStore(),
        prompter=prompter or TerminalPrompter(),
        mode=RunMode(documented=args.documented, dry_run=args.dry_run, shell=settings.shell),
        parser=parser,
        process_runner=process_runner,
    )

    try:
        return asyncio.run(OPERATIONS[args.operation](ctx, args))
    except PromptClosedError:
        print()
        return 130
    except ShmenuError as e:
        error(str(e))
        return 1
    except FileNotFoundError as e:
        error(str(e))
        return 1
    except KeyboardInterrupt:
        print()
        return 130


if __name__ == "__main__":
    sys.exit(main())
