"""
Terminal output helpers for shmenu.

Prefixed, colored status lines for the CLI and the execution engine.
Warnings and errors go to stderr so they never mix with a command's
own stdout. Set NO_COLOR to disable escape codes.
"""

import os
import sys
from typing import Iterable


class Colors:
    """ANSI color escape codes for terminal output."""
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[1;33m"
    BLUE = "\033[0;34m"
    CYAN = "\033[0;36m"
    MAGENTA = "\033[0;35m"
    BOLD = "\033[1m"
    NC = "\033[0m"


def _colored(code: str, text: str) -> str:
    """Wrap `text` in `code` unless NO_COLOR is set."""
    if os.environ.get("NO_COLOR"):
        return text
    return f"{code}{text}{Colors.NC}"


def primary(text: str) -> str:
    """Emphasise script and command names."""
    return _colored(Colors.BOLD + Colors.CYAN, text)


def secondary(text: str) -> str:
    """Emphasise directives and answers."""
    return _colored(Colors.BOLD + Colors.MAGENTA, text)


def log(msg: str) -> None:
    """Report a completed action with a green prefix."""
    print(f"{_colored(Colors.GREEN, '[+]')} {msg}")


def info(msg: str) -> None:
    """Report progress with a cyan prefix."""
    print(f"{_colored(Colors.CYAN, '[i]')} {msg}")


def warn(msg: str) -> None:
    """Report a non-fatal problem on stderr with a yellow prefix."""
    print(f"{_colored(Colors.YELLOW, '[!]')} {msg}", file=sys.stderr)


def error(msg: str) -> None:
    """Report a fatal problem on stderr with a red prefix."""
    print(f"{_colored(Colors.RED, '[ERROR]')} {msg}", file=sys.stderr)


def format_directives(directives: Iterable[str]) -> str:
    """Join directives for display, one per line when there are several."""
    directives = list(directives)
    if len(directives) == 1:
        return primary(directives[0])
    return "\n" + "\n".join(f"  {primary(d)}" for d in directives)
