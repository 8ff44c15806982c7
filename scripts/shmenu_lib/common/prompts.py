"""
Interactive prompt capability for shmenu.

The engine asks questions through the abstract Prompter interface and
awaits one answer per question. TerminalPrompter implements it on top of
prompt_toolkit; tests substitute a scripted prompter.
"""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.formatted_text import ANSI

from shmenu_lib.errors import PromptClosedError
from .output import primary, warn


class QuestionType(Enum):
    LIST = "list"
    INPUT = "input"
    CONFIRM = "confirm"


@dataclass
class Question:
    """A single question: pick from a list, type some text, or confirm."""
    type: QuestionType
    message: str
    choices: List[str] = field(default_factory=list)
    default: Any = None

    @classmethod
    def pick(cls, message: str, choices: List[str]) -> "Question":
        return cls(QuestionType.LIST, message, list(choices))

    @classmethod
    def text(cls, message: str, default: str = "") -> "Question":
        return cls(QuestionType.INPUT, message, default=default)

    @classmethod
    def confirm(cls, message: str, default: bool = False) -> "Question":
        return cls(QuestionType.CONFIRM, message, default=default)


class Prompter(ABC):
    """
    Abstract "ask the user, get an answer" capability.

    `ask` suspends the calling task until the answer is available. Several
    asks may be outstanding at once (variable collection); everything else
    asks one question at a time. `close` ends the answer stream: pending and
    later asks raise PromptClosedError.
    """

    @abstractmethod
    async def ask(self, question: Question) -> Any:
        ...

    @abstractmethod
    def close(self) -> None:
        ...

    @property
    @abstractmethod
    def closed(self) -> bool:
        ...


class TerminalPrompter(Prompter):
    """Prompter rendering questions in the terminal with prompt_toolkit."""

    def __init__(self, session: Optional[PromptSession] = None):
        self._session = session
        self._turn: Optional[asyncio.Lock] = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True

    async def ask(self, question: Question) -> Any:
        if self._turn is None:
            self._turn = asyncio.Lock()
        # One question on screen at a time, in the order they were asked
        async with self._turn:
            if self._closed:
                raise PromptClosedError("Prompt stream has ended")
            if self._session is None:
                self._session = PromptSession()
            try:
                if question.type is QuestionType.LIST:
                    return await self._ask_list(question)
                if question.type is QuestionType.CONFIRM:
                    return await self._ask_confirm(question)
                return await self._ask_input(question)
            except (KeyboardInterrupt, EOFError):
                self.close()
                raise PromptClosedError("Prompt cancelled")

    async def _ask_list(self, question: Question) -> str:
        print(f"\n{primary('?')} {question.message}")
        for index, choice in enumerate(question.choices, start=1):
            print(f"  {index:>2}) {choice}")

        completer = WordCompleter(question.choices, sentence=True)
        while True:
            answer = (await self._session.prompt_async("> ", completer=completer)).strip()
            if answer.isdigit() and 1 <= int(answer) <= len(question.choices):
                return question.choices[int(answer) - 1]
            if answer in question.choices:
                return answer
            warn(f"Invalid choice: {answer}")

    async def _ask_input(self, question: Question) -> str:
        suffix = f" [{question.default}]" if question.default else ""
        answer = await self._session.prompt_async(ANSI(f"{primary('?')} {question.message}{suffix} "))
        return answer or question.default or ""

    async def _ask_confirm(self, question: Question) -> bool:
        suffix = " [Y/n]" if question.default else " [y/N]"
        while True:
            answer = (await self._session.prompt_async(
                ANSI(f"{primary('?')} {question.message}{suffix} ")
            )).strip().lower()
            if not answer:
                return bool(question.default)
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False
            warn("Please answer y or n")
