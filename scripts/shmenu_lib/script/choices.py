"""
Ordered choice list for menu options.

User-defined choices come first; the reserved "back" and "quit" markers
always trail them, with "quit" last.
"""

from typing import Callable, Iterable, Iterator, List

from shmenu_lib.config.constants import BACK_COMMAND, QUIT_COMMAND

TRAILING_MARKERS = (BACK_COMMAND, QUIT_COMMAND)


class ChoiceList:
    """A list of choice tokens that keeps back/quit at the end."""

    def __init__(self, choices: Iterable[str] = ()):
        self._choices: List[str] = list(choices)

    @classmethod
    def for_option(cls, tokens: Iterable[str], root: bool = False) -> "ChoiceList":
        """Build a choice list from user tokens, appending back (non-root) and quit."""
        choices = list(tokens)
        if not root:
            choices.append(BACK_COMMAND)
        choices.append(QUIT_COMMAND)
        return cls(choices)

    def insert_before_markers(self, token: str) -> None:
        """Insert `token` after the user choices, before back/quit."""
        for index, choice in enumerate(self._choices):
            if choice in TRAILING_MARKERS:
                self._choices.insert(index, token)
                return
        self._choices.append(token)

    def remove_if(self, predicate: Callable[[str], bool]) -> None:
        """Remove every choice for which `predicate` is true."""
        self._choices = [c for c in self._choices if not predicate(c)]

    def user_choices(self) -> List[str]:
        """Choices other than the trailing markers."""
        return [c for c in self._choices if c not in TRAILING_MARKERS]

    def to_list(self) -> List[str]:
        """Return a copy of the choices as a plain list."""
        return list(self._choices)

    def __iter__(self) -> Iterator[str]:
        return iter(self._choices)

    def __len__(self) -> int:
        return len(self._choices)

    def __getitem__(self, index):
        return self._choices[index]

    def __contains__(self, token: object) -> bool:
        return token in self._choices

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ChoiceList):
            return self._choices == other._choices
        if isinstance(other, list):
            return self._choices == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"ChoiceList({self._choices!r})"
