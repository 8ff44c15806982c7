"""
shmenu_lib.common - Shared utilities for shmenu

This module provides:
- output: colored status lines (log, info, warn, error)
- prompts: the Prompter capability and its prompt_toolkit implementation
"""

from .output import Colors, log, info, warn, error, primary, secondary, format_directives
from .prompts import Prompter, Question, QuestionType, TerminalPrompter

__all__ = [
    'Colors', 'log', 'info', 'warn', 'error', 'primary', 'secondary', 'format_directives',
    'Prompter', 'Question', 'QuestionType', 'TerminalPrompter',
]
