"""
Exception types for shmenu.

Structural and resource errors abort the current navigation. The CLI
catches ShmenuError, reports it and exits non-zero.
"""

from typing import List


class ShmenuError(Exception):
    """Base class for all shmenu errors."""
    pass


class MalformedScriptError(ShmenuError):
    """Raised when a key addresses neither an option nor a command."""

    def __init__(self, script_name: str, key: str):
        self.script_name = script_name
        self.key = key
        super().__init__(
            f"An error occurred while running '{script_name}' script. "
            f"Could not find '{key}'"
        )


class NoSuchDirectoryError(ShmenuError):
    """Raised when a command's resolved directory does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Could not run command in non-existent {path} directory")


class ScriptValidationError(ShmenuError):
    """Raised when a script file fails validation."""

    def __init__(self, file_name: str, errors: List[str]):
        self.file_name = file_name
        self.errors = errors
        super().__init__(
            f"Script '{file_name}' validation failed:\n  " + "\n  ".join(errors)
        )


class ScriptNotFoundError(ShmenuError):
    """Raised when a saved script does not exist."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"There is currently no saved script with the name {name}")


class PromptClosedError(ShmenuError):
    """Raised when a question is asked after the answer stream has ended."""
    pass
