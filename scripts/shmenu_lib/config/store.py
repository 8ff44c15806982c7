"""
Saved script store for shmenu.

Saved scripts are kept as advanced-format YAML files, one per script,
in the scripts directory of the application home.
"""

from pathlib import Path
from typing import List, Optional

from shmenu_lib.errors import ScriptNotFoundError
from shmenu_lib.script import Script, load_script_file, save_script_file

from .constants import scripts_dir

SAVED_SCRIPT_SUFFIX = ".yml"


class ScriptStore:
    """Directory-backed collection of saved scripts."""

    def __init__(self, directory: Optional[Path] = None):
        self.directory = directory or scripts_dir()

    def path_for(self, name: str) -> Path:
        return self.directory / f"{name}{SAVED_SCRIPT_SUFFIX}"

    def names(self) -> List[str]:
        """Sorted names of the saved scripts."""
        if not self.directory.exists():
            return []
        return sorted(p.stem for p in self.directory.glob(f"*{SAVED_SCRIPT_SUFFIX}"))

    def exists(self, name: str) -> bool:
        return self.path_for(name).exists()

    def get(self, name: str) -> Script:
        """
        Load a saved script.

        Raises:
            ScriptNotFoundError: If no script with that name is saved
        """
        if not self.exists(name):
            raise ScriptNotFoundError(name)
        return load_script_file(self.path_for(name))

    def save(self, script: Script) -> Path:
        path = self.path_for(script.name)
        save_script_file(script, path)
        return path

    def delete(self, name: str) -> None:
        if not self.exists(name):
            raise ScriptNotFoundError(name)
        self.path_for(name).unlink()

    def delete_all(self) -> int:
        """Delete every saved script, returning how many were removed."""
        names = self.names()
        for name in names:
            self.path_for(name).unlink()
        return len(names)
