"""
User settings for shmenu.

Functions for saving and loading settings to/from config.json in the
application home.
"""

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

from .constants import DEFAULT_NPM_ALIAS, DEFAULT_SHELL, config_file


@dataclass
class Settings:
    """Persisted user preferences."""
    shell: str = DEFAULT_SHELL
    npm_alias: str = DEFAULT_NPM_ALIAS


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings, returning defaults when the file doesn't exist."""
    path = path or config_file()
    if not path.exists():
        return Settings()

    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    return Settings(
        shell=data.get("shell") or DEFAULT_SHELL,
        npm_alias=data.get("npm_alias") or DEFAULT_NPM_ALIAS,
    )


def save_settings(settings: Settings, path: Optional[Path] = None) -> None:
    """Save settings to JSON file."""
    path = path or config_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(asdict(settings), f, indent=2)
