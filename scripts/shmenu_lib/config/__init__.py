"""
shmenu_lib.config - Configuration for shmenu.

This package contains:
- constants: program identity, reserved tokens, glyphs and paths
- settings: persisted user settings (shell, npm alias)
- store: saved script collection
"""

from .constants import (
    PROGRAM_NAME,
    DEFAULT_SHELL,
    DEFAULT_NPM_ALIAS,
    app_home,
    config_file,
    scripts_dir,
)
from .settings import Settings, load_settings, save_settings

__all__ = [
    # Constants
    'PROGRAM_NAME',
    'DEFAULT_SHELL',
    'DEFAULT_NPM_ALIAS',
    'app_home',
    'config_file',
    'scripts_dir',
    # Settings
    'Settings',
    'load_settings',
    'save_settings',
]
