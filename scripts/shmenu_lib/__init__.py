"""
shmenu_lib - Library for the shmenu interactive script runner

This package contains the components of shmenu, a tool for defining nested
menus of shell commands in a YAML/JSON file and navigating them
interactively until a command runs.
"""

__version__ = "1.0.0"
