#!/usr/bin/env python3
"""
shmenu.py - Interactive runner for nested shell command menus

Define menus of shell commands in a YAML/JSON file, save them, and
navigate them interactively until a command runs.
"""

import sys

from shmenu_lib.cli import main

if __name__ == "__main__":
    sys.exit(main())
