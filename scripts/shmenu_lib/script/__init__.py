"""
shmenu_lib.script - Script tree model for shmenu.

This package contains:
- dataclasses: Option, Command, Directory and Script
- keys: dot-separated key namespace
- choices: ordered choice list with trailing back/quit markers
- documentation: documented mode decoration
- validation / loader / serialization: file formats
"""

from .choices import ChoiceList
from .dataclasses import Command, Directory, Option, Script
from .documentation import document_choice, document_choices, has_documentation_suffix, undocument_choice
from .keys import ancestor_keys, child_key, is_root_key, name_from_key, normalize_token, parent_key
from .loader import load_package_json, load_script_file, parse_script, parse_simple_script
from .serialization import dump_script, save_script_file, script_to_data

__all__ = [
    'ChoiceList',
    'Command',
    'Directory',
    'Option',
    'Script',
    'document_choice',
    'document_choices',
    'has_documentation_suffix',
    'undocument_choice',
    'ancestor_keys',
    'child_key',
    'is_root_key',
    'name_from_key',
    'normalize_token',
    'parent_key',
    'load_package_json',
    'load_script_file',
    'parse_script',
    'parse_simple_script',
    'dump_script',
    'save_script_file',
    'script_to_data',
]
