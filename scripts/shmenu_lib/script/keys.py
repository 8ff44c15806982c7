"""
Key namespace for script trees.

Every node in a script is addressed by a dot-separated key whose first
segment is the script name, e.g. "deploy.staging.web".
"""

import re

from shmenu_lib.config.constants import KEY_SEPARATOR, WHITESPACE_DELIMITER

_WHITESPACE = re.compile(r"\s+")


def parent_key(key: str) -> str:
    """
    Return the key of the parent node.

    The root key has no parent; asking for one is a programming error.
    """
    index = key.rfind(KEY_SEPARATOR)
    if index == -1:
        raise ValueError(f"Root key '{key}' has no parent")
    return key[:index]


def name_from_key(key: str) -> str:
    """Return the last segment of a key."""
    return key.rsplit(KEY_SEPARATOR, 1)[-1]


def is_root_key(key: str) -> bool:
    return KEY_SEPARATOR not in key


def normalize_token(token: str) -> str:
    """Replace runs of whitespace so a choice can be used as a key segment."""
    return _WHITESPACE.sub(WHITESPACE_DELIMITER, token.strip())


def child_key(parent: str, token: str) -> str:
    """Return the key of the child reached by choosing `token` at `parent`."""
    return f"{parent}{KEY_SEPARATOR}{normalize_token(token)}"


def ancestor_keys(key: str):
    """Yield `key` and then each parent key up to and including the root."""
    while True:
        yield key
        if is_root_key(key):
            return
        key = parent_key(key)
