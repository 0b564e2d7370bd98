"""Command modules for the lmkdir CLI."""

from .session import pick
from .manifest import init, list_names, search, add, remove
from .config import config

__all__ = [
    "pick",
    "init",
    "list_names",
    "search",
    "add",
    "remove",
    "config",
]
