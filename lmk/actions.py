"""Filesystem side effects for confirmed selections."""

import shutil
from pathlib import Path

from .selection import Action, Result
from .utils import log_debug


def is_plain_name(name: str) -> bool:
    """True if `name` is a relative path that cannot climb out of its root."""
    path = Path(name)
    if not path.parts or path.anchor:
        return False
    return ".." not in path.parts


def is_within(path: Path, root: Path) -> bool:
    """True if `path` resolves strictly below `root`."""
    return root.resolve() in path.resolve().parents


def create_directory(path: Path) -> bool:
    """Create a single directory. False if it exists or cannot be made."""
    try:
        path.mkdir()
    except OSError as e:
        log_debug(f"mkdir {path} failed: {e}")
        return False
    return True


def delete_directory(path: Path) -> bool:
    """Remove a directory tree. An already missing directory counts as removed."""
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        return True
    except OSError as e:
        log_debug(f"rmtree {path} failed: {e}")
        return False
    return True


def execute(result: Result, root: Path, dry_run: bool = False) -> bool:
    """Carry out `result` under `root` and report success.

    Names that would land outside `root` (absolute, '..', or the root itself)
    are refused and reported as a failure.
    """
    path = root / result.name
    if not is_plain_name(result.name) or not is_within(path, root):
        log_debug(f"refusing {result.action.value} {path}: outside {root}")
        return False
    if dry_run:
        log_debug(f"dry run: {result.action.value} {path}")
        return True
    if result.action is Action.CREATE:
        return create_directory(path)
    return delete_directory(path)
