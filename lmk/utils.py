"""Shared helpers: verbosity-gated output and manifest loading for commands."""

from contextlib import contextmanager
from functools import wraps
from pathlib import Path

import click

from .config import get_config_file, get_manifest_path, get_scorer_config, get_verbosity
from .manifest import read_manifest, write_manifest
from .search import ScorerUsageError

# Per-invocation override set by the -v/-q options; None means use config.
_verbosity_override: int | None = None


def set_verbosity_override(level: int | None) -> None:
    global _verbosity_override
    _verbosity_override = None if level is None else max(0, min(level, 3))


def current_verbosity() -> int:
    if _verbosity_override is not None:
        return _verbosity_override
    return get_verbosity()


@contextmanager
def silenced():
    """Suppress info/verbose/debug output, e.g. while curses owns the screen."""
    global _verbosity_override
    saved = _verbosity_override
    _verbosity_override = 0
    try:
        yield
    finally:
        _verbosity_override = saved


def log_info(message: str) -> None:
    """Normal output (verbosity >= 1)."""
    if current_verbosity() >= 1:
        click.echo(message)


def log_verbose(message: str) -> None:
    """Detailed output (verbosity >= 2)."""
    if current_verbosity() >= 2:
        click.echo(message)


def log_debug(message: str) -> None:
    """Internals (verbosity >= 3)."""
    if current_verbosity() >= 3:
        click.echo(click.style(f"[debug] {message}", dim=True))


def log_error(message: str) -> None:
    """Errors are always shown, on stderr."""
    click.echo(click.style(message, fg="red"), err=True)


def resolve_manifest(ctx: click.Context) -> Path:
    """Return the manifest path for this invocation or fail with a hint."""
    override = ctx.obj.get("manifest") if ctx.obj else None
    path = get_manifest_path(override)
    if path is None or not path.exists():
        where = f" at {path}" if path is not None else ""
        raise click.ClickException(
            f"No manifest found{where}. Run 'lmkdir init' first."
        )
    if path.is_dir():
        raise click.ClickException(f"Manifest path is a directory: {path}")
    return path


def load_names(path: Path) -> list[str]:
    try:
        names = read_manifest(path)
    except OSError as e:
        raise click.ClickException(f"Could not read manifest {path}: {e}")
    except UnicodeDecodeError as e:
        raise click.ClickException(f"Manifest {path} is not valid UTF-8: {e}")
    log_debug(f"Loaded {len(names)} names from {path}")
    return names


def save_names(path: Path, names) -> None:
    try:
        write_manifest(path, names)
    except OSError as e:
        raise click.ClickException(f"Could not write manifest {path}: {e}")
    log_debug(f"Wrote manifest {path}")


def require_manifest(f):
    """Decorator: resolve the manifest and pass it as `manifest_path`."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()
        kwargs["manifest_path"] = resolve_manifest(ctx)
        return f(*args, **kwargs)

    return wrapper


def load_scorer_config(algorithm: str | None = None, case_sensitive: bool | None = None):
    """Scorer settings for a command, with config errors shown as click errors."""
    try:
        return get_scorer_config(algorithm, case_sensitive)
    except ScorerUsageError as e:
        raise click.ClickException(f"Invalid scorer settings in {get_config_file()}: {e}")
