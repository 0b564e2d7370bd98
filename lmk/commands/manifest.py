"""Non-interactive manifest commands (init, list, search, add, rm)."""

from pathlib import Path

import click

from ..actions import execute, is_plain_name
from ..candidates import CandidateSet
from ..completions import complete_name
from ..config import MANIFEST_NAME, get_manifest_path, is_dry_run
from ..manifest import strip_name
from ..search import rank
from ..search.levenshtein import ALGORITHMS
from ..selection import Action, Origin, Result, SelectionController
from ..tui import default_root
from ..utils import (
    load_names,
    load_scorer_config,
    log_error,
    log_info,
    log_verbose,
    require_manifest,
    save_names,
)


@click.command()
@click.argument("path", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing manifest")
@click.pass_context
def init(ctx, path: Path | None, force: bool):
    """Create an empty manifest.

    PATH defaults to the configured manifest, or ./lmkdir_manifest.
    """
    path = path or get_manifest_path(ctx.obj.get("manifest")) or Path.cwd() / MANIFEST_NAME
    if path.exists() and not force:
        raise click.ClickException(f"Manifest already exists: {path} (use --force to overwrite)")

    save_names(path, [])
    log_info(click.style(f"Created manifest {path}", fg="green"))


@click.command(name="list")
@require_manifest
def list_names(manifest_path: Path):
    """List the names in the manifest."""
    names = load_names(manifest_path)
    if not names:
        log_info("Manifest is empty. Add a name with: lmkdir add <name>")
        return
    for name in names:
        log_info(name)
    log_verbose(f"\nTotal: {len(names)} names")


@click.command()
@click.argument("query")
@click.option("--limit", "-n", type=click.IntRange(min=1), help="Show at most N results")
@click.option("--scorer", type=click.Choice(ALGORITHMS), help="Similarity algorithm")
@click.option("--case-sensitive/--ignore-case", default=None,
              help="Compare characters exactly or case-insensitively")
@require_manifest
def search(query: str, limit: int | None, scorer: str | None,
           case_sensitive: bool | None, manifest_path: Path):
    """Show how the manifest ranks against QUERY.

    Substring matches are marked with '*'; other lines show their score.

    Examples:
        lmkdir search proj
        lmkdir search -n 5 --scorer distance proj
    """
    config = load_scorer_config(scorer, case_sensitive)
    with CandidateSet(load_names(manifest_path)) as candidates:
        ranked = rank(query, candidates, config)

    for entry in ranked[:limit]:
        marker = "*" if entry.is_substring_match else f"{entry.score:g}"
        log_info(f"{marker:>8}  {entry.name}")


def _apply(action: Action, names: tuple[str, ...], root: Path | None,
           dry_run: bool, manifest_path: Path) -> None:
    root = root or default_root(manifest_path)
    dry_run = dry_run or is_dry_run()
    attempted = failures = 0

    with CandidateSet(load_names(manifest_path)) as candidates:
        controller = SelectionController(candidates)
        for raw in names:
            name = strip_name(raw)
            if not name:
                continue
            attempted += 1
            if not is_plain_name(name):
                log_error(f"Refusing \"{name}\": not a directory name under {root}")
                failures += 1
                continue
            origin = Origin.EXISTING if name in candidates else Origin.NEW
            result = Result(name, action, origin)
            success = execute(result, root, dry_run)
            controller.notify(result, success)
            if success:
                log_info(click.style(controller.status, fg="green"))
            else:
                log_error(controller.status)
                failures += 1
        save_names(manifest_path, candidates.names())

    if failures:
        raise click.ClickException(f"{failures} of {attempted} actions failed")


@click.command()
@click.argument("names", nargs=-1, required=True, shell_complete=complete_name)
@click.option("--root", "-r", type=click.Path(file_okay=False, path_type=Path),
              help="Directory to create in (default: the manifest's directory)")
@click.option("--dry-run", is_flag=True, help="Report success without touching the filesystem")
@require_manifest
def add(names: tuple[str, ...], root: Path | None, dry_run: bool, manifest_path: Path):
    """Create directories and record them in the manifest.

    Examples:
        lmkdir add project_a
        lmkdir add --dry-run scratch notes
    """
    _apply(Action.CREATE, names, root, dry_run, manifest_path)


@click.command(name="rm")
@click.argument("names", nargs=-1, required=True, shell_complete=complete_name)
@click.option("--root", "-r", type=click.Path(file_okay=False, path_type=Path),
              help="Directory to delete from (default: the manifest's directory)")
@click.option("--dry-run", is_flag=True, help="Report success without touching the filesystem")
@click.option("--force", "-f", is_flag=True, help="Delete without confirmation")
@require_manifest
def remove(names: tuple[str, ...], root: Path | None, dry_run: bool, force: bool,
           manifest_path: Path):
    """Delete directories (recursively) and drop them from the manifest.

    Examples:
        lmkdir rm old_project
        lmkdir rm -f scratch
    """
    if not force:
        log_info(f"Delete {len(names)} directories: {', '.join(names)}")
        if not click.confirm("Are you sure?"):
            log_info("Cancelled.")
            return
    _apply(Action.DELETE, names, root, dry_run, manifest_path)
