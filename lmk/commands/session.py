"""Interactive directory picker (the default lmkdir command)."""

from pathlib import Path

import click

from ..actions import execute
from ..candidates import CandidateSet
from ..config import is_dry_run
from ..search.levenshtein import ALGORITHMS
from ..selection import Action, SelectionController
from ..tui import default_root, run_session
from ..utils import (
    load_names,
    load_scorer_config,
    log_error,
    log_info,
    log_verbose,
    require_manifest,
    save_names,
    silenced,
)


@click.command()
@click.option("--root", "-r", type=click.Path(file_okay=False, path_type=Path),
              help="Directory to create/delete in (default: the manifest's directory)")
@click.option("--scorer", type=click.Choice(ALGORITHMS), help="Similarity algorithm")
@click.option("--case-sensitive/--ignore-case", default=None,
              help="Compare characters exactly or case-insensitively")
@click.option("--dry-run", is_flag=True, help="Report success without touching the filesystem")
@require_manifest
def pick(root: Path | None, scorer: str | None, case_sensitive: bool | None,
         dry_run: bool, manifest_path: Path):
    """Pick or type a directory name, then create or delete it.

    Type to filter the list; names containing the query come first, the rest
    are ordered by similarity.

    \b
    Keys:
      Up/Down/Home/End  Move the highlight
      Enter             Create the highlighted (or typed) directory
      Delete            Delete the highlighted (or typed) directory
      Backspace         Edit the query
      Esc               Quit and save the manifest
    """
    config = load_scorer_config(scorer, case_sensitive)
    root = root or default_root(manifest_path)
    dry_run = dry_run or is_dry_run()
    names = load_names(manifest_path)

    with CandidateSet(names) as candidates:
        controller = SelectionController(candidates, config)
        with silenced():
            outcomes = run_session(controller, lambda result: execute(result, root, dry_run))
        save_names(manifest_path, candidates.names())
        remaining = len(candidates)

    for result, success in outcomes:
        verb = "created" if result.action is Action.CREATE else "deleted"
        if success:
            log_verbose(click.style(f"  {verb} {result.name}", fg="green"))
        else:
            log_error(f"  could not {result.action.value} {result.name}")

    failures = sum(1 for _, success in outcomes if not success)
    log_info(f"{len(outcomes) - failures} actions, {failures} failed; {remaining} names in {manifest_path}")
