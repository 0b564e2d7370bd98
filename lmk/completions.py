"""Shell completion functions for the lmkdir CLI."""

from click.shell_completion import CompletionItem

from .config import get_manifest_path, get_scorer_config
from .manifest import read_manifest
from .search import ScorerUsageError, rank

MAX_FUZZY_COMPLETIONS = 10

CONFIG_KEYS = ("manifest", "verbosity", "scorer", "case_sensitive", "dry_run")


def _manifest_names(ctx) -> list[str]:
    override = (ctx.find_root().params or {}).get("manifest")
    path = get_manifest_path(override)
    if path is None or not path.is_file():
        return []
    try:
        return read_manifest(path)
    except (OSError, UnicodeDecodeError):
        return []


def complete_name(ctx, param, incomplete: str) -> list:
    """Shell completion for names in the manifest.

    Substring matches come first; if there are none, the best fuzzy matches
    are offered instead.
    """
    names = _manifest_names(ctx)
    if not incomplete:
        return [CompletionItem(n) for n in names]

    try:
        config = get_scorer_config()
    except ScorerUsageError:
        return []

    ranked = rank(incomplete, ((n, None) for n in names), config)
    substring = [entry for entry in ranked if entry.is_substring_match]
    if substring:
        return [CompletionItem(entry.name) for entry in substring]

    return [
        CompletionItem(entry.name, help="fuzzy match")
        for entry in ranked[:MAX_FUZZY_COMPLETIONS]
    ]


def complete_config_key(ctx, param, incomplete: str) -> list:
    """Shell completion for `config set` keys."""
    return [
        CompletionItem(k)
        for k in CONFIG_KEYS
        if not incomplete or k.startswith(incomplete)
    ]
